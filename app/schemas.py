# app/schemas.py  # Ruta y nombre del archivo de esquemas (Pydantic).                               # Indica dónde va este archivo en el proyecto.

# =================================================================================
# 📦 Schemas (MODELOS DE DATOS Pydantic)
# ---------------------------------------------------------------------------------
# Este archivo define los modelos de datos del dashboard del anfitrión.
# - RsvpWithId: una respuesta RSVP leída de Firestore (con su id de documento).
# - RsvpSummary: totales derivados (no se guardan, se recalculan en cada render).
# - ExportResult / ExportDownload / Notification: contrato de la acción de exportar.
# - Usan Pydantic v2: model_validator/field_validator y ConfigDict.
# - Los nombres guardados en Firestore (camelCase) son alias de los campos Python.
# =================================================================================

from datetime import datetime                                                                 # Importa tipo de fecha/hora para timestamps.
from typing import Optional, Literal                                                          # Importa tipos para anotar opcionales y literales.

from pydantic import (                                                                        # Importa utilidades principales de Pydantic v2.
    BaseModel,                                                                                # Clase base para definir modelos.
    ConfigDict,                                                                               # Configuración del modelo (equivalente a class Config).
    Field,                                                                                    # Declaración de campos con metadata y defaults.
    field_validator,                                                                          # Decorador para validación a nivel de campo.
    model_validator,                                                                          # Decorador para validación a nivel de modelo.
)

NotificationVariant = Literal["default", "destructive"]                                       # Estilos de aviso admitidos por la vista.

# =================================================================================
# 💌 Respuesta RSVP (grupo de invitados)
# =================================================================================
class Rsvp(BaseModel):                                                                        # Campos tal como los envía el invitado al confirmar.
    guest_name: str = Field(alias="guestName")                                                # Nombre del invitado principal.
    mobile_number: str = Field(alias="mobileNumber")                                          # Teléfono móvil de contacto.
    email_id: Optional[str] = Field(default=None, alias="emailId")                            # Email (opcional).
    count_adults: int = Field(default=0, ge=0, alias="countAdults")                           # Adultos y niños de 7 años o más.
    count_kids: int = Field(default=0, ge=0, alias="countKids")                               # Niños menores de 7 años.

    model_config = ConfigDict(populate_by_name=True)                                          # Acepta tanto alias (Firestore) como nombres Python.

    @field_validator("email_id")                                                              # Validador para 'email_id'.
    @classmethod                                                                              # Método de clase (requerido por Pydantic).
    def _blank_email_is_none(cls, v: Optional[str]) -> Optional[str]:                         # Un email vacío equivale a no tener email.
        if v is None:                                                                         # Si no vino...
            return None                                                                       # ...se queda en None.
        v = v.strip()                                                                         # Limpia espacios.
        return v or None                                                                      # Cadena vacía → None.


class RsvpWithId(Rsvp):                                                                       # Respuesta RSVP leída del almacén.
    id: str                                                                                   # Id del documento en Firestore (único y estable).
    submitted_at: datetime = Field(alias="submittedAt")                                       # Momento del envío (no cambia nunca).

    model_config = ConfigDict(populate_by_name=True, frozen=True)                             # Solo lectura desde el dashboard.

    @property
    def total_guests(self) -> int:                                                            # Total de personas del grupo.
        return self.count_adults + self.count_kids                                            # Suma de ambos tramos de edad.


# =================================================================================
# 📊 Resumen agregado
# =================================================================================
class RsvpSummary(BaseModel):                                                                 # Totales derivados de la lista actual.
    total_rsvps: int = Field(default=0, alias="totalRsvps")                                   # Número de envíos (grupos).
    total_adults: int = Field(default=0, alias="totalAdults")                                 # Suma de adultos (7+).
    total_kids: int = Field(default=0, alias="totalKids")                                     # Suma de niños (<7).
    total_guests: int = Field(default=0, alias="totalGuests")                                 # Adultos + niños.

    model_config = ConfigDict(populate_by_name=True)


# =================================================================================
# ⬇️ Exportación CSV
# =================================================================================
class ExportResult(BaseModel):                                                                # Resultado de la acción de exportar.
    data: Optional[str] = None                                                                # Texto CSV si todo fue bien.
    error: Optional[str] = None                                                               # Mensaje de error si falló.

    @model_validator(mode="after")                                                            # Validador post-parsing.
    def _exactly_one(self):                                                                   # Éxito y error son excluyentes.
        if (self.data is None) == (self.error is None):                                       # Ambos o ninguno → inválido.
            raise ValueError("ExportResult requiere exactamente uno de 'data' o 'error'.")
        return self

    @property
    def ok(self) -> bool:
        return self.data is not None


class ExportDownload(BaseModel):                                                              # Archivo listo para descargar en el navegador.
    file_name: str                                                                            # Ej.: rsvps_2026-05-22.csv
    mime: str = "text/csv; charset=utf-8"                                                     # Tipo MIME del CSV.
    data: str                                                                                 # Contenido literal devuelto por la exportación.


class Notification(BaseModel):                                                                # Aviso visible para el anfitrión.
    title: str
    description: str
    variant: NotificationVariant = "default"                                                  # 'destructive' para errores.
