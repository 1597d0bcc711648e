# app/crud/rsvps_crud.py                                                      # Indica la ruta del archivo dentro del proyecto.

# =================================================================================
# 🧩 Lectura de respuestas RSVP desde Firestore (colección 'rsvps').             # Describe el propósito del módulo.
# - get_rsvps(): consulta ordenada por fecha de envío (más recientes primero).    # Función principal del cargador.
# - doc_to_rsvp(): conversión documento → RsvpWithId en la frontera del almacén.  # Frontera explícita con el almacén.
# - Cualquier fallo del almacén se propaga como RsvpFetchError (nunca se silencia). # Política de errores.
# =================================================================================

from datetime import datetime, timezone  # Tipo destino de los timestamps.
from typing import Any, List        # Tipado para claridad.

from google.cloud import firestore  # Cliente y constantes de consulta (DESCENDING).
from loguru import logger           # Logger para trazas del cargador.
from pydantic import ValidationError  # Error de validación de documentos mal formados.

from app.schemas import RsvpWithId  # Modelo de salida del cargador.
from app.store import RSVP_COLLECTION  # Nombre de la colección (configurable por .env).

SUBMITTED_AT_FIELD = "submittedAt"  # Campo de orden y timestamp de envío en Firestore.


class RsvpFetchError(RuntimeError):
    """No se pudieron leer las respuestas RSVP del almacén."""


# ---------------------------------------------------------------------------------
# 🕒 Conversión de timestamps nativos del almacén
# ---------------------------------------------------------------------------------

def _to_datetime(value: Any) -> datetime:
    """Convierte un timestamp de Firestore (o equivalente) en datetime con zona horaria (UTC si no trae)."""
    if isinstance(value, datetime):                             # DatetimeWithNanoseconds hereda de datetime.
        result = value
    elif callable(getattr(value, "to_datetime", None)):         # Wrappers propios.
        result = value.to_datetime()
    elif callable(getattr(value, "ToDatetime", None)):          # protobuf Timestamp: devuelve UTC sin tzinfo.
        result = value.ToDatetime()
    elif isinstance(value, str):                                # Algunos documentos antiguos guardan ISO-8601.
        result = datetime.fromisoformat(value.replace("Z", "+00:00"))
    else:
        raise TypeError(f"Timestamp no soportado: {type(value).__name__}")
    if result.tzinfo is None:                                   # Los timestamps del almacén son siempre UTC.
        result = result.replace(tzinfo=timezone.utc)
    return result


def doc_to_rsvp(doc) -> RsvpWithId:
    """Convierte un DocumentSnapshot de Firestore en RsvpWithId (id del documento + fecha parseada)."""
    data = dict(doc.to_dict() or {})                            # Copia los campos para no tocar el snapshot.
    data["id"] = doc.id                                         # Adjunta el id asignado por el almacén.
    data[SUBMITTED_AT_FIELD] = _to_datetime(data.get(SUBMITTED_AT_FIELD))  # Timestamp nativo → datetime.
    return RsvpWithId.model_validate(data)                      # Valida tipos y contadores no negativos.


# ---------------------------------------------------------------------------------
# 🔎 Consulta principal
# ---------------------------------------------------------------------------------

def get_rsvps(client: firestore.Client) -> List[RsvpWithId]:
    """
    Devuelve todas las respuestas RSVP, las más recientes primero.
    El orden lo aplica la consulta; aquí no se reordena nada.
    """
    query = client.collection(RSVP_COLLECTION).order_by(        # Consulta sobre la colección de RSVPs...
        SUBMITTED_AT_FIELD, direction=firestore.Query.DESCENDING  # ...ordenada por fecha de envío descendente.
    )
    try:
        rsvps = [doc_to_rsvp(doc) for doc in query.stream()]    # Recorre y convierte cada documento.
    except (TypeError, ValueError, ValidationError) as e:       # Documento mal formado (fecha o contadores).
        logger.error("Documento RSVP inválido en '{}': {}", RSVP_COLLECTION, e)
        raise RsvpFetchError(f"Invalid RSVP document: {e}") from e
    except Exception as e:                                      # Fallo de red, permisos, cuota, etc.
        logger.error("No se pudieron leer los RSVPs de '{}': {}", RSVP_COLLECTION, e)
        raise RsvpFetchError(f"Could not load RSVPs: {e}") from e

    logger.info("RSVPs cargados → {}", len(rsvps))
    return rsvps
