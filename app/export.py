# app/export.py  # Acción de exportación CSV de las respuestas RSVP.

# =================================================================================  # Separador visual.
# ⬇️ EXPORTACIÓN CSV                                                                 # Título del módulo.
# ---------------------------------------------------------------------------------  # Separador.
# - Carga todas las respuestas (por defecto desde Firestore).                        # Descripción 1.
# - Genera el CSV con pandas (mismo enfoque que el dashboard: DataFrame → to_csv).   # Descripción 2.
# - Devuelve ExportResult con 'data' (texto CSV) o 'error' (mensaje), nunca ambos.   # Descripción 3.
# =================================================================================  # Fin cabecera.

import io  # Buffer de memoria para generar el CSV sin escribir a disco.
from datetime import date, datetime, timezone  # Fecha del nombre de archivo.
from typing import Callable, List, Optional, Sequence  # Tipado de la acción.

import pandas as pd  # Manipulación tabular y serialización CSV.
from loguru import logger  # Trazas de exportación.

from app import store  # Cliente de Firestore (perezoso).
from app.crud import rsvps_crud  # Cargador de RSVPs.
from app.schemas import ExportResult, RsvpWithId  # Contrato de la acción.

CSV_MIME = "text/csv; charset=utf-8"  # Tipo MIME del archivo descargado.
CSV_COLUMNS = [  # Orden de columnas del CSV exportado.
    "Guest Name",
    "Mobile Number",
    "Email",
    "Guests (7+)",
    "Guests (<7)",
    "Total Guests",
    "Submitted At",
]

RsvpLoader = Callable[[], Sequence[RsvpWithId]]  # Firma de cualquier cargador de RSVPs.


def _load_from_store() -> List[RsvpWithId]:
    return rsvps_crud.get_rsvps(store.get_client())  # Consulta ordenada a Firestore.


def export_filename(today: Optional[date] = None) -> str:
    """Nombre del archivo descargado: rsvps_YYYY-MM-DD.csv (fecha UTC por defecto)."""
    today = today or datetime.now(timezone.utc).date()  # Igual que la parte de fecha de un timestamp ISO.
    return f"rsvps_{today.isoformat()}.csv"


def rsvps_to_csv(rsvps: Sequence[RsvpWithId]) -> str:
    """Serializa las respuestas a CSV (solo cabecera si no hay ninguna)."""
    df = pd.DataFrame(  # Construye la tabla con columnas legibles.
        [
            {
                "Guest Name": r.guest_name,
                "Mobile Number": r.mobile_number,
                "Email": r.email_id or "",
                "Guests (7+)": r.count_adults,
                "Guests (<7)": r.count_kids,
                "Total Guests": r.total_guests,
                "Submitted At": r.submitted_at.isoformat(),
            }
            for r in rsvps
        ],
        columns=CSV_COLUMNS,  # Mantiene la cabecera aunque la lista esté vacía.
    )
    buffer = io.StringIO()  # Buffer de texto en memoria.
    df.to_csv(buffer, index=False, lineterminator="\n")  # Mismo separador de línea en cualquier SO.
    return buffer.getvalue()


def export_rsvps(loader: Optional[RsvpLoader] = None) -> ExportResult:
    """Acción de exportar: devuelve el CSV de todas las respuestas o el motivo del fallo."""
    loader = loader or _load_from_store
    try:
        rsvps = loader()  # Lectura completa (sin filtros).
        csv_text = rsvps_to_csv(rsvps)  # Serialización con pandas.
    except Exception as e:  # Cualquier fallo se devuelve como error legible.
        logger.exception("Exportación CSV fallida: {}", e)
        return ExportResult(error=str(e) or e.__class__.__name__)
    logger.info("Exportación CSV generada → {} filas", len(rsvps))
    return ExportResult(data=csv_text)
