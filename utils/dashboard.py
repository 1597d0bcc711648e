# utils/dashboard.py
# =============================================================================
# Piezas de presentación del dashboard del anfitrión (sin llamadas a Streamlit)
# - Tarjetas de resumen (4 KPIs)
# - Tabla de invitados en HTML (fila de relleno si no hay respuestas)
# - Flujo de exportación: acción → descarga + aviso (éxito o error)
# Todo es puro para poder probarlo sin levantar la app.
# =============================================================================

import os
from datetime import date, datetime
from html import escape
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from app.export import CSV_MIME, export_filename
from app.schemas import ExportDownload, ExportResult, Notification, RsvpSummary, RsvpWithId

DATE_FORMAT = os.getenv("DASHBOARD_DATE_FORMAT", "%d/%m/%Y")
TIME_FORMAT = os.getenv("DASHBOARD_TIME_FORMAT", "%H:%M:%S")
EMPTY_TABLE_TEXT = "No RSVPs yet. Share the link to get started!"


class Tile(NamedTuple):
    label: str
    value: int
    caption: str
    icon: str = ""


# ─────────────────────────────────────────────────────────────────────────────
# 1) Tarjetas de resumen
# ─────────────────────────────────────────────────────────────────────────────
def summary_tiles(summary: RsvpSummary) -> List[Tile]:
    """Las cuatro tarjetas en el orden en que se pintan."""
    return [
        Tile("Total Guests", summary.total_guests, "Total people attending", "👥"),
        Tile("Groups RSVP'd", summary.total_rsvps, "Total number of submissions", "🧾"),
        Tile("Guests (Age 7+)", summary.total_adults, "Adults and older children", "🧑"),
        Tile("Little Friends (<7)", summary.total_kids, "Young children", "👶"),
    ]


# ─────────────────────────────────────────────────────────────────────────────
# 2) Tabla de invitados
# ─────────────────────────────────────────────────────────────────────────────
def format_breakdown(rsvp: RsvpWithId) -> str:
    """Desglose por edades, p. ej. '2 (7+) / 1 (<7)'."""
    return f"{rsvp.count_adults} (7+) / {rsvp.count_kids} (<7)"


def format_submitted(submitted_at: datetime) -> Tuple[str, str]:
    """Fecha y hora locales del envío (dos líneas en la tabla)."""
    local = submitted_at.astimezone()                      # UTC de Firestore → zona horaria del servidor.
    return local.strftime(DATE_FORMAT), local.strftime(TIME_FORMAT)


def contact_cell_html(rsvp: RsvpWithId) -> str:
    """Móvil siempre; la línea del email solo si existe."""
    lines = [f'<span>{escape(rsvp.mobile_number)}</span>']
    if rsvp.email_id:
        lines.append(f'<span class="rsvp-muted">{escape(rsvp.email_id)}</span>')
    return f'<div class="rsvp-contact">{"".join(lines)}</div>'


def guests_cell_html(rsvp: RsvpWithId) -> str:
    """Badge con el total del grupo y desglose 7+ / <7 debajo."""
    return (
        f'<span class="rsvp-badge">{rsvp.total_guests}</span>'
        f'<span class="rsvp-muted">{escape(format_breakdown(rsvp))}</span>'
    )


def guest_row_html(rsvp: RsvpWithId) -> str:
    day, clock = format_submitted(rsvp.submitted_at)
    return (
        f'<tr class="rsvp-row" data-id="{escape(rsvp.id)}">'
        f'<td class="rsvp-name">{escape(rsvp.guest_name)}</td>'
        f"<td>{contact_cell_html(rsvp)}</td>"
        f'<td class="rsvp-center">{guests_cell_html(rsvp)}</td>'
        f'<td class="rsvp-right rsvp-muted">{day}<br/>{clock}</td>'
        "</tr>"
    )


def guest_table_html(rsvps: Sequence[RsvpWithId]) -> str:
    """Tabla completa con scroll; si no hay respuestas, una única fila de relleno."""
    if rsvps:
        body = "".join(guest_row_html(r) for r in rsvps)
    else:
        body = f'<tr class="rsvp-empty"><td colspan="4">{escape(EMPTY_TABLE_TEXT)}</td></tr>'
    return (
        '<div class="guest-list-scroll"><table class="rsvp-table">'
        "<thead><tr>"
        "<th>Guest Name</th><th>Contact</th>"
        '<th class="rsvp-center">Guests</th><th class="rsvp-right">Submitted</th>'
        "</tr></thead>"
        f"<tbody>{body}</tbody>"
        "</table></div>"
    )


GUEST_TABLE_CSS = """
<style>
  .guest-list-scroll{ max-height:480px; overflow-y:auto; border:1px solid #E5E5E5; border-radius:12px; }
  .rsvp-table{ width:100%; border-collapse:collapse; font-size:.95rem; }
  .rsvp-table thead th{ position:sticky; top:0; background:#FFFFFF; text-align:left; padding:.6rem .8rem; border-bottom:1px solid #E5E5E5; }
  .rsvp-table td{ padding:.6rem .8rem; border-bottom:1px solid #F0F0F0; vertical-align:top; }
  .rsvp-name{ font-weight:600; }
  .rsvp-contact{ display:flex; flex-direction:column; }
  .rsvp-muted{ display:block; font-size:.75rem; color:#666666; }
  .rsvp-center{ text-align:center !important; }
  .rsvp-right{ text-align:right !important; }
  .rsvp-badge{ display:inline-block; min-width:2rem; padding:.1rem .5rem; border-radius:999px; background:#0F0F0F; color:#FFFFFF; font-weight:600; }
  .rsvp-empty td{ height:6rem; text-align:center; color:#666666; }
</style>
"""


# ─────────────────────────────────────────────────────────────────────────────
# 3) Exportación CSV: resultado → descarga + aviso
# ─────────────────────────────────────────────────────────────────────────────
def build_download(result: ExportResult, today: Optional[date] = None) -> Optional[ExportDownload]:
    """Empaqueta el CSV como archivo rsvps_<fecha>.csv; None si la exportación falló."""
    if not result.ok:
        return None
    return ExportDownload(file_name=export_filename(today), mime=CSV_MIME, data=result.data)


def run_export(
    export_action: Callable[[], ExportResult],
    notify: Callable[[Notification], None],
    today: Optional[date] = None,
) -> Optional[ExportDownload]:
    """
    Llama a la acción de exportar y decide la rama:
    - éxito → devuelve la descarga y avisa 'Export Successful';
    - error → no hay descarga y avisa en rojo con el motivo.
    """
    result = export_action()                                # Espera a que la acción termine antes de avisar.
    download = build_download(result, today)
    if download is None:
        notify(Notification(title="Export Failed", description=result.error, variant="destructive"))
        return None
    notify(
        Notification(
            title="Export Successful",
            description="Your RSVP list is ready to download as a CSV file.",
        )
    )
    return download
