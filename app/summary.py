# app/summary.py
# =================================================================================
# 📊 Totales del dashboard (función pura, sin caché)
# ---------------------------------------------------------------------------------
# - total_rsvps: número de grupos que respondieron.
# - total_adults / total_kids: suma de cada tramo de edad.
# - total_guests: adultos + niños.
# =================================================================================

from typing import Iterable

from app.schemas import RsvpSummary, RsvpWithId


def summarize(rsvps: Iterable[RsvpWithId]) -> RsvpSummary:
    """Calcula los totales a partir de la lista actual de respuestas."""
    rows = list(rsvps)                                                # Permite recibir cualquier iterable.
    total_adults = sum(r.count_adults for r in rows)                  # Invitados de 7 años o más.
    total_kids = sum(r.count_kids for r in rows)                      # Invitados menores de 7.
    return RsvpSummary(
        total_rsvps=len(rows),
        total_adults=total_adults,
        total_kids=total_kids,
        total_guests=total_adults + total_kids,
    )
