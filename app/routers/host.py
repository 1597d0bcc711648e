# app/routers/host.py
# =============================================================================
# 👑 Rutas del anfitrión: lectura de RSVPs, totales y exportación CSV
# - Protegido con API Key mediante dependencia `require_admin`
# - Cliente de Firestore inyectado con `get_store` (sobrescribible en tests)
# - Fallos de lectura → 502 (el almacén es un servicio externo)
# =============================================================================

from typing import List                                            # Tipos para anotaciones.

from fastapi import APIRouter, Depends, HTTPException, Response, status  # Router, dependencias y respuestas.
from google.cloud import firestore                                 # Tipo del cliente inyectado.
from loguru import logger                                          # Trazas de errores.

import app.schemas as schemas                                      # Modelos de entrada/salida.
from app.core.security import require_admin                        # Dep. que valida x-admin-key == ADMIN_API_KEY.
from app.crud import rsvps_crud                                    # Cargador de RSVPs.
from app.export import CSV_MIME, export_filename, export_rsvps     # Acción de exportación.
from app.store import get_store                                    # Proveedor del cliente por request.
from app.summary import summarize                                  # Totales derivados.

router = APIRouter(                                                # Define el router con prefijo /api/host.
    prefix="/api/host",
    tags=["host"],
    dependencies=[Depends(require_admin)],                         # Todas las rutas requieren la API Key.
)

# ------------------------------ Helpers locales -------------------------------

def _load(client: firestore.Client) -> List[schemas.RsvpWithId]:
    """Carga los RSVPs y traduce un fallo del almacén a HTTP 502."""
    try:
        return rsvps_crud.get_rsvps(client)
    except rsvps_crud.RsvpFetchError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

# --------------------------------- Endpoints ----------------------------------

@router.get("/rsvps", response_model=List[schemas.RsvpWithId])
def list_rsvps(client: firestore.Client = Depends(get_store)):
    """Todas las respuestas, las más recientes primero."""
    return _load(client)


@router.get("/summary", response_model=schemas.RsvpSummary)
def get_summary(client: firestore.Client = Depends(get_store)):
    """Totales del dashboard calculados sobre la lista actual."""
    return summarize(_load(client))


@router.get("/export")
def export_csv(client: firestore.Client = Depends(get_store)) -> Response:
    """CSV de todas las respuestas como archivo adjunto rsvps_<fecha>.csv."""
    result = export_rsvps(loader=lambda: rsvps_crud.get_rsvps(client))  # Misma acción que usa el dashboard.
    if not result.ok:                                              # Error → 502 con el motivo.
        logger.warning("Exportación vía API fallida: {}", result.error)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error)
    return Response(
        content=result.data,
        media_type=CSV_MIME,
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )
