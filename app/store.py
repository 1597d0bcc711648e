# app/store.py
# =================================================================================
# 🗄️ CONEXIÓN AL ALMACÉN DE DOCUMENTOS (Firestore)
# ---------------------------------------------------------------------------------
# Este módulo centraliza la creación del cliente de Firestore donde viven las
# respuestas RSVP (colección 'rsvps').
# - Soporta el emulador local (FIRESTORE_EMULATOR_HOST) y la BD real.
# - El cliente se crea de forma perezosa: importar este módulo no exige credenciales.
# =================================================================================

# --- Importaciones de Módulos ---
import os
from typing import Optional

from google.cloud import firestore
from loguru import logger

# --- Configuración desde entorno ---
PROJECT_ID = os.getenv("GOOGLE_CLOUD_PROJECT", "dev-emulated-project").strip()
DATABASE_ID = os.getenv("FIRESTORE_DATABASE_ID", "(default)").strip()
RSVP_COLLECTION = os.getenv("RSVP_COLLECTION", "rsvps").strip() or "rsvps"

_client: Optional[firestore.Client] = None  # Cliente compartido por proceso (se crea al primer uso).


def get_client() -> firestore.Client:
    """Devuelve el cliente de Firestore, creándolo la primera vez."""
    global _client
    if _client is None:
        emulator_host = os.getenv("FIRESTORE_EMULATOR_HOST", "")
        if emulator_host:
            # Con emulador solo se usa el proyecto; la BD siempre es la por defecto.
            logger.info("Firestore → emulador en {} (proyecto={})", emulator_host, PROJECT_ID)
            _client = firestore.Client(project=PROJECT_ID)
        else:
            logger.info("Firestore → proyecto={} | base={}", PROJECT_ID, DATABASE_ID)
            _client = firestore.Client(project=PROJECT_ID, database=DATABASE_ID)
    return _client


def get_store():
    """Dependencia de FastAPI para inyectar el cliente de Firestore por petición."""
    yield get_client()
