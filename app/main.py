# app/main.py                                                                                   # Ruta y nombre del archivo principal de la API.

# =================================================================================             # Separador visual de sección.
# 🧠 NÚCLEO DE LA APLICACIÓN API (FastAPI)                                                      # Título de la sección principal.
# ---------------------------------------------------------------------------------             # Separador de sección.
# - Crea la instancia de FastAPI                                                                # Lista responsabilidades del módulo.
# - Configura CORS                                                                              # Continua la lista.
# - Registra el router del anfitrión (lectura, totales, exportación CSV)                        # Continua la lista.
# =================================================================================             # Fin del encabezado.

import os                                                                                       # Lectura de variables de entorno.
from pathlib import Path                                                                        # Importa Path para manipular rutas de archivos.

from dotenv import load_dotenv                                                                  # Importa load_dotenv para cargar variables desde .env.
from fastapi import FastAPI                                                                     # Importa FastAPI para crear la aplicación.
from fastapi.middleware.cors import CORSMiddleware                                              # Importa middleware CORS para orígenes permitidos.
from loguru import logger                                                                       # Importa logger para escribir trazas al arrancar.

env_path = Path('.') / '.env'                                                                   # Construye la ruta al archivo .env en el directorio actual.
load_dotenv(dotenv_path=env_path)                                                               # Carga las variables de entorno desde el archivo .env.

from app.routers import host                                                                    # noqa: E402  Router del anfitrión (lee .env al importar).
from app.store import PROJECT_ID, RSVP_COLLECTION                                               # noqa: E402  Config del almacén para el log de arranque.

logger.info(                                                                                    # Log informativo de variables clave para verificar configuración.
    "[BOOT] PROJECT={} | COLLECTION={} | EMULATOR={} | ADMIN_KEY_SET={}",                       # Plantilla del mensaje con placeholders.
    PROJECT_ID,                                                                                 # Proyecto de Firestore.
    RSVP_COLLECTION,                                                                            # Colección de respuestas.
    os.getenv("FIRESTORE_EMULATOR_HOST") or "no",                                               # Emulador local (si aplica).
    "yes" if os.getenv("ADMIN_API_KEY") else "no",                                              # Indica si hay API key de admin cargada.
)                                                                                               # Cierra la llamada de log.

app = FastAPI(                                                                                  # Crea la instancia de la aplicación FastAPI.
    title=f"API del anfitrión • {os.getenv('EVENT_NAME', 'RSVP')}",                             # Título de la API (documentación OpenAPI).
    description="Backend de solo lectura para el dashboard de RSVPs del anfitrión",             # Descripción corta de la API.
    version="1.0.0",                                                                            # Versión de la API (para control de cambios).
)                                                                                               # Cierra la creación de la app.

app.add_middleware(                                                                             # Registra el middleware de CORS en la app.
    CORSMiddleware,                                                                             # Especifica el tipo de middleware (CORS).
    allow_origins=[                                                                             # Lista de orígenes permitidos (frontends conocidos).
        "http://localhost:8501",                                                                # Streamlit local (dev).
        "http://127.0.0.1:8501",                                                                # Streamlit local por IP loopback.
        *[o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()],            # Orígenes extra de producción desde .env.
    ],                                                                                          # Cierra la lista de orígenes permitidos.
    allow_credentials=True,                                                                     # Permite el envío de credenciales.
    allow_methods=["GET"],                                                                      # La API es de solo lectura.
    allow_headers=["*"],                                                                        # Permite todos los headers (x-admin-key incluido).
)                                                                                               # Cierra la configuración del middleware CORS.


@app.get("/api/health", tags=["meta"])                                                          # Ruta de salud para monitores externos.
def health() -> dict:
    return {"status": "ok"}


app.include_router(host.router)                                                                 # Monta el router del anfitrión bajo /api/host.
