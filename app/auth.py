# app/auth.py  # Ruta y nombre del archivo del módulo de sesión del anfitrión.

# =================================================================================
# 🔐 SESIÓN DEL ANFITRIÓN (JWT)                                                   # Describe el propósito del módulo.
# ---------------------------------------------------------------------------------
# - host_login(): compara la contraseña con HOST_PASSWORD y emite un JWT 'host'.  # Acceso al dashboard.
# - verify_host_token(): valida firma, expiración y tipo del token.               # Guard del dashboard.
# - host_logout(): acción de cierre de sesión (borra el token de la sesión).      # Acción Logout.
# - Usa python-jose (jose.jwt) para firmar/decodificar JWT.                        # Indica la librería usada.
# =================================================================================

# 🐍 Importaciones
import os                                                     # Acceso a variables de entorno (.env).
import hmac                                                   # Comparación de contraseñas en tiempo constante.
from datetime import datetime, timedelta, timezone            # Manejo de tiempos de emisión/expiración.
from typing import Any, Dict, MutableMapping, Optional        # Tipos para anotar parámetros y retornos.

from jose import jwt, JWTError                                # Implementación de JWT (python-jose).
from loguru import logger                                     # Trazas de acceso.

# ⚙️ Configuración de seguridad (desde .env con defaults seguros)
SECRET_KEY = os.getenv("SECRET_KEY", "dev_secret")            # Clave para firmar JWT (usa valor real en producción).
ALGORITHM = os.getenv("ALGORITHM", "HS256")                   # Algoritmo de firmado (HS256 por defecto).
HOST_SESSION_EXPIRE_MINUTES = int(os.getenv("HOST_SESSION_EXPIRE_MINUTES", "720"))  # Duración de la sesión (minutos).

HOST_TOKEN_KEY = "host_token"                                 # Clave del token en st.session_state.
EXPORT_DOWNLOAD_KEY = "export_download"                       # Descarga pendiente guardada en sesión.
RSVPS_KEY = "rsvps"                                           # Lectura de RSVPs de la sesión actual.

# 🔒 Validación mínima de config crítica
if not SECRET_KEY:                                            # Si por alguna razón queda vacío...
    raise ValueError("SECRET_KEY no está configurado.")       # Falla rápido con mensaje claro.


def _utcnow() -> datetime:                                    # Helper para la hora UTC actual.
    return datetime.now(timezone.utc)


def create_host_token() -> str:
    """Crea el JWT de sesión del anfitrión (tipo 'host')."""
    now = _utcnow()                                           # Momento de emisión.
    exp = now + timedelta(minutes=HOST_SESSION_EXPIRE_MINUTES)  # Momento de expiración.
    payload: Dict[str, Any] = {
        "sub": "host",                                        # Único sujeto posible: el anfitrión.
        "type": "host",                                       # Tipo de token.
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)


def verify_host_token(token: Optional[str]) -> bool:
    """True si el token es un JWT 'host' válido y vigente."""
    if not token:                                             # Sin token no hay sesión.
        return False
    try:
        data = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])  # Valida firma y expiración.
    except JWTError:
        return False
    return data.get("type") == "host"


def host_login(password: str) -> Optional[str]:
    """Devuelve un token de sesión si la contraseña coincide con HOST_PASSWORD; None si no."""
    expected = os.getenv("HOST_PASSWORD")                     # Se lee en cada intento (permite rotarla sin reiniciar).
    if not expected or not password:
        return None
    if not hmac.compare_digest(password.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("Intento de acceso al dashboard con contraseña incorrecta.")
        return None
    logger.info("Anfitrión autenticado en el dashboard.")
    return create_host_token()


def host_logout(session: MutableMapping[str, Any]) -> None:
    """Acción de cierre de sesión: elimina el token, la lectura de RSVPs y la descarga pendiente."""
    session.pop(HOST_TOKEN_KEY, None)                         # Elimina el JWT de la sesión.
    session.pop(EXPORT_DOWNLOAD_KEY, None)                    # No deja datos exportados a la vista del siguiente usuario.
    session.pop(RSVPS_KEY, None)                              # La próxima sesión vuelve a leer el almacén.
    logger.info("Sesión del anfitrión cerrada.")
