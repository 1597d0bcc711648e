# streamlit_app.py  # Archivo principal del dashboard del anfitrión (solo organizadores).

# =================================================================================  # Separador visual.
# 📊 DASHBOARD DEL ANFITRIÓN • RSVPs                                                 # Título de la app.
# ---------------------------------------------------------------------------------  # Separador.
# - Lee las respuestas RSVP de Firestore (más recientes primero).                     # Descripción 1.
# - Muestra 4 KPIs: invitados totales, grupos, mayores de 7 y menores de 7.           # Descripción 2.
# - Lista de invitados con contacto, desglose por edad y fecha de envío.              # Descripción 3.
# - Acciones: refrescar, exportar CSV y cerrar sesión.                                # Descripción 4.
# - Acceso protegido por contraseña definida en .env (HOST_PASSWORD).                 # Descripción 5.
# =================================================================================  # Fin cabecera.

# 🐍 Importaciones                                                                  # Sección de imports.
# ---------------------------------------------------------------------------------
import os  # Lectura de variables de entorno (.env).
from typing import List  # Tipado del cargador.

import streamlit as st  # Framework de UI para construir el dashboard.
from dotenv import load_dotenv  # Utilidad para cargar variables desde archivo .env.

load_dotenv()  # Carga .env antes de importar módulos que leen os.environ al importarse.

from app import store  # noqa: E402  Cliente de Firestore (perezoso).
from app.auth import (  # noqa: E402  Sesión del anfitrión.
    EXPORT_DOWNLOAD_KEY,
    HOST_TOKEN_KEY,
    RSVPS_KEY,
    host_login,
    host_logout,
    verify_host_token,
)
from app.crud import rsvps_crud  # noqa: E402  Cargador de RSVPs.
from app.export import export_rsvps  # noqa: E402  Acción de exportar.
from app.schemas import Notification, RsvpWithId  # noqa: E402  Tipos de datos.
from app.summary import summarize  # noqa: E402  Totales derivados.
from utils.dashboard import GUEST_TABLE_CSS, guest_table_html, run_export, summary_tiles  # noqa: E402  Presentación.

# ⚙️ Configuración inicial                                                           # Preparación previa.
# ---------------------------------------------------------------------------------
EVENT_NAME = os.getenv("EVENT_NAME", "Our Event")  # Nombre del evento mostrado en la cabecera.

st.set_page_config(page_title=f"Host Dashboard • {EVENT_NAME}", layout="wide")  # ✅ Primera llamada Streamlit: define título/layout.

# 🛡️ Gate de autenticación (password único de anfitrión)                             # Control de acceso.
# ---------------------------------------------------------------------------------
if not verify_host_token(st.session_state.get(HOST_TOKEN_KEY)):  # Sin token válido no se muestra nada.
    st.sidebar.header("🔑 Host Access")  # Título de la sección de acceso en la barra lateral.
    if os.getenv("HOST_PASSWORD") is None:  # Comprueba que exista la variable de entorno requerida.
        st.sidebar.warning("HOST_PASSWORD is not set in .env")  # Advierte si falta (ayuda a diagnosticar).
    password_input = st.sidebar.text_input(  # Campo para introducir la contraseña del anfitrión.
        "Host password",  # Etiqueta visible.
        type="password",  # Oculta caracteres mientras se escribe.
        placeholder="Enter the password…",  # Placeholder para mejor UX.
        key="host_password",  # Clave estable del widget.
    )  # Cierra text_input.
    if password_input:  # Si se escribió algo…
        token = host_login(password_input)  # Intenta abrir sesión.
        if token:  # Contraseña correcta.
            st.session_state[HOST_TOKEN_KEY] = token  # Guarda el JWT en la sesión.
            st.rerun()  # Fuerza rerender para cargar el contenido protegido inmediatamente.
        st.sidebar.error("Incorrect password.")  # Contraseña incorrecta.
    st.info("Enter the host password in the sidebar to open the dashboard.")  # Mensaje informativo al usuario.
    st.stop()  # Detiene el resto de la ejecución (no muestra datos sin login).

# 💾 Carga de datos desde Firestore (una vez por sesión)                             # Lectura de datos.
# ---------------------------------------------------------------------------------
def load_rsvps() -> List[RsvpWithId]:  # Devuelve la lista ya ordenada por fecha descendente.
    """Lee Firestore en la primera ejecución de la sesión; los reruns reutilizan esa lectura."""
    if RSVPS_KEY not in st.session_state:  # Nueva página (o tras 'Refresh'): consulta el almacén.
        with st.spinner("Loading RSVPs…"):
            st.session_state[RSVPS_KEY] = rsvps_crud.get_rsvps(store.get_client())  # Solo se guarda si la lectura fue bien.
    return st.session_state[RSVPS_KEY]


try:  # Un fallo de lectura es un fallo de página.
    rsvps = load_rsvps()  # Lista de respuestas (puede estar vacía).
except rsvps_crud.RsvpFetchError as e:  # El cargador envuelve cualquier error del almacén.
    st.error(f"Could not load RSVPs: {e}")  # Muestra el error para depuración.
    st.stop()  # Detiene la ejecución para evitar fallos posteriores.

summary = summarize(rsvps)  # Totales recalculados en cada render.

# 🎨 Encabezado y acciones                                                            # Cabecera visual.
# ---------------------------------------------------------------------------------
st.title(f"💌 Host Dashboard • {EVENT_NAME}")  # Título principal del dashboard.
head, refresh_col, logout_col = st.columns([6, 1, 1])  # Texto a la izquierda, botones a la derecha.
head.subheader("Live Summary")  # Subtítulo de la sección de KPIs.
head.caption("Here are the latest RSVP stats.")  # Texto de apoyo.

if refresh_col.button("🔄 Refresh", key="refresh", use_container_width=True):  # Botón de refresco manual.
    st.session_state.pop(RSVPS_KEY, None)  # Descarta la lectura de esta sesión para forzar una nueva.
    st.rerun()  # Vuelve a ejecutar la página con datos frescos.

if logout_col.button("🚪 Logout", key="logout", type="primary", use_container_width=True):  # Botón de cierre de sesión.
    host_logout(st.session_state)  # Acción de logout (borra el token).
    st.session_state.pop("host_password", None)  # Vacía el campo de contraseña del gate.
    st.rerun()  # Sale del dashboard: el gate vuelve a pedir contraseña.

# 🎯 KPIs                                                                              # Panorama general.
# ---------------------------------------------------------------------------------
for col, tile in zip(st.columns(4), summary_tiles(summary)):  # Cuatro columnas, una por KPI.
    col.metric(tile.label, tile.value)  # Valor principal de la tarjeta.
    col.caption(f"{tile.icon} {tile.caption}")  # Icono y descripción breve debajo.

st.markdown("---")  # Separador visual.

# 📋 Lista de invitados + exportación                                                 # Visualización tabular.
# ---------------------------------------------------------------------------------
list_col, export_col = st.columns([6, 2])  # Título a la izquierda, exportar a la derecha.
list_col.subheader("Guest List")  # Encabezado de la tabla.


def _notify(note: Notification) -> None:
    """Pinta un aviso de la exportación (rojo si es destructivo)."""
    if note.variant == "destructive":  # Error: aviso destacado y persistente.
        st.error(f"**{note.title}:** {note.description}", icon="❌")
    else:  # Éxito: toast y confirmación en línea.
        st.toast(f"{note.title}: {note.description}", icon="✅")
        st.success(f"**{note.title}:** {note.description}", icon="✅")


if export_col.button("⬇️ Export CSV", key="export", use_container_width=True):  # Solicita el CSV a la acción de exportar.
    st.session_state.pop(EXPORT_DOWNLOAD_KEY, None)  # Descarta la descarga anterior.
    download = run_export(export_rsvps, _notify)  # Acción → aviso; devuelve la descarga si hubo éxito.
    if download is not None:  # Solo se guarda si la exportación fue correcta.
        st.session_state[EXPORT_DOWNLOAD_KEY] = download.model_dump()  # Persiste entre reruns.

pending = st.session_state.get(EXPORT_DOWNLOAD_KEY)  # Descarga lista para el navegador (si existe).
if pending:
    export_col.download_button(  # Entrega el archivo generado.
        label=f"💾 {pending['file_name']}",  # Texto del botón con el nombre del archivo.
        data=pending["data"],  # Contenido literal devuelto por la exportación.
        file_name=pending["file_name"],  # rsvps_YYYY-MM-DD.csv
        mime=pending["mime"],  # text/csv; charset=utf-8
        key="download_csv",
        use_container_width=True,  # Ocupa todo el ancho de la columna.
    )

st.markdown(GUEST_TABLE_CSS, unsafe_allow_html=True)  # Estilos de la tabla (scroll, badge, columnas).
st.markdown(guest_table_html(rsvps), unsafe_allow_html=True)  # Tabla de invitados (o fila de relleno).
