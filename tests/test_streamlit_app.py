# tests/test_streamlit_app.py
# =======================
# Página del dashboard ejecutada con streamlit.testing (sin navegador)
# =======================
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import app.export
import app.store
from app.auth import EXPORT_DOWNLOAD_KEY, HOST_TOKEN_KEY, create_host_token
from app.schemas import ExportResult
from conftest import rsvp_doc

APP_PATH = str(Path(__file__).resolve().parents[1] / "streamlit_app.py")
RUN_TIMEOUT = 30


def guest_table(at: AppTest) -> str:
    """HTML de la tabla de invitados tal como se pintó en la última ejecución."""
    tables = [m.value for m in at.markdown if "<table" in m.value]
    assert len(tables) == 1
    return tables[0]


@pytest.fixture()
def dashboard(monkeypatch, fake_client):
    """Fábrica: dashboard(docs=[...] | error=...) → AppTest con sesión de anfitrión abierta."""
    def _make(docs=None, error=None, logged_in=True) -> AppTest:
        client = fake_client(docs or [], error)
        monkeypatch.setattr(app.store, "get_client", lambda: client)
        at = AppTest.from_file(APP_PATH, default_timeout=RUN_TIMEOUT)
        if logged_in:
            at.session_state[HOST_TOKEN_KEY] = create_host_token()
        return at.run()
    return _make


def test_without_session_only_the_gate_is_shown(dashboard):
    at = dashboard(logged_in=False)
    assert any("host password" in i.value for i in at.info)
    assert len(at.metric) == 0


def test_empty_store_shows_zeros_and_placeholder(dashboard):
    at = dashboard([])
    assert not at.exception
    assert [m.value for m in at.metric] == ["0", "0", "0", "0"]
    table = guest_table(at)
    assert table.count('class="rsvp-empty"') == 1
    assert 'class="rsvp-row"' not in table


def test_records_fill_tiles_and_table(dashboard):
    at = dashboard([rsvp_doc("a", "Jo", adults=2, kids=1), rsvp_doc("b", "Ana", adults=1, kids=0)])
    assert [m.value for m in at.metric] == ["4", "2", "3", "1"]
    assert [m.label for m in at.metric] == ["Total Guests", "Groups RSVP'd", "Guests (Age 7+)", "Little Friends (<7)"]
    table = guest_table(at)
    assert table.count('class="rsvp-row"') == 2
    assert "Jo" in table and "Ana" in table


def test_new_session_reads_the_store_again(dashboard):
    first = dashboard([rsvp_doc("a", "Jo", adults=1, kids=0)])
    assert guest_table(first).count('class="rsvp-row"') == 1
    # Otra pestaña abierta después de un nuevo envío: no reutiliza la lectura anterior.
    second = dashboard([rsvp_doc("b", "Ana", adults=2, kids=0), rsvp_doc("a", "Jo", adults=1, kids=0)])
    assert [m.value for m in second.metric] == ["3", "2", "3", "0"]
    assert guest_table(second).count('class="rsvp-row"') == 2


def test_refresh_fetches_new_records(dashboard):
    at = dashboard([rsvp_doc("a", "Jo", adults=1, kids=0)])
    app.store.get_client().query.docs.insert(0, rsvp_doc("b", "Ana", adults=2, kids=1))
    at.run()                                                # Un rerun normal reutiliza la lectura de la sesión.
    assert guest_table(at).count('class="rsvp-row"') == 1
    at.button(key="refresh").click().run()
    assert not at.exception
    assert [m.value for m in at.metric] == ["4", "2", "3", "1"]
    table = guest_table(at)
    assert table.count('class="rsvp-row"') == 2
    assert table.index("Ana") < table.index("Jo")


def test_fetch_failure_is_a_page_level_error(dashboard):
    at = dashboard(error=RuntimeError("firestore unavailable"))
    assert any("Could not load RSVPs" in e.value for e in at.error)
    assert len(at.metric) == 0


def test_export_failure_shows_error_and_no_download(dashboard, monkeypatch):
    monkeypatch.setattr(app.export, "export_rsvps", lambda: ExportResult(error="network error"))
    at = dashboard([rsvp_doc("a")])
    at.button(key="export").click().run()
    assert any("network error" in e.value for e in at.error)
    assert EXPORT_DOWNLOAD_KEY not in at.session_state


def test_export_success_keeps_download_in_session(dashboard, monkeypatch):
    monkeypatch.setattr(app.export, "export_rsvps", lambda: ExportResult(data="a,b\n1,2"))
    at = dashboard([rsvp_doc("a")])
    at.button(key="export").click().run()
    pending = at.session_state[EXPORT_DOWNLOAD_KEY]
    assert pending["data"] == "a,b\n1,2"
    assert pending["file_name"].startswith("rsvps_") and pending["file_name"].endswith(".csv")
    assert pending["mime"] == "text/csv; charset=utf-8"
    assert any("Export Successful" in s.value for s in at.success)


def test_logout_returns_to_the_gate(dashboard):
    at = dashboard([rsvp_doc("a")])
    at.button(key="logout").click().run()
    assert HOST_TOKEN_KEY not in at.session_state
    assert len(at.metric) == 0
