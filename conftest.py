# conftest.py
# -------------------------------------------------------------------------------------
# Archivo: conftest.py (raíz del proyecto)
# Propósito: Fixtures compartidas por toda la suite.
#            - Firestore falso (colección → consulta ordenada → stream de documentos).
#            - Fábrica de RsvpWithId para construir datos de prueba rápido.
#            - Variables de entorno de sesión/API con valores conocidos.
# No necesita red, emulador ni credenciales de Google.
# -------------------------------------------------------------------------------------

from __future__ import annotations  # Permite anotaciones de tipos adelantadas
from datetime import datetime, timezone  # Timestamps de los documentos falsos
from typing import Any, Dict, List, Optional  # Tipado de los fakes

import pytest  # Framework de testing

from app.schemas import RsvpWithId  # Modelo de salida del cargador


# =========================
# Firestore falso
# =========================
class FakeDoc:
    """Imita un DocumentSnapshot: expone .id y .to_dict()."""

    def __init__(self, doc_id: str, data: Dict[str, Any]):
        self.id = doc_id                                                 # Id asignado por el almacén
        self._data = data                                                # Campos guardados

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)                                          # Copia, como hace el SDK


class FakeQuery:
    """Consulta que registra el order_by recibido y devuelve los documentos tal cual."""

    def __init__(self, docs: List[FakeDoc], error: Optional[Exception] = None):
        self.docs = docs                                                 # Documentos en el orden del "almacén"
        self.error = error                                               # Error a lanzar al hacer stream()
        self.order_calls: List[tuple] = []                               # Registro de llamadas a order_by

    def order_by(self, field: str, direction: Any = None) -> "FakeQuery":
        self.order_calls.append((field, direction))                      # Guarda campo y dirección
        return self

    def stream(self):
        if self.error is not None:                                       # Simula caída del almacén
            raise self.error
        return iter(self.docs)


class FakeClient:
    """Cliente mínimo: collection(name) → FakeQuery."""

    def __init__(self, docs: Optional[List[FakeDoc]] = None, error: Optional[Exception] = None):
        self.query = FakeQuery(docs or [], error)                        # Única consulta compartida
        self.collections: List[str] = []                                 # Colecciones consultadas

    def collection(self, name: str) -> FakeQuery:
        self.collections.append(name)
        return self.query


def rsvp_doc(doc_id: str, name: str = "Guest", *, mobile: str = "555", email: Optional[str] = None,
             adults: int = 1, kids: int = 0, submitted_at: Any = None) -> FakeDoc:
    """Documento con los nombres de campo tal como se guardan en Firestore."""
    return FakeDoc(doc_id, {
        "guestName": name,
        "mobileNumber": mobile,
        "emailId": email,
        "countAdults": adults,
        "countKids": kids,
        "submittedAt": submitted_at or datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc),
    })


# =========================
# Fixtures
# =========================
@pytest.fixture()
def fake_client():
    """Fábrica: fake_client(docs=[...]) o fake_client(error=Exception(...))."""
    def _make(docs: Optional[List[FakeDoc]] = None, error: Optional[Exception] = None) -> FakeClient:
        return FakeClient(docs, error)
    return _make


@pytest.fixture()
def make_rsvp():
    """Fábrica de RsvpWithId con valores por defecto razonables."""
    counter = {"n": 0}

    def _make(name: str = "Guest", *, mobile: str = "555", email: Optional[str] = None,
              adults: int = 1, kids: int = 0, submitted_at: Optional[datetime] = None) -> RsvpWithId:
        counter["n"] += 1
        return RsvpWithId(
            id=f"doc-{counter['n']}",
            guest_name=name,
            mobile_number=mobile,
            email_id=email,
            count_adults=adults,
            count_kids=kids,
            submitted_at=submitted_at or datetime(2026, 5, 1, 12, 0),
        )
    return _make


@pytest.fixture()
def host_env(monkeypatch):
    """Contraseña de anfitrión y API key conocidas para los tests."""
    monkeypatch.setenv("HOST_PASSWORD", "let-me-in")
    monkeypatch.setenv("ADMIN_API_KEY", "test-admin-key")
    return {"password": "let-me-in", "admin_key": "test-admin-key"}
