"""Shared pytest fixtures."""
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from reservasport.core.config import settings
from reservasport.core.store import JsonStore, get_store
from reservasport.main import app
from reservasport.models.snapshot import Snapshot

ADMIN_PASSWORD = "test-password"

TEST_DATA = {
    "courts": [
        {
            "id": 1,
            "nombre": "Cancha Central",
            "tipo": "Pádel",
            "tarifa": 20000,
            "activa": True,
            "time_slots": ["08:00", "09:00", "10:00", "23:00"],
        },
        {
            "id": 2,
            "nombre": "Cancha Norte",
            "tipo": "Fútbol 5",
            "tarifa": 30000,
            "activa": True,
            "time_slots": ["09:00", "10:00"],
        },
        {
            "id": 3,
            "nombre": "Cancha Cerrada",
            "tipo": "Tenis",
            "tarifa": 15000,
            "activa": False,
            "time_slots": ["09:00"],
        },
    ],
    "time_slots": [
        {"id": "08:00", "label": "08:00 - 09:00"},
        {"id": "09:00", "label": "09:00 - 10:00"},
        {"id": "10:00", "label": "10:00 - 11:00"},
    ],
    "reservations": [],
    "nextReservationId": 1,
    "adminTokens": {},
}


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Pin settings that the services read at call time."""
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setattr(settings, "TOKEN_TTL_HOURS", 4.0)
    monkeypatch.setattr(settings, "TIMEZONE", None)


@pytest.fixture
def snapshot():
    return Snapshot.model_validate(TEST_DATA)


@pytest.fixture
def store(tmp_path, snapshot):
    json_store = JsonStore(tmp_path / "data.json")
    json_store.save(snapshot)
    return json_store


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def future_date():
    return (date.today() + timedelta(days=30)).isoformat()


@pytest.fixture
def reservation_payload(future_date):
    return {
        "courtId": 1,
        "date": future_date,
        "slotId": "09:00",
        "clienteNombre": "Ana Pérez",
        "clienteTelefono": "600123456",
    }


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
