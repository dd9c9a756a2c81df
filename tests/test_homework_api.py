import pytest

from hausaufgaben.errors import ValidationError
from hausaufgaben.models.homework import DEFAULT_HOMEWORK, HomeworkStore


def test_banner(client):
    body = client.get("/").get_json()
    assert body == {
        "message": "Hausaufgaben API läuft!",
        "version": "6.3.2",
        "wartungsarbeiten": False,
    }


def test_list_all_fields(client):
    body = client.get("/api/hausaufgaben").get_json()
    assert body["success"] is True
    assert body["data"] == DEFAULT_HOMEWORK
    assert "lastUpdated" in body


def test_get_single_field(client):
    body = client.get("/api/hausaufgaben/MatheHausaufgabe").get_json()
    assert body["value"] == "S.176/8"


def test_get_unknown_field(client):
    response = client.get("/api/hausaufgaben/Physik")
    assert response.status_code == 404
    assert response.get_json() == {"success": False, "error": "Feld 'Physik' nicht gefunden"}


def test_put_field(client):
    response = client.put("/api/hausaufgaben/DeutschHausaufgabe", json={"value": "S.120/1"})
    assert response.status_code == 200
    assert client.get("/api/hausaufgaben/DeutschHausaufgabe").get_json()["value"] == "S.120/1"


def test_put_requires_value(client):
    response = client.put("/api/hausaufgaben/DeutschHausaufgabe", json={})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Wert (value) ist erforderlich"


@pytest.mark.parametrize("field, value", [
    ("Wartungsarbeiten", "ja"),
    ("latein", -1),
    ("latein", "16"),
    ("latein", True),
])
def test_put_validated_fields(client, field, value):
    response = client.put(f"/api/hausaufgaben/{field}", json={"value": value})
    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_bulk_update_partial_errors(client):
    response = client.post("/api/hausaufgaben", json={"MatheHausaufgabe": "S.1", "latein": -5})
    body = response.get_json()
    assert response.status_code == 200
    assert body["updatedFields"] == ["MatheHausaufgabe"]
    assert len(body["errors"]) == 1


def test_bulk_update_all_invalid(client):
    response = client.post("/api/hausaufgaben", json={"Wartungsarbeiten": 1})
    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_bulk_update_requires_object(client):
    response = client.post("/api/hausaufgaben", json=[1, 2])
    assert response.status_code == 400


def test_reset(client):
    body = client.delete("/api/hausaufgaben").get_json()
    assert body["data"]["MatheHausaufgabe"] == ""
    assert body["data"]["Version"] == "6.3.2"
    assert body["data"]["WartungsarbeitenZeit"] == "08:50"
    assert body["data"]["latein"] == 0


def test_toggle_maintenance(client):
    first = client.post("/api/wartung").get_json()
    second = client.post("/api/wartung").get_json()
    assert first["wartungsarbeiten"] is True
    assert first["message"] == "Wartungsmodus aktiviert"
    assert second["wartungsarbeiten"] is False


def test_status(client):
    status = client.get("/api/status").get_json()["status"]
    assert status["version"] == "6.3.2"
    assert status["lateinStunden"] == 16
    assert status["totalFields"] == len(DEFAULT_HOMEWORK)
    assert status["uptime"] >= 0


def test_store_accepts_float_for_latein():
    store = HomeworkStore()
    assert store.set("latein", 2.5) == 2.5
    with pytest.raises(ValidationError):
        store.set("Wartungsarbeiten", None)
