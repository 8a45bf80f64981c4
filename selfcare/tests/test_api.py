from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient

from selfcare.app import app, get_dataset_config
from selfcare.dataset.config import TIP_COLUMN, DatasetConfig
from selfcare.dataset.errors import DatasetUnavailableError

client = TestClient(app)

ROW_TWO = {
    "Age group": "18 - 24",
    "Gender": "Male",
    "Occupation": "Student",
    "Average daily social media use (hours)": "3 - 4",
    "How often do you feel stressed?": "Sometimes",
    "How would you rate your sleep quality?": "Average",
}


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_schema_lists_question_columns():
    resp = client.get("/api/predict")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True

    names = [c["name"] for c in body["columns"]]
    assert names == list(ROW_TWO)
    assert TIP_COLUMN not in names

    gender = next(c for c in body["columns"] if c["name"] == "Gender")
    assert gender["type"] == "categorical"
    assert gender["options"] == ["Female", "Male", "Non-binary"]


def test_predict_exact_row():
    resp = client.post("/api/predict", json=ROW_TWO)
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["prediction"].startswith("Take a 10-minute walk")
    assert body["score"] == 1.0
    assert body["matched_fields"] == list(ROW_TWO)


def test_predict_ignores_unanswered_fields():
    answers = {name: "" for name in ROW_TWO}
    answers["Occupation"] = "Retired"
    resp = client.post("/api/predict", json=answers)
    body = resp.json()
    assert body["prediction"].startswith("Stay active with daily walks")
    assert body["score"] == 1.0
    assert body["matched_fields"] == ["Occupation"]


def test_predict_empty_object_returns_first_row():
    resp = client.post("/api/predict", json={})
    assert resp.status_code == 200
    body = resp.json()
    assert body["prediction"].startswith("Set an app timer")
    assert body["score"] == 0.0


def test_predict_rejects_non_object_body():
    resp = client.post("/api/predict", json=["Female", "Student"])
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Invalid input format"}


def test_predict_rejects_malformed_json():
    resp = client.post(
        "/api/predict",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_predict_rejects_missing_body():
    resp = client.post("/api/predict")
    assert resp.status_code == 400


@patch(
    "selfcare.recommendations.retrieval.get_dataset",
    side_effect=DatasetUnavailableError("Failed to load data"),
)
def test_schema_failure_envelope(mock_get):
    resp = client.get("/api/predict")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to load form structure"}


@patch(
    "selfcare.recommendations.retrieval.get_dataset",
    side_effect=DatasetUnavailableError("Failed to load data"),
)
def test_predict_failure_envelope(mock_get):
    resp = client.post("/api/predict", json=ROW_TWO)
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to generate recommendation"}


def test_invalid_dataset_file_returns_500(tmp_path: Path):
    path = tmp_path / "broken.csv"
    path.write_text("Mood,Sleep\nLow,Poor\n", encoding="utf-8")
    app.dependency_overrides[get_dataset_config] = lambda: DatasetConfig(csv_path=path)
    try:
        assert client.get("/api/predict").status_code == 500
        assert client.post("/api/predict", json={"Mood": "Low"}).status_code == 500
    finally:
        app.dependency_overrides.clear()


def test_custom_dataset_via_config_override(tmp_path: Path):
    path = tmp_path / "tips.csv"
    path.write_text(f"Mood,{TIP_COLUMN}\nLow,Call a friend\nHigh,Share the energy\n", encoding="utf-8")
    app.dependency_overrides[get_dataset_config] = lambda: DatasetConfig(csv_path=path)
    try:
        resp = client.post("/api/predict", json={"Mood": "High"})
        assert resp.json()["prediction"] == "Share the energy"
    finally:
        app.dependency_overrides.clear()


def test_cache_stats_endpoint():
    client.get("/api/predict")
    client.post("/api/predict", json=ROW_TWO)
    resp = client.get("/cache/stats")
    assert resp.status_code == 200
    body = resp.json()
    assert body["loads"] == 1
    assert body["hits"] >= 1
    assert body["loaded_at"] is not None


def test_root_serves_form():
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Self-Care Recommendation System" in resp.text
    assert client.get("/static/app.js").status_code == 200


def test_form_script_reads_answers_from_rendered_selects():
    script = client.get("/static/app.js").text
    # Looking fields up by name collides with the submit button and duplicate headers
    assert "namedItem" not in script
    assert "selects[index]" in script
