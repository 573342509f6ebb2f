import json

import pytest

from server import app, create_app


@pytest.fixture
def client(tiny):
    return create_app(tiny).test_client()


def test_health():
    resp = app.test_client().get("/health")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "ok"


def test_post_sentiment_ok():
    client = app.test_client()
    resp = client.post(
        "/sentimentAnalyzer",
        data=json.dumps({"text": "VADER is smart, handsome, and funny."}),
        content_type="application/json",
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert data == {"neg": 0.0, "neu": 0.254, "pos": 0.746, "compound": 0.8316, "label": "positive"}


def test_post_with_injected_analyzer(client):
    resp = client.post("/sentimentAnalyzer", json={"text": "not good"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["label"] == "negative"
    assert data["neg"] + data["neu"] + data["pos"] == pytest.approx(1.0, abs=1e-3)


def test_empty_text_is_valid(client):
    resp = client.post("/sentimentAnalyzer", json={"text": ""})
    assert resp.status_code == 200
    assert resp.get_json() == {"neg": 0.0, "neu": 0.0, "pos": 0.0, "compound": 0.0, "label": "neutral"}


@pytest.mark.parametrize("payload", [{}, {"text": 3}, {"text": None}, ["text"]])
def test_bad_request(client, payload):
    resp = client.post("/sentimentAnalyzer", json=payload)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_non_json_body(client):
    resp = client.post("/sentimentAnalyzer", data="hello", content_type="text/plain")
    assert resp.status_code == 400
