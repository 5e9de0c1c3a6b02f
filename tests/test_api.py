import pytest
import sys
import os
from fastapi.testclient import TestClient

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from package_express.api.main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "online"


def test_limits(client):
    response = client.get("/limits")
    assert response.json() == {"max_weight": 50.0, "max_dimensions": 50.0, "cost_divisor": 100.0}


def test_quote(client):
    response = client.post("/quote", json={"weight": 10, "width": 2, "height": 2, "length": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "quoted"
    assert body["total"] == pytest.approx(0.8)
    assert body["formatted_total"] == "$0.80"
    assert body["error"] is None
    assert len(body["trace"]) == 3


def test_rejection_is_not_an_http_error(client):
    response = client.post("/quote", json={"weight": 60, "width": 1, "height": 1, "length": 1})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "rejected"
    assert body["total"] is None
    assert body["error"] == "Package too heavy to be shipped via Package Express. Have a good day."


def test_malformed_body(client):
    response = client.post("/quote", json={"weight": "heavy", "width": 1, "height": 1, "length": 1})
    assert response.status_code == 422

    response = client.post("/quote", json={"weight": 1, "width": 1})
    assert response.status_code == 422
