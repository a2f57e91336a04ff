import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


@pytest.fixture
def client():
    """Fresh app with an empty store."""
    with TestClient(create_app(Settings(seed_demo_video=False))) as c:
        yield c


@pytest.fixture
def seeded_client():
    """Fresh app starting with the demo video (id 0)."""
    with TestClient(create_app(Settings(seed_demo_video=True))) as c:
        yield c


@pytest.fixture
def new_video():
    return {"title": "Intro to FastAPI", "author": "Alice", "availableResolutions": ["P720", "P1080"]}


@pytest.fixture
def created(client, new_video):
    resp = client.post("/videos", json=new_video)
    assert resp.status_code == 201
    return resp.json()
