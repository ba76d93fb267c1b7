import pytest
from openai import AsyncOpenAI
from fastapi.testclient import TestClient

from rumor_check.config import Config
from rumor_check.main import app
from rumor_check.routers.analyze import get_analysis_client

client = TestClient(app)


@pytest.fixture
def use_reply(make_client):
    def _use(reply=None, error=None):
        analysis_client, completions = make_client(reply=reply, error=error)
        app.dependency_overrides[get_analysis_client] = lambda: analysis_client
        return completions
    yield _use
    app.dependency_overrides.clear()


def test_root():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_analyze_success(use_reply, earthquake_reply):
    use_reply(reply=earthquake_reply)
    r = client.post("/api/analyze", json={"query": "某地发生地震"})
    assert r.status_code == 200
    assert r.json() == earthquake_reply


def test_analyze_fallback_is_still_200(use_reply):
    use_reply(error=TimeoutError("upstream timed out"))
    r = client.post("/api/analyze", json={"query": "某地发生地震"})
    assert r.status_code == 200
    assert r.json() == {"message": "系统繁忙，无法获取分析结果，请稍后重试。", "isRumor": False, "graphData": None}


def test_analyze_requires_query(use_reply, earthquake_reply):
    use_reply(reply=earthquake_reply)
    r = client.post("/api/analyze", json={})
    assert r.status_code == 422


def test_shutdown_closes_analysis_client(monkeypatch):
    monkeypatch.setattr(Config, "OPENAI_KEY", "sk-test")
    with TestClient(app):
        analysis_client = app.state.analysis_client
        assert isinstance(analysis_client.client, AsyncOpenAI)
        assert not analysis_client.client.is_closed()
    assert analysis_client.client.is_closed()
