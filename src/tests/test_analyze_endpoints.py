import json

import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from core.deps import get_analyzer
from core.settings import get_settings
from schemas.analyze import AnalyzeRequest
from services.analyzer_service import (
    AnalysisResult,
    AnalyzerUnavailableError,
    LocalAnalyzer,
    RemoteAnalyzer,
)


client = TestClient(app)

TEXT = (
    "Solar panels convert sunlight into electricity. Battery storage keeps solar power "
    "available at night. Grid operators balance solar power with wind and hydro."
)


@pytest.fixture(autouse=True)
def _reset_overrides():
    yield
    app.dependency_overrides.clear()


class RecordingAnalyzer:
    """Запоминает параметры вызова"""

    mode = "local"

    def __init__(self):
        self.calls = []

    def analyze(self, text, k, top_n, task):
        self.calls.append({"k": k, "top_n": top_n, "task": task})
        return AnalysisResult(summary=["s"], keywords=["w"], mode=self.mode)


def test_health_and_info():
    assert client.get("/v1/health").json()["status"] == "healthy"
    info = client.get("/v1/info").json()
    assert info["analyzer_mode"] in ("local", "remote")
    assert info["max_k"] >= 1 and info["max_top_n"] >= 1


def test_root_and_legacy_health():
    assert client.get("/").json()["status"] == "running"
    assert client.get("/health").json()["service"] == "text-digest-api"


def test_analyze_local():
    app.dependency_overrides[get_analyzer] = lambda: LocalAnalyzer()
    resp = client.post("/v1/analyze", json={"text": TEXT, "k": 2, "topN": 5})
    assert resp.status_code == 200
    data = resp.json()
    assert data["mode"] == "local"
    assert 1 <= len(data["summary"]) <= 2
    assert 1 <= len(data["keywords"]) <= 5


def test_analyze_clamps_numbers():
    analyzer = RecordingAnalyzer()
    app.dependency_overrides[get_analyzer] = lambda: analyzer

    client.post("/v1/analyze", json={"text": TEXT, "k": 100, "topN": 0})
    client.post("/v1/analyze", json={"text": TEXT, "task": "keywords"})

    assert analyzer.calls[0] == {"k": 12, "top_n": 1, "task": "both"}
    assert analyzer.calls[1] == {"k": 3, "top_n": 8, "task": "keywords"}


def test_analyze_short_text():
    app.dependency_overrides[get_analyzer] = lambda: LocalAnalyzer()
    resp = client.post("/v1/analyze", json={"text": "too short"})
    assert resp.status_code == 422


def test_analyze_bad_task():
    resp = client.post("/v1/analyze", json={"text": TEXT, "task": "translate"})
    assert resp.status_code == 422


def test_analyze_remote_unavailable():
    class DownAnalyzer(RecordingAnalyzer):
        mode = "remote"

        def analyze(self, text, k, top_n, task):
            raise AnalyzerUnavailableError("connection refused")

    app.dependency_overrides[get_analyzer] = lambda: DownAnalyzer()
    resp = client.post("/v1/analyze", json={"text": TEXT})
    assert resp.status_code == 503


def test_contract_endpoint():
    resp = client.post("/api/analyze", json={"text": TEXT, "k": 1, "topN": 3, "task": "both"})
    assert resp.status_code == 200
    data = resp.json()
    assert set(data) == {"summary", "keywords"}
    assert len(data["summary"]) == 1
    assert len(data["keywords"]) <= 3


def test_contract_endpoint_error_body():
    resp = client.post("/api/analyze", json={"text": "tiny"})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_contract_endpoint_too_long_text():
    limit = get_settings().max_text_length
    resp = client.post("/api/analyze", json={"text": "word " * (limit // 5 + 1)})
    assert resp.status_code == 413
    assert "error" in resp.json()


def test_analyze_too_long_text_uses_settings_limit(monkeypatch):
    settings = get_settings()
    monkeypatch.setattr(settings, "max_text_length", 50)
    app.dependency_overrides[get_analyzer] = lambda: LocalAnalyzer()
    resp = client.post("/v1/analyze", json={"text": TEXT})
    assert resp.status_code == 422
    assert "50" in resp.json()["detail"]


def test_remote_analyzer_against_contract_endpoint():
    """RemoteAnalyzer -> /api/analyze этого же сервиса"""

    def handler(request: httpx.Request) -> httpx.Response:
        resp = client.post("/api/analyze", json=json.loads(request.content))
        return httpx.Response(resp.status_code, json=resp.json())

    remote = RemoteAnalyzer("http://digest.test", transport=httpx.MockTransport(handler))
    result = remote.analyze(TEXT, k=2, top_n=4)
    local = LocalAnalyzer().analyze(TEXT, k=2, top_n=4)
    assert result.summary == local.summary
    assert result.keywords == local.keywords

    with pytest.raises(AnalyzerUnavailableError):
        RemoteAnalyzer(
            "http://digest.test",
            min_text_length=0,
            transport=httpx.MockTransport(handler),
        ).analyze("tiny")


def test_request_normalizes_crlf():
    request = AnalyzeRequest(text="First line here\r\nSecond line here\rThird", topN=3)
    assert request.text == "First line here\nSecond line here\nThird"
    assert request.top_n == 3
