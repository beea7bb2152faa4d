import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


class TestCatalogEndpoints:
    def test_languages(self, client: TestClient) -> None:
        response = client.get("/api/languages")
        assert response.status_code == 200
        languages = response.json()["languages"]
        assert {"code": "es", "name": "Spanish"} in languages
        assert {"code": "cy", "name": "Welsh"} in languages
        assert len({language["code"] for language in languages}) == len(languages)
        assert response.headers["access-control-allow-origin"] == "*"

    def test_formats(self, client: TestClient) -> None:
        response = client.get("/api/formats")
        assert response.status_code == 200
        body = response.json()
        assert body["direct"] == ["doc", "docx", "pdf", "txt"]
        assert "mp3" in body["withTranscription"]
        assert "mp4" in body["withTranscription"]
        assert "txt" not in body["withTranscription"]
        assert body["maxUploadBytes"] == 25 * 1024 * 1024
        assert body["maxTextLength"] == 50_000
        assert body["notes"]
