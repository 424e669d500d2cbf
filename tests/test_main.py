from unittest.mock import patch

import pytest

from magical_miles.ai.gemini_client import GeminiClient
from magical_miles.main import create_gemini_client
from magical_miles.settings import Settings


@pytest.mark.unit
class TestCreateGeminiClient:
    def test_disabled_by_configuration(self, monkeypatch):
        monkeypatch.setenv("GEMINI_ENABLED", "false")
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")

        assert create_gemini_client(Settings()) is None

    def test_missing_key_disables_ai(self, monkeypatch):
        monkeypatch.delenv("GEMINI_ENABLED", raising=False)
        monkeypatch.setenv("GEMINI_API_KEY", "")

        assert create_gemini_client(Settings()) is None

    def test_ready_client(self, monkeypatch):
        monkeypatch.delenv("GEMINI_ENABLED", raising=False)
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")
        monkeypatch.setenv("GEMINI_MODEL", "gemini-test")

        with patch("magical_miles.ai.gemini_client.genai.Client"):
            client = create_gemini_client(Settings())

        assert isinstance(client, GeminiClient)
        assert client.ready
        assert client.model == "gemini-test"
