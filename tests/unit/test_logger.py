import logging

import pytest

from media_translator.logging.logger import Log


class TestLog:
    def test_context_rendered_as_pairs(self) -> None:
        assert Log._render("Run failed", {"run_id": "abc", "code": "rate_limited"}) == (
            "Run failed [run_id=abc code=rate_limited]"
        )

    def test_message_without_context_unchanged(self) -> None:
        assert Log._render("plain", {}) == "plain"

    def test_configure_sets_level_and_quiets_sdk_loggers(self) -> None:
        Log.configure("info")
        assert Log._logger.level == logging.INFO
        assert logging.getLogger("openai").level == logging.WARNING
        assert len(Log._logger.handlers) == 1
        Log.configure("INFO")
        assert len(Log._logger.handlers) == 1

    def test_debug_level_keeps_sdk_loggers_verbose(self) -> None:
        Log.configure("DEBUG")
        assert logging.getLogger("httpx").level == logging.DEBUG
        Log.configure("INFO")

    def test_info_goes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        Log._logger.handlers.clear()
        Log.configure("INFO")
        Log.info("Transcription completed", language="english")
        assert "Transcription completed [language=english]" in capsys.readouterr().out
        Log._logger.handlers.clear()
