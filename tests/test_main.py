"""
Entry point tests — exit codes and printed verdicts of main.py.
"""

from __future__ import annotations

import pytest

import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VERHOEFF_LOG_LEVEL", raising=False)
    monkeypatch.delenv("VERHOEFF_VISIBLE_DIGITS", raising=False)


class TestMain:
    def test_valid_number_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main.main(["823519740628"]) == 0
        out = capsys.readouterr().out
        assert "VALID" in out
        assert "INVALID" not in out
        assert "XXXXXXXX0628" in out

    def test_invalid_number_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main.main(["823519740627"]) == 1
        assert "INVALID" in capsys.readouterr().out

    def test_demo_generation_always_printed(self, capsys: pytest.CaptureFixture[str]) -> None:
        main.main(["823519740627"])
        out = capsys.readouterr().out
        assert "Generated checksum for 82351974062" in out
        assert "823519740628" in out

    def test_parse_error_exits_two(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main.main(["8235-1974"]) == 2
        out = capsys.readouterr().out
        assert "PARSE_ERROR" in out
        assert "position: 4" in out

    def test_prompts_when_no_argument(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("builtins.input", lambda prompt: "8235 1974 0628")
        assert main.main([]) == 0

    def test_blank_input_exits_two(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("builtins.input", lambda prompt: "   ")
        assert main.main([]) == 2
        assert "INVALID_INPUT" in capsys.readouterr().out

    def test_visible_digits_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("VERHOEFF_VISIBLE_DIGITS", "2")
        main.main(["823519740628"])
        assert "XXXXXXXXXX28" in capsys.readouterr().out
