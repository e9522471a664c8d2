"""Tests for the typer CLI."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from prompt_forge.cli import app
from prompt_forge.errors import CompletionError, QuotaExceededError, RateLimitError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    # Keep a developer's config.yaml out of the picture
    monkeypatch.chdir(tmp_path)


class TestLocalCommands:
    def test_generate_json(self):
        result = runner.invoke(app, ["generate", "a cat", "--modality", "image", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["title"] for item in data] == ["Photorealistic", "Artistic & Creative", "Commercial & Clean"]

    def test_generate_panels(self):
        result = runner.invoke(app, ["generate", "build a REST API", "-m", "code", "--no-enhance"])
        assert result.exit_code == 0
        assert "Production Ready" in result.output

    def test_empty_request_rejected(self):
        result = runner.invoke(app, ["generate", "   "])
        assert result.exit_code == 1
        assert "Please enter a request" in result.output

    def test_analyze(self):
        result = runner.invoke(app, ["analyze", "explain how recursion works"])
        assert result.exit_code == 0
        assert "explain" in result.output

    def test_enhance(self):
        result = runner.invoke(app, ["enhance", "make me a logo"])
        assert result.exit_code == 0
        assert "Capitalized first letter" in result.output

    def test_platforms(self):
        result = runner.invoke(app, ["platforms"])
        assert result.exit_code == 0
        assert "midjourney" in result.output


def _mock_llm(generate: AsyncMock) -> MagicMock:
    llm = MagicMock()
    llm.generate = generate
    llm.get_token_summary.return_value = {"input": 0, "output": 0, "calls": []}
    return llm


class TestOptimizeCommand:
    def test_optimize_json(self, mock_llm_client):
        with patch("prompt_forge.cli.LLMClient", return_value=mock_llm_client):
            result = runner.invoke(app, ["optimize", "write a haiku", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output[result.output.index("["):])
        assert data[0]["title"] == "Quick & Direct"

    def test_optimize_prints_usage(self, mock_llm_client):
        with patch("prompt_forge.cli.LLMClient", return_value=mock_llm_client):
            result = runner.invoke(app, ["optimize", "write a haiku"])
        assert result.exit_code == 0
        assert "1 call(s), 120 input / 80 output tokens, ~$0.0005" in result.output

    @pytest.mark.parametrize(
        "error, code",
        [(RateLimitError(), 2), (QuotaExceededError(), 3), (CompletionError(), 1)],
    )
    def test_optimize_error_exit_codes(self, error, code):
        llm = _mock_llm(AsyncMock(side_effect=error))
        with patch("prompt_forge.cli.LLMClient", return_value=llm):
            result = runner.invoke(app, ["optimize", "write a haiku"])
        assert result.exit_code == code
