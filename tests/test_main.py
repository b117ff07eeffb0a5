"""
Tests for the command line interface.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch
from typer.testing import CliRunner

from socialgenius.exceptions import ConfigurationError, MalformedOutputError
from socialgenius.main import app
from socialgenius.models.idea import IdeaRecord

runner = CliRunner()


def test_generate_prints_ideas_as_json():
    service = MagicMock()
    service.generate_ideas = AsyncMock(return_value=[
        IdeaRecord(category="viral trend", suggestedFormat="Reel", hookTitle="Hook", executionGuide="Desc"),
    ])

    with patch("socialgenius.main.create_ai_service", return_value=service):
        result = runner.invoke(app, ["generate", "bakery"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["category"] == "viral trend"
    service.generate_ideas.assert_awaited_once_with("bakery")


def test_generate_reports_generation_errors():
    service = MagicMock()
    service.generate_ideas = AsyncMock(side_effect=MalformedOutputError("AI response contains invalid JSON"))

    with patch("socialgenius.main.create_ai_service", return_value=service):
        result = runner.invoke(app, ["generate", "bakery"])

    assert result.exit_code == 1
    assert "invalid JSON" in result.output


def test_generate_reports_missing_configuration():
    with patch("socialgenius.main.create_ai_service", side_effect=ConfigurationError("AI_API_KEY is not set in the environment")):
        result = runner.invoke(app, ["generate", "bakery"])

    assert result.exit_code == 1
    assert "AI_API_KEY" in result.output


def test_serve_runs_uvicorn():
    with patch("socialgenius.main.create_app") as mock_create_app, \
            patch("socialgenius.main.uvicorn.run") as mock_run:
        result = runner.invoke(app, ["serve", "--port", "8080"])

    assert result.exit_code == 0
    mock_run.assert_called_once()
    assert mock_run.call_args.args[0] is mock_create_app.return_value
    assert mock_run.call_args.kwargs["port"] == 8080
