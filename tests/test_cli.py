from unittest.mock import Mock, patch

import requests
from click.testing import CliRunner

from telugu_bible.cli import cli
from telugu_bible.helpers.models import BookNames, HealthResponse


class TestHealthCommand:
    @patch("telugu_bible.cli.health_check")
    def test_prints_status(self, mock_health):
        mock_health.return_value = HealthResponse(
            status="healthy", books_index_loaded=True
        )

        result = CliRunner().invoke(cli, ["health", "--base-url", "http://x"])

        assert result.exit_code == 0
        assert "Server Status: healthy" in result.output
        mock_health.assert_called_once_with("http://x")

    @patch("telugu_bible.cli.health_check")
    def test_connection_failure_exits_non_zero(self, mock_health):
        mock_health.side_effect = requests.ConnectionError("refused")

        result = CliRunner().invoke(cli, ["health"])

        assert result.exit_code == 1
        assert "Error: refused" in result.output


class TestBooksCommand:
    @patch("telugu_bible.cli.list_books")
    def test_lists_english_and_telugu_names(self, mock_list):
        mock_list.return_value = [BookNames(english="Genesis", telugu="ఆదికాండము")]

        result = CliRunner().invoke(cli, ["books"])

        assert result.exit_code == 0
        assert "Genesis\tఆదికాండము" in result.output


class TestReadCommand:
    @patch("telugu_bible.cli.get_passage")
    def test_reads_a_verse(self, mock_get):
        mock_get.return_value = {"verse": "1", "text": "In the beginning..."}

        result = CliRunner().invoke(cli, ["read", "Genesis", "1", "1"])

        assert result.exit_code == 0
        assert "Genesis 1:1 In the beginning..." in result.output
        mock_get.assert_called_once_with("Genesis", "1", "1", None)

    @patch("telugu_bible.cli.get_passage")
    def test_reads_a_chapter(self, mock_get):
        mock_get.return_value = [
            {"verse": "1", "text": "first"},
            {"verse": "2", "text": "second"},
        ]

        result = CliRunner().invoke(cli, ["read", "Genesis", "1"])

        assert result.exit_code == 0
        assert "1. first" in result.output
        assert "2. second" in result.output

    @patch("telugu_bible.cli.get_passage")
    def test_not_found_shows_server_error_message(self, mock_get):
        response = Mock()
        response.json.return_value = {"error": "Chapter 99 not found"}
        mock_get.side_effect = requests.HTTPError("404", response=response)

        result = CliRunner().invoke(cli, ["read", "Genesis", "99"])

        assert result.exit_code == 1
        assert "Error: Chapter 99 not found" in result.output


class TestServerCommand:
    @patch("uvicorn.run")
    def test_uses_configured_port_by_default(self, mock_run):
        result = CliRunner().invoke(cli, ["server"])

        assert result.exit_code == 0
        mock_run.assert_called_once_with(
            "telugu_bible.server.server:app",
            host="0.0.0.0",
            port=3000,
            reload=False,
            workers=1,
        )

    @patch("uvicorn.run")
    def test_reload_forces_single_worker(self, mock_run):
        result = CliRunner().invoke(
            cli, ["server", "--port", "8080", "--reload", "--workers", "4"]
        )

        assert result.exit_code == 0
        assert mock_run.call_args.kwargs["port"] == 8080
        assert mock_run.call_args.kwargs["workers"] == 1

    @patch.dict("sys.modules", {"uvicorn": None})
    def test_missing_uvicorn_explains_install(self):
        result = CliRunner().invoke(cli, ["server"])

        assert result.exit_code == 1
        assert "uvicorn is required" in result.output
        assert "fastapi[standard]" in result.output
