"""
Tests for the bookshelf command line interface
"""

from unittest.mock import patch

from click.testing import CliRunner

from bookshelf import __version__
from bookshelf.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_schema_prints_sdl():
    result = CliRunner().invoke(cli, ["schema"])

    assert result.exit_code == 0, result.output
    assert "scalar ObjectID" in result.output
    assert "type Mutation" in result.output


def test_schema_writes_file(tmp_path):
    target = tmp_path / "schema.graphql"

    result = CliRunner().invoke(cli, ["schema", "--output", str(target)])

    assert result.exit_code == 0, result.output
    assert "type Book" in target.read_text(encoding="utf-8")


def test_serve_runs_uvicorn():
    with patch("bookshelf.cli.uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--port", "4100", "--host", "127.0.0.1"])

    assert result.exit_code == 0, result.output
    mock_run.assert_called_once()
    kwargs = mock_run.call_args.kwargs
    assert kwargs["port"] == 4100
    assert kwargs["host"] == "127.0.0.1"


def test_serve_with_reload_passes_import_string():
    with patch("bookshelf.cli.uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--reload"])

    assert result.exit_code == 0, result.output
    assert mock_run.call_args.args[0] == "bookshelf.api.app:app"
    assert mock_run.call_args.kwargs["reload"] is True


def test_serve_startup_failure_exits_nonzero():
    with patch("bookshelf.cli.uvicorn.run", side_effect=OSError("address in use")):
        result = CliRunner().invoke(cli, ["serve"])

    assert result.exit_code == 1
