from unittest.mock import AsyncMock, patch

import pytest

from simphy_scriptgen.server import cli


@pytest.fixture
def env(monkeypatch, knowledge_path):
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("SCRIPTGEN_KNOWLEDGE_BASE", str(knowledge_path))
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


def test_serve_exits_before_listening_without_knowledge_base(env, monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("SCRIPTGEN_KNOWLEDGE_BASE", str(tmp_path / "missing.json"))

    with patch.object(cli.uvicorn, "run") as mock_run:
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["serve"])

    assert excinfo.value.code == 1
    mock_run.assert_not_called()
    assert "Failed to load or parse" in capsys.readouterr().err


def test_serve_exits_without_api_key(env, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "")

    with patch.object(cli.uvicorn, "run") as mock_run:
        with pytest.raises(SystemExit):
            cli.main(["serve"])

    mock_run.assert_not_called()


def test_serve_runs_uvicorn_with_overrides(env):
    with patch.object(cli.uvicorn, "run") as mock_run:
        cli.main(["serve", "--port", "8080"])

    _, kwargs = mock_run.call_args
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 8080


def test_generate_prints_script(env, capsys):
    with patch.object(cli, "LLMClient") as mock_cls:
        mock_cls.return_value.complete = AsyncMock(return_value="World.clearAll();")
        cli.main(["generate", "a", "ball", "falling"])

    assert capsys.readouterr().out == "World.clearAll();\n"
    messages = mock_cls.return_value.complete.await_args.args[0]
    assert '"a ball falling"' in messages[1]["content"]


def test_generate_rejects_empty_interactive_prompt(env, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda _: "")

    with pytest.raises(SystemExit):
        cli.main(["generate"])

    assert "Prompt is required" in capsys.readouterr().err
