"""Tests for the command line entry point."""

import io

import pytest

from instaprompt.__main__ import main


def _add(capsys, name: str, content: str, *extra: str) -> str:
    assert main(["add", name, "--content", content, *extra]) == 0
    return capsys.readouterr().out.strip()


class TestPromptCommands:
    def test_add_and_list(self, app_env, capsys):
        prompt_id = _add(capsys, "Review", "Review {FILENAME}", "--category", "code")

        assert main(["list"]) == 0
        out = capsys.readouterr().out
        assert prompt_id in out
        assert "Review [code]" in out

    def test_add_reads_stdin(self, app_env, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("from stdin {LINE}"))
        assert main(["add", "Stdin"]) == 0
        prompt_id = capsys.readouterr().out.strip()

        assert main(["insert", prompt_id, "--file", "a.py", "--line", "3"]) == 0
        assert capsys.readouterr().out == "from stdin 3\n"

    def test_delete(self, app_env, capsys):
        prompt_id = _add(capsys, "Tmp", "x")
        assert main(["delete", prompt_id]) == 0
        assert main(["delete", prompt_id]) == 1


class TestInsert:
    def test_resolves_context_flags(self, app_env, capsys, tmp_path):
        prompt_id = _add(capsys, "Explain", "{FILENAME}:{LINE} {SELECTION} {CLIPBOARD} {TASK}")
        task_doc = tmp_path / "docs" / "delivery" / "2" / "2-5.md"

        code = main(
            [
                "insert",
                prompt_id,
                "--file",
                str(tmp_path / "app.py"),
                "--line",
                "12",
                "--selection",
                "x = 1",
                "--clipboard",
                "clip",
                "--visible",
                str(task_doc),
            ]
        )

        assert code == 0
        assert capsys.readouterr().out == "app.py:12 x = 1 clip 2-5\n"

    def test_asks_for_missing_values(self, app_env, capsys, monkeypatch):
        prompt_id = _add(capsys, "Greet", "Hi {NAME}, {NAME}!")
        answers = iter(["Ada"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        assert main(["insert", prompt_id]) == 0
        assert capsys.readouterr().out == "Hi Ada, Ada!\n"

    def test_end_of_input_cancels_silently(self, app_env, capsys, monkeypatch):
        prompt_id = _add(capsys, "Greet", "Hi {NAME}")

        def eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", eof)

        assert main(["insert", prompt_id]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Traceback" not in captured.err

    def test_unknown_prompt(self, app_env, capsys):
        assert main(["insert", "missing"]) == 1
        assert "Prompt not found" in capsys.readouterr().err


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])
