from __future__ import annotations

from pathlib import Path

import pytest

from envsetup.cli import main, prompt_values
from envsetup.env_utils import read_existing_env_file
from envsetup.model import NO_CHANGES, EnvSetup


def _answers(*replies):
    """Build an input function that returns the given replies in order.

    A reply that is an exception class is raised instead of returned.
    """
    queue = list(replies)
    prompts: list[str] = []

    def _input(prompt: str = "") -> str:
        prompts.append(prompt)
        if not queue:
            raise EOFError
        reply = queue.pop(0)
        if isinstance(reply, type) and issubclass(reply, BaseException):
            raise reply
        return reply

    _input.prompts = prompts  # type: ignore[attr-defined]
    return _input


def _write(directory: Path, name: str, content: str) -> Path:
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    _write(tmp_path, ".env.example", "KEY1=val1 # desc1\nKEY2=val2\n")
    _write(tmp_path, ".env", "KEY1=old_val1\n")
    return tmp_path


def _loaded(directory: Path) -> EnvSetup:
    setup = EnvSetup(directory)
    setup.load()
    return setup


def test_prompt_values_empty_answers_keep_prefilled(project):
    setup = _loaded(project)
    values = prompt_values(setup, _answers("", ""))
    assert values == {"KEY1": "old_val1", "KEY2": "val2"}
    assert values == setup.initial_values()


def test_prompt_values_typed_answer_replaces(project):
    setup = _loaded(project)
    values = prompt_values(setup, _answers("new_val1_updated", "val2_updated"))
    assert values == {"KEY1": "new_val1_updated", "KEY2": "val2_updated"}


def test_prompt_values_dash_clears(project):
    setup = _loaded(project)
    values = prompt_values(setup, _answers("-", ""))
    assert values["KEY1"] == ""
    assert values["KEY2"] == "val2"


def test_prompt_values_prompts_show_key_description_and_value(project):
    setup = _loaded(project)
    ask = _answers("", "")
    prompt_values(setup, ask)
    first, second = ask.prompts
    assert "KEY1" in first and "desc1" in first and "old_val1" in first
    assert "KEY2" in second and "val2" in second


def test_prompt_values_propagates_eof(project):
    setup = _loaded(project)
    with pytest.raises(EOFError):
        prompt_values(setup, _answers(EOFError))


def test_main_missing_example(tmp_path, capsys):
    assert main(["-C", str(tmp_path)]) == 1
    assert "Error reading .env.example" in capsys.readouterr().out


def test_main_empty_example(tmp_path, capsys):
    _write(tmp_path, ".env.example", "")
    assert main(["-C", str(tmp_path)]) == 1
    assert "No environment variables found in .env.example" in capsys.readouterr().out


def test_main_no_changes(tmp_path, monkeypatch, capsys):
    _write(tmp_path, ".env.example", "K1=v1\nK2=v2\n")
    env = _write(tmp_path, ".env", "K1=v1\nK2=v2\n")
    monkeypatch.setattr("builtins.input", _answers("", ""))
    assert main(["--directory", str(tmp_path)]) == 0
    assert NO_CHANGES in capsys.readouterr().out
    assert env.read_text(encoding="utf-8") == "K1=v1\nK2=v2\n"
    assert not (tmp_path / ".env.old").exists()


def test_main_save_writes_and_backs_up(project, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _answers("new_val1_updated", "", "y"))
    assert main(["-C", str(project)]) == 0
    out = capsys.readouterr().out
    assert '~ Changed: KEY1: "old_val1" -> "new_val1_updated"' in out
    assert '+ Added: KEY2="val2"' in out
    assert read_existing_env_file(project / ".env") == {
        "KEY1": "new_val1_updated",
        "KEY2": "val2",
    }
    assert (project / ".env.old").read_text(encoding="utf-8") == "KEY1=old_val1\n"


def test_main_save_is_default_answer(project, monkeypatch):
    monkeypatch.setattr("builtins.input", _answers("", "", ""))
    assert main(["-C", str(project)]) == 0
    assert read_existing_env_file(project / ".env") == {"KEY1": "old_val1", "KEY2": "val2"}


def test_main_discard_leaves_file(project, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _answers("should_not_be_saved", "", "n"))
    assert main(["-C", str(project)]) == 0
    assert "Changes discarded by user." in capsys.readouterr().out
    assert (project / ".env").read_text(encoding="utf-8") == "KEY1=old_val1\n"
    assert not (project / ".env.old").exists()


def test_main_invalid_confirm_answer_asks_again(project, monkeypatch):
    ask = _answers("x", "", "maybe", "no")
    monkeypatch.setattr("builtins.input", ask)
    assert main(["-C", str(project)]) == 0
    assert len(ask.prompts) == 4
    assert (project / ".env").read_text(encoding="utf-8") == "KEY1=old_val1\n"


def test_main_abort_during_prompts(project, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _answers(KeyboardInterrupt))
    assert main(["-C", str(project)]) == 0
    assert "Operation cancelled by user (main form aborted)." in capsys.readouterr().out
    assert (project / ".env").read_text(encoding="utf-8") == "KEY1=old_val1\n"


def test_main_abort_during_confirmation(project, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _answers("changed", "", EOFError))
    assert main(["-C", str(project)]) == 0
    assert "Save operation cancelled by user." in capsys.readouterr().out
    assert (project / ".env").read_text(encoding="utf-8") == "KEY1=old_val1\n"


def test_main_without_existing_env_creates_it(tmp_path, monkeypatch):
    _write(tmp_path, ".env.example", "FRESH_KEY=fresh_value\n")
    monkeypatch.setattr("builtins.input", _answers("", "yes"))
    assert main(["-C", str(tmp_path)]) == 0
    assert (tmp_path / ".env").read_text(encoding="utf-8") == "FRESH_KEY=fresh_value\n"
    assert not (tmp_path / ".env.old").exists()