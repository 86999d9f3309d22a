"""Tests for the `titools agents` flow and CLI wiring."""

from unittest.mock import patch

import pytest

from titools.cli import build_parser, main
from titools.knowledge.block import BLOCK_PREFIX, start_marker
from titools.knowledge.installer import choose_targets, run_agents

# ---------------------------------------------------------------------------
# choose_targets
# ---------------------------------------------------------------------------


def test_choose_targets_uses_existing_files(tmp_path):
    (tmp_path / "AGENTS.md").touch()
    (tmp_path / "CLAUDE.md").touch()
    assert choose_targets(tmp_path) == ["CLAUDE.md", "AGENTS.md"]


def test_choose_targets_force_defaults_to_claude(tmp_path):
    with patch("builtins.input") as mock_input:
        assert choose_targets(tmp_path, force=True) == ["CLAUDE.md"]
    mock_input.assert_not_called()


def test_choose_targets_prompts_when_none_exist(tmp_path):
    with patch("builtins.input", return_value="2"):
        assert choose_targets(tmp_path) == ["GEMINI.md"]


# ---------------------------------------------------------------------------
# run_agents
# ---------------------------------------------------------------------------


def test_run_agents_requires_template(fake_home, titanium_project, capsys):
    with pytest.raises(SystemExit) as exc:
        run_agents(str(titanium_project), force=True)

    assert exc.value.code == 1
    assert "AGENTS-TEMPLATE.md not found" in capsys.readouterr().err
    assert not (titanium_project / "CLAUDE.md").exists()


def test_run_agents_requires_titanium_project(installed_template, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        run_agents(str(tmp_path), force=True)

    assert exc.value.code == 1
    assert "not a Titanium project" in capsys.readouterr().err


def test_run_agents_force_creates_claude_md(installed_template, titanium_project, capsys):
    assert run_agents(str(titanium_project), force=True) == 0

    content = (titanium_project / "CLAUDE.md").read_text(encoding="utf-8")
    assert content.startswith(start_marker("v1.0.0"))
    out = capsys.readouterr().out
    assert "alloy, SDK 13.1.0.GA" in out
    assert "CLAUDE.md created" in out


def test_run_agents_updates_all_existing(installed_template, titanium_project, capsys):
    (titanium_project / "GEMINI.md").write_text("# Gemini notes\n", encoding="utf-8")
    (titanium_project / "AGENTS.md").write_text("# Agents notes\n", encoding="utf-8")

    assert run_agents(str(titanium_project)) == 0

    for name in ("GEMINI.md", "AGENTS.md"):
        content = (titanium_project / name).read_text(encoding="utf-8")
        assert content.count(BLOCK_PREFIX) == 1
    assert not (titanium_project / "CLAUDE.md").exists()
    assert "synced across 2 files" in capsys.readouterr().out


def test_run_agents_partial_failure_is_success(installed_template, titanium_project, capsys):
    (titanium_project / "CLAUDE.md").write_text(
        f"{start_marker('v1.0.0')}\nbroken\n", encoding="utf-8"
    )
    (titanium_project / "AGENTS.md").write_text("# Agents\n", encoding="utf-8")

    assert run_agents(str(titanium_project)) == 0

    captured = capsys.readouterr()
    assert "Failed to update CLAUDE.md" in captured.err
    assert "AGENTS.md updated" in captured.out


def test_run_agents_latin1_file_does_not_abort(installed_template, titanium_project, capsys):
    (titanium_project / "CLAUDE.md").write_bytes(b"# Caf\xe9 notes\n")
    (titanium_project / "GEMINI.md").write_text("# Gemini\n", encoding="utf-8")

    assert run_agents(str(titanium_project)) == 0

    captured = capsys.readouterr()
    assert "Failed to update CLAUDE.md" in captured.err
    assert "GEMINI.md updated" in captured.out
    assert (titanium_project / "CLAUDE.md").read_bytes() == b"# Caf\xe9 notes\n"


def test_run_agents_all_failed(installed_template, titanium_project, capsys):
    installed_template.write_text("# no index\n", encoding="utf-8")
    (titanium_project / "CLAUDE.md").write_text("# Claude\n", encoding="utf-8")

    assert run_agents(str(titanium_project)) == 1

    assert (titanium_project / "CLAUDE.md").read_text(encoding="utf-8") == "# Claude\n"
    assert "No files were updated" in capsys.readouterr().err


def test_run_agents_explicit_version(installed_template, titanium_project):
    run_agents(str(titanium_project), force=True, version_tag="v9.9.9")
    content = (titanium_project / "CLAUDE.md").read_text(encoding="utf-8")
    assert start_marker("v9.9.9") in content


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def test_parser_agents_defaults():
    args = build_parser().parse_args(["agents"])
    assert args.path == "."
    assert args.force is False


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_main_agents(installed_template, titanium_project):
    assert main(["agents", str(titanium_project), "--force"]) == 0
    assert (titanium_project / "CLAUDE.md").exists()


def test_main_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert "titools" in capsys.readouterr().out
