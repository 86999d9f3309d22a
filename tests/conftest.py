"""
Pytest configuration and shared fixtures.

Marks:
    network -- downloads from GitHub; runs only with TITOOLS_NETWORK_TESTS=1

Every test gets an isolated HOME through the fake_home fixture when it asks
for it, so nothing is ever written to the real ~/.agents or ~/.claude.
"""

import os

import pytest

_NETWORK_ENABLED = os.environ.get("TITOOLS_NETWORK_TESTS") == "1"

TEMPLATE_TEXT = """\
# Titanium SDK Agents Template

Intro text that is not part of the block.

## Compressed Documentation Index

- ti-ui: layouts, listviews, gestures -> ~/.agents/skills/ti-ui/references
- alloy-guides: MVC, models, widgets -> ~/.agents/skills/alloy-guides/references
- purgetss: utility classes -> ~/.agents/skills/purgetss/references
-

Footer that is not part of the block.
"""


# ---------------------------------------------------------------------------
# Auto-skip via markers
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(config, items):
    for item in items:
        if item.get_closest_marker("network") and not _NETWORK_ENABLED:
            item.add_marker(
                pytest.mark.skip(reason="network tests disabled (set TITOOLS_NETWORK_TESTS=1)")
            )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def fake_home(tmp_path, monkeypatch):
    """Point Path.home() at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("TITOOLS_CONFIG", raising=False)
    return home


@pytest.fixture()
def template_text():
    return TEMPLATE_TEXT


@pytest.fixture()
def template_path(tmp_path):
    path = tmp_path / "AGENTS-TEMPLATE.md"
    path.write_text(TEMPLATE_TEXT, encoding="utf-8")
    return path


@pytest.fixture()
def installed_template(fake_home):
    """AGENTS-TEMPLATE.md installed where `titools agents` looks for it."""
    agents_dir = fake_home / ".agents"
    agents_dir.mkdir()
    path = agents_dir / "AGENTS-TEMPLATE.md"
    path.write_text(TEMPLATE_TEXT, encoding="utf-8")
    return path


@pytest.fixture()
def titanium_project(tmp_path):
    """A minimal Alloy project with an SDK version in tiapp.xml."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "app").mkdir()
    (project / "tiapp.xml").write_text(
        "<?xml version='1.0'?>\n<ti:app>\n  <sdk-version>13.1.0.GA</sdk-version>\n</ti:app>\n",
        encoding="utf-8",
    )
    return project


@pytest.fixture()
def source_repo(tmp_path):
    """A titools source tree as it looks after download."""
    from titools.config import AGENTS, SKILLS

    repo = tmp_path / "repo"
    for skill in SKILLS:
        skill_dir = repo / "skills" / skill
        skill_dir.mkdir(parents=True)
        (skill_dir / "SKILL.md").write_text(f"---\nname: {skill}\n---\n", encoding="utf-8")
    (repo / "agents").mkdir()
    for agent in AGENTS:
        (repo / "agents" / f"{agent}.md").write_text(f"# {agent}\n", encoding="utf-8")
    (repo / "AGENTS-TEMPLATE.md").write_text(TEMPLATE_TEXT, encoding="utf-8")
    return repo
