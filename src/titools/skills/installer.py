"""
Copy skills, agents and the knowledge template out of a titools checkout.

Repository layout consumed:

    skills/<skill>/            -> ~/.agents/skills/<skill>/
    agents/<agent>.md          -> ~/.claude/agents/<agent>.md
    AGENTS-TEMPLATE.md         -> ~/.agents/AGENTS-TEMPLATE.md

Existing copies are replaced. Bulk helpers return {"installed"/"removed": [...],
"failed": [...]} so the commands can report partial results.
"""

import shutil
import sys
from pathlib import Path

from titools.config import (
    AGENTS,
    AGENTS_TEMPLATE_FILE,
    SKILLS,
    get_agents_dir,
    get_agents_skills_dir,
    get_claude_agents_dir,
)
from titools.skills.symlink import remove_path

# src/titools/skills/installer.py -> repository root of a source checkout
_CHECKOUT_ROOT = Path(__file__).resolve().parents[3]


# ---------------------------------------------------------------------------
# Install
# ---------------------------------------------------------------------------


def install_skill(repo_dir: Path, skill: str, skills_dir: Path = None) -> bool:
    skills_dir = skills_dir or get_agents_skills_dir()
    src = repo_dir / "skills" / skill
    if not src.is_dir():
        return False

    dest = skills_dir / skill
    skills_dir.mkdir(parents=True, exist_ok=True)
    remove_path(dest)
    shutil.copytree(src, dest)
    return True


def install_skills(repo_dir: Path, skills_dir: Path = None) -> dict:
    results = {"installed": [], "failed": []}
    for skill in SKILLS:
        try:
            ok = install_skill(repo_dir, skill, skills_dir)
        except OSError as e:
            print(f"Failed to install skill {skill}: {e}", file=sys.stderr)
            ok = False
        results["installed" if ok else "failed"].append(skill)
    return results


def install_agent(repo_dir: Path, agent: str) -> bool:
    src = repo_dir / "agents" / f"{agent}.md"
    if not src.is_file():
        return False

    agents_dir = get_claude_agents_dir()
    agents_dir.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, agents_dir / f"{agent}.md")
    return True


def install_agents(repo_dir: Path) -> dict:
    results = {"installed": [], "failed": []}
    for agent in AGENTS:
        try:
            ok = install_agent(repo_dir, agent)
        except OSError as e:
            print(f"Failed to install agent {agent}: {e}", file=sys.stderr)
            ok = False
        results["installed" if ok else "failed"].append(agent)
    return results


def install_agents_template(repo_dir: Path) -> bool:
    """Copy AGENTS-TEMPLATE.md to ~/.agents, where `titools agents` reads it."""
    src = repo_dir / AGENTS_TEMPLATE_FILE
    if not src.is_file():
        return False

    agents_dir = get_agents_dir()
    agents_dir.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, agents_dir / AGENTS_TEMPLATE_FILE)
    return True


def get_local_repo_dir(root: Path = _CHECKOUT_ROOT):
    """Return the checkout root when running from source, else None."""
    if (root / "skills").is_dir() and (root / AGENTS_TEMPLATE_FILE).is_file():
        return root
    return None


# ---------------------------------------------------------------------------
# Uninstall
# ---------------------------------------------------------------------------


def _remove_named(directory: Path, names: list) -> dict:
    results = {"removed": [], "failed": []}
    if not directory.exists():
        return results

    for name in names:
        path = directory / name
        if not (path.exists() or path.is_symlink()):
            continue
        try:
            remove_path(path)
            results["removed"].append(name)
        except OSError:
            results["failed"].append(name)
    return results


def remove_skill_links(platform_skills_dir: Path) -> dict:
    """Remove titools skill links (or fallback copies) from a platform."""
    return _remove_named(platform_skills_dir, SKILLS)


def remove_skills() -> dict:
    return _remove_named(get_agents_skills_dir(), SKILLS)


def remove_agents() -> dict:
    results = _remove_named(get_claude_agents_dir(), [f"{a}.md" for a in AGENTS])
    return {
        key: [name[: -len(".md")] for name in names] for key, names in results.items()
    }
