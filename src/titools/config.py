"""
Constants, well-known directories and optional user settings for titools.

Directory getters read Path.home() on every call so a relocated HOME (tests,
sudo) is honoured.

User settings live in ~/.agents/titools.toml (or $TITOOLS_CONFIG):

    repo = "macCesar/titools"
    branch = "main"
    timeout = 30
"""

import os
from pathlib import Path

import tomli

from titools import __version__
from titools.errors import ConfigError

# ---------------------------------------------------------------------------
# Package and knowledge block
# ---------------------------------------------------------------------------

PACKAGE_VERSION = __version__
KNOWLEDGE_VERSION = "v1.0.0"

AGENTS_TEMPLATE_FILE = "AGENTS-TEMPLATE.md"
TITANIUM_PROJECT_FILE = "tiapp.xml"

# ---------------------------------------------------------------------------
# Distributed content
# ---------------------------------------------------------------------------

SKILLS = [
    "alloy-expert",
    "alloy-guides",
    "alloy-howtos",
    "purgetss",
    "ti-guides",
    "ti-howtos",
    "ti-ui",
]

AGENTS = ["ti-researcher"]

DEFAULT_REPO = "macCesar/titools"
DEFAULT_BRANCH = "main"
DEFAULT_TIMEOUT = 30

_SETTINGS_FILE = "titools.toml"
_SETTINGS_ENV = "TITOOLS_CONFIG"


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------


def get_agents_dir() -> Path:
    """~/.agents, the shared home of skills and AGENTS-TEMPLATE.md."""
    return Path.home() / ".agents"


def get_agents_skills_dir() -> Path:
    return get_agents_dir() / "skills"


def get_claude_agents_dir() -> Path:
    return Path.home() / ".claude" / "agents"


def get_claude_skills_dir() -> Path:
    return Path.home() / ".claude" / "skills"


def get_gemini_skills_dir() -> Path:
    return Path.home() / ".gemini" / "skills"


def get_codex_skills_dir() -> Path:
    return Path.home() / ".codex" / "skills"


def get_platforms() -> list:
    """
    Supported AI coding assistants.

    A platform counts as installed when its config_dir exists; skills are
    linked into its skills_dir.
    """
    home = Path.home()
    return [
        {
            "name": "claude",
            "display_name": "Claude Code",
            "config_dir": home / ".claude",
            "skills_dir": get_claude_skills_dir(),
        },
        {
            "name": "gemini",
            "display_name": "Gemini CLI",
            "config_dir": home / ".gemini",
            "skills_dir": get_gemini_skills_dir(),
        },
        {
            "name": "codex",
            "display_name": "Codex CLI",
            "config_dir": home / ".codex",
            "skills_dir": get_codex_skills_dir(),
        },
    ]


# ---------------------------------------------------------------------------
# User settings
# ---------------------------------------------------------------------------


def default_settings() -> dict:
    return {
        "repo": DEFAULT_REPO,
        "branch": DEFAULT_BRANCH,
        "timeout": DEFAULT_TIMEOUT,
    }


def settings_path() -> Path:
    override = os.environ.get(_SETTINGS_ENV)
    if override:
        return Path(override).expanduser()
    return get_agents_dir() / _SETTINGS_FILE


def read_settings(path: Path = None) -> dict:
    """
    Read the TOML settings file merged over the defaults.

    A missing file yields the defaults. Unknown keys are ignored.
    """
    path = path or settings_path()
    settings = default_settings()
    if not path.exists():
        return settings

    try:
        with open(path, "rb") as f:
            loaded = tomli.load(f)
    except tomli.TOMLDecodeError as e:
        raise ConfigError(f"Invalid settings file {path}: {e}") from e

    for key in settings:
        if key in loaded:
            settings[key] = loaded[key]
    return settings
