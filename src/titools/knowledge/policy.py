"""
Which AI instruction files receive the knowledge block.

Priority is CLAUDE.md > GEMINI.md > AGENTS.md. Every existing file is synced,
highest priority first. When none exist the caller picks one (prompt, or
DEFAULT_TARGET when forced).
"""

from pathlib import Path
from typing import NamedTuple

CLAUDE_MD = "CLAUDE.md"
GEMINI_MD = "GEMINI.md"
AGENTS_MD = "AGENTS.md"

DEFAULT_TARGET = CLAUDE_MD

# (label, filename) pairs offered when a project has no AI file yet.
TARGET_CHOICES = [
    ("Claude Code (creates CLAUDE.md)", CLAUDE_MD),
    ("Gemini CLI (creates GEMINI.md)", GEMINI_MD),
    ("Cursor/Copilot (creates AGENTS.md)", AGENTS_MD),
]


class AIFiles(NamedTuple):
    claude: bool = False
    gemini: bool = False
    agents: bool = False


def detect_ai_files(project_dir: Path) -> AIFiles:
    return AIFiles(
        claude=(project_dir / CLAUDE_MD).exists(),
        gemini=(project_dir / GEMINI_MD).exists(),
        agents=(project_dir / AGENTS_MD).exists(),
    )


def files_to_sync(ai_files: AIFiles) -> list:
    """Return the filenames to update, highest priority first."""
    files = []
    if ai_files.claude:
        files.append(CLAUDE_MD)
        if ai_files.gemini:
            files.append(GEMINI_MD)
        if ai_files.agents:
            files.append(AGENTS_MD)
    elif ai_files.gemini:
        files.append(GEMINI_MD)
        if ai_files.agents:
            files.append(AGENTS_MD)
    elif ai_files.agents:
        files.append(AGENTS_MD)
    return files
