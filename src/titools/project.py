"""Titanium project detection from files in the project root."""

import re
from pathlib import Path

from titools.config import TITANIUM_PROJECT_FILE

_SDK_VERSION = re.compile(r"<sdk-version>([^<]+)</sdk-version>")


def is_titanium_project(project_dir: Path) -> bool:
    return (project_dir / TITANIUM_PROJECT_FILE).exists()


def detect_titanium_version(project_dir: Path) -> str:
    """Return the <sdk-version> declared in tiapp.xml, or 'unknown'."""
    tiapp = project_dir / TITANIUM_PROJECT_FILE
    if not tiapp.exists():
        return "unknown"

    match = _SDK_VERSION.search(tiapp.read_text(encoding="utf-8"))
    return match.group(1).strip() if match else "unknown"


def detect_project_type(project_dir: Path) -> str:
    """
    Classify a project as 'alloy' (app/), 'classic' (Resources/),
    'titanium' (tiapp.xml only) or 'unknown'.
    """
    if not is_titanium_project(project_dir):
        return "unknown"
    if (project_dir / "app").exists():
        return "alloy"
    if (project_dir / "Resources").exists():
        return "classic"
    return "titanium"
