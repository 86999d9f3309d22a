"""
Skill links from platform directories into ~/.agents/skills.

A directory symlink is preferred so every platform shares one copy. Where
symlinks are not allowed (Windows without developer mode, cross-device
targets) the skill is copied instead.
"""

import errno
import os
import shutil
import sys
from pathlib import Path

from titools.config import get_agents_skills_dir
from titools.platform import is_windows

_COPY_FALLBACK_ERRNOS = {errno.EPERM, errno.EXDEV}


def remove_path(path: Path) -> None:
    """Remove a file, symlink or directory tree at path, if anything is there."""
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)


def create_symlink_or_copy(target: Path, link: Path) -> bool:
    """
    Point link at target, replacing whatever link currently is.
    Returns True on success; failures are reported on stderr.
    """
    link.parent.mkdir(parents=True, exist_ok=True)
    try:
        remove_path(link)
    except OSError as e:
        print(f"Failed to remove {link}: {e}", file=sys.stderr)
        return False

    try:
        os.symlink(target, link, target_is_directory=True)
        return True
    except OSError as e:
        if not (is_windows() or e.errno in _COPY_FALLBACK_ERRNOS):
            print(f"Failed to create symlink {link}: {e}", file=sys.stderr)
            return False

    try:
        shutil.copytree(target, link)
        return True
    except OSError as e:
        print(f"Failed to copy {target} to {link}: {e}", file=sys.stderr)
        return False


def create_skill_links(platform_skills_dir: Path, skills: list) -> dict:
    """Link each skill from the central skills dir into platform_skills_dir."""
    source_dir = get_agents_skills_dir()
    results = {"linked": [], "failed": []}

    platform_skills_dir.mkdir(parents=True, exist_ok=True)
    for skill in skills:
        if create_symlink_or_copy(source_dir / skill, platform_skills_dir / skill):
            results["linked"].append(skill)
        else:
            results["failed"].append(skill)
    return results
