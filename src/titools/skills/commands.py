"""Orchestrators for the install, update and uninstall commands."""

import sys
import tempfile
from contextlib import contextmanager
from pathlib import Path

from titools.config import PACKAGE_VERSION, SKILLS, read_settings
from titools.errors import ConfigError, DownloadError
from titools.platform import detect_os, detect_platforms, get_platform_by_name
from titools.prompts import choose_many, choose_one, prompt_yes_no
from titools.skills.downloader import check_for_update, download_repo_archive
from titools.skills.installer import (
    get_local_repo_dir,
    install_agents,
    install_agents_template,
    install_skills,
    remove_agents,
    remove_skill_links,
    remove_skills,
)
from titools.skills.symlink import create_skill_links

_REPO_URL = "https://github.com/{repo}"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@contextmanager
def _checkout(settings: dict):
    """Yield a repository root: the local source tree, or a fresh download."""
    local = get_local_repo_dir()
    if local is not None:
        print("Using local repository")
        yield local
        return

    print(f"Downloading {settings['repo']} ({settings['branch']}) from GitHub...")
    with tempfile.TemporaryDirectory(prefix="titools-") as tmp:
        repo_dir = download_repo_archive(
            Path(tmp), settings["repo"], settings["branch"], settings["timeout"]
        )
        print("Downloaded from GitHub")
        yield repo_dir


def _load_settings():
    try:
        return read_settings()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return None


def _report(label: str, results: dict, key: str = "installed") -> None:
    done = results[key]
    print(f"  {label}: {', '.join(done) if done else 'none'}")
    if results["failed"]:
        print(f"  {label} failed: {', '.join(results['failed'])}", file=sys.stderr)


def _print_platforms(platforms: list) -> None:
    for platform in platforms:
        print(f"  {platform['display_name']} detected")
    print()


def _install_from(repo_dir: Path, platforms: list) -> None:
    """Install skills, agents and template, then link skills for each platform."""
    _report("Skills", install_skills(repo_dir))
    _report("Agents", install_agents(repo_dir))

    if install_agents_template(repo_dir):
        print("  AGENTS-TEMPLATE.md installed")
    else:
        print("  Warning: AGENTS-TEMPLATE.md not found in repository", file=sys.stderr)

    for platform in platforms:
        linked = create_skill_links(platform["skills_dir"], SKILLS)["linked"]
        name = platform["display_name"]
        if len(linked) == len(SKILLS):
            print(f"  {name} linked")
        else:
            print(f"  Warning: {name}: {len(linked)}/{len(SKILLS)} linked", file=sys.stderr)


def _select_platforms(detected: list, all_platforms: bool):
    """Return the platforms to link, or None if the user cancelled."""
    if all_platforms:
        return detected

    choices = [("All detected platforms", "all")]
    choices += [(f"{p['display_name']} only", p["name"]) for p in detected]
    choices.append(("Cancel", "cancel"))

    answer = choose_one("Select platform to install:", choices)
    if answer == "cancel":
        return None
    if answer == "all":
        return detected
    return [get_platform_by_name(answer)]


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def run_install(all_platforms: bool = False, custom_path: str = None) -> int:
    print("=== titools: install ===\n")

    detected = detect_platforms()
    if not detected and not custom_path:
        print("No AI coding assistants detected.", file=sys.stderr)
        print("Install one of: Claude Code, Gemini CLI, or Codex CLI")
        print("Or use: titools install --path /custom/path")
        return 1
    _print_platforms(detected)

    platforms = []
    if not custom_path:
        platforms = _select_platforms(detected, all_platforms)
        if platforms is None:
            print("Cancelled.")
            return 0

    settings = _load_settings()
    if settings is None:
        return 1

    try:
        with _checkout(settings) as repo_dir:
            if custom_path:
                target = Path(custom_path).expanduser().resolve()
                _report("Skills", install_skills(repo_dir, target))
                print(f"\nInstalled skills to {target}")
                return 0
            _install_from(repo_dir, platforms)
    except (DownloadError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\nInstallation complete.")
    print("Add the knowledge block to your project: titools agents")
    if detect_os() == "windows":
        print("Windows: skills were copied where symlinks were not permitted.")
    return 0


def run_update() -> int:
    print("=== titools: update ===\n")

    settings = _load_settings()
    if settings is None:
        return 1

    try:
        latest = check_for_update(PACKAGE_VERSION, settings["repo"], settings["timeout"])
        if latest is None:
            print(f"Already up to date (v{PACKAGE_VERSION})")
            return 0

        print(f"Update available: {PACKAGE_VERSION} -> {latest}\n")
        detected = detect_platforms()
        if detected:
            _print_platforms(detected)
        else:
            print("No AI coding assistants detected.")
            print("Skills will still be installed to ~/.agents/skills/\n")

        with _checkout(settings) as repo_dir:
            _install_from(repo_dir, detected)
    except (DownloadError, OSError) as e:
        print(f"Update failed: {e}", file=sys.stderr)
        print(f"You can install manually from {_REPO_URL.format(repo=settings['repo'])}")
        return 1

    print("\nUpdate complete.")
    print("Refresh your projects with: titools agents")
    return 0


def run_uninstall() -> int:
    print("=== titools: uninstall ===\n")

    detected = detect_platforms()
    if detected:
        _print_platforms(detected)
    else:
        print("No AI coding assistants detected.")
        print("Skills can still be removed from the central directory.\n")

    targets = choose_many(
        "What do you want to uninstall?",
        [
            ("Skill links from all platforms", "links"),
            ("Skills from central directory (~/.agents/skills/)", "skills"),
            ("Agents from Claude Code", "agents"),
        ],
        checked=("links",),
    )
    if "links" in targets and not detected:
        print("No platforms detected, skipping link removal.")
        targets.remove("links")
    if not targets:
        print("Nothing to uninstall.")
        return 0
    if not prompt_yes_no("Remove the selected items?", default=True):
        print("Aborted.")
        return 0

    print()
    if "links" in targets:
        for platform in detected:
            removed = remove_skill_links(platform["skills_dir"])["removed"]
            print(f"  {platform['display_name']}: {len(removed)} removed")
    if "skills" in targets:
        _report("Skills removed", remove_skills(), key="removed")
    if "agents" in targets:
        _report("Agents removed", remove_agents(), key="removed")

    print("\nUninstall complete.")
    print("AGENTS.md/CLAUDE.md/GEMINI.md files in your projects were not modified.")
    return 0
