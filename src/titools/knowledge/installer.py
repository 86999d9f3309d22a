"""Thin orchestrator for the `titools agents` flow."""

import sys
from pathlib import Path

from titools.config import AGENTS_TEMPLATE_FILE, KNOWLEDGE_VERSION, get_agents_dir
from titools.knowledge.policy import (
    DEFAULT_TARGET,
    TARGET_CHOICES,
    detect_ai_files,
    files_to_sync,
)
from titools.knowledge.sync import FAILED, sync_files
from titools.project import (
    detect_project_type,
    detect_titanium_version,
    is_titanium_project,
)
from titools.prompts import choose_one


def _require_template(template_path: Path) -> None:
    if template_path.exists():
        return
    print(f"Error: {AGENTS_TEMPLATE_FILE} not found at {template_path}", file=sys.stderr)
    print("Install titools first:")
    print("  titools install")
    sys.exit(1)


def _require_project(project_dir: Path) -> None:
    if is_titanium_project(project_dir):
        return
    print(f"Error: {project_dir} is not a Titanium project (no tiapp.xml)", file=sys.stderr)
    print("Run this command from your project root.")
    sys.exit(1)


def choose_targets(project_dir: Path, force: bool = False) -> list:
    """Return the SyncPlan for project_dir, asking when no AI file exists yet."""
    targets = files_to_sync(detect_ai_files(project_dir))
    if targets:
        return targets
    if force:
        return [DEFAULT_TARGET]
    return [choose_one("Which AI assistant are you using?", TARGET_CHOICES)]


def run_agents(
    project_path: str = ".",
    force: bool = False,
    version_tag: str = KNOWLEDGE_VERSION,
) -> int:
    """
    Add or refresh the knowledge block in a project's AI instruction files.

    Returns the process exit code: 0 when at least one file was synced.
    """
    project_dir = Path(project_path).resolve()
    template_path = get_agents_dir() / AGENTS_TEMPLATE_FILE

    print("=== titools: knowledge block ===\n")

    _require_template(template_path)
    _require_project(project_dir)

    sdk = detect_titanium_version(project_dir)
    kind = detect_project_type(project_dir)
    print(f"Titanium project ({kind}, SDK {sdk})")

    targets = choose_targets(project_dir, force=force)
    results = sync_files(project_dir, targets, template_path, version_tag)

    print()
    for result in results:
        if result.status == FAILED:
            print(f"  Failed to update {result.filename}: {result.reason}", file=sys.stderr)
        else:
            print(f"  {result.filename} {result.status}")

    synced = [r.filename for r in results if r.ok]
    if not synced:
        print("\nNo files were updated.", file=sys.stderr)
        return 1

    print(f"\nDone. Updated: {', '.join(synced)}")
    if len(synced) > 1:
        print(f"Knowledge block {version_tag} synced across {len(synced)} files.")
    return 0
