"""
Knowledge block sync for one or more AI instruction files.

sync_file() is the read-strip-rebuild-write step for a single target. The
whole result is composed in memory and written with one call, so a template
or block error leaves the target untouched.

sync_files() runs a batch: the template is checked once, then each target is
attempted regardless of failures on the others, and every outcome is returned
as a SyncResult.
"""

from pathlib import Path
from typing import NamedTuple, Optional

from titools.errors import TemplateNotFoundError, TitoolsError
from titools.knowledge.block import build_block, extract_index, has_block, strip_block

UPDATED = "updated"
CREATED = "created"
FAILED = "failed"

# Per-target failures; UnicodeDecodeError is a ValueError, not an OSError.
_SYNC_ERRORS = (TitoolsError, OSError, UnicodeError)


class SyncResult(NamedTuple):
    filename: str
    status: str
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status != FAILED


def read_template(template_path: Path) -> str:
    if not template_path.exists():
        raise TemplateNotFoundError(f"Template not found: {template_path}")
    return template_path.read_text(encoding="utf-8")


def sync_file(target_path: Path, template_path: Path, version_tag: str) -> SyncResult:
    """
    Add or replace the knowledge block in target_path.

    Content outside the block is preserved. Every existing block is removed
    before the new one is appended, so the target ends with exactly one. A
    target that is missing or empty is reported as CREATED, otherwise UPDATED.

    Raises:
        TemplateNotFoundError: template_path does not exist.
        TemplateFormatError: template has no documentation index.
        BlockFormatError: target holds an unterminated block.
        UnicodeDecodeError: template or target is not valid UTF-8.
        OSError: reading or writing the target failed.
    """
    template = read_template(template_path)
    existing = (
        target_path.read_text(encoding="utf-8") if target_path.exists() else ""
    )

    block = build_block(template, version_tag)
    remaining = existing
    while has_block(remaining):
        remaining = strip_block(remaining)
    body = remaining.rstrip()

    text = block.strip("\n") + "\n"
    result = f"{body}\n\n{text}" if body else text

    target_path.write_text(result, encoding="utf-8")
    return SyncResult(target_path.name, UPDATED if existing.strip() else CREATED)


def sync_files(
    project_dir: Path, filenames: list, template_path: Path, version_tag: str
) -> list:
    """
    Sync every file in filenames (relative to project_dir), in order.

    The template is checked once up front. If it is missing or malformed,
    every target is reported as failed and no file is created or touched.
    Otherwise missing targets are created empty first, and failures are
    recorded per file without stopping the remaining targets.
    """
    try:
        extract_index(read_template(template_path))
    except _SYNC_ERRORS as e:
        return [SyncResult(filename, FAILED, str(e)) for filename in filenames]

    results = []
    for filename in filenames:
        target = project_dir / filename
        try:
            if not target.exists():
                target.touch()
            results.append(sync_file(target, template_path, version_tag))
        except _SYNC_ERRORS as e:
            results.append(SyncResult(filename, FAILED, str(e)))
    return results
