"""
Knowledge block codec.

The knowledge block is the region titools owns inside CLAUDE.md, GEMINI.md or
AGENTS.md, bounded by markers:

    <!-- TITANIUM-KNOWLEDGE-v1.0.0 -->
    ...preamble and documentation index...
    <!-- END-TITANIUM-KNOWLEDGE -->

Existing blocks are found by the start marker without its version tag, so a
block written by an older release is recognised and replaced. Markers are
matched as literal text. Everything outside the block belongs to the user.
"""

from pathlib import Path
from string import Template

from titools.errors import BlockFormatError, TemplateFormatError

BLOCK_PREFIX = "<!-- TITANIUM-KNOWLEDGE-"
BLOCK_END = "<!-- END-TITANIUM-KNOWLEDGE -->"
INDEX_HEADING = "## Compressed Documentation Index"

_INDEX_TERMINATOR = "-"
_TEMPLATES_DIR = Path(__file__).parent / "templates"


def start_marker(version_tag: str) -> str:
    """Return the versioned start marker, e.g. '<!-- TITANIUM-KNOWLEDGE-v1.0.0 -->'."""
    return f"{BLOCK_PREFIX}{version_tag} -->"


def extract_index(template_text: str) -> str:
    """
    Return the Compressed Documentation Index section of a template.

    The section starts at its heading and stops before the first line that is
    a lone '-'. Without that line it runs to the end of the template.

    Raises:
        TemplateFormatError: heading missing, or nothing under it.
    """
    start = template_text.find(INDEX_HEADING)
    if start == -1:
        raise TemplateFormatError(
            "Could not find compressed documentation index in template"
        )

    lines = []
    for line in template_text[start:].splitlines():
        if line.rstrip() == _INDEX_TERMINATOR:
            break
        lines.append(line)

    index = "\n".join(lines).rstrip()
    if index == INDEX_HEADING:
        raise TemplateFormatError("Compressed documentation index in template is empty")
    return index


def build_block(template_text: str, version_tag: str) -> str:
    """
    Build a fresh knowledge block from template text.

    The result starts and ends with a newline so it can be spliced after
    existing content.
    """
    index = extract_index(template_text)
    preamble_text = (_TEMPLATES_DIR / "knowledge_preamble.md").read_text(
        encoding="utf-8"
    )
    preamble = Template(preamble_text).safe_substitute(version=version_tag)
    return (
        f"\n{start_marker(version_tag)}\n"
        f"{preamble.strip()}\n\n"
        f"{index}\n\n"
        f"{BLOCK_END}\n"
    )


def has_block(text: str, marker: str = BLOCK_PREFIX) -> bool:
    return marker in text


def strip_block(
    text: str, marker: str = BLOCK_PREFIX, end_marker: str = BLOCK_END
) -> str:
    """
    Remove the first knowledge block from text, if present.

    Blank lines directly after the end marker go with the block. When content
    remains on both sides they are rejoined with a single blank line.

    Raises:
        BlockFormatError: start marker found but no end marker after it.
    """
    if marker not in text:
        return text

    begin = text.index(marker)
    finish = text.find(end_marker, begin + len(marker))
    if finish == -1:
        raise BlockFormatError(
            f"Found '{marker}' without a closing '{end_marker}'; fix the file by hand"
        )

    before = text[:begin]
    after = text[finish + len(end_marker) :].lstrip("\r\n")
    if not after:
        return before
    if not before.strip():
        return after
    return before.rstrip() + "\n\n" + after
