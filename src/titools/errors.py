"""Exception types raised by titools.

Commands catch these at the edge and report them; library code only raises.
"""


class TitoolsError(Exception):
    """Base class for all titools errors."""


class ConfigError(TitoolsError, ValueError):
    """The user settings file exists but cannot be parsed."""


class TemplateNotFoundError(TitoolsError, FileNotFoundError):
    """The knowledge template (AGENTS-TEMPLATE.md) is missing."""


class TemplateFormatError(TitoolsError, ValueError):
    """The template has no usable Compressed Documentation Index section."""


class BlockFormatError(TitoolsError, ValueError):
    """A target file holds a start marker with no matching end marker."""


class DownloadError(TitoolsError):
    """Fetching or unpacking the repository archive failed."""
