"""titools: install Titanium SDK skills and knowledge blocks for AI coding assistants."""

__version__ = "2.1.0"
