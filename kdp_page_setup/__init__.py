"""KDP page setup: trim sizes, margins and paper settings for book documents."""

__version__ = "1.1.0"
