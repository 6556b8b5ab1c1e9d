"""Building blocks for an SDK version manager: shells, archives, downloads, JSON, HTML and more."""

__version__ = "0.2.4"