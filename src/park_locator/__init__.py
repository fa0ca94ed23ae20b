"""Community-moderated park locator service."""

__version__ = "0.1.0"
