"""Figma -> Discord relay for comment and version-update webhooks."""

__version__ = "0.1.0"
