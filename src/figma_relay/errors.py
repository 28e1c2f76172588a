"""Exceptions raised by the remote clients.

Formatters catch these and turn them into relay outcomes; they never reach
the HTTP layer.
"""


class RelayError(Exception):
    """Base class for relay failures."""


class CommentFetchError(RelayError):
    """Listing a file's comments through the Figma API failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotificationDeliveryError(RelayError):
    """Posting an embed to the Discord webhook failed."""
