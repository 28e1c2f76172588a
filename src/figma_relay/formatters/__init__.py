"""Event formatters: build and deliver one Discord embed per event kind."""

from figma_relay.formatters.comment import handle_file_comment
from figma_relay.formatters.version import handle_version_update

__all__ = ["handle_file_comment", "handle_version_update"]
