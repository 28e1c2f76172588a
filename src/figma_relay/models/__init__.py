"""Data models for the Figma -> Discord relay."""

from figma_relay.models.discord import DiscordEmbed, EmbedAuthor, EmbedImage
from figma_relay.models.events import (
    CommentFragment,
    EventType,
    FileCommentEvent,
    FileVersionUpdateEvent,
    TriggeredBy,
)
from figma_relay.models.figma import ClientMeta, CommentsResponse, FigmaComment
from figma_relay.models.lookup import Absent, Found, LookupResult
from figma_relay.models.outcome import RelayOutcome
from figma_relay.models.rules import ReplaceRule

__all__ = [
    "Absent",
    "ClientMeta",
    "CommentFragment",
    "CommentsResponse",
    "DiscordEmbed",
    "EmbedAuthor",
    "EmbedImage",
    "EventType",
    "FigmaComment",
    "FileCommentEvent",
    "FileVersionUpdateEvent",
    "Found",
    "LookupResult",
    "RelayOutcome",
    "ReplaceRule",
    "TriggeredBy",
]
