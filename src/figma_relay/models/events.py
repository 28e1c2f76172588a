"""Inbound Figma webhook event models."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


# Figma file keys are alphanumeric; anything else never reaches a request URL.
FILE_KEY_PATTERN = r"^[A-Za-z0-9]+$"


class EventType(str, Enum):
    """Figma webhook event kinds the relay accepts."""

    FILE_COMMENT = "FILE_COMMENT"
    FILE_VERSION_UPDATE = "FILE_VERSION_UPDATE"


class TriggeredBy(BaseModel):
    """The Figma user whose action fired the webhook."""

    id: str | None = None
    handle: str
    img_url: str | None = None


class CommentFragment(BaseModel):
    """One piece of a comment body: plain text or a user mention."""

    text: str | None = None
    mention: str | None = None


class FileCommentEvent(BaseModel):
    """A FILE_COMMENT payload. Unknown Figma fields (webhook_id, ...) are ignored."""

    event_type: Literal["FILE_COMMENT"]
    file_key: str = Field(pattern=FILE_KEY_PATTERN)
    file_name: str
    comment: CommentFragment | list[CommentFragment]
    comment_id: str
    parent_id: str | None = None  # Set (non-empty) only for replies
    resolved_at: str | None = None
    triggered_by: TriggeredBy
    timestamp: str
    passcode: str | None = None

    @property
    def is_reply(self) -> bool:
        return bool(self.parent_id)

    @property
    def anchor_comment_id(self) -> str:
        """Comment whose node anchors the deep link. Replies share their parent's anchor."""
        return self.parent_id if self.parent_id else self.comment_id


class FileVersionUpdateEvent(BaseModel):
    """A FILE_VERSION_UPDATE payload."""

    event_type: Literal["FILE_VERSION_UPDATE"]
    file_key: str = Field(pattern=FILE_KEY_PATTERN)
    file_name: str
    triggered_by: TriggeredBy
    description: str = ""
    label: str = ""
    timestamp: str
    passcode: str | None = None
