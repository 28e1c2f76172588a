"""FILE_COMMENT formatter: new comment threads and replies."""

import asyncio
import logging

from figma_relay.config import Settings
from figma_relay.figma.comments import resolve_node_id, resolve_parent_message
from figma_relay.formatters.common import deliver, embed_author, matches_project
from figma_relay.models.discord import DiscordEmbed, EmbedImage
from figma_relay.models.events import FileCommentEvent
from figma_relay.models.lookup import Absent, Found, LookupResult
from figma_relay.models.outcome import NODE_ID_NOT_FOUND, UNKNOWN_FILE_NAME, RelayOutcome
from figma_relay.text.substitution import WordReplacer, get_word_replacer

logger = logging.getLogger(__name__)

REPLY_COLOR = "3244390"
THREAD_COLOR = "8482097"

REPLY_TITLE = "New reply on comment"
THREAD_TITLE = "New comment thread on design"


async def handle_file_comment(event: FileCommentEvent, settings: Settings) -> RelayOutcome:
    """Relay a FILE_COMMENT event to Discord.

    Replies look up the parent's text and anchor on the parent's node;
    top-level comments anchor on their own node. Nothing is sent when the
    anchor node cannot be resolved.
    """
    if not matches_project(event.file_name, settings):
        logger.info("Ignoring comment on unknown file %r", event.file_name)
        return UNKNOWN_FILE_NAME

    parent: LookupResult | None = None
    if event.is_reply:
        parent, anchor = await asyncio.gather(
            resolve_parent_message(event.parent_id, event.file_key, settings),
            resolve_node_id(event.anchor_comment_id, event.file_key, settings),
        )
    else:
        anchor = await resolve_node_id(event.anchor_comment_id, event.file_key, settings)

    if isinstance(anchor, Absent):
        logger.warning(
            "Node ID not found for comment %s on %s: %s",
            event.anchor_comment_id,
            event.file_key,
            anchor.reason,
        )
        return NODE_ID_NOT_FOUND

    replacer = get_word_replacer(tuple(settings.replace_words))
    body = build_comment_body(event, parent, replacer)
    embed = build_comment_embed(event, anchor.value, body, settings)
    return await deliver(embed, settings)


def build_comment_body(
    event: FileCommentEvent, parent: LookupResult | None, replacer: WordReplacer
) -> str:
    """Assemble the message body: quoted parent (replies only), then the comment lines."""
    body = ""

    if isinstance(parent, Found):
        body += f">>> `{replacer.replace(parent.value)}`\n\n"
    elif isinstance(parent, Absent):
        logger.warning("Parent comment %s unavailable: %s", event.parent_id, parent.reason)

    if isinstance(event.comment, list):
        for fragment in event.comment:
            if fragment.text:
                body += f"{replacer.replace(fragment.text)}\n"
            elif fragment.mention:
                body += f"Mentioned user: {fragment.mention}\n"
    elif event.comment.text:
        body += f"{replacer.replace(event.comment.text)}\n"

    return body


def build_comment_embed(
    event: FileCommentEvent, node_id: str, body: str, settings: Settings
) -> DiscordEmbed:
    """Build the Discord embed linking back to the comment's position on the canvas."""
    status = f"resolved at {event.resolved_at}" if event.resolved_at else "unsolved"

    if event.is_reply:
        title, image_url, color = REPLY_TITLE, settings.reply_image_url, REPLY_COLOR
    else:
        title, image_url, color = THREAD_TITLE, settings.thread_image_url, THREAD_COLOR

    return DiscordEmbed(
        author=embed_author(event.triggered_by),
        title=f"[{event.file_name}] {title}",
        url=(
            f"{settings.figma_design_base}/{event.file_key}"
            f"?node-id={node_id}#{event.anchor_comment_id}"
        ),
        description=f"{status}\n{body}",
        image=EmbedImage(url=image_url),
        timestamp=event.timestamp,
        color=color,
    )
