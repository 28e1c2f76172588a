"""Steps shared by the comment and version formatters."""

import logging

from figma_relay.config import Settings
from figma_relay.discord.webhook import post_embed
from figma_relay.errors import NotificationDeliveryError
from figma_relay.models.discord import DiscordEmbed, EmbedAuthor
from figma_relay.models.events import TriggeredBy
from figma_relay.models.outcome import DELIVERY_FAILED, NOTIFICATION_SENT, RelayOutcome

logger = logging.getLogger(__name__)


def matches_project(file_name: str, settings: Settings) -> bool:
    """True when no project filter is configured or file_name equals it exactly."""
    return not settings.project_name or file_name == settings.project_name


def embed_author(user: TriggeredBy) -> EmbedAuthor:
    return EmbedAuthor(name=user.handle, icon_url=user.img_url)


async def deliver(embed: DiscordEmbed, settings: Settings) -> RelayOutcome:
    """Send the embed and report the outcome. Delivery errors are logged, not raised."""
    try:
        await post_embed(embed, settings)
    except NotificationDeliveryError as exc:
        logger.error("Error sending notification to Discord: %s", exc, exc_info=True)
        return DELIVERY_FAILED

    logger.info("Notification sent: %s", embed.title)
    return NOTIFICATION_SENT
