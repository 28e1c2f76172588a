"""FILE_VERSION_UPDATE formatter."""

import logging

from figma_relay.config import Settings
from figma_relay.formatters.common import deliver, embed_author, matches_project
from figma_relay.models.discord import DiscordEmbed, EmbedImage
from figma_relay.models.events import FileVersionUpdateEvent
from figma_relay.models.outcome import UNKNOWN_FILE_NAME, RelayOutcome

logger = logging.getLogger(__name__)

VERSION_COLOR = "2379919"


async def handle_version_update(
    event: FileVersionUpdateEvent, settings: Settings
) -> RelayOutcome:
    """Relay a FILE_VERSION_UPDATE event. Version events have no canvas position to resolve."""
    if not matches_project(event.file_name, settings):
        logger.info("Ignoring version update on unknown file %r", event.file_name)
        return UNKNOWN_FILE_NAME

    embed = build_version_embed(event, settings)
    return await deliver(embed, settings)


def build_version_embed(event: FileVersionUpdateEvent, settings: Settings) -> DiscordEmbed:
    return DiscordEmbed(
        author=embed_author(event.triggered_by),
        title=f"[{event.file_name}] **New version update on design: {event.label}**",
        url=f"{settings.figma_design_base}/{event.file_key}",
        description=f">>> {event.description}",
        image=EmbedImage(url=settings.version_image_url),
        timestamp=event.timestamp,
        color=VERSION_COLOR,
    )
