"""Discord webhook delivery."""

import logging

import httpx

from figma_relay.config import Settings
from figma_relay.errors import NotificationDeliveryError
from figma_relay.models.discord import DiscordEmbed

logger = logging.getLogger(__name__)


async def post_embed(embed: DiscordEmbed, settings: Settings) -> None:
    """Post a single embed to the configured Discord webhook.

    Raises:
        NotificationDeliveryError: if the webhook URL is not configured, the
            request fails in transport, or Discord answers with a non-2xx status.
    """
    if not settings.discord_webhook_url:
        raise NotificationDeliveryError("DISCORD_WEBHOOK_URL is not configured")

    try:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout_seconds)
        ) as client:
            response = await client.post(settings.discord_webhook_url, json=embed.to_payload())
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise NotificationDeliveryError(
            f"Discord returned {exc.response.status_code}: {exc.response.text}"
        ) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise NotificationDeliveryError(f"Discord request failed: {exc}") from exc

    logger.debug("Discord accepted embed %r (%d)", embed.title, response.status_code)
