"""Tests for Discord webhook delivery (mocked httpx)."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from figma_relay.discord.webhook import post_embed
from figma_relay.errors import NotificationDeliveryError
from figma_relay.models.discord import DiscordEmbed, EmbedAuthor, EmbedImage

DISCORD_URL = "https://discord.test/api/webhooks/1/token"


def _embed() -> DiscordEmbed:
    return DiscordEmbed(
        author=EmbedAuthor(name="alice"),
        title="[Design] New comment thread on design",
        url="https://www.figma.com/design/fk123?node-id=1:2#c1",
        description="unsolved\nPlease review\n",
        image=EmbedImage(url="https://img.test/thread.gif"),
        timestamp="2024-05-01T10:00:00Z",
        color="8482097",
    )


def _mock_client(response: httpx.Response | None = None, error: Exception | None = None):
    client = AsyncMock()
    if error is not None:
        client.post.side_effect = error
    else:
        client.post.return_value = response

    ctx = AsyncMock()
    ctx.__aenter__ = AsyncMock(return_value=client)
    ctx.__aexit__ = AsyncMock(return_value=False)
    return ctx, client


def _response(status_code: int, **kwargs) -> httpx.Response:
    return httpx.Response(status_code, request=httpx.Request("POST", DISCORD_URL), **kwargs)


async def test_post_embed_sends_embeds_payload(settings):
    """The embed is posted as the single entry of an `embeds` list."""
    ctx, client = _mock_client(_response(204))

    with patch("figma_relay.discord.webhook.httpx.AsyncClient", return_value=ctx):
        await post_embed(_embed(), settings)

    client.post.assert_called_once()
    args, kwargs = client.post.call_args
    assert args == (DISCORD_URL,)
    embeds = kwargs["json"]["embeds"]
    assert len(embeds) == 1
    assert embeds[0]["color"] == "8482097"
    assert embeds[0]["author"] == {"name": "alice"}


async def test_post_embed_error_status_raises(settings):
    """A 4xx from Discord raises NotificationDeliveryError with the status."""
    ctx, _ = _mock_client(_response(400, json={"message": "Invalid Form Body"}))

    with patch("figma_relay.discord.webhook.httpx.AsyncClient", return_value=ctx):
        with pytest.raises(NotificationDeliveryError, match="400"):
            await post_embed(_embed(), settings)


async def test_post_embed_transport_error_raises(settings):
    """Connection failures are wrapped in NotificationDeliveryError."""
    ctx, _ = _mock_client(error=httpx.ConnectError("refused"))

    with patch("figma_relay.discord.webhook.httpx.AsyncClient", return_value=ctx):
        with pytest.raises(NotificationDeliveryError):
            await post_embed(_embed(), settings)


async def test_post_embed_without_webhook_url_raises(make_settings):
    """An unconfigured webhook fails before any request is made."""
    with patch("figma_relay.discord.webhook.httpx.AsyncClient") as mock_client_cls:
        with pytest.raises(NotificationDeliveryError, match="not configured"):
            await post_embed(_embed(), make_settings(discord_webhook_url=""))

    mock_client_cls.assert_not_called()


async def test_post_embed_invalid_url_raises(make_settings):
    """A webhook URL httpx rejects as invalid is reported as a delivery failure."""
    ctx, _ = _mock_client(error=httpx.InvalidURL("Invalid URL"))

    with patch("figma_relay.discord.webhook.httpx.AsyncClient", return_value=ctx):
        with pytest.raises(NotificationDeliveryError):
            await post_embed(_embed(), make_settings(discord_webhook_url="https://bad\x01host/"))
