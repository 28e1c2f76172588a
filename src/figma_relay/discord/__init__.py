"""Discord egress: webhook embed delivery."""

from figma_relay.discord.webhook import post_embed

__all__ = ["post_embed"]
