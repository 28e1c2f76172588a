"""Figma REST API access: comment listing and lookups."""

from figma_relay.figma.comments import fetch_comments, resolve_node_id, resolve_parent_message

__all__ = [
    "fetch_comments",
    "resolve_node_id",
    "resolve_parent_message",
]
