"""Figma REST API response models for the comments endpoint."""

from pydantic import BaseModel


class ClientMeta(BaseModel):
    """Position data of a comment. Canvas-pinned comments carry no node_id."""

    node_id: str | None = None


class FigmaComment(BaseModel):
    id: str
    message: str = ""
    client_meta: ClientMeta | None = None
    parent_id: str | None = None


class CommentsResponse(BaseModel):
    """Body of GET /v1/files/{file_key}/comments."""

    comments: list[FigmaComment] = []
