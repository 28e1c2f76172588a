"""Comment lookups against the Figma REST API.

Both lookups list every comment on the file and filter client-side; the
API has no single-comment endpoint. Each call re-fetches the list.
"""

import logging
from collections.abc import Callable
from urllib.parse import quote

import httpx

from figma_relay.config import Settings
from figma_relay.errors import CommentFetchError
from figma_relay.models.figma import CommentsResponse, FigmaComment
from figma_relay.models.lookup import Absent, Found, LookupResult

logger = logging.getLogger(__name__)


async def fetch_comments(file_key: str, settings: Settings) -> list[FigmaComment]:
    """List all comments on a Figma file.

    Raises:
        CommentFetchError: on transport failure, any non-2xx status, or a
            body that is not a comments listing. 403/404 usually mean a bad
            token or file key and are logged as such.
    """
    url = f"{settings.figma_api_base}/files/{quote(file_key, safe='')}/comments"
    headers = {"X-Figma-Token": settings.figma_api_token}

    try:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout_seconds)
        ) as client:
            response = await client.get(url, headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise CommentFetchError(f"Comment request for file {file_key} failed: {exc}") from exc

    if response.status_code in (403, 404):
        logger.error(
            "Figma returned %d for file %s: check the API token and file key",
            response.status_code,
            file_key,
        )
        raise CommentFetchError(
            f"Figma returned {response.status_code} for file {file_key}",
            status_code=response.status_code,
        )
    if response.is_error:
        raise CommentFetchError(
            f"Figma returned {response.status_code} for file {file_key}",
            status_code=response.status_code,
        )

    try:
        return CommentsResponse.model_validate(response.json()).comments
    except ValueError as exc:
        raise CommentFetchError(f"Malformed comments response for file {file_key}") from exc


async def resolve_node_id(comment_id: str, file_key: str, settings: Settings) -> LookupResult:
    """Look up the canvas node a comment is pinned to."""
    return await _lookup(comment_id, file_key, settings, _node_id_of, "node id")


async def resolve_parent_message(
    parent_id: str, file_key: str, settings: Settings
) -> LookupResult:
    """Look up the raw text of the comment a reply answers."""
    return await _lookup(parent_id, file_key, settings, _message_of, "message")


def _node_id_of(comment: FigmaComment) -> str | None:
    return comment.client_meta.node_id if comment.client_meta else None


def _message_of(comment: FigmaComment) -> str | None:
    # An empty parent message counts as absent: replies then go out without a quote block.
    return comment.message or None


async def _lookup(
    comment_id: str,
    file_key: str,
    settings: Settings,
    extract: Callable[[FigmaComment], str | None],
    field: str,
) -> LookupResult:
    """Fetch the file's comments and extract a field from the one with comment_id.

    Never raises for remote failures: they come back as Absent.
    """
    try:
        comments = await fetch_comments(file_key, settings)
    except CommentFetchError as exc:
        logger.warning("Comment lookup for %s failed: %s", comment_id, exc)
        return Absent(reason=str(exc))

    comment = next((c for c in comments if c.id == comment_id), None)
    if comment is None:
        return Absent(reason=f"Comment {comment_id} not found in file {file_key}")

    value = extract(comment)
    if value is None:
        return Absent(reason=f"Comment {comment_id} has no {field}")
    return Found(value=value)
