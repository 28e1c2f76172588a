"""Figma event classification and dispatch to formatters."""

import asyncio
import hmac
import logging
from collections.abc import Awaitable, Callable

from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel, ValidationError

from figma_relay.config import Settings
from figma_relay.formatters.comment import handle_file_comment
from figma_relay.formatters.version import handle_version_update
from figma_relay.models.events import EventType, FileCommentEvent, FileVersionUpdateEvent
from figma_relay.models.outcome import (
    EVENT_TIMED_OUT,
    INVALID_PASSCODE,
    INVALID_PAYLOAD,
    RelayOutcome,
)

logger = logging.getLogger(__name__)

_EVENT_HANDLERS: dict[str, tuple[type[BaseModel], Callable[..., Awaitable[RelayOutcome]]]] = {
    EventType.FILE_COMMENT.value: (FileCommentEvent, handle_file_comment),
    EventType.FILE_VERSION_UPDATE.value: (FileVersionUpdateEvent, handle_version_update),
}


async def dispatch_event(payload: object, settings: Settings) -> Response:
    """Route one inbound webhook payload to its formatter and build the HTTP response.

    - unknown or missing event_type: 400 plain text, nothing else happens
    - known event_type with an invalid body: 400 JSON
    - passcode configured and not matching: 403 JSON
    - otherwise: the formatter's outcome, verbatim
    """
    event_type = payload.get("event_type") if isinstance(payload, dict) else None
    handler = _EVENT_HANDLERS.get(event_type) if isinstance(event_type, str) else None
    if handler is None:
        logger.info("Rejecting unknown event type %r", event_type)
        return PlainTextResponse("Unknown event type", status_code=400)

    model, handle = handler
    try:
        event = model.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Invalid %s payload: %s", event_type, exc.errors(include_url=False))
        return _outcome_response(INVALID_PAYLOAD)

    if not _passcode_matches(getattr(event, "passcode", None), settings):
        logger.warning("Rejecting %s event with a bad passcode", event_type)
        return _outcome_response(INVALID_PASSCODE)

    try:
        async with asyncio.timeout(settings.event_timeout_seconds):
            outcome = await handle(event, settings)
    except TimeoutError:
        logger.error(
            "Handling %s timed out after %.1fs", event_type, settings.event_timeout_seconds
        )
        outcome = EVENT_TIMED_OUT

    return _outcome_response(outcome)


def _passcode_matches(passcode: str | None, settings: Settings) -> bool:
    """Figma echoes the webhook's passcode in every payload. No passcode configured: accept all."""
    if not settings.figma_webhook_passcode:
        return True
    return hmac.compare_digest(
        (passcode or "").encode(), settings.figma_webhook_passcode.encode()
    )


def _outcome_response(outcome: RelayOutcome) -> JSONResponse:
    return JSONResponse(outcome.to_body(), status_code=outcome.status_code)
