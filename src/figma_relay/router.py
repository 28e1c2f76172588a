"""Figma webhook router."""

import json

from fastapi import APIRouter, Request
from fastapi.responses import Response

from figma_relay.config import get_settings
from figma_relay.dispatch import dispatch_event

WEBHOOK_ENDPOINT = "/figma-event"

router = APIRouter(prefix="", tags=["figma"])


@router.post(WEBHOOK_ENDPOINT)
async def figma_event(request: Request) -> Response:
    """Receive a Figma webhook event and relay it to Discord.

    A body that is not JSON has no readable event_type and is rejected the
    same way as an unknown one.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None
    return await dispatch_event(payload, get_settings())
