"""Formatter outcome model and the fixed set of outcomes the relay reports."""

from pydantic import BaseModel, ConfigDict


class RelayOutcome(BaseModel):
    """Result of handling one event, mapped 1:1 onto the HTTP response."""

    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
    status_code: int

    def to_body(self) -> dict:
        return {"success": self.success, "message": self.message}


NOTIFICATION_SENT = RelayOutcome(success=True, message="Notification sent", status_code=200)
UNKNOWN_FILE_NAME = RelayOutcome(success=False, message="Unknown file name", status_code=400)
INVALID_PAYLOAD = RelayOutcome(success=False, message="Invalid event payload", status_code=400)
INVALID_PASSCODE = RelayOutcome(success=False, message="Invalid passcode", status_code=403)
NODE_ID_NOT_FOUND = RelayOutcome(success=False, message="Node ID not found", status_code=404)
DELIVERY_FAILED = RelayOutcome(
    success=False, message="Error sending notification", status_code=500
)
EVENT_TIMED_OUT = RelayOutcome(
    success=False, message="Timed out processing event", status_code=504
)
