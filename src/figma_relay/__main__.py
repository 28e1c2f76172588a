"""Run the relay with uvicorn: ``python -m figma_relay``."""

import uvicorn

from figma_relay.config import get_settings

if __name__ == "__main__":
    uvicorn.run("figma_relay.app:app", host="0.0.0.0", port=get_settings().port, log_config=None)
