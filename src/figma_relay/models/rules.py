"""Word substitution rule model."""

from pydantic import BaseModel, ConfigDict


class ReplaceRule(BaseModel):
    """A single word -> replacement pair, e.g. ``@Designer`` -> ``<@&123456>``."""

    model_config = ConfigDict(frozen=True)

    word: str
    replacement: str
