"""Discord webhook embed models."""

from pydantic import BaseModel


class EmbedAuthor(BaseModel):
    name: str
    icon_url: str | None = None


class EmbedImage(BaseModel):
    url: str


class DiscordEmbed(BaseModel):
    """A single rich embed block. Discord takes ``color`` as a decimal string here."""

    author: EmbedAuthor
    title: str
    url: str
    description: str
    image: EmbedImage
    timestamp: str
    color: str

    def to_payload(self) -> dict:
        """Wrap the embed in the JSON body the webhook endpoint expects."""
        return {"embeds": [self.model_dump(exclude_none=True)]}
