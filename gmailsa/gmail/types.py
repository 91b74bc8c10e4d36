"""Type definitions for the Gmail send-message call."""

from pydantic import BaseModel, ConfigDict, Field


class SendEmailRequest(BaseModel):
    """JSON body of ``users.messages.send``."""

    raw: str


class SentMessage(BaseModel):
    """Message resource returned after a successful send."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    thread_id: str = Field(alias="threadId")
    label_ids: list[str] = Field(alias="labelIds")
