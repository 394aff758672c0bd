"""Chat message model."""

from __future__ import annotations

import time
import uuid
from enum import Enum

from pydantic import BaseModel, Field


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


def new_message_id() -> str:
    return f"m-{uuid.uuid4().hex[:12]}"


class ChatMessage(BaseModel):
    id: str = Field(default_factory=new_message_id)
    role: ChatRole
    text: str = ""  # filled in place while a reply streams
    # Local failure notice; never sent back to the model.
    is_notice: bool = False
    timestamp: float = Field(default_factory=time.time)
