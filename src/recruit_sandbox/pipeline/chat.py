"""Chat orchestrator: message log plus streamed assistant replies."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from recruit_sandbox.errors import RecruitSandboxError
from recruit_sandbox.labels import ui_text
from recruit_sandbox.models.chat import ChatMessage, ChatRole
from recruit_sandbox.pipeline.generator import GenerationClient

logger = logging.getLogger(__name__)


class ChatOrchestrator:
    """Keeps the conversation log and streams replies into it.

    Only the reply started by the most recent ``send`` is active; deltas
    aimed at any other message id are dropped.
    """

    def __init__(self, generator: GenerationClient, *, language: str = "he"):
        self.generator = generator
        self.language = language
        self.messages: list[ChatMessage] = [
            ChatMessage(role=ChatRole.ASSISTANT, text=ui_text("chat_welcome", language))
        ]
        self.active_id: str | None = None

    @property
    def is_streaming(self) -> bool:
        return self.active_id is not None

    def set_language(self, language: str) -> None:
        """Switch the notice language, keeping the conversation.

        The welcome message is re-localized only while it is the sole message.
        """
        self.language = language
        if len(self.messages) == 1:
            self.messages[0].text = ui_text("chat_welcome", language)

    def _find(self, message_id: str) -> ChatMessage | None:
        for message in self.messages:
            if message.id == message_id:
                return message
        return None

    def apply_delta(self, message_id: str, delta: str) -> bool:
        """Append ``delta`` to the active message. Returns False if dropped."""
        if message_id != self.active_id:
            return False
        message = self._find(message_id)
        if message is None:
            return False
        message.text += delta
        return True

    def _fail(self, placeholder: ChatMessage) -> None:
        notice = ui_text("chat_failure", self.language)
        if placeholder.text:
            # Keep what already arrived; report the failure separately.
            self.messages.append(
                ChatMessage(role=ChatRole.ASSISTANT, text=notice, is_notice=True)
            )
        else:
            placeholder.text = notice
            placeholder.is_notice = True

    async def send(self, text: str, context: str | None = None) -> AsyncIterator[ChatMessage]:
        """Submit ``text`` and yield the reply message after each applied delta.

        A later ``send`` supersedes this one: remaining deltas are ignored.
        """
        history = list(self.messages)
        self.messages.append(ChatMessage(role=ChatRole.USER, text=text))
        placeholder = ChatMessage(role=ChatRole.ASSISTANT)
        self.messages.append(placeholder)
        self.active_id = placeholder.id

        try:
            async for delta in self.generator.stream_chat_response(history, text, context):
                if self.apply_delta(placeholder.id, delta):
                    yield placeholder
        except RecruitSandboxError:
            logger.exception("Chat stream failed")
            if self.active_id == placeholder.id:
                self._fail(placeholder)
                yield placeholder
        finally:
            if self.active_id == placeholder.id:
                self.active_id = None
