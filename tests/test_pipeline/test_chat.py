"""Tests for ChatOrchestrator."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from recruit_sandbox.errors import TransportError
from recruit_sandbox.labels import ui_text
from recruit_sandbox.models import ChatRole
from recruit_sandbox.pipeline.chat import ChatOrchestrator


def _stream(chunks: list[str], error: Exception | None = None) -> MagicMock:
    async def _gen(*args, **kwargs):
        for chunk in chunks:
            yield chunk
        if error is not None:
            raise error

    return MagicMock(side_effect=_gen)


@pytest.fixture
def chat(generator) -> ChatOrchestrator:
    return ChatOrchestrator(generator, language="he")


class TestSend:
    def test_welcome_message(self, chat):
        assert len(chat.messages) == 1
        assert chat.messages[0].role is ChatRole.ASSISTANT
        assert chat.messages[0].text == ui_text("chat_welcome", "he")
        assert not chat.is_streaming

    async def test_concatenated_deltas(self, chat, mock_llm_client):
        mock_llm_client.stream_text = _stream(["אפשר ", "להוסיף ", "שאלה"])

        updates = [m async for m in chat.send("איך לשפר?")]

        assert len(updates) == 3
        assert len({m.id for m in updates}) == 1
        assert updates[-1].text == "אפשר להוסיף שאלה"
        assert [m.role for m in chat.messages] == [
            ChatRole.ASSISTANT, ChatRole.USER, ChatRole.ASSISTANT
        ]
        assert chat.messages[-1].text == "אפשר להוסיף שאלה"
        assert not chat.is_streaming

    async def test_user_message_appended_before_reply(self, chat, mock_llm_client):
        mock_llm_client.stream_text = _stream(["ok"])

        stream = chat.send("hello")
        first = await stream.__anext__()

        assert chat.messages[1].text == "hello"
        assert chat.is_streaming
        assert chat.active_id == first.id
        await stream.aclose()
        assert not chat.is_streaming

    async def test_history_excludes_welcome_and_new_turn(self, chat, mock_llm_client):
        mock_llm_client.stream_text = _stream(["ok"])

        _ = [m async for m in chat.send("hello", context="Current Job Title: X")]

        messages = mock_llm_client.stream_text.call_args.args[0]
        assert messages == [{"role": "user", "content": "hello"}]

    async def test_failure_before_any_delta(self, chat, mock_llm_client):
        mock_llm_client.stream_text = _stream([], TransportError("down"))

        updates = [m async for m in chat.send("hello")]

        notice = ui_text("chat_failure", "he")
        assert updates[-1].text == notice
        assert len(chat.messages) == 3
        assert chat.messages[-1].text == notice
        assert not chat.is_streaming

    async def test_failure_mid_stream_keeps_partial_text(self, chat, mock_llm_client):
        mock_llm_client.stream_text = _stream(["חלק ", "ראשון"], TransportError("down"))

        _ = [m async for m in chat.send("hello")]

        assert len(chat.messages) == 4
        assert chat.messages[2].text == "חלק ראשון"
        assert chat.messages[3].text == ui_text("chat_failure", "he")


class TestSupersession:
    async def test_newer_send_drops_stale_deltas(self, chat, mock_llm_client):
        mock_llm_client.stream_text = _stream(["a1", "a2", "a3"])
        first = chat.send("one")
        stale = await first.__anext__()

        mock_llm_client.stream_text = _stream(["b1", "b2"])
        second = [m async for m in chat.send("two")]

        rest = [m async for m in first]

        assert rest == []
        assert stale.text == "a1"
        assert second[-1].text == "b1b2"
        assert not chat.is_streaming

    def test_apply_delta_to_inactive_id(self, chat):
        welcome = chat.messages[0]
        assert chat.apply_delta(welcome.id, "x") is False
        assert welcome.text == ui_text("chat_welcome", "he")


class TestFailureNotices:
    async def test_notice_not_sent_back_to_model(self, chat, mock_llm_client):
        mock_llm_client.stream_text = _stream(["חלקי"], TransportError("down"))
        _ = [m async for m in chat.send("first")]
        assert chat.messages[-1].is_notice

        mock_llm_client.stream_text = _stream(["ok"])
        _ = [m async for m in chat.send("second")]

        messages = mock_llm_client.stream_text.call_args.args[0]
        assert messages == [
            {"role": "user", "content": "first"},
            {"role": "assistant", "content": "חלקי"},
            {"role": "user", "content": "second"},
        ]

    async def test_replaced_placeholder_flagged(self, chat, mock_llm_client):
        mock_llm_client.stream_text = _stream([], TransportError("down"))
        _ = [m async for m in chat.send("first")]

        assert chat.messages[2].is_notice
        assert len(chat.messages) == 3


class TestLanguageSwitch:
    async def test_conversation_kept(self, chat, mock_llm_client):
        mock_llm_client.stream_text = _stream(["ok"])
        _ = [m async for m in chat.send("hello")]
        before = [m.id for m in chat.messages]

        chat.set_language("en")

        assert [m.id for m in chat.messages] == before
        assert chat.language == "en"

    def test_untouched_welcome_relocalized(self, chat):
        chat.set_language("en")
        assert chat.messages[0].text == ui_text("chat_welcome", "en")

    async def test_notices_follow_new_language(self, chat, mock_llm_client):
        chat.set_language("en")
        mock_llm_client.stream_text = _stream([], TransportError("down"))

        _ = [m async for m in chat.send("hello")]

        assert chat.messages[-1].text == ui_text("chat_failure", "en")
