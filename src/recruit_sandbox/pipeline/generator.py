"""Generation client: prompt -> LLM -> parse -> validate -> typed result.

Stateless between calls. Preconditions are checked before any network call.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import AsyncIterator

from recruit_sandbox.clients.llm_client import LLMClient
from recruit_sandbox.clients.speech_client import SpeechClient
from recruit_sandbox.config import AppConfig
from recruit_sandbox.errors import ConfigurationError, PreconditionError
from recruit_sandbox.models.advanced import AdvancedAssets
from recruit_sandbox.models.candidate import CandidateProfile
from recruit_sandbox.models.chat import ChatMessage, ChatRole
from recruit_sandbox.models.interview import InterviewQuestion
from recruit_sandbox.models.job import JobDescription
from recruit_sandbox.models.session import JobAssets
from recruit_sandbox.parsers.image_input import ImageAttachment
from recruit_sandbox.prompts import (
    JOB_ASSETS_SYSTEM,
    build_advanced_prompt,
    build_chat_system_prompt,
    build_job_assets_content,
    build_profiles_prompt,
    validate_notes,
)
from recruit_sandbox.schemas import EMPTY_BODY, Task, validate_response

logger = logging.getLogger(__name__)


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def serialize_history(history: list[ChatMessage]) -> list[dict]:
    """Convert chat history into API turns.

    Leading assistant turns (the local welcome message) and failure notices
    are dropped so the conversation opens with a user turn.
    """
    turns: list[dict] = []
    for message in history:
        if not turns and message.role is ChatRole.ASSISTANT:
            continue
        if not message.text or message.is_notice:
            continue
        turns.append({"role": message.role.value, "content": message.text})
    return turns


class GenerationClient:
    """Runs the four generation tasks against the hosted model."""

    def __init__(
        self,
        llm: LLMClient,
        speech: SpeechClient | None = None,
        *,
        config: AppConfig | None = None,
    ):
        self.llm = llm
        self.speech = speech
        self.config = config or AppConfig()

    @property
    def language(self) -> str:
        return self.config.content.language_name

    async def _generate_validated(self, task: Task, content: str | list[dict], system: str = ""):
        llm_config = self.config.llm
        data = await self.llm.generate_json(
            content,
            system=system,
            model=llm_config.model,
            max_tokens=llm_config.max_tokens,
            thinking_budget=llm_config.thinking_budget,
            empty=EMPTY_BODY[task],
        )
        return validate_response(
            task, data, enforce_contracts=self.config.content.enforce_contracts
        )

    async def generate_job_assets(
        self,
        notes: str,
        image: ImageAttachment | None = None,
    ) -> JobAssets:
        """Generate the job description and interview guide in one request."""
        notes = validate_notes(notes)
        logger.info("Generating job assets (image=%s)", image is not None)
        content = build_job_assets_content(notes, image, language=self.language)
        payload = await self._generate_validated(Task.JOB_ASSETS, content, JOB_ASSETS_SYSTEM)
        questions = [
            InterviewQuestion(id=new_id("q"), **draft.model_dump())
            for draft in payload.interview_questions
        ]
        logger.info(
            "Job assets ready: %r, %d questions", payload.job_description.title, len(questions)
        )
        return JobAssets(job_description=payload.job_description, interview_questions=questions)

    async def generate_candidate_profiles(
        self, job: JobDescription | None
    ) -> list[CandidateProfile]:
        """Generate one ideal-candidate persona per profile type."""
        if job is None:
            raise PreconditionError("Candidate profiles require a job description")
        logger.info("Generating candidate profiles for %r", job.title)
        prompt = build_profiles_prompt(job, language=self.language)
        drafts = await self._generate_validated(Task.CANDIDATE_PROFILES, prompt)
        return [CandidateProfile(id=new_id("p"), **draft.model_dump()) for draft in drafts]

    async def generate_advanced_assets(self, job: JobDescription | None) -> AdvancedAssets:
        """Generate the eight-asset recruiting toolkit."""
        if job is None:
            raise PreconditionError("Advanced assets require a job description")
        logger.info("Generating advanced assets for %r", job.title)
        prompt = build_advanced_prompt(job, language=self.language)
        return await self._generate_validated(Task.ADVANCED_ASSETS, prompt)

    async def generate_speech(self, text: str) -> bytes:
        """Synthesize one question as audio bytes."""
        if self.speech is None:
            raise ConfigurationError("Speech synthesis is not configured")
        if not text or not text.strip():
            raise PreconditionError("Nothing to synthesize")
        return await self.speech.synthesize(text.strip())

    async def stream_chat_response(
        self,
        history: list[ChatMessage],
        new_message: str,
        context: str | None = None,
    ) -> AsyncIterator[str]:
        """Yield the assistant's reply to ``new_message`` incrementally.

        Each call is a fresh exchange seeded with ``history``; the returned
        iterator is forward-only and cannot be restarted.
        """
        if not new_message or not new_message.strip():
            raise PreconditionError("Chat message is empty")
        llm_config = self.config.llm
        messages = serialize_history(history)
        messages.append({"role": ChatRole.USER.value, "content": new_message})
        system = build_chat_system_prompt(context, language=self.language)
        async for delta in self.llm.stream_text(
            messages,
            system=system,
            model=llm_config.model,
            max_tokens=llm_config.max_tokens,
            thinking_budget=llm_config.thinking_budget,
        ):
            yield delta
