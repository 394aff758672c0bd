"""Response schema registry.

Declares, per generation task, the structure the generator must return and
validates raw parsed output into typed payloads. Structural mismatches and
contract violations (placeholder count, question distribution, one profile
per type) both surface as ``SchemaValidationError``.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from recruit_sandbox.errors import SchemaValidationError
from recruit_sandbox.models.advanced import AdvancedAssets
from recruit_sandbox.models.candidate import ProfileDraft, ProfileType
from recruit_sandbox.models.interview import (
    GUIDE_SIZE,
    QUESTION_DISTRIBUTION,
    QuestionDraft,
    category_buckets,
)
from recruit_sandbox.models.job import JobDescription

logger = logging.getLogger(__name__)


class Task(str, Enum):
    JOB_ASSETS = "job_assets"
    CANDIDATE_PROFILES = "candidate_profiles"
    ADVANCED_ASSETS = "advanced_assets"


class JobAssetsPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_description: JobDescription = Field(alias="jobDescription")
    interview_questions: list[QuestionDraft] = Field(alias="interviewQuestions")


_ADAPTERS: dict[Task, TypeAdapter] = {
    Task.JOB_ASSETS: TypeAdapter(JobAssetsPayload),
    Task.CANDIDATE_PROFILES: TypeAdapter(list[ProfileDraft]),
    Task.ADVANCED_ASSETS: TypeAdapter(AdvancedAssets),
}

# Empty structure used when the generator returns no body at all.
EMPTY_BODY: dict[Task, dict | list] = {
    Task.JOB_ASSETS: {},
    Task.CANDIDATE_PROFILES: [],
    Task.ADVANCED_ASSETS: {},
}


def response_schema(task: Task) -> dict:
    """JSON schema (wire field names) the generator output must satisfy."""
    return _ADAPTERS[task].json_schema(by_alias=True)


def schema_instruction(task: Task) -> str:
    """Prompt fragment asking for JSON matching the task's schema."""
    schema = json.dumps(response_schema(task), ensure_ascii=False, indent=2)
    return (
        "Return JSON only, with no commentary and no markdown fences. "
        "The JSON must validate against this JSON Schema:\n"
        f"{schema}"
    )


def validate_response(task: Task, data: Any, *, enforce_contracts: bool = True) -> Any:
    """Validate parsed generator output for ``task``.

    Returns the typed payload: ``JobAssetsPayload``, ``list[ProfileDraft]``
    or ``AdvancedAssets``.
    """
    try:
        payload = _ADAPTERS[task].validate_python(data)
    except ValidationError as e:
        logger.warning("Schema validation failed for %s: %d errors", task.value, e.error_count())
        raise SchemaValidationError(
            task.value,
            f"response does not match schema ({e.error_count()} errors)",
            errors=e.errors(include_url=False),
        ) from e

    if enforce_contracts:
        if task is Task.JOB_ASSETS:
            check_placeholder_slot(payload.job_description)
            check_question_distribution(payload.interview_questions)
        elif task is Task.CANDIDATE_PROFILES:
            check_profile_types(payload)
    return payload


def check_placeholder_slot(job: JobDescription) -> None:
    """Hard skills must carry exactly one coding-challenge placeholder."""
    slots = job.coding_challenge_slots()
    if len(slots) != 1:
        raise SchemaValidationError(
            Task.JOB_ASSETS.value,
            f"expected exactly one coding-challenge placeholder in hardSkills, found {len(slots)}",
        )


def check_question_distribution(questions: list[QuestionDraft]) -> None:
    """A 21-question guide must split 10/5/3/3 across the buckets."""
    if len(questions) != GUIDE_SIZE:
        raise SchemaValidationError(
            Task.JOB_ASSETS.value,
            f"expected {GUIDE_SIZE} interview questions, got {len(questions)}",
        )
    buckets = category_buckets(questions)
    if buckets != QUESTION_DISTRIBUTION:
        raise SchemaValidationError(
            Task.JOB_ASSETS.value,
            f"question distribution {buckets} does not match {QUESTION_DISTRIBUTION}",
        )


def check_profile_types(profiles: list[ProfileDraft]) -> None:
    """Exactly one profile per ProfileType."""
    seen = [p.type for p in profiles]
    if len(seen) != len(ProfileType) or set(seen) != set(ProfileType):
        raise SchemaValidationError(
            Task.CANDIDATE_PROFILES.value,
            "expected one profile per type "
            f"{[t.value for t in ProfileType]}, got {[t.value for t in seen]}",
        )
