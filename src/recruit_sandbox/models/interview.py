"""Models for the interview guide."""

from __future__ import annotations

from collections import Counter
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QuestionCategory(str, Enum):
    """Machine tokens for question categories. Display labels live in ``labels``."""

    HARD_SKILL = "hard_skill"
    SOFT_SKILL = "soft_skill"
    PROBLEM_SOLVING = "problem_solving"
    CONFLICT_RESOLUTION = "conflict_resolution"
    DEI = "dei"


# Requested 21-question distribution. Hard and soft skill questions share the
# "general competency" bucket.
GENERAL_COMPETENCY = frozenset({QuestionCategory.HARD_SKILL, QuestionCategory.SOFT_SKILL})
QUESTION_DISTRIBUTION: dict[str, int] = {
    "general": 10,
    QuestionCategory.CONFLICT_RESOLUTION.value: 5,
    QuestionCategory.PROBLEM_SOLVING.value: 3,
    QuestionCategory.DEI.value: 3,
}
GUIDE_SIZE = sum(QUESTION_DISTRIBUTION.values())


class QuestionDraft(BaseModel):
    """A question as emitted by the generator, before an id is attached."""

    model_config = ConfigDict(populate_by_name=True)

    question: str
    target_skill: str = Field(alias="targetSkill")
    category: QuestionCategory


class InterviewQuestion(QuestionDraft):
    id: str


def category_buckets(questions: list[QuestionDraft]) -> dict[str, int]:
    """Count questions per distribution bucket."""
    counts: Counter[str] = Counter()
    for q in questions:
        if q.category in GENERAL_COMPETENCY:
            counts["general"] += 1
        else:
            counts[q.category.value] += 1
    return {bucket: counts.get(bucket, 0) for bucket in QUESTION_DISTRIBUTION}
