"""Aggregate of artifacts generated during one browsing session."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from recruit_sandbox.models.advanced import AdvancedAssets
from recruit_sandbox.models.candidate import CandidateProfile
from recruit_sandbox.models.interview import InterviewQuestion
from recruit_sandbox.models.job import JobDescription


class JobAssets(BaseModel):
    """Result of the base generation: both artifacts or neither."""

    job_description: JobDescription
    interview_questions: list[InterviewQuestion]


class SessionAssets(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_description: JobDescription | None = Field(default=None, alias="jobDescription")
    interview_questions: list[InterviewQuestion] | None = Field(
        default=None, alias="interviewQuestions"
    )
    candidate_profiles: list[CandidateProfile] | None = Field(
        default=None, alias="candidateProfiles"
    )
    advanced_assets: AdvancedAssets | None = Field(default=None, alias="advancedAssets")

    @property
    def is_empty(self) -> bool:
        return self.job_description is None
