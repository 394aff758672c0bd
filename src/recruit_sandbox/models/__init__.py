"""Data models for the recruitment content generator."""

from recruit_sandbox.models.advanced import (
    KPI,
    AdvancedAssets,
    BiasItem,
    CompAnalysis,
    HiringChallenge,
    OnboardingPlan,
    OutreachMessage,
    ScreeningQuestion,
    Stakeholder,
)
from recruit_sandbox.models.candidate import CandidateProfile, ProfileDraft, ProfileType
from recruit_sandbox.models.chat import ChatMessage, ChatRole
from recruit_sandbox.models.interview import InterviewQuestion, QuestionCategory, QuestionDraft
from recruit_sandbox.models.job import JobDescription, SalaryRange
from recruit_sandbox.models.session import JobAssets, SessionAssets

__all__ = [
    "AdvancedAssets",
    "BiasItem",
    "CandidateProfile",
    "ChatMessage",
    "ChatRole",
    "CompAnalysis",
    "HiringChallenge",
    "InterviewQuestion",
    "JobAssets",
    "JobDescription",
    "KPI",
    "OnboardingPlan",
    "OutreachMessage",
    "ProfileDraft",
    "ProfileType",
    "QuestionCategory",
    "QuestionDraft",
    "SalaryRange",
    "ScreeningQuestion",
    "SessionAssets",
    "Stakeholder",
]
