"""Pydantic models for the advanced recruiting toolkit (eight assets)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _AliasedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class OutreachMessage(_AliasedModel):
    headline: str
    content: str


class KPI(_AliasedModel):
    timeframe: str
    goal: str


class BiasItem(_AliasedModel):
    original_text: str = Field(alias="originalText")
    bias_type: str = Field(alias="biasType")
    suggestion: str


class HiringChallenge(_AliasedModel):
    objective: str
    deliverables: list[str]
    duration: str
    evaluation_criteria: list[str] = Field(alias="evaluationCriteria")


class ScreeningQuestion(_AliasedModel):
    category: str  # compensation, availability, motivation, hard skill
    question: str


class OnboardingPlan(_AliasedModel):
    week1: list[str]
    day30_milestone: str = Field(alias="day30Milestone")


class CompAnalysis(_AliasedModel):
    competitive_advantages: list[str] = Field(alias="competitiveAdvantages")
    negotiation_tactic: str = Field(alias="negotiationTactic")


class Stakeholder(_AliasedModel):
    role: str
    collaboration_goal: str = Field(alias="collaborationGoal")


class AdvancedAssets(_AliasedModel):
    outreach_message: OutreachMessage = Field(alias="outreachMessage")
    success_metrics: list[KPI] = Field(alias="successMetrics")
    bias_analysis: list[BiasItem] = Field(alias="biasAnalysis")
    hiring_challenge: HiringChallenge = Field(alias="hiringChallenge")
    screening_questions: list[ScreeningQuestion] = Field(alias="screeningQuestions")
    onboarding_plan: OnboardingPlan = Field(alias="onboardingPlan")
    comp_analysis: CompAnalysis = Field(alias="compAnalysis")
    stakeholder_map: list[Stakeholder] = Field(alias="stakeholderMap")
