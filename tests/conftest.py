"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from recruit_sandbox.clients.llm_client import LLMClient, LLMResponse
from recruit_sandbox.clients.speech_client import SpeechClient
from recruit_sandbox.config import AppConfig
from recruit_sandbox.models.advanced import AdvancedAssets
from recruit_sandbox.models.job import JobDescription
from recruit_sandbox.pipeline.generator import GenerationClient


def _questions(category: str, count: int, skill: str) -> list[dict]:
    return [
        {"question": f"ספר על מקרה שבו {skill} #{i}", "targetSkill": skill, "category": category}
        for i in range(count)
    ]


@pytest.fixture
def sample_notes() -> str:
    return "תפקיד: מפתח Backend\nדרישות: Node.js, PostgreSQL"


@pytest.fixture
def job_description_json() -> dict:
    return {
        "title": "מפתח/ת Backend",
        "aboutUs": "סטארטאפ פינטק צומח בתל אביב.",
        "keySellingPoints": ["השפעה ישירה על המוצר", "צוות מוביל", "טכנולוגיות חדשות"],
        "summary": "הובל/י את פיתוח שירותי הליבה שלנו.",
        "responsibilities": ["פתח/י שירותי API ב-Node.js", "תכנן/י סכמות PostgreSQL"],
        "hardSkills": [
            "Node.js - 3 שנות ניסיון",
            "PostgreSQL",
            "[Placeholder: Short coding challenge related to PostgreSQL]",
        ],
        "niceToHaves": ["Kubernetes"],
        "softSkills": ["תקשורת", "עבודת צוות"],
        "whatWeOffer": ["היברידי", "קרן השתלמות"],
        "salary": {"min": 30000, "max": 40000, "currency": "ILS"},
    }


@pytest.fixture
def interview_questions_json() -> list[dict]:
    return (
        _questions("hard_skill", 6, "Node.js")
        + _questions("soft_skill", 4, "תקשורת")
        + _questions("conflict_resolution", 5, "ניהול קונפליקטים")
        + _questions("problem_solving", 3, "פתרון בעיות")
        + _questions("dei", 3, "הכלה")
    )


@pytest.fixture
def job_assets_json(job_description_json, interview_questions_json) -> dict:
    return {
        "jobDescription": job_description_json,
        "interviewQuestions": interview_questions_json,
    }


@pytest.fixture
def profiles_json() -> list[dict]:
    return [
        {
            "type": "high_potential_junior",
            "description": "בוגר/ת מדעי המחשב עם פרויקטים אישיים.",
            "keySellingPoint": "לומד/ת מהר",
            "redFlag": "ניסיון מועט בסביבת ייצור",
        },
        {
            "type": "core_mid_level",
            "description": "3-5 שנות ניסיון ב-Node.js.",
            "keySellingPoint": "עצמאות מלאה",
            "redFlag": "חוסר ניסיון בהובלה",
        },
        {
            "type": "veteran_specialist",
            "description": "10+ שנות ניסיון בארכיטקטורה.",
            "keySellingPoint": "ידע עמוק ב-PostgreSQL",
            "redFlag": "ציפיות שכר גבוהות",
        },
    ]


@pytest.fixture
def advanced_json() -> dict:
    return {
        "outreachMessage": {"headline": "בוא/י לבנות את הליבה", "content": "היי, ראיתי את הפרופיל שלך..."},
        "successMetrics": [
            {"timeframe": "90 יום", "goal": "היכרות עם המערכת"},
            {"timeframe": "6 חודשים", "goal": "אספקת שירות חדש"},
            {"timeframe": "12 חודשים", "goal": "הובלת פרויקט"},
        ],
        "biasAnalysis": [
            {"originalText": "נינג'ה", "biasType": "מגדרי", "suggestion": "מומחה/ית"},
        ],
        "hiringChallenge": {
            "objective": "בניית API",
            "deliverables": ["קוד", "README"],
            "duration": "3-4 שעות",
            "evaluationCriteria": ["איכות קוד", "בדיקות"],
        },
        "screeningQuestions": [
            {"category": "Compensation", "question": "מה ציפיות השכר?"},
            {"category": "Availability", "question": "מתי תוכל/י להתחיל?"},
            {"category": "Motivation", "question": "למה אנחנו?"},
            {"category": "Hard Skill", "question": "כמה שנים עבדת עם Node.js?"},
            {"category": "Hard Skill", "question": "ניסיון עם PostgreSQL?"},
        ],
        "onboardingPlan": {"week1": ["הקמת סביבה", "פגישות היכרות"], "day30Milestone": "פיצ'ר ראשון בייצור"},
        "compAnalysis": {"competitiveAdvantages": ["גמישות", "למידה"], "negotiationTactic": "הדגש/י אופציות"},
        "stakeholderMap": [
            {"role": "CTO", "collaborationGoal": "ארכיטקטורה"},
            {"role": "PM", "collaborationGoal": "תעדוף"},
            {"role": "QA", "collaborationGoal": "איכות"},
        ],
    }


@pytest.fixture
def sample_job(job_description_json) -> JobDescription:
    return JobDescription.model_validate(job_description_json)


@pytest.fixture
def sample_advanced(advanced_json) -> AdvancedAssets:
    return AdvancedAssets.model_validate(advanced_json)


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="{}", input_tokens=100, output_tokens=50)
    )
    client.generate_json = AsyncMock(return_value={})
    return client


@pytest.fixture
def mock_speech_client() -> SpeechClient:
    client = AsyncMock(spec=SpeechClient)
    client.synthesize = AsyncMock(return_value=b"RIFF....WAVE")
    return client


@pytest.fixture
def generator(mock_llm_client, mock_speech_client) -> GenerationClient:
    return GenerationClient(mock_llm_client, mock_speech_client, config=AppConfig())
