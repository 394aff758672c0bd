"""Display tables mapping machine tokens to localized labels and icons.

Presentation code looks labels up here by enum token; it never branches on
generated (localized) text.
"""

from __future__ import annotations

from recruit_sandbox.models.candidate import ProfileType
from recruit_sandbox.models.interview import QuestionCategory

CATEGORY_ICONS: dict[QuestionCategory, str] = {
    QuestionCategory.HARD_SKILL: ":material/code:",
    QuestionCategory.SOFT_SKILL: ":material/psychology:",
    QuestionCategory.PROBLEM_SOLVING: ":material/bolt:",
    QuestionCategory.CONFLICT_RESOLUTION: ":material/balance:",
    QuestionCategory.DEI: ":material/diversity_3:",
}

PROFILE_ICONS: dict[ProfileType, str] = {
    ProfileType.HIGH_POTENTIAL_JUNIOR: ":material/school:",
    ProfileType.CORE_MID_LEVEL: ":material/work:",
    ProfileType.VETERAN_SPECIALIST: ":material/military_tech:",
}

CATEGORY_LABELS: dict[str, dict[QuestionCategory, str]] = {
    "he": {
        QuestionCategory.HARD_SKILL: "מיומנות טכנית",
        QuestionCategory.SOFT_SKILL: "מיומנות רכה",
        QuestionCategory.PROBLEM_SOLVING: "פתרון בעיות",
        QuestionCategory.CONFLICT_RESOLUTION: "ניהול קונפליקטים",
        QuestionCategory.DEI: "גיוון והכלה (DEI)",
    },
    "en": {
        QuestionCategory.HARD_SKILL: "Hard Skill",
        QuestionCategory.SOFT_SKILL: "Soft Skill",
        QuestionCategory.PROBLEM_SOLVING: "Problem Solving",
        QuestionCategory.CONFLICT_RESOLUTION: "Conflict Resolution",
        QuestionCategory.DEI: "Diversity, Equity & Inclusion",
    },
}

PROFILE_LABELS: dict[str, dict[ProfileType, str]] = {
    "he": {
        ProfileType.HIGH_POTENTIAL_JUNIOR: "ג'וניור עם פוטנציאל גבוה",
        ProfileType.CORE_MID_LEVEL: "הליבה (Mid-Level)",
        ProfileType.VETERAN_SPECIALIST: "המומחה הוותיק",
    },
    "en": {
        ProfileType.HIGH_POTENTIAL_JUNIOR: "High-Potential Junior",
        ProfileType.CORE_MID_LEVEL: "Core Mid-Level",
        ProfileType.VETERAN_SPECIALIST: "Veteran Specialist",
    },
}

# Section headings for the job description, in presentation order.
JOB_SECTION_LABELS: dict[str, dict[str, str]] = {
    "he": {
        "about_us": "על החברה",
        "selling_points": "למה להצטרף אלינו?",
        "summary": "תקציר המשרה",
        "responsibilities": "תחומי אחריות",
        "hard_skills": "דרישות חובה",
        "nice_to_haves": "יתרון משמעותי",
        "soft_skills": "כישורים רכים",
        "offerings": "מה אנחנו מציעים",
        "salary": "טווח שכר (חודשי)",
    },
    "en": {
        "about_us": "About Us",
        "selling_points": "Why Join Us?",
        "summary": "Role Summary",
        "responsibilities": "Responsibilities",
        "hard_skills": "Requirements",
        "nice_to_haves": "Nice to Have",
        "soft_skills": "Soft Skills",
        "offerings": "What We Offer",
        "salary": "Salary Range (monthly)",
    },
}

UI_TEXT: dict[str, dict[str, str]] = {
    "he": {
        "chat_welcome": "היי! אני יכול לעזור לך לחדד את מסמכי הגיוס או לענות על שאלות. שאל אותי כל דבר!",
        "chat_failure": "אני מצטער, נתקלתי בשגיאה בזמן החשיבה. אנא נסה שנית.",
        "generation_failure": "יצירת הנכסים נכשלה. אנא נסה שנית.",
        "profiles_failure": "יצירת הפרופילים נכשלה.",
        "advanced_failure": "יצירת הכלים המתקדמים נכשלה.",
        "speech_failure": "השמעת השאלה נכשלה.",
        "edit_rejected": "דרישות החובה חייבות לכלול בדיוק מציין מקום אחד לאתגר קוד.",
        "no_context": "אין עדיין הקשר.",
    },
    "en": {
        "chat_welcome": "Hi! I can help you refine your recruitment documents or answer questions. Ask me anything!",
        "chat_failure": "Sorry, I ran into an error while thinking. Please try again.",
        "generation_failure": "Generating the assets failed. Please try again.",
        "profiles_failure": "Generating the profiles failed.",
        "advanced_failure": "Generating the advanced toolkit failed.",
        "speech_failure": "Playing the question failed.",
        "edit_rejected": "Hard skills must keep exactly one coding-challenge placeholder.",
        "no_context": "No context yet.",
    },
}


def category_label(category: QuestionCategory, language: str) -> str:
    return CATEGORY_LABELS[language][category]


def profile_label(profile_type: ProfileType, language: str) -> str:
    return PROFILE_LABELS[language][profile_type]


def ui_text(key: str, language: str) -> str:
    return UI_TEXT[language][key]
