"""Tests for text/markdown export and display label tables."""

from recruit_sandbox.export import job_description_to_text, outreach_to_text, session_to_markdown
from recruit_sandbox.labels import (
    CATEGORY_ICONS,
    CATEGORY_LABELS,
    PROFILE_ICONS,
    PROFILE_LABELS,
    UI_TEXT,
    category_label,
    profile_label,
)
from recruit_sandbox.models import (
    CandidateProfile,
    InterviewQuestion,
    ProfileType,
    QuestionCategory,
    SessionAssets,
)


class TestLabels:
    def test_every_token_has_label_and_icon(self):
        for language in CATEGORY_LABELS:
            assert set(CATEGORY_LABELS[language]) == set(QuestionCategory)
            assert set(PROFILE_LABELS[language]) == set(ProfileType)
        assert set(CATEGORY_ICONS) == set(QuestionCategory)
        assert set(PROFILE_ICONS) == set(ProfileType)

    def test_ui_text_keys_match(self):
        assert set(UI_TEXT["he"]) == set(UI_TEXT["en"])

    def test_lookup(self):
        assert category_label(QuestionCategory.DEI, "he") == "גיוון והכלה (DEI)"
        assert profile_label(ProfileType.CORE_MID_LEVEL, "en") == "Core Mid-Level"


class TestJobDescriptionText:
    def test_sections_in_order(self, sample_job):
        text = job_description_to_text(sample_job, "he")
        assert text.startswith(sample_job.title)
        order = ["על החברה", "למה להצטרף אלינו?", "תקציר המשרה", "תחומי אחריות",
                 "דרישות חובה", "יתרון משמעותי", "כישורים רכים", "מה אנחנו מציעים"]
        positions = [text.index(heading) for heading in order]
        assert positions == sorted(positions)
        assert "- PostgreSQL" in text
        assert "30,000 - 40,000 ILS" in text

    def test_without_salary(self, sample_job):
        job = sample_job.model_copy(update={"salary": None})
        assert "ILS" not in job_description_to_text(job, "en")


class TestOutreach:
    def test_headline_then_content(self, sample_advanced):
        text = outreach_to_text(sample_advanced)
        assert text.split("\n\n") == [
            sample_advanced.outreach_message.headline,
            sample_advanced.outreach_message.content,
        ]


class TestSessionMarkdown:
    def test_only_present_sections(self, sample_job):
        md = session_to_markdown(SessionAssets(job_description=sample_job), "en")
        assert md.startswith(f"# {sample_job.title}")
        assert "Interview Guide" not in md
        assert "KPIs" not in md

    def test_full_session(self, sample_job, profiles_json, sample_advanced):
        questions = [
            InterviewQuestion(
                id="q-1", question="Why?", target_skill="SQL", category=QuestionCategory.HARD_SKILL
            )
        ]
        profiles = [CandidateProfile(id=f"p-{i}", **p) for i, p in enumerate(profiles_json)]
        md = session_to_markdown(
            SessionAssets(
                job_description=sample_job,
                interview_questions=questions,
                candidate_profiles=profiles,
                advanced_assets=sample_advanced,
            ),
            "en",
        )
        assert "1. Why? _(Hard Skill: SQL)_" in md
        assert "### Veteran Specialist" in md
        assert "## KPIs" in md
        assert "CTO: ארכיטקטורה" in md
