"""Render generated artifacts as plain text (clipboard) and markdown (download)."""

from __future__ import annotations

from recruit_sandbox.labels import (
    JOB_SECTION_LABELS,
    category_label,
    profile_label,
)
from recruit_sandbox.models.advanced import AdvancedAssets
from recruit_sandbox.models.job import JobDescription
from recruit_sandbox.models.session import SessionAssets

_LIST_SECTIONS = (
    "selling_points",
    "responsibilities",
    "hard_skills",
    "nice_to_haves",
    "soft_skills",
    "offerings",
)


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def format_salary(job: JobDescription) -> str | None:
    if job.salary is None:
        return None
    s = job.salary
    return f"{s.min:,.0f} - {s.max:,.0f} {s.currency}"


def job_description_to_text(job: JobDescription, language: str = "he") -> str:
    """Plain-text job description, ready to paste into a job board."""
    labels = JOB_SECTION_LABELS[language]
    blocks = [job.title, f"{labels['about_us']}:\n{job.about_us}"]
    blocks.append(f"{labels['selling_points']}\n{_bullets(job.selling_points)}")
    blocks.append(f"{labels['summary']}:\n{job.summary}")
    for key in _LIST_SECTIONS[1:]:
        blocks.append(f"{labels[key]}:\n{_bullets(getattr(job, key))}")
    salary = format_salary(job)
    if salary:
        blocks.append(f"{labels['salary']}:\n{salary}")
    return "\n\n".join(blocks)


def outreach_to_text(advanced: AdvancedAssets) -> str:
    msg = advanced.outreach_message
    return f"{msg.headline}\n\n{msg.content}"


def session_to_markdown(assets: SessionAssets, language: str = "he") -> str:
    """Everything generated in the session as one markdown document."""
    out: list[str] = []
    job = assets.job_description
    if job is not None:
        labels = JOB_SECTION_LABELS[language]
        out.append(f"# {job.title}")
        out.append(f"## {labels['about_us']}\n\n{job.about_us}")
        out.append(f"## {labels['summary']}\n\n{job.summary}")
        for key in _LIST_SECTIONS:
            out.append(f"## {labels[key]}\n\n{_bullets(getattr(job, key))}")
        salary = format_salary(job)
        if salary:
            out.append(f"## {labels['salary']}\n\n{salary}")

    if assets.interview_questions:
        lines = [
            f"{i}. {q.question} _({category_label(q.category, language)}: {q.target_skill})_"
            for i, q in enumerate(assets.interview_questions, start=1)
        ]
        out.append("## Interview Guide\n\n" + "\n".join(lines))

    if assets.candidate_profiles:
        for p in assets.candidate_profiles:
            out.append(
                f"### {profile_label(p.type, language)}\n\n{p.description}\n\n"
                f"- **+** {p.key_selling_point}\n- **!** {p.red_flag}"
            )

    if assets.advanced_assets is not None:
        adv = assets.advanced_assets
        out.append(f"## {adv.outreach_message.headline}\n\n{adv.outreach_message.content}")
        out.append(
            "## KPIs\n\n" + _bullets([f"{k.timeframe}: {k.goal}" for k in adv.success_metrics])
        )
        out.append(
            "## Bias\n\n"
            + _bullets([
                f"\"{b.original_text}\" ({b.bias_type}) -> {b.suggestion}"
                for b in adv.bias_analysis
            ])
        )
        ch = adv.hiring_challenge
        out.append(
            f"## Challenge ({ch.duration})\n\n{ch.objective}\n\n{_bullets(ch.deliverables)}"
            f"\n\n{_bullets(ch.evaluation_criteria)}"
        )
        out.append(
            "## Screening\n\n"
            + _bullets([f"{q.category}: {q.question}" for q in adv.screening_questions])
        )
        out.append(
            f"## Onboarding\n\n{_bullets(adv.onboarding_plan.week1)}\n\n"
            f"**Day 30:** {adv.onboarding_plan.day30_milestone}"
        )
        out.append(
            f"## Compensation\n\n{_bullets(adv.comp_analysis.competitive_advantages)}\n\n"
            f"{adv.comp_analysis.negotiation_tactic}"
        )
        out.append(
            "## Stakeholders\n\n"
            + _bullets([f"{s.role}: {s.collaboration_goal}" for s in adv.stakeholder_map])
        )
    return "\n\n".join(out) + "\n"
