"""Prompt templates for the four generation tasks.

Builders return plain strings (or Anthropic content blocks when an image is
attached). They never fail on empty notes; callers reject blank notes with
``validate_notes`` before submitting a request.
"""

from __future__ import annotations

from recruit_sandbox.errors import PreconditionError
from recruit_sandbox.models.candidate import ProfileType
from recruit_sandbox.models.interview import QUESTION_DISTRIBUTION, QuestionCategory
from recruit_sandbox.models.job import CODING_CHALLENGE_MARKER, JobDescription
from recruit_sandbox.models.session import SessionAssets
from recruit_sandbox.parsers.image_input import ImageAttachment
from recruit_sandbox.schemas import Task, schema_instruction

JOB_ASSETS_SYSTEM = """\
You are an expert Recruitment Consultant. You turn raw hiring notes into
polished, compelling recruitment documents. You always answer with a single
JSON object and nothing else."""

IMAGE_NOTE = (
    "Please also analyze this image, which contains additional notes or context "
    "for the role, and incorporate it as supplementary context."
)


def validate_notes(notes: str | None) -> str:
    """Return stripped notes, or raise if there is nothing to generate from."""
    if notes is None or not notes.strip():
        raise PreconditionError("Job notes are empty")
    return notes.strip()


def build_job_assets_prompt(notes: str, *, language: str) -> str:
    """Instruction for the job description + 21-question interview guide."""
    general = QUESTION_DISTRIBUTION["general"]
    conflict = QUESTION_DISTRIBUTION[QuestionCategory.CONFLICT_RESOLUTION.value]
    problem = QUESTION_DISTRIBUTION[QuestionCategory.PROBLEM_SOLVING.value]
    dei = QUESTION_DISTRIBUTION[QuestionCategory.DEI.value]
    total = general + conflict + problem + dei
    return f"""\
Based on the following raw notes (and the attached image if provided), generate a
comprehensive Job Description and an Extended Interview Guide in {language}.

Raw Notes:
{notes}

Output 1: Polished Job Description ({language})
- TONE: Professional, energetic and compelling.
- ACTIVE VOICE CHECK: STRICTLY use active voice with strong action verbs
  ("Lead", "Drive", "Create", "Manage" and their {language} equivalents).
  Avoid passive phrases like "will be responsible for".

Structure:
1. title
2. aboutUs: Brief, engaging company vision/culture intro.
3. keySellingPoints: 3 top reasons to join.
4. summary: Role summary.
5. responsibilities: Achievement-oriented bullets using strong active verbs.
6. hardSkills: Technical must-haves. IMPORTANT: include EXACTLY ONE item that is a
   placeholder for a coding challenge, written literally as
   "{CODING_CHALLENGE_MARKER}Short coding challenge related to X]". Keep the
   "{CODING_CHALLENGE_MARKER.strip()}" marker in English.
7. niceToHaves: Advantages.
8. softSkills: Behavioral attributes.
9. whatWeOffer: Benefits, growth, work-life balance.
10. salary: Extract the salary range if available into numerical min/max values
    (min <= max) with a currency code. Omit the field if no salary is given.

Output 2: Extended Interview Guide ({total} Questions) ({language})
- {total} behavioral questions (STAR method), each mapped to a specific targetSkill.
- Distribution, using these exact category tokens:
  - {general} General Competency: category "{QuestionCategory.HARD_SKILL.value}" or "{QuestionCategory.SOFT_SKILL.value}"
  - {conflict} Conflict Resolution & Interpersonal: category "{QuestionCategory.CONFLICT_RESOLUTION.value}"
  - {problem} Complex Problem Solving: category "{QuestionCategory.PROBLEM_SOLVING.value}"
  - {dei} Diversity, Equity and Inclusion: category "{QuestionCategory.DEI.value}". Questions
    assessing awareness of bias, inclusive collaboration and fostering a diverse environment.
- The category tokens are machine-readable keys: never translate them.

All other strings in {language}.

{schema_instruction(Task.JOB_ASSETS)}"""


def build_job_assets_content(
    notes: str,
    image: ImageAttachment | None = None,
    *,
    language: str,
) -> list[dict]:
    """Content blocks for the base request; the image (if any) comes first."""
    content: list[dict] = []
    if image is not None:
        content.append({
            "type": "image",
            "source": {
                "type": "base64",
                "media_type": image.media_type,
                "data": image.to_base64(),
            },
        })
        content.append({"type": "text", "text": IMAGE_NOTE})
    content.append({"type": "text", "text": build_job_assets_prompt(notes, language=language)})
    return content


def build_profiles_prompt(job: JobDescription, *, language: str) -> str:
    """Instruction for the three ideal-candidate personas."""
    junior, mid, veteran = (
        ProfileType.HIGH_POTENTIAL_JUNIOR.value,
        ProfileType.CORE_MID_LEVEL.value,
        ProfileType.VETERAN_SPECIALIST.value,
    )
    return f"""\
Based on the Job Description provided, generate three distinct Ideal Candidate
Profiles in {language}.

Job Title: {job.title}
Summary: {job.summary}
Hard Skills: {", ".join(job.hard_skills)}
Soft Skills: {", ".join(job.soft_skills)}

Profiles to generate, exactly one of each:
1. type "{junior}": The High-Potential Junior
2. type "{mid}": The Core Mid-Level
3. type "{veteran}": The Veteran Specialist

For each, include:
- description (in {language})
- keySellingPoint: the hook for this candidate (in {language})
- redFlag: potential weakness to probe (in {language})

IMPORTANT: The 'type' field is consumed programmatically. Keep it EXACTLY as one
of the English tokens above and never translate it.

{schema_instruction(Task.CANDIDATE_PROFILES)}"""


def build_advanced_prompt(job: JobDescription, *, language: str) -> str:
    """Instruction for the eight-asset recruiting toolkit."""
    return f"""\
Based on the Job Description below, generate a comprehensive "Pro Recruitment
Toolkit" with 8 distinct assets in {language}.

Job Context:
Title: {job.title}
Summary: {job.summary}
Responsibilities: {", ".join(job.responsibilities)}
Hard Skills: {", ".join(job.hard_skills)}

--- ASSETS TO GENERATE ---

1. outreachMessage (Recruiter Outreach Message):
   - Catchy headline, key challenge, one hard skill, call to action. Max 5 lines.

2. successMetrics (KPIs), exactly 3:
   - 90 Days (Learning), 6 Months (Delivery), 12 Months (Impact).

3. biasAnalysis:
   - 3 phrases from the job description to neutralize, with the bias type and a
     suggested rewrite.

4. hiringChallenge (Home Assignment):
   - Objective, 2 deliverables, duration (3-4h), evaluation criteria.

5. screeningQuestions, exactly 5:
   - Covering compensation, availability, motivation and a hard-skill check.

6. onboardingPlan (30 Days):
   - week1 checklist.
   - day30Milestone project.

7. compAnalysis (Compensation Analysis):
   - 2 non-monetary competitive advantages.
   - 1 negotiation tactic for a candidate asking for +15% salary.

8. stakeholderMap:
   - 3 key stakeholders (role + collaboration goal).

All strings in {language}.

{schema_instruction(Task.ADVANCED_ASSETS)}"""


def build_chat_system_prompt(context: str | None, *, language: str) -> str:
    """System instruction for the recruitment assistant chat."""
    return f"""\
You are a helpful recruitment assistant AI speaking {language}.
You are helping a user refine recruitment documents.
Use the following context about the current role if available:
{context or "No context yet."}

Be concise, helpful and professional. Reply in {language}."""


def build_session_context(assets: SessionAssets) -> str:
    """Free-text summary of the current session artifacts for the chat."""
    parts: list[str] = []
    job = assets.job_description
    if job is not None:
        parts.append(f"Current Job Title: {job.title}")
        parts.append(f"Summary: {job.summary}")
        parts.append(f"Responsibilities: {'; '.join(job.responsibilities)}")
        parts.append(f"Hard Skills: {'; '.join(job.hard_skills)}")
        if job.salary is not None:
            parts.append(
                f"Salary: {job.salary.min:g}-{job.salary.max:g} {job.salary.currency}"
            )
    if assets.interview_questions:
        parts.append(f"Interview guide: {len(assets.interview_questions)} questions")
    if assets.candidate_profiles:
        types = ", ".join(p.type.value for p in assets.candidate_profiles)
        parts.append(f"Candidate profiles: {types}")
    if assets.advanced_assets is not None:
        parts.append(f"Outreach headline: {assets.advanced_assets.outreach_message.headline}")
    return "\n".join(parts)
