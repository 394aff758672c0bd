"""Streamlit Web UI for recruit-sandbox.

Paste raw job notes (optionally with an image) to generate a job description
and interview guide, then candidate personas and the advanced toolkit, and
refine everything with the chat assistant.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
import os

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

# Streamlit Cloud: sync st.secrets → os.environ so backend clients can read them
for key in ("ANTHROPIC_API_KEY", "OPENAI_API_KEY"):
    if key not in os.environ:
        try:
            os.environ[key] = st.secrets[key]
        except Exception:
            pass

from recruit_sandbox.clients.llm_client import LLMClient
from recruit_sandbox.clients.speech_client import AUDIO_MIME_TYPES, SpeechClient
from recruit_sandbox.config import SUPPORTED_LANGUAGES, load_config
from recruit_sandbox.errors import (
    ConfigurationError,
    RecruitSandboxError,
    SchemaValidationError,
)
from recruit_sandbox.export import job_description_to_text, outreach_to_text, session_to_markdown
from recruit_sandbox.labels import (
    CATEGORY_ICONS,
    JOB_SECTION_LABELS,
    PROFILE_ICONS,
    category_label,
    profile_label,
    ui_text,
)
from recruit_sandbox.logging.cost_calculator import calculate_cost
from recruit_sandbox.models.job import JobDescription
from recruit_sandbox.parsers.image_input import load_image_attachment
from recruit_sandbox.pipeline.chat import ChatOrchestrator
from recruit_sandbox.pipeline.generator import GenerationClient
from recruit_sandbox.pipeline.session import SessionState
from recruit_sandbox.prompts import build_session_context
from recruit_sandbox.schemas import Task

DEFAULT_NOTES = """תפקיד: מדען נתונים בכיר
כפיפות ל: ראש מחלקת אנליטיקה

תחומי אחריות:
- בניית מודלים לחיזוי נטישת לקוחות
- חונכות ל-2 אנליסטים זוטרים
- הטמעת מודלים בסביבת ייצור (AWS)
- הצגת ממצאים לבעלי עניין לא טכניים

דרישות קשות (Hard Skills):
- Python (Pandas, Scikit-learn)
- SQL (מתקדם)
- AWS SageMaker
- Terraform (יתרון)

מיומנויות רכות:
- תקשורת בין-אישית חזקה
- ראייה עסקית
- יוזמה וחתירה למגע

שכר ומיקום:
- 35,000 - 45,000 ש"ח
- היברידי (תל אביב)"""

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Recruit Sandbox",
    page_icon=":material/psychology:",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Session bootstrap
# ---------------------------------------------------------------------------

if "session" not in st.session_state:
    st.session_state.session = SessionState()
    st.session_state.audio = {}
    st.session_state.usage_calls = []
    st.session_state.speech_chars = 0

session: SessionState = st.session_state.session

with st.sidebar:
    st.title("Recruit Sandbox")
    st.caption("AI recruitment toolkit")

    base_config = load_config()
    lang_names = list(SUPPORTED_LANGUAGES)
    lang_code = st.radio(
        "Output language",
        lang_names,
        index=lang_names.index(base_config.content.language),
        format_func=lambda code: SUPPORTED_LANGUAGES[code],
        horizontal=True,
    )
    config = dataclasses.replace(
        base_config, content=dataclasses.replace(base_config.content, language=lang_code)
    )

    st.divider()
    cost = calculate_cost(st.session_state.usage_calls, st.session_state.speech_chars)
    st.metric("Estimated cost (USD)", f"${cost:.4f}")
    st.caption(f"{len(st.session_state.usage_calls)} model calls")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_generator() -> GenerationClient:
    """Fresh clients per action; async HTTP clients are bound to one event loop."""
    llm = LLMClient(timeout=config.llm.timeout, max_retries=config.llm.max_retries)
    speech = None
    if os.environ.get("OPENAI_API_KEY"):
        speech = SpeechClient(
            model=config.speech.model,
            voice=config.speech.voice,
            response_format=config.speech.response_format,
            timeout=config.speech.timeout,
        )
    return GenerationClient(llm, speech, config=config)


def _record_usage(generator: GenerationClient) -> None:
    st.session_state.usage_calls.extend(generator.llm.get_token_summary()["calls"])
    if generator.speech is not None:
        st.session_state.speech_chars += generator.speech.get_char_count()


def _run(task_coro_factory, failure_key: str | None = None):
    """Run one generation action; log and show a generic notice on failure.

    Without ``failure_key`` the caller renders the notice from ``session.failures``.
    """
    try:
        generator = _build_generator()
    except ConfigurationError as e:
        st.error(str(e))
        return None
    try:
        return asyncio.run(task_coro_factory(generator))
    except RecruitSandboxError:
        logger.exception("Generation failed")
        if failure_key:
            st.error(ui_text(failure_key, lang_code))
        return None
    finally:
        _record_usage(generator)


def _lines(value: str) -> list[str]:
    return [line.strip() for line in value.split("\n") if line.strip()]


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------


def _input_form() -> None:
    st.subheader("Role definition")
    notes = st.text_area("Raw notes", value=DEFAULT_NOTES, height=420, max_chars=10000)
    image_file = st.file_uploader(
        "Image with extra context (optional)",
        type=["png", "jpg", "jpeg", "gif", "webp"],
        help="Whiteboard photo, screenshot or org chart (5MB max)",
    )
    busy = session.is_in_flight(Task.JOB_ASSETS)
    if st.button("Generate", type="primary", disabled=busy or not notes.strip()):
        image = None
        if image_file is not None:
            try:
                image = load_image_attachment(image_file.getvalue(), image_file.name)
            except ValueError as e:
                st.error(str(e))
                return
        st.session_state.audio = {}
        with st.spinner("Generating job description and interview guide..."):
            _run(lambda g: session.run_job_generation(g, notes, image), "generation_failure")


def _job_description_view(job: JobDescription) -> None:
    labels = JOB_SECTION_LABELS[lang_code]
    editing = st.toggle("Edit", key="jd_edit")
    if editing:
        with st.form("jd_form"):
            title = st.text_input("Title", value=job.title)
            about_us = st.text_area(labels["about_us"], value=job.about_us)
            summary = st.text_area(labels["summary"], value=job.summary)
            lists = {
                key: st.text_area(labels[key], value="\n".join(getattr(job, key)))
                for key in (
                    "selling_points", "responsibilities", "hard_skills",
                    "nice_to_haves", "soft_skills", "offerings",
                )
            }
            if st.form_submit_button("Save"):
                edited = job.model_copy(update={
                    "title": title,
                    "about_us": about_us,
                    "summary": summary,
                    **{key: _lines(value) for key, value in lists.items()},
                })
                try:
                    session.edit_job_description(
                        edited, enforce_contracts=config.content.enforce_contracts
                    )
                except SchemaValidationError:
                    st.error(ui_text("edit_rejected", lang_code))
                else:
                    st.rerun()
        return

    st.header(job.title)
    st.markdown(f"**{labels['about_us']}**\n\n{job.about_us}")
    st.markdown(f"**{labels['summary']}**\n\n{job.summary}")
    for key in ("selling_points", "responsibilities", "hard_skills",
                "nice_to_haves", "soft_skills", "offerings"):
        st.markdown(f"**{labels[key]}**")
        st.markdown("\n".join(f"- {item}" for item in getattr(job, key)))
    if job.salary is not None:
        s = job.salary
        st.markdown(f"**{labels['salary']}**")
        cols = st.columns(3)
        cols[0].metric("Min", f"{s.min:,.0f} {s.currency}")
        cols[1].metric("Midpoint", f"{s.midpoint:,.0f} {s.currency}")
        cols[2].metric("Max", f"{s.max:,.0f} {s.currency}")

    with st.expander("Copy as text"):
        st.code(job_description_to_text(job, lang_code), language=None)


def _interview_guide_view() -> None:
    questions = session.assets.interview_questions or []
    st.caption(f"{len(questions)} questions")
    for i, q in enumerate(questions, start=1):
        with st.container(border=True):
            cols = st.columns([12, 1])
            cols[0].markdown(f"**{i}. \"{q.question}\"**")
            cols[0].caption(
                f"{CATEGORY_ICONS[q.category]} {category_label(q.category, lang_code)}"
                f" · {q.target_skill}"
            )
            if cols[1].button("Play", icon=":material/volume_up:", key=f"tts-{q.id}"):
                audio = _run(lambda g, text=q.question: g.generate_speech(text), "speech_failure")
                if audio:
                    st.session_state.audio[q.id] = audio
            if q.id in st.session_state.audio:
                st.audio(
                    st.session_state.audio[q.id],
                    format=AUDIO_MIME_TYPES.get(config.speech.response_format, "audio/wav"),
                )


def _profiles_view() -> None:
    profiles = session.assets.candidate_profiles
    if not profiles:
        busy = session.is_in_flight(Task.CANDIDATE_PROFILES)
        if st.button("Generate profiles", type="primary", disabled=busy):
            with st.spinner("Thinking..."):
                profiles = _run(session.run_profile_generation)
            if profiles is not None:
                st.rerun()
        if Task.CANDIDATE_PROFILES in session.failures:
            st.error(ui_text("profiles_failure", lang_code))
        return
    cols = st.columns(len(profiles))
    for col, p in zip(cols, profiles):
        with col.container(border=True):
            st.markdown(f"{PROFILE_ICONS[p.type]} **{profile_label(p.type, lang_code)}**")
            st.write(p.description)
            st.success(p.key_selling_point, icon=":material/bolt:")
            st.warning(p.red_flag, icon=":material/warning:")


def _advanced_view() -> None:
    adv = session.assets.advanced_assets
    if adv is None:
        busy = session.is_in_flight(Task.ADVANCED_ASSETS)
        if st.button("Generate advanced toolkit", type="primary", disabled=busy):
            with st.spinner("Analyzing..."):
                advanced = _run(session.run_advanced_generation)
            if advanced is not None:
                st.rerun()
        if Task.ADVANCED_ASSETS in session.failures:
            st.error(ui_text("advanced_failure", lang_code))
        return

    st.subheader(adv.outreach_message.headline)
    st.code(outreach_to_text(adv), language=None)

    st.subheader("KPIs")
    for k in adv.success_metrics:
        st.markdown(f"- **{k.timeframe}**: {k.goal}")

    st.subheader("Bias analysis")
    for b in adv.bias_analysis:
        st.markdown(f"- ~~{b.original_text}~~ → {b.suggestion} _({b.bias_type})_")

    ch = adv.hiring_challenge
    st.subheader(f"Hiring challenge ({ch.duration})")
    st.write(ch.objective)
    st.markdown("\n".join(f"- {d}" for d in ch.deliverables))
    st.caption(" · ".join(ch.evaluation_criteria))

    st.subheader("Screening questions")
    for q in adv.screening_questions:
        st.markdown(f"- **{q.category}**: {q.question}")

    st.subheader("Onboarding (30 days)")
    st.markdown("\n".join(f"- [ ] {item}" for item in adv.onboarding_plan.week1))
    st.info(adv.onboarding_plan.day30_milestone)

    st.subheader("Compensation")
    st.markdown("\n".join(f"- {a}" for a in adv.comp_analysis.competitive_advantages))
    st.write(adv.comp_analysis.negotiation_tactic)

    st.subheader("Stakeholders")
    for s in adv.stakeholder_map:
        st.markdown(f"- **{s.role}**: {s.collaboration_goal}")


def _chat_panel() -> None:
    st.subheader("Recruitment assistant")
    try:
        generator = _build_generator()
    except ConfigurationError as e:
        st.error(str(e))
        return
    if "chat" not in st.session_state:
        st.session_state.chat = ChatOrchestrator(generator, language=lang_code)
    chat: ChatOrchestrator = st.session_state.chat
    chat.generator = generator
    if chat.language != lang_code:
        chat.set_language(lang_code)

    for message in chat.messages:
        with st.chat_message(message.role.value):
            st.markdown(message.text)

    prompt = st.chat_input("Ask about the role or the documents...", disabled=chat.is_streaming)
    if not prompt:
        return
    with st.chat_message("user"):
        st.markdown(prompt)
    context = build_session_context(session.assets)
    with st.chat_message("assistant"):
        placeholder = st.empty()

        async def _consume() -> None:
            async for message in chat.send(prompt, context):
                placeholder.markdown(message.text)

        try:
            asyncio.run(_consume())
        finally:
            _record_usage(generator)
    st.rerun()


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

left, right = st.columns([1, 2])
with left:
    _input_form()

with right:
    if session.assets.is_empty:
        st.info("Enter the role requirements and generate your recruitment documents.")
    else:
        tab_jd, tab_guide, tab_profiles, tab_adv = st.tabs(
            ["Job description", "Interview guide", "Candidate profiles", "Advanced"]
        )
        with tab_jd:
            _job_description_view(session.assets.job_description)
        with tab_guide:
            _interview_guide_view()
        with tab_profiles:
            _profiles_view()
        with tab_adv:
            _advanced_view()
        st.download_button(
            "Download markdown",
            data=session_to_markdown(session.assets, lang_code).encode("utf-8"),
            file_name="recruitment_assets.md",
            mime="text/markdown",
        )

st.divider()
_chat_panel()
