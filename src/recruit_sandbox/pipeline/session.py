"""In-memory session state: the current artifacts plus per-task in-flight flags."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from recruit_sandbox.errors import PreconditionError, RecruitSandboxError, TaskInFlightError
from recruit_sandbox.models.advanced import AdvancedAssets
from recruit_sandbox.models.candidate import CandidateProfile
from recruit_sandbox.models.job import JobDescription
from recruit_sandbox.models.session import JobAssets, SessionAssets
from recruit_sandbox.parsers.image_input import ImageAttachment
from recruit_sandbox.pipeline.generator import GenerationClient
from recruit_sandbox.schemas import Task, check_placeholder_slot

logger = logging.getLogger(__name__)


class SessionState:
    """Owns one SessionAssets aggregate for a browsing session.

    Mutation goes through ``reset``, ``set_job_assets``, ``add_profiles``,
    ``add_advanced`` and ``edit_job_description``. Failed generations never
    touch the aggregate.
    """

    def __init__(self) -> None:
        self.assets = SessionAssets()
        self._in_flight: dict[Task, bool] = {task: False for task in Task}
        # Last failure per task, kept until the task succeeds or the session resets.
        self.failures: dict[Task, RecruitSandboxError] = {}
        # Bumped on every reset so late sub-generation results can be detected.
        self.epoch = 0

    def is_in_flight(self, task: Task) -> bool:
        return self._in_flight[task]

    @contextmanager
    def track(self, task: Task) -> Iterator[None]:
        """Mark ``task`` in flight for the duration of the block.

        A failure raised inside the block is recorded in ``failures``.
        """
        if self._in_flight[task]:
            raise TaskInFlightError(f"{task.value} is already running")
        self._in_flight[task] = True
        try:
            yield
        except RecruitSandboxError as e:
            self.failures[task] = e
            raise
        else:
            self.failures.pop(task, None)
        finally:
            self._in_flight[task] = False

    def reset(self) -> None:
        self.assets = SessionAssets()
        self.failures = {}
        self.epoch += 1

    def set_job_assets(self, result: JobAssets) -> None:
        self.assets = self.assets.model_copy(update={
            "job_description": result.job_description,
            "interview_questions": result.interview_questions,
        })

    def _require_job(self) -> JobDescription:
        if self.assets.job_description is None:
            raise PreconditionError("No job description in this session yet")
        return self.assets.job_description

    def add_profiles(self, profiles: list[CandidateProfile]) -> None:
        self._require_job()
        self.assets = self.assets.model_copy(update={"candidate_profiles": profiles})

    def add_advanced(self, advanced: AdvancedAssets) -> None:
        self._require_job()
        self.assets = self.assets.model_copy(update={"advanced_assets": advanced})

    def edit_job_description(
        self, job: JobDescription, *, enforce_contracts: bool = True
    ) -> None:
        """Replace the job description with a user-edited version.

        Raises:
            SchemaValidationError: if the edit drops or duplicates the
                coding-challenge placeholder. The stored version is kept.
        """
        self._require_job()
        if enforce_contracts:
            check_placeholder_slot(job)
        self.assets = self.assets.model_copy(update={"job_description": job})

    async def run_job_generation(
        self,
        generator: GenerationClient,
        notes: str,
        image: ImageAttachment | None = None,
    ) -> JobAssets:
        """Clear the session, then generate and store the base artifacts."""
        with self.track(Task.JOB_ASSETS):
            self.reset()
            result = await generator.generate_job_assets(notes, image)
            self.set_job_assets(result)
            return result

    async def run_profile_generation(
        self, generator: GenerationClient
    ) -> list[CandidateProfile] | None:
        """Generate and store candidate profiles.

        Returns None when a newer base generation replaced the job
        description while this call was running; the stale result is dropped.
        """
        job = self._require_job()
        epoch = self.epoch
        with self.track(Task.CANDIDATE_PROFILES):
            profiles = await generator.generate_candidate_profiles(job)
        if epoch != self.epoch:
            logger.info("Dropping candidate profiles from a superseded generation")
            return None
        self.add_profiles(profiles)
        return profiles

    async def run_advanced_generation(self, generator: GenerationClient) -> AdvancedAssets | None:
        """Generate and store the advanced toolkit. Stale results are dropped."""
        job = self._require_job()
        epoch = self.epoch
        with self.track(Task.ADVANCED_ASSETS):
            advanced = await generator.generate_advanced_assets(job)
        if epoch != self.epoch:
            logger.info("Dropping advanced assets from a superseded generation")
            return None
        self.add_advanced(advanced)
        return advanced
