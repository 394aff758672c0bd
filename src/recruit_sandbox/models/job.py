"""Pydantic models for the generated job description."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Literal marker the generator is asked to keep for the coding-challenge slot,
# e.g. "[Placeholder: Short coding challenge related to PostgreSQL]".
CODING_CHALLENGE_MARKER = "[Placeholder: "
CODING_CHALLENGE_RE = re.compile(r"\[\s*placeholder\s*:[^\]]*\]", re.IGNORECASE)


class SalaryRange(BaseModel):
    min: float
    max: float
    currency: str

    @model_validator(mode="after")
    def _check_order(self) -> SalaryRange:
        if self.min > self.max:
            raise ValueError(f"salary min ({self.min}) is greater than max ({self.max})")
        return self

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


class JobDescription(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    about_us: str = Field(alias="aboutUs")
    selling_points: list[str] = Field(alias="keySellingPoints")
    summary: str
    responsibilities: list[str]
    hard_skills: list[str] = Field(alias="hardSkills")
    nice_to_haves: list[str] = Field(alias="niceToHaves")
    soft_skills: list[str] = Field(alias="softSkills")
    offerings: list[str] = Field(alias="whatWeOffer")
    salary: SalaryRange | None = None

    def coding_challenge_slots(self) -> list[str]:
        """Hard-skill entries that carry the coding-challenge placeholder."""
        return [s for s in self.hard_skills if CODING_CHALLENGE_RE.search(s)]
