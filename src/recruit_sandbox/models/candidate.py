"""Pydantic models for ideal-candidate personas."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProfileType(str, Enum):
    HIGH_POTENTIAL_JUNIOR = "high_potential_junior"
    CORE_MID_LEVEL = "core_mid_level"
    VETERAN_SPECIALIST = "veteran_specialist"


class ProfileDraft(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: ProfileType
    description: str
    key_selling_point: str = Field(alias="keySellingPoint")
    red_flag: str = Field(alias="redFlag")


class CandidateProfile(ProfileDraft):
    id: str
