from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

SkillLevel = Literal["Beginner", "Intermediate", "Advanced", "Expert"]

_MONTH_PATTERN = r"^(\d{4}-\d{2})?$"


class _ResumeModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(_ResumeModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linked_in: str = ""
    portfolio: str = ""


class Experience(_ResumeModel):
    id: str
    company: str = ""
    position: str = ""
    start_date: str = Field(default="", pattern=_MONTH_PATTERN)
    end_date: str = Field(default="", pattern=_MONTH_PATTERN)
    description: str = ""
    is_current: bool = Field(default=False, validation_alias=AliasChoices("isCurrent", "is_current", "current"))


class Education(_ResumeModel):
    id: str
    institution: str = ""
    degree: str = ""
    field: str = ""
    graduation_date: str = ""
    gpa: str | None = None


class Skill(_ResumeModel):
    id: str
    name: str = ""
    level: SkillLevel = "Intermediate"


class Project(_ResumeModel):
    id: str
    name: str = ""
    description: str = ""
    technologies: str = ""
    start_date: str = Field(default="", pattern=_MONTH_PATTERN)
    end_date: str = Field(default="", pattern=_MONTH_PATTERN)
    url: str | None = None
    is_current: bool = Field(default=False, validation_alias=AliasChoices("isCurrent", "is_current", "current"))


class ResumeRecord(_ResumeModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_unique_ids(self) -> "ResumeRecord":
        for section in ("experience", "education", "skills", "projects"):
            ids = [item.id for item in getattr(self, section)]
            if len(ids) != len(set(ids)):
                raise ValueError(f"{section} entries must have unique ids")
        return self
