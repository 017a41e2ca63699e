from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.schemas.resume import ResumeRecord


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeOptions(_ApiModel):
    use_ai: bool = True
    api_key: str | None = Field(default=None, max_length=200)


class AnalyzeRequest(_ApiModel):
    job_description: str = Field(default="", max_length=100000)
    resume: ResumeRecord = Field(default_factory=ResumeRecord)
    options: AnalyzeOptions = Field(default_factory=AnalyzeOptions)


class OptimizeRequest(_ApiModel):
    job_description: str = Field(default="", max_length=100000)
    resume: ResumeRecord = Field(default_factory=ResumeRecord)
    api_key: str | None = Field(default=None, max_length=200)


class OptimizeResponse(_ApiModel):
    optimized_experience: list[str] = Field(default_factory=list)
    optimized_summary: str | None = None
    suggested_skills: list[str] = Field(default_factory=list)
