from decimal import Decimal
from typing import Annotated

from pydantic import ConfigDict, Field, model_validator

from schemas.commons import CamelModel, Count, Handle, JobId, Name

Equity = Annotated[Decimal, Field(ge=0, le=1, description="지분 비율 (0 ~ 1)")]


class JobSummary(CamelModel):
    """회사 상세에 포함되는 공고 요약"""
    id: JobId
    title: str
    salary: int | None = None
    equity: Decimal | None = None


class Job(JobSummary):
    company_handle: Handle


class JobCreateRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    title: Name
    salary: Count | None = None
    equity: Equity | None = None
    company_handle: Handle


class JobUpdateRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    title: Name | None = None
    salary: Count | None = None
    equity: Equity | None = None

    @model_validator(mode='after')
    def check_not_null_fields(self):
        if "title" in self.model_fields_set and self.title is None:
            raise ValueError("title cannot be null")
        return self


class JobResponse(CamelModel):
    job: Job


class JobListResponse(CamelModel):
    jobs: list[Job]


class JobDeleteResponse(CamelModel):
    deleted: int
