from pydantic import ConfigDict, model_validator

from schemas.commons import CamelModel, Count, Handle, Name, Url
from schemas.job import JobSummary


class Company(CamelModel):
    handle: Handle
    name: Name
    description: str
    num_employees: Count | None = None
    logo_url: str | None = None


class CompanyDetail(Company):
    jobs: list[JobSummary] = []


class CompanyCreateRequest(Company):
    model_config = ConfigDict(extra='forbid')

    logo_url: Url | None = None


class CompanyUpdateRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    name: Name | None = None
    description: str | None = None
    num_employees: Count | None = None
    logo_url: Url | None = None

    @model_validator(mode='after')
    def check_not_null_fields(self):
        """
        "미전송" 과 "명시적 null(값 삭제)" 을 구분하기 위해 model_fields_set 기준으로 검사
        빈 body 는 여기서 막지 않고 build_set_clause 가 400 으로 처리
        """
        for field in ("name", "description"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class CompanyResponse(CamelModel):
    company: Company


class CompanyDetailResponse(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: list[Company]


class CompanyDeleteResponse(CamelModel):
    deleted: str
