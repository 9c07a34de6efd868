from typing import Annotated
from urllib.parse import urlparse

import asyncpg
from fastapi import Depends
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from utils.database import get_connection


def validate_url(value: str) -> str:
    parsed = urlparse(value)
    if not (parsed.scheme and parsed.netloc):
        raise ValueError("must be a valid absolute URL (scheme + host)")
    return value


# INTEGER(int4) 컬럼 범위
MAX_INT4 = 2_147_483_647

Handle = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=25),
    Field(description="회사 handle", examples=["anderson-arias-morrow"]),
]

JobId = Annotated[int, Field(ge=1, le=MAX_INT4, description="공고 ID", examples=[1])]

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

SearchTerm = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]

Count = Annotated[int, Field(ge=0, le=MAX_INT4)]

Url = Annotated[str, AfterValidator(validate_url)]

DBConnection = Annotated[asyncpg.Connection, Depends(get_connection)]


class CamelModel(BaseModel):
    """JSON 에서는 camelCase, 파이썬에서는 snake_case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)