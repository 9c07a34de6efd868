"""
Company 저장소

모든 함수는 요청 단위로 빌린 asyncpg 커넥션을 첫 인자로 받는다.
반환값은 API 필드명(camelCase)을 키로 하는 dict.
"""
import logging
from typing import Any

import asyncpg

from utils.errors import BadRequestError, NotFoundError
from utils.query import WhereClause, build_set_clause, like_pattern

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = (
    'handle, name, description, '
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)

# API 필드명 -> DB 컬럼명
COMPANY_COLUMN_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

# PostgreSQL 기본 제약조건 이름 (companies.name UNIQUE)
NAME_UNIQUE_CONSTRAINT = "companies_name_key"


def _is_duplicate_name(exc: asyncpg.UniqueViolationError) -> bool:
    return getattr(exc, "constraint_name", None) == NAME_UNIQUE_CONSTRAINT


async def create_company(conn: asyncpg.Connection, data: dict[str, Any]) -> dict:
    """
    회사 생성

    data: {handle, name, description, numEmployees, logoUrl}
    이미 같은 handle 이 있으면 BadRequestError
    """
    handle = data["handle"]
    duplicate = await conn.fetchrow(
        "SELECT handle FROM companies WHERE handle = $1",
        handle,
    )
    if duplicate:
        raise BadRequestError(f"Duplicate company: {handle}")

    try:
        row = await conn.fetchrow(
            f"""
            INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {COMPANY_COLUMNS}
            """,
            handle,
            data["name"],
            data["description"],
            data.get("numEmployees"),
            data.get("logoUrl"),
        )
    except asyncpg.UniqueViolationError as exc:
        if _is_duplicate_name(exc):
            raise BadRequestError(f"Duplicate company name: {data['name']}") from exc
        # 중복 확인과 INSERT 사이에 다른 요청이 같은 handle 을 먼저 넣은 경우
        raise BadRequestError(f"Duplicate company: {handle}") from exc

    logger.info("Company created: %s", handle)
    return dict(row)


async def find_all_companies(
        conn: asyncpg.Connection,
        name: str | None = None,
        min_employees: int | None = None,
        max_employees: int | None = None,
) -> list[dict]:
    """
    회사 목록 조회 (이름순)

    - name: 대소문자 무시 부분 일치
    - min_employees / max_employees: 직원 수 범위 (경계 포함)
    """
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("Minimum cannot exceed maximum!")

    where = WhereClause()
    if name is not None:
        where.add("name ILIKE {} ESCAPE '\\'", like_pattern(name))
    if min_employees is not None:
        where.add("num_employees >= {}", min_employees)
    if max_employees is not None:
        where.add("num_employees <= {}", max_employees)
    where_sql, values = where.build()

    rows = await conn.fetch(
        f"SELECT {COMPANY_COLUMNS} FROM companies{where_sql} ORDER BY name",
        *values,
    )
    return [dict(row) for row in rows]


async def get_company(conn: asyncpg.Connection, handle: str) -> dict:
    """회사 상세 조회 (소속 공고 jobs 포함)"""
    row = await conn.fetchrow(
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        handle,
    )
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    jobs = await conn.fetch(
        """
        SELECT id, title, salary, equity
        FROM jobs
        WHERE company_handle = $1
        ORDER BY id
        """,
        handle,
    )

    company = dict(row)
    company["jobs"] = [dict(job) for job in jobs]
    return company


async def update_company(conn: asyncpg.Connection, handle: str, data: dict[str, Any]) -> dict:
    """
    회사 정보 부분 수정 (전달된 필드만 변경)

    data: {name, description, numEmployees, logoUrl} 중 일부
    다른 회사가 이미 쓰는 name 으로 바꾸면 BadRequestError
    """
    set_clause, values = build_set_clause(data, COMPANY_COLUMN_MAP)
    handle_idx = len(values) + 1

    try:
        row = await conn.fetchrow(
            f"""
            UPDATE companies
            SET {set_clause}
            WHERE handle = ${handle_idx}
            RETURNING {COMPANY_COLUMNS}
            """,
            *values,
            handle,
        )
    except asyncpg.UniqueViolationError as exc:
        # handle 은 수정 대상이 아니므로 name 중복뿐
        raise BadRequestError(f"Duplicate company name: {data.get('name')}") from exc
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    return dict(row)


async def remove_company(conn: asyncpg.Connection, handle: str) -> None:
    row = await conn.fetchrow(
        "DELETE FROM companies WHERE handle = $1 RETURNING handle",
        handle,
    )
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    logger.info("Company deleted: %s", handle)
