"""
Job 저장소

company 저장소와 같은 규칙: 커넥션은 인자로 받고, API 필드명 dict 를 반환.
"""
import logging
from typing import Any

import asyncpg

from utils.errors import BadRequestError, NotFoundError
from utils.query import WhereClause, build_set_clause, like_pattern

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# 수정 가능한 필드 (id, companyHandle 은 변경 불가)
JOB_COLUMN_MAP = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}


async def create_job(conn: asyncpg.Connection, data: dict[str, Any]) -> dict:
    """
    공고 생성

    data: {title, salary, equity, companyHandle}
    존재하지 않는 회사면 BadRequestError
    """
    company_handle = data["companyHandle"]
    try:
        row = await conn.fetchrow(
            f"""
            INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_COLUMNS}
            """,
            data["title"],
            data.get("salary"),
            data.get("equity"),
            company_handle,
        )
    except asyncpg.ForeignKeyViolationError:
        raise BadRequestError(f"No company: {company_handle}")

    logger.info("Job created: %s (%s)", row["id"], company_handle)
    return dict(row)


async def find_all_jobs(
        conn: asyncpg.Connection,
        title: str | None = None,
        min_salary: int | None = None,
        has_equity: bool = False,
) -> list[dict]:
    """
    공고 목록 조회 (제목순)

    - title: 대소문자 무시 부분 일치
    - min_salary: 최소 연봉 (경계 포함)
    - has_equity: True 면 equity > 0 인 공고만
    """
    where = WhereClause()
    if title is not None:
        where.add("title ILIKE {} ESCAPE '\\'", like_pattern(title))
    if min_salary is not None:
        where.add("salary >= {}", min_salary)
    if has_equity:
        where.add("equity > 0")
    where_sql, values = where.build()

    rows = await conn.fetch(
        f"SELECT {JOB_COLUMNS} FROM jobs{where_sql} ORDER BY title",
        *values,
    )
    return [dict(row) for row in rows]


async def get_job(conn: asyncpg.Connection, job_id: int) -> dict:
    row = await conn.fetchrow(
        f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
        job_id,
    )
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    return dict(row)


async def update_job(conn: asyncpg.Connection, job_id: int, data: dict[str, Any]) -> dict:
    """
    공고 부분 수정

    data: {title, salary, equity} 중 일부
    """
    set_clause, values = build_set_clause(data, JOB_COLUMN_MAP)
    id_idx = len(values) + 1

    row = await conn.fetchrow(
        f"""
        UPDATE jobs
        SET {set_clause}
        WHERE id = ${id_idx}
        RETURNING {JOB_COLUMNS}
        """,
        *values,
        job_id,
    )
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    return dict(row)


async def remove_job(conn: asyncpg.Connection, job_id: int) -> None:
    row = await conn.fetchrow(
        "DELETE FROM jobs WHERE id = $1 RETURNING id",
        job_id,
    )
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    logger.info("Job deleted: %s", job_id)
