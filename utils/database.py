# utils/database.py

import logging
from typing import AsyncGenerator

import asyncpg

from config import settings

pool: asyncpg.Pool | None = None

logger = logging.getLogger(__name__)


def get_pool() -> asyncpg.Pool:
    if pool is None:
        raise RuntimeError("Database pool is not initialized")
    return pool


async def get_connection() -> AsyncGenerator[asyncpg.Connection, None]:
    """요청 단위로 커넥션을 빌려주고 요청이 끝나면 반납"""
    pool = get_pool()
    async with pool.acquire() as conn:
        yield conn


async def init_pool() -> None:
    global pool
    pool = await asyncpg.create_pool(
        dsn=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    logger.info(
        "Database pool ready (min=%s, max=%s)",
        settings.db_pool_min_size,
        settings.db_pool_max_size,
    )


async def close_pool() -> None:
    global pool
    if pool:
        await pool.close()
        pool = None
