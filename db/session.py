import logging

from sqlalchemy.ext.asyncio import create_async_engine

from config import settings
from db.base import Base

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.sqlalchemy_database_url)


async def create_tables() -> None:
    """companies / jobs 테이블이 없으면 생성"""
    # 모델 import 로 Base.metadata 에 테이블 등록
    from db.models import company, job  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables ensured: %s", ", ".join(Base.metadata.tables))
