"""테스트 데이터 생성 스크립트

사용법:
    python scripts/seed.py

테이블을 만들고 샘플 회사/공고를 넣은 뒤 관리자 토큰을 출력한다.
"""
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

import asyncpg

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import settings
from db.session import create_tables, engine
from repositories.company import create_company
from repositories.job import create_job
from utils.auth import create_access_token
from utils.errors import BadRequestError

SAMPLE_COMPANIES = [
    {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "numEmployees": 1,
        "logoUrl": "http://c1.img",
    },
    {
        "handle": "c2",
        "name": "C2",
        "description": "Desc2",
        "numEmployees": 2,
        "logoUrl": "http://c2.img",
    },
    {
        "handle": "c3",
        "name": "C3",
        "description": "Desc3",
        "numEmployees": 3,
        "logoUrl": None,
    },
]

SAMPLE_JOBS = [
    {"title": "j1", "salary": 100, "equity": Decimal("0.1"), "companyHandle": "c1"},
    {"title": "j2", "salary": 200, "equity": Decimal("0"), "companyHandle": "c1"},
    {"title": "j3", "salary": 300, "equity": None, "companyHandle": "c2"},
]

ADMIN_USERNAME = "admin"


async def seed():
    """모든 테스트 데이터 생성"""
    await create_tables()
    await engine.dispose()

    conn = await asyncpg.connect(settings.database_url)
    try:
        for company in SAMPLE_COMPANIES:
            try:
                await create_company(conn, company)
            except BadRequestError as e:
                print(f"⏭  {e.message}")
                continue
            print(f"🏢 {company['handle']}")

            for job in SAMPLE_JOBS:
                if job["companyHandle"] == company["handle"]:
                    created = await create_job(conn, job)
                    print(f"   - job #{created['id']}: {created['title']}")
    finally:
        await conn.close()

    token = create_access_token(data={"sub": ADMIN_USERNAME, "is_admin": True})
    print("\n✅ 테스트 데이터 생성 완료!")
    print(f"\n🔑 관리자 토큰 ({settings.access_token_expire_minutes}분 유효):")
    print(f"   {token}")


if __name__ == "__main__":
    asyncio.run(seed())
