from typing import Annotated

from fastapi import APIRouter, Query, status

from repositories import job as job_repo
from schemas.commons import Count, DBConnection, JobId, SearchTerm
from schemas.job import (
    Job,
    JobCreateRequest,
    JobDeleteResponse,
    JobListResponse,
    JobResponse,
    JobUpdateRequest,
)
from utils.auth import AdminUser

router = APIRouter(
    tags=["JOBS"],
)


@router.post("/jobs", response_model=JobResponse,
             status_code=status.HTTP_201_CREATED)
async def create_job(_: AdminUser, job: JobCreateRequest, conn: DBConnection) -> JobResponse:
    """공고 생성 (관리자)"""
    created = await job_repo.create_job(conn, job.model_dump(by_alias=True))
    return JobResponse(job=Job.model_validate(created))


@router.get("/jobs", response_model=JobListResponse)
async def get_jobs(
        conn: DBConnection,
        title: Annotated[SearchTerm | None, Query(description="공고 제목 부분 일치 검색어")] = None,
        min_salary: Annotated[Count | None, Query(alias="minSalary")] = None,
        has_equity: Annotated[bool, Query(alias="hasEquity")] = False,
) -> JobListResponse:
    """
    공고 목록 조회
    - title: 제목 부분 일치
    - minSalary: 최소 연봉
    - hasEquity: true 면 지분 있는 공고만
    """
    jobs = await job_repo.find_all_jobs(
        conn,
        title=title,
        min_salary=min_salary,
        has_equity=has_equity,
    )
    return JobListResponse(jobs=[Job.model_validate(j) for j in jobs])


@router.get("/jobs/{job_id}", response_model=JobResponse)
async def get_job(job_id: JobId, conn: DBConnection) -> JobResponse:
    """공고 상세 조회"""
    job = await job_repo.get_job(conn, job_id)
    return JobResponse(job=Job.model_validate(job))


@router.patch("/jobs/{job_id}", response_model=JobResponse)
async def update_job(
        _: AdminUser, job_id: JobId, update_data: JobUpdateRequest, conn: DBConnection) -> JobResponse:
    """공고 수정 (관리자, title / salary / equity 만)"""
    update_fields = update_data.model_dump(exclude_unset=True, by_alias=True)
    job = await job_repo.update_job(conn, job_id, update_fields)
    return JobResponse(job=Job.model_validate(job))


@router.delete("/jobs/{job_id}", response_model=JobDeleteResponse)
async def delete_job(_: AdminUser, job_id: JobId, conn: DBConnection) -> JobDeleteResponse:
    """공고 삭제 (관리자)"""
    await job_repo.remove_job(conn, job_id)
    return JobDeleteResponse(deleted=job_id)
