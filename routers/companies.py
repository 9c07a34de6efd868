from typing import Annotated

from fastapi import APIRouter, Query, status

from repositories import company as company_repo
from schemas.commons import Count, DBConnection, Handle, SearchTerm
from schemas.company import (
    Company,
    CompanyCreateRequest,
    CompanyDeleteResponse,
    CompanyDetail,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdateRequest,
)
from utils.auth import AdminUser

router = APIRouter(
    tags=["COMPANIES"],
)


@router.post("/companies", response_model=CompanyResponse,
             status_code=status.HTTP_201_CREATED)
async def create_company(_: AdminUser, company: CompanyCreateRequest, conn: DBConnection) -> CompanyResponse:
    """회사 생성 (관리자)"""
    created = await company_repo.create_company(conn, company.model_dump(by_alias=True))
    return CompanyResponse(company=Company.model_validate(created))


@router.get("/companies", response_model=CompanyListResponse)
async def get_companies(
        conn: DBConnection,
        name: Annotated[SearchTerm | None, Query(description="회사 이름 부분 일치 검색어")] = None,
        min_employees: Annotated[Count | None, Query(alias="minEmployees")] = None,
        max_employees: Annotated[Count | None, Query(alias="maxEmployees")] = None,
) -> CompanyListResponse:
    """
    회사 목록 조회
    - name: 이름 부분 일치 (대소문자 무시)
    - minEmployees / maxEmployees: 직원 수 범위
    """
    companies = await company_repo.find_all_companies(
        conn,
        name=name,
        min_employees=min_employees,
        max_employees=max_employees,
    )
    return CompanyListResponse(companies=[Company.model_validate(c) for c in companies])


@router.get("/companies/{handle}", response_model=CompanyDetailResponse)
async def get_company(handle: Handle, conn: DBConnection) -> CompanyDetailResponse:
    """회사 상세 조회 (공고 목록 포함)"""
    company = await company_repo.get_company(conn, handle)
    return CompanyDetailResponse(company=CompanyDetail.model_validate(company))


@router.patch("/companies/{handle}", response_model=CompanyResponse)
async def update_company(
        _: AdminUser, handle: Handle, update_data: CompanyUpdateRequest, conn: DBConnection) -> CompanyResponse:
    """회사 정보 수정 (관리자, 전달된 필드만)"""
    update_fields = update_data.model_dump(exclude_unset=True, by_alias=True)
    company = await company_repo.update_company(conn, handle, update_fields)
    return CompanyResponse(company=Company.model_validate(company))


@router.delete("/companies/{handle}", response_model=CompanyDeleteResponse)
async def delete_company(_: AdminUser, handle: Handle, conn: DBConnection) -> CompanyDeleteResponse:
    """회사 삭제 (관리자, 소속 공고도 함께 삭제)"""
    await company_repo.remove_company(conn, handle)
    return CompanyDeleteResponse(deleted=handle)
