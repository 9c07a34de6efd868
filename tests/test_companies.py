"""
회사 API 테스트

실행 방법:
    pip install -e ".[dev]"
    pytest tests/test_companies.py -v
"""
from unittest.mock import AsyncMock, patch

import asyncpg

from utils.errors import BadRequestError, NotFoundError

NEW_COMPANY = {
    "handle": "new",
    "name": "New",
    "description": "DescNew",
    "numEmployees": 10,
    "logoUrl": "http://new.img",
}


class TestCreateCompany:
    """POST /companies 테스트"""

    def test_create_success(self, client, admin_headers):
        with patch("routers.companies.company_repo.create_company",
                   new=AsyncMock(return_value=NEW_COMPANY)) as mock_create:
            response = client.post("/companies", json=NEW_COMPANY, headers=admin_headers)

        assert response.status_code == 201
        assert response.json() == {"company": NEW_COMPANY}
        # 저장소에는 API 필드명(camelCase)으로 전달
        assert mock_create.call_args.args[1] == NEW_COMPANY

    def test_create_unauthorized(self, client):
        response = client.post("/companies", json=NEW_COMPANY)
        assert response.status_code == 401

    def test_create_forbidden_for_non_admin(self, client, user_headers):
        response = client.post("/companies", json=NEW_COMPANY, headers=user_headers)
        assert response.status_code == 403
        assert response.json()["detail"] == "Admin only"

    def test_create_invalid_token(self, client):
        headers = {"Authorization": "Bearer invalid_token"}
        response = client.post("/companies", json=NEW_COMPANY, headers=headers)
        assert response.status_code == 401

    def test_create_missing_field(self, client, admin_headers):
        data = {k: v for k, v in NEW_COMPANY.items() if k != "name"}
        response = client.post("/companies", json=data, headers=admin_headers)
        assert response.status_code == 422

    def test_create_extra_field(self, client, admin_headers):
        response = client.post("/companies", json={**NEW_COMPANY, "foo": 1}, headers=admin_headers)
        assert response.status_code == 422

    def test_create_invalid_logo_url(self, client, admin_headers):
        response = client.post("/companies", json={**NEW_COMPANY, "logoUrl": "not-a-url"}, headers=admin_headers)
        assert response.status_code == 422

    def test_create_duplicate(self, client, admin_headers):
        with patch("routers.companies.company_repo.create_company",
                   new=AsyncMock(side_effect=BadRequestError("Duplicate company: new"))):
            response = client.post("/companies", json=NEW_COMPANY, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Duplicate company: new"


class TestGetCompanies:
    """GET /companies 테스트"""

    def test_list(self, client, company_row):
        with patch("routers.companies.company_repo.find_all_companies",
                   new=AsyncMock(return_value=[company_row])):
            response = client.get("/companies")

        assert response.status_code == 200
        assert response.json() == {"companies": [company_row]}

    def test_filters_passed_through(self, client):
        with patch("routers.companies.company_repo.find_all_companies",
                   new=AsyncMock(return_value=[])) as mock_find:
            response = client.get("/companies?name=net&minEmployees=2&maxEmployees=20")

        assert response.status_code == 200
        assert mock_find.call_args.kwargs == {"name": "net", "min_employees": 2, "max_employees": 20}

    def test_no_filters(self, client):
        with patch("routers.companies.company_repo.find_all_companies",
                   new=AsyncMock(return_value=[])) as mock_find:
            client.get("/companies")

        assert mock_find.call_args.kwargs == {"name": None, "min_employees": None, "max_employees": None}

    def test_negative_min(self, client):
        response = client.get("/companies?minEmployees=-1")
        assert response.status_code == 422

    def test_min_out_of_int_range(self, client, conn):
        response = client.get(f"/companies?minEmployees={2**31}")

        assert response.status_code == 422
        conn.fetch.assert_not_awaited()

    def test_min_greater_than_max(self, client, conn):
        """저장소까지 내려가서 400"""
        response = client.get("/companies?minEmployees=10&maxEmployees=1")

        assert response.status_code == 400
        assert response.json()["detail"] == "Minimum cannot exceed maximum!"
        conn.fetch.assert_not_awaited()


class TestGetCompany:
    """GET /companies/{handle} 테스트"""

    def test_get_with_jobs(self, client, conn, company_row):
        conn.fetchrow.return_value = company_row
        conn.fetch.return_value = [{"id": 1, "title": "j1", "salary": 100, "equity": None}]

        response = client.get("/companies/c1")

        assert response.status_code == 200
        assert response.json() == {
            "company": {
                **company_row,
                "jobs": [{"id": 1, "title": "j1", "salary": 100, "equity": None}],
            }
        }

    def test_not_found(self, client, conn):
        conn.fetchrow.return_value = None

        response = client.get("/companies/nope")

        assert response.status_code == 404
        assert response.json()["detail"] == "No company: nope"


class TestUpdateCompany:
    """PATCH /companies/{handle} 테스트"""

    def test_update_success(self, client, conn, admin_headers, company_row):
        conn.fetchrow.return_value = {**company_row, "numEmployees": 50}

        response = client.patch("/companies/c1", json={"numEmployees": 50}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["company"]["numEmployees"] == 50
        sql = " ".join(conn.fetchrow.call_args.args[0].split())
        assert 'SET "num_employees"=$1 WHERE handle = $2' in sql
        assert conn.fetchrow.call_args.args[1:] == (50, "c1")

    def test_update_explicit_null(self, client, conn, admin_headers, company_row):
        """명시적 null 은 값으로 전달 (미전송 필드는 제외)"""
        conn.fetchrow.return_value = {**company_row, "logoUrl": None}

        response = client.patch("/companies/c1", json={"logoUrl": None}, headers=admin_headers)

        assert response.status_code == 200
        assert conn.fetchrow.call_args.args[1:] == (None, "c1")

    def test_update_empty_body(self, client, conn, admin_headers):
        """빈 body 는 400 No data, 쿼리 없음"""
        response = client.patch("/companies/c1", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No data"
        conn.fetchrow.assert_not_awaited()

    def test_update_handle_not_allowed(self, client, admin_headers):
        response = client.patch("/companies/c1", json={"handle": "other"}, headers=admin_headers)
        assert response.status_code == 422

    def test_update_name_null_rejected(self, client, admin_headers):
        response = client.patch("/companies/c1", json={"name": None}, headers=admin_headers)
        assert response.status_code == 422

    def test_update_not_found(self, client, conn, admin_headers):
        conn.fetchrow.return_value = None

        response = client.patch("/companies/nope", json={"name": "X"}, headers=admin_headers)

        assert response.status_code == 404

    def test_update_duplicate_name(self, client, conn, admin_headers):
        conn.fetchrow.side_effect = asyncpg.UniqueViolationError("duplicate key")

        response = client.patch("/companies/c1", json={"name": "C2"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Duplicate company name: C2"

    def test_update_num_employees_out_of_range(self, client, conn, admin_headers):
        response = client.patch("/companies/c1", json={"numEmployees": 2**31}, headers=admin_headers)

        assert response.status_code == 422
        conn.fetchrow.assert_not_awaited()

    def test_update_forbidden(self, client, user_headers):
        response = client.patch("/companies/c1", json={"name": "X"}, headers=user_headers)
        assert response.status_code == 403


class TestDeleteCompany:
    """DELETE /companies/{handle} 테스트"""

    def test_delete_success(self, client, admin_headers):
        with patch("routers.companies.company_repo.remove_company", new=AsyncMock(return_value=None)):
            response = client.delete("/companies/c1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": "c1"}

    def test_delete_not_found(self, client, admin_headers):
        with patch("routers.companies.company_repo.remove_company",
                   new=AsyncMock(side_effect=NotFoundError("No company: nope"))):
            response = client.delete("/companies/nope", headers=admin_headers)

        assert response.status_code == 404

    def test_delete_unauthorized(self, client):
        response = client.delete("/companies/c1")
        assert response.status_code == 401
