"""
Tests for the HTTP API.

Managers are replaced with mocks through dependency overrides; the database
manager is patched so the lifespan does not open a pool.
"""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from app.auth import create_access_token
from app.dependencies import get_customer_manager, get_employee_manager
from app.domain.entities import EmployeeRole
from app.domain.exceptions import InvalidCpfError
from app.main import app
from app.models import CustomerResponse, EmployeeResponse


@pytest.fixture
def customer_manager():
    return AsyncMock()


@pytest.fixture
def employee_manager():
    return AsyncMock()


@pytest.fixture
def mock_db():
    with patch("app.main.db_manager") as db:
        db.connect = AsyncMock()
        db.disconnect = AsyncMock()
        db.fetchval = AsyncMock(return_value=1)
        yield db


@pytest.fixture
def client(mock_db, customer_manager, employee_manager):
    """Create a test client with manager overrides."""
    app.dependency_overrides[get_customer_manager] = lambda: customer_manager
    app.dependency_overrides[get_employee_manager] = lambda: employee_manager
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {create_access_token('1', role='Admin')}"}


@pytest.fixture
def customer_payload():
    return {
        "cpf": "98659502000",
        "name": "Maria",
        "surname": "Silva",
        "email": "maria.silva@example.com",
        "birth_date": "1985-05-20",
    }


@pytest.fixture
def employee_payload():
    return {
        "cpf": "98659502000",
        "name": "Admin",
        "surname": "Doe",
        "email": "admin@admin.com",
        "birth_date": "1990-01-01",
        "password": "x",
        "role": "Admin",
    }


def employee_response(**overrides):
    fields = {
        "id": 1,
        "cpf": "98659502000",
        "name": "Admin",
        "surname": "Doe",
        "email": "admin@admin.com",
        "birth_date": date(1990, 1, 1),
        "role": EmployeeRole.ADMIN,
        "is_active": True,
    }
    fields.update(overrides)
    return EmployeeResponse(**fields)


class TestHealth:
    """Tests for health endpoint."""

    def test_healthy(self, client, mock_db):
        """Test health reports the database as connected."""
        response = client.get("/healthz")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["database"] == "connected"

    def test_unhealthy(self, client, mock_db):
        """Test health answers 503 when the database fails."""
        mock_db.fetchval.side_effect = ConnectionError("down")

        response = client.get("/healthz")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"

    def test_no_auth_required(self, client):
        """Test health is public."""
        assert client.get("/healthz").status_code == 200


class TestAuthentication:
    """Tests for the bearer token guard."""

    def test_missing_token(self, client):
        """Test protected routes need a token."""
        response = client.get("/customer/1")
        assert response.status_code == 401

    def test_invalid_token(self, client):
        """Test a bad token is rejected."""
        response = client.get("/employee/1", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401


class TestCustomerEndpoints:
    """Tests for customer routes."""

    def test_create(self, client, auth_headers, customer_manager, customer_payload):
        """Test a created customer answers 200."""
        customer_manager.create.return_value = CustomerResponse(id=3, cpf="98659502000")

        response = client.post("/customer", json=customer_payload, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["id"] == 3
        request = customer_manager.create.call_args.args[0]
        assert request.birth_date == date(1985, 5, 20)

    def test_create_validation_error(
        self, client, auth_headers, customer_manager, customer_payload
    ):
        """Test domain errors become a 400 problem body."""
        customer_manager.create.side_effect = InvalidCpfError()

        response = client.post("/customer", json=customer_payload, headers=auth_headers)

        assert response.status_code == 400
        body = response.json()
        assert body["title"] == "An error occured"
        assert body["status"] == 400
        assert body["detail"] == "CPF was invalid."

    def test_unexpected_error(self, client, auth_headers, customer_manager, customer_payload):
        """Test other errors become a 500 problem body."""
        customer_manager.create.side_effect = RuntimeError("boom")

        response = client.post("/customer", json=customer_payload, headers=auth_headers)

        assert response.status_code == 500
        assert response.json()["status"] == 500
        assert "boom" not in response.text

    def test_update_not_found(self, client, auth_headers, customer_manager, customer_payload):
        """Test an error response answers 400 with the response body."""
        customer_manager.update.return_value = CustomerResponse.failure("Customer not found.")

        response = client.put(
            "/customer", json=dict(customer_payload, id=9), headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["error"] is True
        assert response.json()["error_message"] == "Customer not found."

    def test_get_by_id(self, client, auth_headers, customer_manager):
        """Test a found customer answers 200."""
        customer_manager.get_by_id.return_value = CustomerResponse(id=1, name="Maria")

        response = client.get("/customer/1", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["name"] == "Maria"
        customer_manager.get_by_id.assert_awaited_once_with(1)

    def test_get_by_id_not_found(self, client, auth_headers, customer_manager):
        """Test a missing customer answers 404."""
        customer_manager.get_by_id.return_value = None

        response = client.get("/customer/1", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {
            "title": "Customer not found",
            "status": 404,
            "detail": "The requested customer could not be found.",
        }

    def test_get_by_cpf_not_found(self, client, auth_headers, customer_manager):
        """Test a missing CPF answers 404."""
        customer_manager.get_by_cpf.return_value = None

        response = client.get("/cpf/98659502000", headers=auth_headers)

        assert response.status_code == 404
        customer_manager.get_by_cpf.assert_awaited_once_with("98659502000")


class TestEmployeeEndpoints:
    """Tests for employee routes."""

    def test_create(self, client, auth_headers, employee_manager, employee_payload):
        """Test a created employee answers 201."""
        employee_manager.create.return_value = employee_response(id=12)

        response = client.post("/employee", json=employee_payload, headers=auth_headers)

        assert response.status_code == 201
        assert response.headers["Location"] == "/employee/12"
        body = response.json()
        assert body["id"] == 12
        assert body["role"] == "Admin"
        assert "password" not in body

    def test_create_validation_failure(
        self, client, auth_headers, employee_manager, employee_payload
    ):
        """Test an error response answers 400."""
        employee_manager.create.return_value = EmployeeResponse.failure(
            "Message: CPF was null or empty."
        )

        response = client.post(
            "/employee", json=dict(employee_payload, cpf=""), headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["error_message"] == "Message: CPF was null or empty."

    def test_create_unknown_role(self, client, auth_headers, employee_manager, employee_payload):
        """Test an unknown role fails request validation."""
        response = client.post(
            "/employee", json=dict(employee_payload, role="Janitor"), headers=auth_headers
        )

        assert response.status_code == 422
        employee_manager.create.assert_not_called()

    def test_update_uses_path_id(self, client, auth_headers, employee_manager, employee_payload):
        """Test the id in the path replaces the id in the body."""
        employee_manager.update.return_value = employee_response(id=5)

        response = client.put(
            "/employee/5", json=dict(employee_payload, id=99), headers=auth_headers
        )

        assert response.status_code == 200
        request = employee_manager.update.call_args.args[0]
        assert request.id == 5

    def test_update_not_found(self, client, auth_headers, employee_manager, employee_payload):
        """Test a missing employee answers 400."""
        employee_manager.update.return_value = EmployeeResponse.failure("Employee not found.")

        response = client.put("/employee/5", json=employee_payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error_message"] == "Employee not found."

    def test_delete(self, client, auth_headers, employee_manager):
        """Test delete answers with the affected count."""
        employee_manager.delete.return_value = 1

        response = client.delete("/employee/3", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == 1
        employee_manager.delete.assert_awaited_once_with(3)

    def test_delete_missing(self, client, auth_headers, employee_manager):
        """Test deleting a missing employee answers 0."""
        employee_manager.delete.return_value = 0

        response = client.delete("/employee/3", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == 0

    def test_list(self, client, auth_headers, employee_manager):
        """Test listing forwards paging arguments."""
        employee_manager.get_all.return_value = [employee_response(id=1), employee_response(id=2)]

        response = client.get("/employee?skip=10&take=2", headers=auth_headers)

        assert response.status_code == 200
        assert [e["id"] for e in response.json()] == [1, 2]
        employee_manager.get_all.assert_awaited_once_with(skip=10, take=2)

    def test_list_defaults(self, client, auth_headers, employee_manager):
        """Test default paging."""
        employee_manager.get_all.return_value = [employee_response()]

        client.get("/employee", headers=auth_headers)

        employee_manager.get_all.assert_awaited_once_with(skip=0, take=10)

    def test_list_empty(self, client, auth_headers, employee_manager):
        """Test an empty page answers 204."""
        employee_manager.get_all.return_value = []

        response = client.get("/employee", headers=auth_headers)

        assert response.status_code == 204
        assert response.content == b""

    def test_get_by_id_not_found(self, client, auth_headers, employee_manager):
        """Test a missing employee answers 404."""
        employee_manager.get_by_id.return_value = None

        response = client.get("/employee/77", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["title"] == "Employee not found"
        assert response.json()["detail"] == "The requested employee could not be found."
