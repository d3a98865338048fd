"""
Pytest configuration and shared fixtures for the Well Reports API tests.

Every test gets its own settings: a fresh DuckDB file and logs directory under
pytest's tmp_path, and a low bcrypt cost so hashing stays fast.
"""

import pytest
from fastapi.testclient import TestClient

from well_reports.main import create_app
from well_reports.shared.config.settings import Settings
from tests.utils.test_helpers import TestDataHelper

TEST_JWT_SECRET = "test-only-signing-secret-0123456789abcdef"


@pytest.fixture
def test_settings(tmp_path):
    """Isolated settings for one test."""
    return Settings(
        ENV="test",
        DATA_ROOT_DIR=tmp_path / "data",
        DUCKDB_FILENAME="test_well_reports.duckdb",
        JWT_SECRET=TEST_JWT_SECRET,
        PASSWORD_HASH_ROUNDS=4,
        REPORTS_DEFAULT_PAGE_SIZE=4,
        LOGS_DIR_NAME=str(tmp_path / "logs"),
    )


@pytest.fixture
def db_path(test_settings):
    """Path of the test DuckDB file (directories created)."""
    test_settings.setup_directories()
    return test_settings.DATABASE_PATH


@pytest.fixture
def test_client(test_settings):
    """
    Create a test client for the FastAPI application.
    Function-scoped so each test starts from an empty database.
    """
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture(scope="session")
def api_endpoints():
    """Common API endpoints used in tests."""
    return {
        "health": "/health",
        "root": "/",
        "register": "/register",
        "login": "/login",
        "wells": "/wells",
        "reports": "/reports",
    }


@pytest.fixture
def test_data():
    """Provide payload builders."""
    return TestDataHelper


@pytest.fixture
def register_user(test_client, api_endpoints):
    """Register a user and return the registration payload used."""
    def _register(username: str = "jdoe", role: str = "operator"):
        payload = TestDataHelper.create_sample_user_data(username, role)
        response = test_client.post(api_endpoints["register"], json=payload)
        assert response.status_code == 201, response.text
        return payload
    return _register


@pytest.fixture
def login(test_client, api_endpoints):
    """Log in and return the token."""
    def _login(username: str, password: str) -> str:
        response = test_client.post(api_endpoints["login"], json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return response.json()["token"]
    return _login


@pytest.fixture
def admin_headers(register_user, login):
    """Authorization headers of a freshly registered admin."""
    user = register_user("admin1", "admin")
    return TestDataHelper.auth_headers(login(user["username"], user["password"]))


@pytest.fixture
def operator_headers(register_user, login):
    """Authorization headers of a freshly registered operator."""
    user = register_user("operator1", "operator")
    return TestDataHelper.auth_headers(login(user["username"], user["password"]))


class TestAssertions:
    """Helper class for common test assertions."""

    @staticmethod
    def assert_successful_response(response, expected_status=200):
        """Assert that a response is successful."""
        assert response.status_code == expected_status, f"Expected {expected_status}, got {response.status_code}: {response.text}"
        return response.json()

    @staticmethod
    def assert_error_response(response, expected_status, expected_code=None):
        """Assert that a response is a standard error envelope with the given status."""
        assert response.status_code == expected_status, f"Expected {expected_status}, got {response.status_code}: {response.text}"
        data = response.json()
        assert data["success"] is False
        if expected_code is not None:
            assert data["error"]["error_code"] == expected_code
        return data

    @staticmethod
    def assert_json_structure(data, required_keys):
        """Assert that JSON data contains required keys."""
        for key in required_keys:
            assert key in data, f"Missing required key: {key}"


@pytest.fixture
def test_assertions():
    """Provide test assertion helpers."""
    return TestAssertions
