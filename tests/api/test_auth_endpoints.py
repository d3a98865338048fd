"""
Tests for registration and login endpoints.
"""

import jwt
import pytest

from tests.conftest import TEST_JWT_SECRET


class TestRegisterEndpoint:
    """Test class for POST /register."""

    def test_register_returns_created(self, test_client, api_endpoints, test_data, test_assertions):
        # Act
        response = test_client.post(api_endpoints["register"], json=test_data.create_sample_user_data("alice", "admin"))

        # Assert
        data = test_assertions.assert_successful_response(response, 201)
        test_assertions.assert_json_structure(data, ["success", "data", "metadata", "message"])
        assert data["success"] is True
        assert data["message"] == "User registered"
        assert data["data"]["username"] == "alice"
        assert data["data"]["role"] == "admin"
        assert "password" not in data["data"]
        assert "password_hash" not in data["data"]

    @pytest.mark.parametrize("missing", ["username", "password", "role"])
    def test_register_missing_field(self, test_client, api_endpoints, test_data, test_assertions, missing):
        """Each of username, password and role is required."""
        payload = test_data.create_sample_user_data()
        del payload[missing]

        # Act
        response = test_client.post(api_endpoints["register"], json=payload)

        # Assert
        data = test_assertions.assert_error_response(response, 400, "VALIDATION_ERROR")
        assert data["error"]["message"] == "All fields are required."
        assert data["error"]["field"] == missing

    def test_register_empty_string_counts_as_missing(self, test_client, api_endpoints, test_assertions):
        response = test_client.post(api_endpoints["register"], json={"username": "", "password": "x", "role": "admin"})
        test_assertions.assert_error_response(response, 400, "VALIDATION_ERROR")

    def test_register_without_body(self, test_client, api_endpoints, test_assertions):
        response = test_client.post(api_endpoints["register"])
        test_assertions.assert_error_response(response, 400, "VALIDATION_ERROR")


class TestLoginEndpoint:
    """Test class for POST /login."""

    def test_login_returns_token_and_role(self, test_client, api_endpoints, register_user, test_assertions):
        user = register_user("bob", "operator")

        # Act
        response = test_client.post(
            api_endpoints["login"],
            json={"username": user["username"], "password": user["password"]}
        )

        # Assert
        data = test_assertions.assert_successful_response(response, 200)
        assert set(data.keys()) == {"token", "role"}
        assert data["role"] == "operator"

        claims = jwt.decode(data["token"], TEST_JWT_SECRET, algorithms=["HS256"])
        assert claims["role"] == "operator"
        assert claims["sub"]
        assert "exp" not in claims

    def test_login_wrong_password(self, test_client, api_endpoints, register_user, test_assertions):
        user = register_user("bob", "operator")

        response = test_client.post(api_endpoints["login"], json={"username": user["username"], "password": "nope"})

        data = test_assertions.assert_error_response(response, 401, "UNAUTHENTICATED")
        assert data["error"]["message"] == "Invalid credentials"

    def test_login_unknown_user(self, test_client, api_endpoints, test_assertions):
        response = test_client.post(api_endpoints["login"], json={"username": "ghost", "password": "boo"})
        data = test_assertions.assert_error_response(response, 401, "UNAUTHENTICATED")
        assert data["error"]["message"] == "Invalid credentials"

    def test_login_missing_password(self, test_client, api_endpoints, test_assertions):
        response = test_client.post(api_endpoints["login"], json={"username": "bob"})
        data = test_assertions.assert_error_response(response, 400, "VALIDATION_ERROR")
        assert data["error"]["message"] == "Username and password are required."

    def test_duplicate_username_logs_in_as_first_registered(self, test_client, api_endpoints, test_data, login):
        """Usernames are not unique; login matches the earliest registration."""
        first = test_data.create_sample_user_data("dup", "admin")
        second = {"username": "dup", "password": "other-password", "role": "operator"}
        assert test_client.post(api_endpoints["register"], json=first).status_code == 201
        assert test_client.post(api_endpoints["register"], json=second).status_code == 201

        token = login("dup", first["password"])
        assert jwt.decode(token, TEST_JWT_SECRET, algorithms=["HS256"])["role"] == "admin"
