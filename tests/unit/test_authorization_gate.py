"""
Unit tests for the role gate.
"""

import pytest

from well_reports.application.services.authorization_gate import AuthorizationGate
from well_reports.domain.value_objects.identity import ADMIN, OPERATOR, Claims, Role
from well_reports.infrastructure.security.token_service import JWTTokenService
from well_reports.shared.exceptions import ForbiddenException, UnauthenticatedException

SECRET = "unit-test-signing-secret-0123456789abcdef"


@pytest.fixture
def token_service():
    return JWTTokenService(secret=SECRET)


@pytest.fixture
def operator_token(token_service):
    return token_service.issue(Claims(subject="op-1", role="operator"))


class TestRole:
    """Roles are compared by name only."""

    def test_same_name_satisfies(self):
        assert Role("operator").satisfies(OPERATOR)

    def test_no_requirement_is_always_satisfied(self):
        assert Role("anything").satisfies(None)

    def test_admin_does_not_satisfy_operator(self):
        assert not ADMIN.satisfies(OPERATOR)

    def test_comparison_is_case_sensitive(self):
        assert not Role("Admin").satisfies(ADMIN)


class TestAuthorizationGate:
    """Unit tests for AuthorizationGate."""

    def test_operator_passes_operator_gate(self, token_service, operator_token):
        identity = AuthorizationGate(token_service, OPERATOR).admit(operator_token)

        assert identity.user_id == "op-1"
        assert identity.role == OPERATOR

    def test_operator_passes_open_gate(self, token_service, operator_token):
        identity = AuthorizationGate(token_service, None).admit(operator_token)
        assert identity.role.name == "operator"

    def test_operator_fails_admin_gate(self, token_service, operator_token):
        with pytest.raises(ForbiddenException):
            AuthorizationGate(token_service, ADMIN).admit(operator_token)

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token(self, token_service, token):
        with pytest.raises(UnauthenticatedException):
            AuthorizationGate(token_service, None).admit(token)

    def test_corrupted_token(self, token_service, operator_token):
        with pytest.raises(UnauthenticatedException):
            AuthorizationGate(token_service, OPERATOR).admit(operator_token[:-4] + "AAAA")

    def test_custom_role_passes_matching_gate(self, token_service):
        token = token_service.issue(Claims(subject="s-1", role="supervisor"))
        identity = AuthorizationGate(token_service, Role("supervisor")).admit(token, route="GET /x")
        assert identity.role == Role("supervisor")
