"""
Dependency injection container for managing service dependencies.
Eliminates tight coupling between layers and enables easy testing.
"""
import logging
from typing import Any, Dict, Optional

import duckdb
from fastapi import Request

from ..domain.ports.security import PasswordHasherPort, TokenServicePort
from ..domain.repositories.report_repository import ReportRepository
from ..domain.repositories.user_repository import UserRepository
from ..domain.repositories.well_repository import WellRepository
from ..domain.value_objects.identity import Role

from ..application.services.auth_service import AuthService
from ..application.services.authorization_gate import AuthorizationGate
from ..application.services.report_service import ReportService
from ..application.services.well_service import WellService

from ..infrastructure.repositories.duckdb_report_repository import DuckDBReportRepository
from ..infrastructure.repositories.duckdb_user_repository import DuckDBUserRepository
from ..infrastructure.repositories.duckdb_well_repository import DuckDBWellRepository
from ..infrastructure.security.password_hasher import BcryptPasswordHasher
from ..infrastructure.security.token_service import JWTTokenService

from .config.settings import Settings

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency injection container for managing service instances.
    Implements singleton pattern with lazy initialization.

    One container is built per application at startup; the signing secret is
    read from settings exactly once, when the token service is first created.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._instances: Dict[str, Any] = {}

    def _get(self, key: str, factory):
        if key not in self._instances:
            self._instances[key] = factory()
        return self._instances[key]

    # Security
    def get_password_hasher(self) -> PasswordHasherPort:
        return self._get(
            'password_hasher',
            lambda: BcryptPasswordHasher(rounds=self.settings.PASSWORD_HASH_ROUNDS)
        )

    def get_token_service(self) -> TokenServicePort:
        return self._get(
            'token_service',
            lambda: JWTTokenService(secret=self.settings.JWT_SECRET, algorithm=self.settings.JWT_ALGORITHM)
        )

    def get_gate(self, required_role: Optional[Role] = None) -> AuthorizationGate:
        key = f"gate:{required_role.name if required_role else '*'}"
        return self._get(key, lambda: AuthorizationGate(self.get_token_service(), required_role))

    # Repositories
    def get_user_repository(self) -> UserRepository:
        return self._get('user_repository', lambda: DuckDBUserRepository(self.settings.DATABASE_PATH))

    def get_well_repository(self) -> WellRepository:
        return self._get('well_repository', lambda: DuckDBWellRepository(self.settings.DATABASE_PATH))

    def get_report_repository(self) -> ReportRepository:
        return self._get('report_repository', lambda: DuckDBReportRepository(self.settings.DATABASE_PATH))

    # Services
    def get_auth_service(self) -> AuthService:
        return self._get('auth_service', lambda: AuthService(
            repository=self.get_user_repository(),
            password_hasher=self.get_password_hasher(),
            token_service=self.get_token_service()
        ))

    def get_well_service(self) -> WellService:
        return self._get('well_service', lambda: WellService(self.get_well_repository()))

    def get_report_service(self) -> ReportService:
        return self._get('report_service', lambda: ReportService(
            self.get_report_repository(),
            default_page_size=self.settings.REPORTS_DEFAULT_PAGE_SIZE
        ))

    def startup(self) -> None:
        """Create tables and load the signing secret before the first request."""
        self.get_user_repository()
        self.get_well_repository()
        self.get_report_repository()
        self.get_token_service()
        logger.info(f"Storage ready at {self.settings.DATABASE_PATH}")

    def check_health(self) -> Dict[str, Any]:
        """Check that the database file answers a trivial query."""
        try:
            with duckdb.connect(str(self.settings.DATABASE_PATH)) as conn:
                conn.execute("SELECT 1").fetchone()
            return {"database": "healthy"}
        except duckdb.Error as e:
            logger.error(f"Database health check failed: {e}")
            return {"database": "unhealthy"}


def get_container(request: Request) -> DependencyContainer:
    return request.app.state.container


def provide_auth_service(request: Request) -> AuthService:
    return get_container(request).get_auth_service()


def provide_well_service(request: Request) -> WellService:
    return get_container(request).get_well_service()


def provide_report_service(request: Request) -> ReportService:
    return get_container(request).get_report_service()
