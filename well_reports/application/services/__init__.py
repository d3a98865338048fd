"""
Application services module.
This package contains the use cases of the well reports service.
"""

from .auth_service import AuthService, LoginResult
from .authorization_gate import AuthorizationGate
from .report_service import ReportPage, ReportService
from .well_service import WellService

__all__ = [
    "AuthService",
    "LoginResult",
    "AuthorizationGate",
    "ReportPage",
    "ReportService",
    "WellService",
]
