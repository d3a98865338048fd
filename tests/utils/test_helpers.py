"""
Test helper utilities.
"""

from typing import Any, Dict, Optional


class TestDataHelper:
    """Helper class for building request payloads."""

    @staticmethod
    def create_sample_user_data(username: str = "jdoe", role: str = "operator") -> Dict[str, Any]:
        """Registration payload for a user."""
        return {"username": username, "password": f"{username}-password", "role": role}

    @staticmethod
    def create_sample_well_data(name: str = "Candeias-7", location: str = "Reconcavo Basin") -> Dict[str, Any]:
        """Create sample well data for testing."""
        return {"name": name, "location": location}

    @staticmethod
    def create_sample_report_data(well_id: str, title: str = "Morning round", **overrides: Any) -> Dict[str, Any]:
        """Create a report payload for the given well; keyword overrides replace fields."""
        data = {
            "title": title,
            "content": "Valve B replaced, flow nominal",
            "pressure": 212.5,
            "wellStatus": "producing",
            "temperature": 68.0,
            "well": well_id,
        }
        data.update(overrides)
        return data

    @staticmethod
    def auth_headers(token: Optional[str]) -> Dict[str, str]:
        """Authorization header for a bearer token."""
        return {"Authorization": f"Bearer {token}"} if token else {}
