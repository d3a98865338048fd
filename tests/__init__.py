"""
Test package for Well Production API.

This package contains all test modules organized by test type:
- api: API endpoint tests
- integration: Integration tests
- unit: Unit tests for individual components
"""

__version__ = "1.0.0" 