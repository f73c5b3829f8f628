"""
Pytest configuration and fixtures for record-validator tests

This module provides shared schemas and records for the unit tests.
"""
import pytest


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that exercise a single component"
    )
    config.addinivalue_line(
        "markers", "cli: Tests that drive the command-line interface"
    )


# =======================
# SCHEMA FIXTURES
# =======================

@pytest.fixture
def policy_schema() -> dict:
    """
    Schema used by the policy request endpoint: a name plus either a
    phone number or a policy number.
    """
    return {
        "_anyOf": ["phone_number", "policy_number"],
        "phone_number": {"type": "number", "phone": True},
        "policy_number": {"type": "string", "minLength": 5},
        "name": {"type": "string", "required": True},
    }


@pytest.fixture
def customer_schema() -> dict:
    """Schema covering every field type, including a nested address."""
    return {
        "name": {"type": "string", "required": True, "minLength": 2, "maxLength": 50},
        "age": {"type": "number", "min": 18, "max": 65},
        "email": {"type": "string", "email": True},
        "plan": {"type": "string", "validValues": ["basic", "premium"]},
        "joined": {"type": "date", "dateFormat": "yyyy-mm-dd"},
        "address": {
            "type": "object",
            "properties": {
                "city": {"type": "string", "required": True},
                "zip": {"type": "string", "length": 5},
            },
        },
    }


@pytest.fixture
def valid_customer() -> dict:
    return {
        "name": "Jane Doe",
        "age": 30,
        "email": "jane@example.com",
        "plan": "premium",
        "joined": "2024-01-15",
        "address": {"city": "Pune", "zip": "41100"},
    }
