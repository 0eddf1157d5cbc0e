"""
Test configuration and fixtures for the redirect service.
This centralizes all test setup, making individual tests clean.
"""

from ipaddress import ip_address

import pytest
from fastapi.testclient import TestClient

from main import app
from redirect_app.dependencies import get_client_ip, get_store
from redirect_app.store import LockMode, StoreFactory

VISITOR_IP = "203.0.113.5"


@pytest.fixture(scope="function")
def store():
    """
    Create a fresh store for each test.
    This ensures tests are isolated and don't affect each other.
    """
    return StoreFactory.build(LockMode.PER_COMPONENT)


@pytest.fixture(scope="function")
def visitor_ip():
    return ip_address(VISITOR_IP)


@pytest.fixture(scope="function")
def client(store, visitor_ip):
    """
    Create a test client with the store and client address overridden.
    This is the main fixture that tests will use.
    """
    app.dependency_overrides[get_store] = lambda: store
    # TestClient connections report "testclient" as their host
    app.dependency_overrides[get_client_ip] = lambda: visitor_ip
    
    with TestClient(app) as test_client:
        yield test_client
    
    # Clean up overrides
    app.dependency_overrides.clear()
    StoreFactory.clear_instance()
