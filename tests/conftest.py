"""
Test configuration for the loyalty server.
"""
import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def member(db):
    from tests.factories import UserFactory
    return UserFactory()


@pytest.fixture
def cashier(db):
    from tests.factories import CashierFactory
    return CashierFactory()


@pytest.fixture
def manager(db):
    from tests.factories import ManagerFactory
    return ManagerFactory()
