"""Root conftest: shared fixtures over in-memory ports.

Invariants:
    - No test touches the default storefront.db file
    - Every test gets fresh storage, navigation and context
"""

import datetime
import os

import pytest

from storefront.infrastructure.memory_storage import InMemoryStorage
from storefront.infrastructure.navigation import InMemoryNavigation
from storefront.services.app_context import build_context

os.environ.setdefault("STORAGE_URL", "sqlite:///:memory:")
os.environ.setdefault("ADMIN_PASSCODE", "test-passcode")

PASSCODE = "test-passcode"
FIXED_DAY = datetime.date(2026, 3, 14)


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def navigation():
    return InMemoryNavigation()


@pytest.fixture
def ctx(storage, navigation):
    return build_context(storage, navigation, admin_passcode=PASSCODE)


@pytest.fixture
def admin_ctx(ctx):
    assert ctx.gate.attempt_login(PASSCODE) is None
    return ctx
