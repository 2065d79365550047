import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

REPOSITORIES = (
    "tenants",
    "associations",
    "admin_users",
    "elected_officials",
    "superadmins",
    "plans",
    "addons",
    "access_tokens",
    "sessions",
    "audit_events",
    "contributions",
)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    for name in REPOSITORIES:
        setattr(uow, name, AsyncMock())
    return uow


class FrozenClock:
    """Callable clock that only moves when told to"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta):
        self.now = self.now + delta


@pytest.fixture
def clock():
    return FrozenClock(datetime(2025, 3, 1, 9, 0, 0))
