import pytest

from modules.group_manager import service as group_manager_service
from tests.factories.sakai import make_group, make_site, make_users


@pytest.fixture
def group_factory():
    """Factory for host groups (see tests.factories.sakai.make_group)."""
    return make_group


@pytest.fixture
def site_factory():
    """Factory for host sites (see tests.factories.sakai.make_site)."""
    return make_site


@pytest.fixture
def users():
    """Three resolvable users: user_id1..user_id3."""
    return make_users(3)


@pytest.fixture(autouse=True)
def reset_group_manager_host():
    """Make sure no host facade leaks between tests."""
    group_manager_service.reset_sakai_service()
    yield
    group_manager_service.reset_sakai_service()
