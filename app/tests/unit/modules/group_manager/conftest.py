"""Unit test fixtures for the group manager module."""

from unittest.mock import MagicMock

import pytest

from modules.group_manager.infrastructure import InMemorySakaiService


@pytest.fixture
def user_lookup(users):
    """UserLookup resolving the `users` fixture and nothing else."""
    by_id = {u.id: u for u in users}
    lookup = MagicMock()
    lookup.get_user.side_effect = by_id.get
    return lookup


@pytest.fixture
def host(site_factory, group_factory, users):
    """In-memory host with one current site holding three groups."""
    site = site_factory(
        groups=[
            group_factory("g1", "Beta", member_ids=["user_id2", "user_id1"]),
            group_factory("g2", "alpha", member_ids=["user_id3", "ghost"]),
            group_factory("g3", "Gamma", wsetup_created="false"),
        ]
    )
    return InMemorySakaiService(sites=[site], users=users, current_site_id=site.id)
