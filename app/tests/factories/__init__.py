"""Test data factories for deterministic test data generation."""

from tests.factories.sakai import (
    make_group,
    make_groups,
    make_members,
    make_site,
    make_users,
)

__all__ = [
    "make_group",
    "make_groups",
    "make_members",
    "make_site",
    "make_users",
]
