"""Unit tests for the group removal coordinator."""

from unittest.mock import MagicMock, call

import pytest

from infrastructure.operations import OperationStatus
from modules.group_manager.core.removal import (
    RemovalResult,
    delete_group,
    remove_groups,
)
from modules.group_manager.domain.errors import AuthzRealmLockError
from modules.group_manager.domain.models import RealmLockMode

pytestmark = pytest.mark.unit


@pytest.fixture
def collaborators():
    """Group lookup, site mutator and site persister mocks."""
    return MagicMock(), MagicMock(), MagicMock()


def _refuse_group(locked_id):
    def _delete(site, group):
        if group.id == locked_id:
            raise AuthzRealmLockError(group.id, "DELETE")

    return _delete


def _lookup_from(groups):
    by_id = {g.id: g for g in groups}
    lookup = MagicMock()
    lookup.find_group_by_id.side_effect = by_id.get
    return lookup


class TestRemoveGroups:
    """Tests for remove_groups."""

    @pytest.mark.parametrize("requested", [None, []])
    def test_nothing_requested_does_no_work(self, site_factory, collaborators, requested):
        lookup, mutator, persister = collaborators

        result = remove_groups(site_factory(), requested, lookup, mutator, persister)

        assert result == RemovalResult()
        lookup.find_group_by_id.assert_not_called()
        mutator.delete_group.assert_not_called()
        persister.save_site.assert_not_called()

    def test_locked_group_does_not_abort_batch(self, site_factory, group_factory):
        """g1 deletes, g2 is locked: one save, g2 recorded, nothing raised."""
        g1 = group_factory("g1", "One")
        g2 = group_factory("g2", "Two", lock=RealmLockMode.DELETE)
        site = site_factory(groups=[g1, g2])
        lookup = _lookup_from([g1, g2])
        mutator = MagicMock()
        mutator.delete_group.side_effect = _refuse_group("g2")
        persister = MagicMock()

        result = remove_groups(site, ["g1", "g2"], lookup, mutator, persister)

        assert result.any_deleted is True
        assert result.deleted_ids == ["g1"]
        assert result.locked_ids == ["g2"]
        assert result.results[1].error_code == "GROUP_LOCKED"
        persister.save_site.assert_called_once_with(site)

    def test_deletions_attempted_in_request_order(self, site_factory, group_factory):
        groups = [group_factory(f"g{i}", f"T{i}") for i in range(1, 4)]
        site = site_factory(groups=groups)
        lookup = _lookup_from(groups)
        mutator = MagicMock()
        persister = MagicMock()

        remove_groups(site, ["g3", "g1", "g2"], lookup, mutator, persister)

        assert lookup.find_group_by_id.call_args_list == [
            call("g3"),
            call("g1"),
            call("g2"),
        ]
        assert [c.args[1].id for c in mutator.delete_group.call_args_list] == [
            "g3",
            "g1",
            "g2",
        ]
        persister.save_site.assert_called_once_with(site)

    def test_unresolved_ids_are_skipped(self, site_factory, group_factory):
        g1 = group_factory("g1", "One")
        site = site_factory(groups=[g1])
        lookup = _lookup_from([g1])
        mutator = MagicMock()
        persister = MagicMock()

        result = remove_groups(site, ["missing", "g1"], lookup, mutator, persister)

        assert result.missing_ids == ["missing"]
        assert result.deleted_ids == ["g1"]
        assert result.results[0].status == OperationStatus.NOT_FOUND
        mutator.delete_group.assert_called_once_with(site, g1)
        persister.save_site.assert_called_once_with(site)

    def test_no_save_when_every_id_unresolved(self, site_factory, collaborators):
        lookup, mutator, persister = collaborators
        lookup.find_group_by_id.return_value = None

        result = remove_groups(site_factory(), ["a", "b"], lookup, mutator, persister)

        assert result.any_deleted is False
        assert result.missing_ids == ["a", "b"]
        mutator.delete_group.assert_not_called()
        persister.save_site.assert_not_called()

    def test_no_save_when_every_group_locked(self, site_factory, group_factory):
        groups = [
            group_factory("g1", "One", lock=RealmLockMode.ALL),
            group_factory("g2", "Two", lock=RealmLockMode.DELETE),
        ]
        site = site_factory(groups=groups)
        mutator = MagicMock()
        mutator.delete_group.side_effect = AuthzRealmLockError("locked")
        persister = MagicMock()

        result = remove_groups(site, ["g1", "g2"], _lookup_from(groups), mutator, persister)

        assert result.any_deleted is False
        assert result.locked_ids == ["g1", "g2"]
        persister.save_site.assert_not_called()

    def test_save_called_once_for_many_deletions(self, site_factory, group_factory):
        groups = [group_factory(f"g{i}", f"T{i}") for i in range(5)]
        site = site_factory(groups=groups)
        persister = MagicMock()

        result = remove_groups(
            site, [g.id for g in groups], _lookup_from(groups), MagicMock(), persister
        )

        assert len(result.deleted_ids) == 5
        persister.save_site.assert_called_once_with(site)

    def test_other_mutator_errors_propagate(self, site_factory, group_factory):
        g1 = group_factory("g1", "One")
        mutator = MagicMock()
        mutator.delete_group.side_effect = RuntimeError("host down")
        persister = MagicMock()

        with pytest.raises(RuntimeError, match="host down"):
            remove_groups(
                site_factory(groups=[g1]), ["g1"], _lookup_from([g1]), mutator, persister
            )

        persister.save_site.assert_not_called()


class TestDeleteGroup:
    """Tests for a single deletion attempt."""

    def test_success_result(self, site_factory, group_factory):
        site = site_factory()
        group = group_factory("g1")
        mutator = MagicMock()

        result = delete_group(site, group, mutator)

        assert result.is_success
        assert result.data == {"group_id": "g1"}
        mutator.delete_group.assert_called_once_with(site, group)

    def test_lock_error_becomes_locked_result(self, site_factory, group_factory):
        mutator = MagicMock()
        mutator.delete_group.side_effect = AuthzRealmLockError("g1", "ALL")

        result = delete_group(site_factory(), group_factory("g1"), mutator)

        assert result.status == OperationStatus.LOCKED
        assert result.error_code == "GROUP_LOCKED"
        assert result.data == {"group_id": "g1"}
        assert "locked" in result.message
