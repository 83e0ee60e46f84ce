"""Core logic - view building and group removal."""

from modules.group_manager.core.view import GroupView, build_group_view
from modules.group_manager.core.removal import RemovalResult, remove_groups

__all__ = [
    "GroupView",
    "build_group_view",
    "RemovalResult",
    "remove_groups",
]
