"""Errors for the group manager module."""

from typing import Optional


class AuthzRealmLockError(Exception):
    """Raised by the host when a realm lock forbids changing a group.

    Attributes:
        group_id: id of the lock-protected group
        lock_mode: the group's lock mode at the time of the attempt
    """

    def __init__(self, group_id: str, lock_mode: Optional[str] = None):
        message = f"Group {group_id} is locked"
        if lock_mode:
            message += f" ({lock_mode})"
        super().__init__(message)
        self.group_id = group_id
        self.lock_mode = lock_mode
