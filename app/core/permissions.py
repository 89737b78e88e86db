"""Ownership checks shared by every forum mutation."""

from typing import Optional

from app.models.user import User


def can_mutate(user: Optional[User], owner_id: Optional[int]) -> bool:
    """Return True when `user` authored the resource or holds the admin role."""
    if user is None:
        return False
    if owner_id is not None and user.id == owner_id:
        return True
    return user.is_admin
