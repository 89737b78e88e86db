"""CRUD operations for `User` model."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.user import User


class CRUDUser(CRUDBase[User, dict, dict]):
    def get_by_email(self, db: Session, email: Optional[str]) -> Optional[User]:
        if not email:
            return None
        return self.get_by_field(db, "email", email.strip().lower())


# Singleton instance
crud_user = CRUDUser(User)
