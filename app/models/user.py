from enum import Enum

from sqlalchemy import Column, Integer, String, Text, Boolean, TIMESTAMP, CheckConstraint
from sqlalchemy.sql import func
from ..database import Base


class UserRole(str, Enum):
    """Community roles issued by the identity service."""
    CONSUMER = "consumer"
    PRODUCER = "producer"
    ADMIN = "admin"
    EXPERT = "expert"


class User(Base):
    __tablename__ = "users"

    # Primary Key
    id = Column(Integer, primary_key=True, index=True)

    # Identity
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)

    # Role & Authorization
    role = Column(String(50), nullable=False, default=UserRole.CONSUMER.value, index=True)

    # Profile
    phone = Column(String(20))
    profile_image = Column(String(500))
    bio = Column(Text)

    # Account Status
    is_active = Column(Boolean, default=True, index=True)
    is_verified = Column(Boolean, default=False)

    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    # Constraints
    __table_args__ = (
        CheckConstraint(
            "role IN ('consumer', 'producer', 'admin', 'expert')",
            name="check_user_role"
        ),
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
