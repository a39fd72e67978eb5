"""
User and Password models.

The password hash lives in its own table, one-to-one with users, so queries
that load users never pull credentials along with them.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from planit.db.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # Stored lowercased and trimmed; see services.auth_service.normalize_email
    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(100), nullable=True)

    # Relationships raise on lazy access; load them with selectinload()
    password = relationship(
        "Password",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )
    events = relationship("Event", back_populates="owner", passive_deletes=True, lazy="raise")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"


class Password(Base, TimestampMixin):
    __tablename__ = "passwords"

    id = Column(Integer, primary_key=True, index=True)
    hash = Column(String(255), nullable=False)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )

    user = relationship("User", back_populates="password")

    def __repr__(self) -> str:
        return f"<Password(id={self.id}, user={self.user_id})>"
