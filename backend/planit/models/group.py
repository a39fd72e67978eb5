"""
Group model: a collection container for events.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from planit.db.base import Base, TimestampMixin


class Group(Base, TimestampMixin):
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(String(1000), nullable=True)

    events = relationship("Event", back_populates="group", passive_deletes=True, lazy="raise")

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name={self.name})>"
