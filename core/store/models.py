"""
SQLAlchemy ORM model for the persisted trainer state.

The whole state is one JSON document stored in a single row, keyed so that
several independent profiles can share one database.
"""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class TrainerStateDocument(Base):
    """
    One saved TrainerState, serialized as JSON.
    """
    __tablename__ = 'trainer_state'

    key = Column(String(255), primary_key=True, nullable=False)
    payload = Column(Text, nullable=False)  # TrainerState.model_dump_json()
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<TrainerStateDocument({self.key}, updated_at={self.updated_at})>"
