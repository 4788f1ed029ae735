"""
Topic model - A course unit inside a category
"""
from sqlalchemy import Column, String, Integer, Text, Enum, JSON
from byteforge.database import Base, PreciseDateTime, utcnow
import enum


class TopicLevel(str, enum.Enum):
    """Difficulty level of a topic"""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class Topic(Base):
    """Model Topic - references its category by business key"""

    __tablename__ = "topics"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(100), nullable=False, unique=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    level = Column(Enum(TopicLevel, values_callable=lambda x: [e.value for e in x]), nullable=False, index=True)
    duration = Column(String(100), nullable=False)
    category = Column(String(100), nullable=False, index=True)  # Category.id
    prerequisites = Column(JSON, nullable=False, default=list)  # Topic ids, not validated
    tags = Column(JSON, nullable=False, default=list)
    image = Column(String(500), nullable=False)
    created_at = Column(PreciseDateTime, default=utcnow)
    updated_at = Column(PreciseDateTime, default=utcnow, onupdate=utcnow, index=True)

    def __repr__(self):
        return f"<Topic(id={self.id}, title={self.title}, category={self.category})>"
