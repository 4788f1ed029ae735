"""
Category model - Top-level grouping of topics
"""
from sqlalchemy import Column, String, DateTime, Integer, Text, JSON
from sqlalchemy.sql import func
from byteforge.database import Base


class Category(Base):
    """
    Model Category

    `id` is the business key used by Topic.category; `pk` is the
    database identifier and never leaves the service layer.
    `topics` lists Topic ids in insertion order and is kept in sync by
    TopicService, not by the database.
    """

    __tablename__ = "categories"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(100), nullable=False, unique=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    icon = Column(String(100), nullable=False)
    color = Column(String(50), nullable=False)
    order = Column(Integer, nullable=False, index=True)
    topics = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Category(id={self.id}, title={self.title})>"
