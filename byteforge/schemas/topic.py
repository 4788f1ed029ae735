"""
Topic schemas - Request/response bodies for /topics

A topic is one course unit, e.g. "Introduction to Java Programming".
- level: Beginner | Intermediate | Advanced
- category: Category.id the topic is listed under
- prerequisites: Topic ids suggested before this one (soft hints, not checked)
"""
from pydantic import Field
from typing import Optional, List
from datetime import datetime

from byteforge.models.topic import TopicLevel
from byteforge.schemas.common import CamelModel, Slug


# ============= REQUEST SCHEMAS =============

class TopicCreate(CamelModel):
    """Schema for creating a topic"""
    id: Slug = Field(..., description="Business key", examples=["java-basics"])
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    level: TopicLevel
    duration: str = Field(..., min_length=1, max_length=100, examples=["8 weeks"])
    category: Slug = Field(..., description="Category.id", examples=["java-fundamentals"])
    prerequisites: List[Slug] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    image: str = Field(..., min_length=1, max_length=500)


class TopicUpdate(CamelModel):
    """Schema for updating a topic; changing `category` moves the topic"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    level: Optional[TopicLevel] = None
    duration: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[Slug] = None
    prerequisites: Optional[List[Slug]] = None
    tags: Optional[List[str]] = None
    image: Optional[str] = Field(None, min_length=1, max_length=500)


# ============= RESPONSE SCHEMAS =============

class TopicResponse(CamelModel):
    """Topic as returned by the API"""
    id: str
    title: str
    description: str
    level: TopicLevel
    duration: str
    category: str
    prerequisites: List[str] = []
    tags: List[str] = []
    image: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TopicDeleteResponse(CamelModel):
    """Body returned by DELETE /topics/{id}"""
    message: str
    deleted_topic: TopicResponse


class TopicBulkError(CamelModel):
    id: Optional[str] = None
    error: str


class TopicBulkResponse(CamelModel):
    """Result of POST /topics/bulk - each topic succeeds or fails on its own"""
    created: List[TopicResponse] = []
    errors: List[TopicBulkError] = []
