"""
Category schemas - Request/response bodies for /categories

A category groups topics on the browse page (e.g. "Programming",
"Web Development"). `order` drives the display order and `topics` is the
ordered list of Topic ids. Only the topic service writes `topics`, so the
request schemas do not accept it.
"""
from pydantic import Field
from typing import Optional, List
from datetime import datetime

from byteforge.schemas.common import CamelModel, Slug


# ============= REQUEST SCHEMAS =============

class CategoryCreate(CamelModel):
    """Schema for creating a category"""
    id: Slug = Field(..., description="Business key", examples=["java-fundamentals"])
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    icon: str = Field(..., min_length=1, max_length=100, examples=["code"])
    color: str = Field(..., min_length=1, max_length=50, examples=["#007396"])
    order: int = Field(..., description="Display order, ascending")


class CategoryUpdate(CamelModel):
    """Schema for updating a category; the business key cannot change"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    icon: Optional[str] = Field(None, min_length=1, max_length=100)
    color: Optional[str] = Field(None, min_length=1, max_length=50)
    order: Optional[int] = None


# ============= RESPONSE SCHEMAS =============

class CategoryResponse(CamelModel):
    """Category as returned by the API"""
    id: str
    title: str
    description: str
    icon: str
    color: str
    order: int
    topics: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CategoryDeleteResponse(CamelModel):
    """Body returned by DELETE /categories/{id}"""
    message: str
    deleted_category: CategoryResponse
