"""
Categories Router - API endpoints for topic categories

=== WHAT IT SOLVES ===
1. Browse page groups topics into categories (Programming, Web Development...)
2. Admin tooling creates/edits categories

=== LOGIC ===
- GET /categories → all categories ordered by `order`
- POST /categories → 400 on missing fields, 409 on duplicate id
- DELETE /categories/{id} → topics of the category are NOT deleted
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from byteforge.database import get_db
from byteforge.schemas.category import (
    CategoryCreate, CategoryUpdate, CategoryResponse, CategoryDeleteResponse
)
from byteforge.services import category_service

router = APIRouter(
    prefix="/categories",
    tags=["Categories"]
)


# ============================================================
# GET /categories - List categories
# ============================================================
@router.get("", response_model=List[CategoryResponse])
def get_categories(db: Session = Depends(get_db)):
    """
    📋 LIST CATEGORIES

    Sorted by `order` ascending, ties by creation.
    """
    return [CategoryResponse.model_validate(c) for c in category_service.list(db)]


# ============================================================
# GET /categories/{category_id} - Category detail
# ============================================================
@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: str, db: Session = Depends(get_db)):
    """📖 GET ONE CATEGORY (404 if missing)"""
    return CategoryResponse.model_validate(category_service.get_by_id(db, category_id))


# ============================================================
# POST /categories - Create category
# ============================================================
@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    """
    ➕ CREATE CATEGORY

    Logic:
    1. Validate body (id, title, description, icon, color, order required)
    2. Reject an id that already exists (409)
    3. Insert with `topics = []`; a `topics` field in the body is ignored
    """
    category = category_service.create(db, category_data.model_dump(mode="json"))
    return CategoryResponse.model_validate(category)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(category_id: str, category_data: CategoryUpdate, db: Session = Depends(get_db)):
    """✏️ UPDATE CATEGORY - only the fields sent are changed"""
    category = category_service.update(db, category_id, category_data.model_dump(mode="json", exclude_unset=True))
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", response_model=CategoryDeleteResponse)
def delete_category(category_id: str, db: Session = Depends(get_db)):
    """🗑️ DELETE CATEGORY - its topics keep pointing at the deleted id"""
    category = category_service.delete(db, category_id)
    return CategoryDeleteResponse(
        message="Category deleted successfully",
        deleted_category=CategoryResponse.model_validate(category)
    )
