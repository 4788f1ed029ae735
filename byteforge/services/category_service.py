"""
Category Service - CRUD for categories

=== RULES ===
- Categories are listed by `order` ascending
- `id` is unique; creating an existing id raises DuplicateKeyError
- New categories start with `topics = []`; only TopicService changes it
- Deleting a category does NOT delete its topics; their `category`
  reference is left dangling on purpose
"""
import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from byteforge.core.exceptions import CategoryNotFound, DuplicateKeyError
from byteforge.core.validation import pick, require_fields
from byteforge.database import commit_or_rollback
from byteforge.models import Category

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for category records"""

    REQUIRED_FIELDS = ("id", "title", "description", "icon", "color", "order")
    UPDATABLE_FIELDS = ("title", "description", "icon", "color", "order")

    def list(self, db: Session) -> List[Category]:
        return db.query(Category).order_by(Category.order, Category.pk).all()

    def get_by_id(self, db: Session, category_id: str) -> Category:
        category = db.query(Category).filter(Category.id == category_id).first()
        if not category:
            raise CategoryNotFound(category_id)
        return category

    def exists(self, db: Session, category_id: str) -> bool:
        return db.query(Category.pk).filter(Category.id == category_id).first() is not None

    def create(self, db: Session, data: Dict[str, Any]) -> Category:
        """
        Create a category

        Raises:
            ContentValidationError: a required field is missing or blank
            DuplicateKeyError: the id is taken
        """
        require_fields(data, self.REQUIRED_FIELDS)

        if self.exists(db, data["id"]):
            raise DuplicateKeyError("Category", data["id"])

        category = Category(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            icon=data["icon"],
            color=data["color"],
            order=data["order"],
            topics=[],
        )
        db.add(category)
        commit_or_rollback(db)
        db.refresh(category)

        logger.info(f"Category created: {category.id}")
        return category

    def update(self, db: Session, category_id: str, patch: Dict[str, Any]) -> Category:
        category = self.get_by_id(db, category_id)

        for field, value in pick(patch, self.UPDATABLE_FIELDS).items():
            setattr(category, field, value)

        commit_or_rollback(db)
        db.refresh(category)
        return category

    def delete(self, db: Session, category_id: str) -> Category:
        category = self.get_by_id(db, category_id)
        orphaned = len(category.topics or [])

        db.delete(category)
        commit_or_rollback(db)

        logger.info(f"Category deleted: {category_id} ({orphaned} topics left in place)")
        return category


category_service = CategoryService()
