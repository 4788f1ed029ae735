"""
Topic Service - CRUD for topics + category membership

=== CATEGORY <-> TOPIC LINK ===
The link is stored twice: `Topic.category` and `Category.topics[]`.
This service is the only writer of both sides:
- create: topic is inserted and its id appended to the category
- update: when `category` changes, the id is pulled from the old category
  and appended to the new one
- delete: the id is pulled from the category

Each of these commits as ONE transaction, so a failure leaves both sides
as they were. Reads never trust `Category.topics[]` alone; listing topics
of a category queries `Topic.category`.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from byteforge.core.exceptions import (
    CategoryNotFound, ContentError, ContentValidationError, DuplicateKeyError, TopicNotFound
)
from byteforge.core.validation import pick, require_fields
from byteforge.database import commit_or_rollback
from byteforge.models import Category, Topic, TopicLevel

logger = logging.getLogger(__name__)


class TopicService:
    """Service for topic records"""

    REQUIRED_FIELDS = ("id", "title", "description", "level", "duration", "category", "image")
    UPDATABLE_FIELDS = ("title", "description", "level", "duration", "category", "prerequisites", "tags", "image")

    # ============================================================
    # READS
    # ============================================================

    def list(self, db: Session) -> List[Topic]:
        """All topics, most recently updated first"""
        return db.query(Topic).order_by(Topic.updated_at.desc(), Topic.pk.desc()).all()

    def get_by_id(self, db: Session, topic_id: str) -> Topic:
        topic = db.query(Topic).filter(Topic.id == topic_id).first()
        if not topic:
            raise TopicNotFound(topic_id)
        return topic

    def list_by_category(self, db: Session, category_id: str) -> List[Topic]:
        if not self._find_category(db, category_id):
            raise CategoryNotFound(category_id)

        return (
            db.query(Topic)
            .filter(Topic.category == category_id)
            .order_by(Topic.updated_at.desc(), Topic.pk.desc())
            .all()
        )

    # ============================================================
    # WRITES
    # ============================================================

    def create(self, db: Session, data: Dict[str, Any]) -> Topic:
        """
        Create a topic and register it on its category

        Raises:
            ContentValidationError: required field missing or bad level
            DuplicateKeyError: the topic id is taken
            CategoryNotFound: the referenced category does not exist;
                nothing is written in that case
        """
        require_fields(data, self.REQUIRED_FIELDS)
        level = self._parse_level(data["level"])

        if db.query(Topic.pk).filter(Topic.id == data["id"]).first() is not None:
            raise DuplicateKeyError("Topic", data["id"])

        category = self._find_category(db, data["category"])
        if not category:
            raise CategoryNotFound(data["category"])

        topic = Topic(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            level=level,
            duration=data["duration"],
            category=data["category"],
            prerequisites=list(data.get("prerequisites") or []),
            tags=list(data.get("tags") or []),
            image=data["image"],
        )
        db.add(topic)
        self._add_to_category(category, topic.id)
        commit_or_rollback(db)
        db.refresh(topic)

        logger.info(f"Topic created: {topic.id} in category {topic.category}")
        return topic

    def create_many(self, db: Session, items: Iterable[Dict[str, Any]]) -> Dict[str, List[Any]]:
        """
        Create several topics, each on its own

        Returns:
            {"created": [Topic, ...], "errors": [{"id": ..., "error": ...}, ...]}
        """
        results = {"created": [], "errors": []}

        for data in items:
            try:
                results["created"].append(self.create(db, data))
            except (ContentError, SQLAlchemyError) as e:
                message = e.message if isinstance(e, ContentError) else str(e)
                logger.warning(f"Topic {data.get('id')} skipped: {message}")
                results["errors"].append({"id": data.get("id"), "error": message})

        return results

    def update(self, db: Session, topic_id: str, patch: Dict[str, Any]) -> Topic:
        """
        Update a topic; a new `category` moves it between categories

        Raises:
            TopicNotFound: no topic with this id
            CategoryNotFound: the new category does not exist; nothing changes
        """
        topic = self.get_by_id(db, topic_id)
        changes = pick(patch, self.UPDATABLE_FIELDS)

        if "level" in changes:
            changes["level"] = self._parse_level(changes["level"])

        new_category_id = changes.get("category")
        if new_category_id and new_category_id != topic.category:
            new_category = self._find_category(db, new_category_id)
            if not new_category:
                raise CategoryNotFound(new_category_id)

            old_category = self._find_category(db, topic.category)
            if old_category:
                self._remove_from_category(old_category, topic.id)
            self._add_to_category(new_category, topic.id)
            logger.info(f"Topic {topic.id} moved: {topic.category} -> {new_category_id}")

        for field, value in changes.items():
            if field in ("prerequisites", "tags"):
                value = list(value)
            setattr(topic, field, value)

        commit_or_rollback(db)
        db.refresh(topic)
        return topic

    def delete(self, db: Session, topic_id: str) -> Topic:
        """Delete a topic and pull its id from its category"""
        topic = self.get_by_id(db, topic_id)

        category = self._find_category(db, topic.category)
        if category:
            self._remove_from_category(category, topic.id)

        db.delete(topic)
        commit_or_rollback(db)

        logger.info(f"Topic deleted: {topic_id}")
        return topic

    # ============================================================
    # HELPERS
    # ============================================================

    def _find_category(self, db: Session, category_id: str) -> Optional[Category]:
        return db.query(Category).filter(Category.id == category_id).first()

    def _parse_level(self, value: Any) -> TopicLevel:
        try:
            return TopicLevel(value)
        except ValueError:
            allowed = ", ".join(level.value for level in TopicLevel)
            raise ContentValidationError(f"Invalid level '{value}', expected one of: {allowed}", fields=["level"])

    @staticmethod
    def _add_to_category(category: Category, topic_id: str) -> None:
        # JSON columns only track reassignment, never in-place mutation
        topics = list(category.topics or [])
        if topic_id not in topics:
            topics.append(topic_id)
        category.topics = topics

    @staticmethod
    def _remove_from_category(category: Category, topic_id: str) -> None:
        category.topics = [t for t in (category.topics or []) if t != topic_id]


topic_service = TopicService()
