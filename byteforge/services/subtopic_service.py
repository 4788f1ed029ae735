"""
SubTopic Service - CRUD + upsert for subtopics

=== UPSERT ===
POST /topics/{topicId}/subtopics is create-or-update keyed on `subtopicId`:
- topic must exist, otherwise TopicNotFound and nothing is written
- existing subtopicId -> fields present in the body overwritten (omitted
  lists are kept), subtopic re-parented to topicId
- new subtopicId -> inserted under topicId
So posting the same subtopic twice never grows the topic's subtopic count.
"""
import logging
from typing import Any, Dict, List, NamedTuple

from sqlalchemy.orm import Session

from byteforge.core.exceptions import SubTopicNotFound, TopicNotFound
from byteforge.core.validation import pick, require_fields
from byteforge.database import commit_or_rollback
from byteforge.models import SubTopic, Topic

logger = logging.getLogger(__name__)


class UpsertResult(NamedTuple):
    subtopic: SubTopic
    created: bool
    message: str


class SubTopicService:
    """Service for subtopic records"""

    REQUIRED_FIELDS = ("subtopic_id", "title", "description", "estimated_time")
    CONTENT_FIELDS = (
        "title", "description", "estimated_time",
        "content", "code_examples", "resources", "quiz_questions",
    )

    def list(self, db: Session) -> List[SubTopic]:
        return db.query(SubTopic).order_by(SubTopic.created_at.desc(), SubTopic.pk.desc()).all()

    def get_by_id(self, db: Session, subtopic_id: str) -> SubTopic:
        subtopic = db.query(SubTopic).filter(SubTopic.subtopic_id == subtopic_id).first()
        if not subtopic:
            raise SubTopicNotFound(subtopic_id)
        return subtopic

    def get_for_topic(self, db: Session, topic_id: str, subtopic_id: str) -> SubTopic:
        """Subtopic by id, only if it belongs to the given topic"""
        subtopic = db.query(SubTopic).filter(
            SubTopic.topic_id == topic_id,
            SubTopic.subtopic_id == subtopic_id
        ).first()
        if not subtopic:
            raise SubTopicNotFound(subtopic_id)
        return subtopic

    def list_by_topic_id(self, db: Session, topic_id: str) -> List[SubTopic]:
        self._require_topic(db, topic_id)
        return (
            db.query(SubTopic)
            .filter(SubTopic.topic_id == topic_id)
            .order_by(SubTopic.created_at.desc(), SubTopic.pk.desc())
            .all()
        )

    def upsert(self, db: Session, topic_id: str, data: Dict[str, Any]) -> UpsertResult:
        """
        Create or update a subtopic under a topic

        Raises:
            TopicNotFound: the topic does not exist
            ContentValidationError: a required field is missing
        """
        self._require_topic(db, topic_id)
        require_fields(data, self.REQUIRED_FIELDS)

        fields = self._content(data)
        existing = db.query(SubTopic).filter(SubTopic.subtopic_id == data["subtopic_id"]).first()

        if existing:
            for field, value in fields.items():
                setattr(existing, field, value)
            existing.topic_id = topic_id
            subtopic, created = existing, False
        else:
            subtopic = SubTopic(subtopic_id=data["subtopic_id"], topic_id=topic_id, **fields)
            db.add(subtopic)
            created = True

        commit_or_rollback(db)
        db.refresh(subtopic)

        action = "created" if created else "updated"
        logger.info(f"Subtopic {action}: {subtopic.subtopic_id} under topic {topic_id}")
        return UpsertResult(subtopic, created, f"Subtopic {action} successfully")

    def update(self, db: Session, subtopic_id: str, patch: Dict[str, Any]) -> SubTopic:
        subtopic = self.get_by_id(db, subtopic_id)

        for field, value in self._content(patch).items():
            setattr(subtopic, field, value)

        commit_or_rollback(db)
        db.refresh(subtopic)
        return subtopic

    def delete(self, db: Session, subtopic_id: str) -> SubTopic:
        subtopic = self.get_by_id(db, subtopic_id)

        db.delete(subtopic)
        commit_or_rollback(db)

        logger.info(f"Subtopic deleted: {subtopic_id}")
        return subtopic

    def _content(self, data: Dict[str, Any]) -> Dict[str, Any]:
        # Nested lists are copied so the JSON columns see a new value
        return {
            field: list(value) if isinstance(value, (list, tuple)) else value
            for field, value in pick(data, self.CONTENT_FIELDS).items()
        }

    @staticmethod
    def _require_topic(db: Session, topic_id: str) -> None:
        if db.query(Topic.pk).filter(Topic.id == topic_id).first() is None:
            raise TopicNotFound(topic_id)


subtopic_service = SubTopicService()
