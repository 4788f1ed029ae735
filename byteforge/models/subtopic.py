"""
SubTopic model - A lesson page inside a topic
"""
from sqlalchemy import Column, String, Integer, Text, JSON, UniqueConstraint
from byteforge.database import Base, PreciseDateTime, utcnow


class SubTopic(Base):
    """
    Model SubTopic

    Nested documents (content blocks, code examples, resources, quiz
    questions) are stored as JSON lists of snake_case dicts, validated by
    the pydantic schemas before they get here.
    """

    __tablename__ = "subtopics"
    __table_args__ = (
        UniqueConstraint("topic_id", "subtopic_id", name="uq_subtopics_topic_subtopic"),
    )

    pk = Column(Integer, primary_key=True, autoincrement=True)
    subtopic_id = Column(String(100), nullable=False, unique=True, index=True)
    topic_id = Column(String(100), nullable=False, index=True)  # Topic.id
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    estimated_time = Column(String(100), nullable=False)
    content = Column(JSON, nullable=False, default=list)
    code_examples = Column(JSON, nullable=False, default=list)
    resources = Column(JSON, nullable=False, default=list)
    quiz_questions = Column(JSON, nullable=False, default=list)
    created_at = Column(PreciseDateTime, default=utcnow)
    updated_at = Column(PreciseDateTime, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<SubTopic(subtopic_id={self.subtopic_id}, topic_id={self.topic_id})>"
