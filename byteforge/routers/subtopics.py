"""
SubTopics Router - API endpoints for subtopics (lesson pages of a topic)

Mounted under /topics next to the topics router, and included BEFORE it so
that /topics/subtopics/... never gets captured by /topics/{topic_id}.

=== LOGIC ===
- POST /topics/{topicId}/subtopics is create-or-update on `subtopicId`
  → always 201, message says "created" or "updated"
- GET/PUT/DELETE /topics/subtopics/{id} address a subtopic by its own key
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from byteforge.database import get_db
from byteforge.schemas.subtopic import (
    SubTopicUpsert, SubTopicUpdate, SubTopicResponse,
    SubTopicUpsertResponse, SubTopicDeleteResponse
)
from byteforge.services import subtopic_service

router = APIRouter(
    prefix="/topics",
    tags=["SubTopics"]
)


# ============================================================
# Subtopics addressed by their own id
# ============================================================
@router.get("/subtopics", response_model=List[SubTopicResponse])
def get_all_subtopics(db: Session = Depends(get_db)):
    """📋 LIST ALL SUBTOPICS, newest first"""
    return [SubTopicResponse.model_validate(s) for s in subtopic_service.list(db)]


@router.get("/subtopics/{subtopic_id}", response_model=SubTopicResponse)
def get_subtopic(subtopic_id: str, db: Session = Depends(get_db)):
    """📖 GET ONE SUBTOPIC (404 if missing)"""
    return SubTopicResponse.model_validate(subtopic_service.get_by_id(db, subtopic_id))


@router.put("/subtopics/{subtopic_id}", response_model=SubTopicResponse)
def update_subtopic(subtopic_id: str, subtopic_data: SubTopicUpdate, db: Session = Depends(get_db)):
    """✏️ UPDATE SUBTOPIC - only the fields sent are changed"""
    subtopic = subtopic_service.update(db, subtopic_id, subtopic_data.model_dump(mode="json", exclude_unset=True))
    return SubTopicResponse.model_validate(subtopic)


@router.delete("/subtopics/{subtopic_id}", response_model=SubTopicDeleteResponse)
def delete_subtopic(subtopic_id: str, db: Session = Depends(get_db)):
    """🗑️ DELETE SUBTOPIC"""
    subtopic = subtopic_service.delete(db, subtopic_id)
    return SubTopicDeleteResponse(
        message="Subtopic deleted successfully",
        subtopic=SubTopicResponse.model_validate(subtopic)
    )


# ============================================================
# Subtopics of one topic
# ============================================================
@router.get("/{topic_id}/subtopics", response_model=List[SubTopicResponse])
def get_subtopics_by_topic(topic_id: str, db: Session = Depends(get_db)):
    """
    📚 SUBTOPICS OF A TOPIC

    404 if the topic does not exist; [] if it has no subtopics yet.
    """
    return [SubTopicResponse.model_validate(s) for s in subtopic_service.list_by_topic_id(db, topic_id)]


@router.get("/{topic_id}/subtopics/{subtopic_id}", response_model=SubTopicResponse)
def get_topic_subtopic(topic_id: str, subtopic_id: str, db: Session = Depends(get_db)):
    """📖 GET ONE SUBTOPIC OF A TOPIC (404 unless it belongs to that topic)"""
    return SubTopicResponse.model_validate(subtopic_service.get_for_topic(db, topic_id, subtopic_id))


@router.post("/{topic_id}/subtopics", response_model=SubTopicUpsertResponse, status_code=status.HTTP_201_CREATED)
def upsert_subtopic(topic_id: str, subtopic_data: SubTopicUpsert, db: Session = Depends(get_db)):
    """
    ➕ CREATE OR UPDATE SUBTOPIC

    Logic:
    1. 404 if the topic does not exist (nothing written)
    2. Existing subtopicId → overwrite the fields sent, move under this topic
    3. Otherwise insert
    """
    result = subtopic_service.upsert(db, topic_id, subtopic_data.model_dump(mode="json", exclude_unset=True))
    return SubTopicUpsertResponse(
        subtopic=SubTopicResponse.model_validate(result.subtopic),
        message=result.message
    )
