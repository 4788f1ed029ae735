"""
Content Client - typed wrapper over the ByteForge REST API

Used by tools and front-end backends that read content over HTTP instead of
touching the database. Every call is a single request: no retries, no
caching. Failures are logged and raised as ContentClientError.

Usage:
    with ContentClient() as client:
        topics = client.get_all_topics()
        catalog = client.progress_catalog()
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from byteforge.config import settings
from byteforge.schemas.category import CategoryResponse
from byteforge.schemas.subtopic import SubTopicResponse, SubTopicUpsertResponse
from byteforge.schemas.topic import TopicResponse

logger = logging.getLogger(__name__)


class ContentClientError(Exception):
    """HTTP call to the content API failed"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ContentClient:
    """Client for /topics and /categories"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.CLIENT_TIMEOUT_SECONDS,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    def __enter__(self) -> "ContentClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    # ============================================================
    # TOPICS
    # ============================================================

    def get_all_topics(self) -> List[TopicResponse]:
        data = self._request("GET", "/topics", "fetching topics")
        return [TopicResponse.model_validate(t) for t in data]

    def get_topic(self, topic_id: str) -> TopicResponse:
        data = self._request("GET", f"/topics/{topic_id}", f"fetching topic {topic_id}")
        return TopicResponse.model_validate(data)

    def get_topics_by_category(self, category_id: str) -> List[TopicResponse]:
        data = self._request("GET", f"/topics/category/{category_id}", f"fetching topics of {category_id}")
        return [TopicResponse.model_validate(t) for t in data]

    def create_topic(self, topic_data: Dict[str, Any]) -> TopicResponse:
        data = self._request("POST", "/topics", "creating topic", json=topic_data)
        return TopicResponse.model_validate(data)

    def update_topic(self, topic_id: str, topic_data: Dict[str, Any]) -> TopicResponse:
        data = self._request("PUT", f"/topics/{topic_id}", f"updating topic {topic_id}", json=topic_data)
        return TopicResponse.model_validate(data)

    def delete_topic(self, topic_id: str) -> None:
        self._request("DELETE", f"/topics/{topic_id}", f"deleting topic {topic_id}")

    # ============================================================
    # SUBTOPICS
    # ============================================================

    def get_subtopics(self, topic_id: str) -> List[SubTopicResponse]:
        data = self._request("GET", f"/topics/{topic_id}/subtopics", f"fetching subtopics for topic {topic_id}")
        return [SubTopicResponse.model_validate(s) for s in data]

    def upsert_subtopic(self, topic_id: str, subtopic_data: Dict[str, Any]) -> SubTopicUpsertResponse:
        data = self._request(
            "POST", f"/topics/{topic_id}/subtopics", f"saving subtopic for topic {topic_id}", json=subtopic_data
        )
        return SubTopicUpsertResponse.model_validate(data)

    # ============================================================
    # CATEGORIES
    # ============================================================

    def get_categories(self) -> List[CategoryResponse]:
        data = self._request("GET", "/categories", "fetching categories")
        return [CategoryResponse.model_validate(c) for c in data]

    # ============================================================
    # PROGRESS SUPPORT
    # ============================================================

    def progress_catalog(self, topic_ids: Optional[List[str]] = None) -> Dict[str, List[str]]:
        """
        Map topic id -> its subtopic ids, the input of ProgressTracker

        Fetches every topic when topic_ids is not given.
        """
        if topic_ids is None:
            topic_ids = [t.id for t in self.get_all_topics()]

        return {
            topic_id: [s.subtopic_id for s in self.get_subtopics(topic_id)]
            for topic_id in topic_ids
        }

    # ============================================================
    # HTTP
    # ============================================================

    def _request(self, method: str, path: str, action: str, **kwargs) -> Any:
        try:
            response = self._http.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = self._error_message(e.response)
            logger.error(f"Error {action}: {e.response.status_code} {message}")
            raise ContentClientError(message, status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error(f"Error {action}: {e}")
            raise ContentClientError(str(e)) from e

        return response.json()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return response.text
