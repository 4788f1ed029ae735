"""
Content client tests - HTTP calls are served by httpx.MockTransport

Running tests:
    pytest test_content_client.py -v
"""
import httpx
import pytest

from byteforge.client import ContentClient, ContentClientError
from byteforge.models import TopicLevel


TOPIC = {
    "id": "java-basics",
    "title": "Java Basics",
    "description": "Java from scratch",
    "level": "Beginner",
    "duration": "8 weeks",
    "category": "java-fundamentals",
    "prerequisites": [],
    "tags": ["java"],
    "image": "https://example.com/java.jpg",
    "createdAt": "2026-01-01T10:00:00",
    "updatedAt": "2026-01-01T10:00:00",
}


def _subtopic(subtopic_id, topic_id="java-basics"):
    return {
        "subtopicId": subtopic_id,
        "topicId": topic_id,
        "title": subtopic_id.title(),
        "description": "Lesson",
        "estimatedTime": "1 hour",
        "content": [{"type": "text", "content": "Hello"}],
        "codeExamples": [],
        "resources": [],
        "quizQuestions": [],
    }


def make_client(handler):
    return ContentClient(base_url="http://content.test", timeout=5, transport=httpx.MockTransport(handler))


def test_get_all_topics():
    def handler(request):
        assert request.method == "GET"
        assert request.url.path == "/topics"
        return httpx.Response(200, json=[TOPIC])

    with make_client(handler) as client:
        topics = client.get_all_topics()

    assert len(topics) == 1
    assert topics[0].id == "java-basics"
    assert topics[0].level == TopicLevel.BEGINNER


def test_create_topic_sends_body():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["body"] = request.read()
        return httpx.Response(201, json=TOPIC)

    with make_client(handler) as client:
        topic = client.create_topic({"id": "java-basics"})

    assert seen["method"] == "POST"
    assert b"java-basics" in seen["body"]
    assert topic.category == "java-fundamentals"


def test_upsert_subtopic():
    def handler(request):
        assert request.url.path == "/topics/java-basics/subtopics"
        return httpx.Response(201, json={"subtopic": _subtopic("introduction"), "message": "Subtopic created successfully"})

    with make_client(handler) as client:
        result = client.upsert_subtopic("java-basics", {"subtopicId": "introduction"})

    assert result.message == "Subtopic created successfully"
    assert result.subtopic.subtopic_id == "introduction"


def test_error_body_becomes_client_error():
    def handler(request):
        return httpx.Response(404, json={"error": "Topic with ID missing not found"})

    with make_client(handler) as client:
        with pytest.raises(ContentClientError) as exc_info:
            client.get_topic("missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Topic with ID missing not found"


def test_non_json_error_body():
    def handler(request):
        return httpx.Response(502, text="Bad Gateway")

    with make_client(handler) as client:
        with pytest.raises(ContentClientError) as exc_info:
            client.get_categories()

    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "Bad Gateway"


def test_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with make_client(handler) as client:
        with pytest.raises(ContentClientError) as exc_info:
            client.get_all_topics()

    assert exc_info.value.status_code is None


def test_progress_catalog():
    subtopics = {
        "java-basics": [_subtopic("introduction"), _subtopic("arrays")],
        "java-oop": [],
    }

    def handler(request):
        if request.url.path == "/topics":
            return httpx.Response(200, json=[TOPIC, dict(TOPIC, id="java-oop")])
        topic_id = request.url.path.split("/")[2]
        return httpx.Response(200, json=subtopics[topic_id])

    with make_client(handler) as client:
        assert client.progress_catalog() == {"java-basics": ["introduction", "arrays"], "java-oop": []}
        assert client.progress_catalog(["java-oop"]) == {"java-oop": []}
