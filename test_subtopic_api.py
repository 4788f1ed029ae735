"""
Test suite for SubTopic API endpoints

Tests:
1. POST /topics/{topicId}/subtopics - create-or-update on subtopicId
2. GET /topics/{topicId}/subtopics and /topics/{topicId}/subtopics/{id}
3. GET/PUT/DELETE /topics/subtopics/{id}
4. Nested document validation (quiz answers, content block types)

Running tests:
    pytest test_subtopic_api.py -v
"""
from byteforge.models import SubTopic


class TestUpsertSubtopic:
    def test_create(self, client, seeded_topic, subtopic_payload):
        response = client.post("/topics/java-basics/subtopics", json=subtopic_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Subtopic created successfully"
        subtopic = data["subtopic"]
        assert subtopic["subtopicId"] == "introduction"
        assert subtopic["topicId"] == "java-basics"
        assert subtopic["content"][1]["language"] == "java"
        assert subtopic["quizQuestions"][0]["correctAnswer"] == 0
        assert subtopic["codeExamples"][0]["title"] == "Hello"

    def test_second_post_updates(self, client, seeded_topic, subtopic_payload):
        client.post("/topics/java-basics/subtopics", json=subtopic_payload)

        response = client.post(
            "/topics/java-basics/subtopics",
            json=dict(subtopic_payload, title="Getting Started, revised")
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Subtopic updated successfully"
        assert response.json()["subtopic"]["title"] == "Getting Started, revised"

        listed = client.get("/topics/java-basics/subtopics").json()
        assert len(listed) == 1
        assert listed[0]["title"] == "Getting Started, revised"

    def test_partial_repost_keeps_nested_lists(self, client, seeded_topic, subtopic_payload):
        client.post("/topics/java-basics/subtopics", json=subtopic_payload)

        response = client.post("/topics/java-basics/subtopics", json={
            "subtopicId": "introduction",
            "title": "Getting Started, short",
            "description": "Only the basics",
            "estimatedTime": "1 hour",
        })

        assert response.status_code == 201
        subtopic = response.json()["subtopic"]
        assert subtopic["title"] == "Getting Started, short"
        assert len(subtopic["content"]) == 2
        assert len(subtopic["codeExamples"]) == 1
        assert len(subtopic["resources"]) == 1
        assert subtopic["quizQuestions"][0]["correctAnswer"] == 0

    def test_create_without_lists(self, client, seeded_topic):
        response = client.post("/topics/java-basics/subtopics", json={
            "subtopicId": "variables",
            "title": "Variables",
            "description": "Declaring variables",
            "estimatedTime": "30 minutes",
        })

        assert response.status_code == 201
        subtopic = response.json()["subtopic"]
        assert subtopic["content"] == []
        assert subtopic["quizQuestions"] == []

    def test_unknown_topic_writes_nothing(self, client, seeded_category, subtopic_payload, db_session):
        response = client.post("/topics/missing/subtopics", json=subtopic_payload)

        assert response.status_code == 404
        assert response.json()["error"] == "Topic with ID missing not found"
        assert db_session.query(SubTopic).count() == 0

    def test_upsert_moves_subtopic(self, client, seeded_topic, topic_payload, subtopic_payload):
        client.post("/topics", json=dict(topic_payload, id="java-oop", title="OOP"))
        client.post("/topics/java-basics/subtopics", json=subtopic_payload)

        client.post("/topics/java-oop/subtopics", json=subtopic_payload)

        assert client.get("/topics/java-basics/subtopics").json() == []
        assert [s["subtopicId"] for s in client.get("/topics/java-oop/subtopics").json()] == ["introduction"]

    def test_missing_fields(self, client, seeded_topic):
        response = client.post("/topics/java-basics/subtopics", json={"subtopicId": "introduction"})

        assert response.status_code == 400
        assert response.json()["error"].startswith("Missing required fields")

    def test_correct_answer_out_of_range(self, client, seeded_topic, subtopic_payload, db_session):
        bad = dict(subtopic_payload)
        bad["quizQuestions"] = [{"question": "Pick one", "options": ["a", "b"], "correctAnswer": 2}]

        response = client.post("/topics/java-basics/subtopics", json=bad)

        assert response.status_code == 400
        assert db_session.query(SubTopic).count() == 0

    def test_unknown_content_type(self, client, seeded_topic, subtopic_payload):
        bad = dict(subtopic_payload, content=[{"type": "audio", "content": "..."}])

        response = client.post("/topics/java-basics/subtopics", json=bad)
        assert response.status_code == 400


class TestReadSubtopics:
    def test_list_for_topic_without_subtopics(self, client, seeded_topic):
        response = client.get("/topics/java-basics/subtopics")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_for_unknown_topic(self, client):
        response = client.get("/topics/missing/subtopics")
        assert response.status_code == 404

    def test_get_for_topic(self, client, seeded_topic, subtopic_payload):
        client.post("/topics/java-basics/subtopics", json=subtopic_payload)

        response = client.get("/topics/java-basics/subtopics/introduction")
        assert response.status_code == 200
        assert response.json()["title"] == "Getting Started with Java"

    def test_get_for_wrong_topic(self, client, seeded_topic, topic_payload, subtopic_payload):
        client.post("/topics", json=dict(topic_payload, id="java-oop", title="OOP"))
        client.post("/topics/java-basics/subtopics", json=subtopic_payload)

        response = client.get("/topics/java-oop/subtopics/introduction")
        assert response.status_code == 404
        assert response.json()["error"] == "Subtopic with ID introduction not found"

    def test_get_by_own_id(self, client, seeded_topic, subtopic_payload):
        client.post("/topics/java-basics/subtopics", json=subtopic_payload)

        response = client.get("/topics/subtopics/introduction")
        assert response.status_code == 200
        assert response.json()["topicId"] == "java-basics"

        assert client.get("/topics/subtopics/missing").status_code == 404

    def test_list_all(self, client, seeded_topic, subtopic_payload):
        client.post("/topics/java-basics/subtopics", json=subtopic_payload)
        client.post("/topics/java-basics/subtopics", json=dict(subtopic_payload, subtopicId="variables"))

        response = client.get("/topics/subtopics")
        assert response.status_code == 200
        assert sorted(s["subtopicId"] for s in response.json()) == ["introduction", "variables"]


class TestUpdateDeleteSubtopic:
    def test_update(self, client, seeded_topic, subtopic_payload):
        client.post("/topics/java-basics/subtopics", json=subtopic_payload)

        response = client.put("/topics/subtopics/introduction", json={"estimatedTime": "3 hours"})

        assert response.status_code == 200
        data = response.json()
        assert data["estimatedTime"] == "3 hours"
        assert data["title"] == "Getting Started with Java"

    def test_delete(self, client, seeded_topic, subtopic_payload):
        client.post("/topics/java-basics/subtopics", json=subtopic_payload)

        response = client.delete("/topics/subtopics/introduction")

        assert response.status_code == 200
        assert response.json()["message"] == "Subtopic deleted successfully"
        assert client.get("/topics/java-basics/subtopics").json() == []

    def test_delete_not_found(self, client):
        response = client.delete("/topics/subtopics/missing")
        assert response.status_code == 404
