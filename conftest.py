"""
Shared pytest fixtures

The app engine is pointed at an in-memory SQLite database (single shared
connection) before anything from byteforge is imported, so every test runs
against a fresh schema without a MySQL server.
"""
import os

os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from byteforge import models  # noqa: E402,F401
from byteforge.database import Base, SessionLocal, engine, get_db  # noqa: E402
from byteforge.main import app  # noqa: E402


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test"""
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database session override"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def category_payload():
    return {
        "id": "java-fundamentals",
        "title": "Java Fundamentals",
        "description": "Core Java",
        "icon": "code",
        "color": "#007396",
        "order": 1,
    }


@pytest.fixture
def topic_payload():
    return {
        "id": "java-basics",
        "title": "Introduction to Java Programming",
        "description": "Java from scratch",
        "level": "Beginner",
        "duration": "8 weeks",
        "category": "java-fundamentals",
        "prerequisites": [],
        "tags": ["java", "basics"],
        "image": "https://example.com/java.jpg",
    }


@pytest.fixture
def subtopic_payload():
    return {
        "subtopicId": "introduction",
        "title": "Getting Started with Java",
        "description": "Learn about Java basics and setup",
        "estimatedTime": "2 hours",
        "content": [
            {"type": "text", "content": "Java runs on the JVM"},
            {"type": "code", "content": 'System.out.println("Hi");', "language": "java"},
        ],
        "codeExamples": [
            {"title": "Hello", "code": "class A {}", "language": "java", "description": "Smallest class"},
        ],
        "resources": [
            {"title": "Docs", "url": "https://docs.oracle.com", "type": "documentation"},
        ],
        "quizQuestions": [
            {
                "question": "Entry point of a Java program?",
                "options": ["main", "start", "run"],
                "correctAnswer": 0,
                "explanation": "public static void main",
                "difficulty": "easy",
                "timeLimit": 30,
            },
        ],
    }


@pytest.fixture
def seeded_category(client, category_payload):
    response = client.post("/categories", json=category_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def seeded_topic(client, seeded_category, topic_payload):
    response = client.post("/topics", json=topic_payload)
    assert response.status_code == 201
    return response.json()
