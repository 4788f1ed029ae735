"""
Seed Data Script - Sample content for a fresh database

Creates:
1. Categories
2. Topics (through topic_service, so every category's `topics` list is
   built by the same code path the API uses)
3. Subtopics (through subtopic_service upsert)

Usage:
    python -m byteforge.seeding.seed_data
"""
from typing import Dict, List

from sqlalchemy.orm import Session

from byteforge.database import SessionLocal, init_db
from byteforge.models import Category, SubTopic, Topic
from byteforge.schemas import CategoryCreate, SubTopicUpsert, TopicCreate
from byteforge.services import category_service, subtopic_service, topic_service


CATEGORIES = [
    {
        "id": "java-fundamentals",
        "title": "Java Fundamentals",
        "description": "Core Java: syntax, object orientation and the standard library",
        "icon": "code",
        "color": "#007396",
        "order": 1,
    },
    {
        "id": "web-development",
        "title": "Web Development",
        "description": "Master modern web development technologies",
        "icon": "globe",
        "color": "#61DAFB",
        "order": 2,
    },
    {
        "id": "data-science",
        "title": "Data Science",
        "description": "Explore data analysis and machine learning",
        "icon": "chart-bar",
        "color": "#FF6B6B",
        "order": 3,
    },
]

TOPICS = [
    {
        "id": "java-basics",
        "title": "Introduction to Java Programming",
        "description": "Learn the fundamentals of Java, from basic syntax to your first programs.",
        "level": "Beginner",
        "duration": "8 weeks",
        "category": "java-fundamentals",
        "prerequisites": [],
        "tags": ["java", "programming", "basics", "fundamentals"],
        "image": "https://example.com/java.jpg",
    },
    {
        "id": "java-oop",
        "title": "Object-Oriented Programming in Java",
        "description": "Classes, objects, inheritance and polymorphism in Java.",
        "level": "Intermediate",
        "duration": "6 weeks",
        "category": "java-fundamentals",
        "prerequisites": ["java-basics"],
        "tags": ["java", "oop", "classes", "objects", "inheritance"],
        "image": "https://example.com/java-oop.jpg",
    },
    {
        "id": "java-collections",
        "title": "Java Collections Framework",
        "description": "Use Lists, Sets, Maps and the other collection types effectively.",
        "level": "Intermediate",
        "duration": "4 weeks",
        "category": "java-fundamentals",
        "prerequisites": ["java-basics", "java-oop"],
        "tags": ["java", "collections", "data-structures", "lists", "maps"],
        "image": "https://example.com/java-collections.jpg",
    },
    {
        "id": "react-basics",
        "title": "React Fundamentals",
        "description": "Components, props, state and hooks.",
        "level": "Beginner",
        "duration": "6 weeks",
        "category": "web-development",
        "prerequisites": [],
        "tags": ["react", "javascript", "frontend", "web-development"],
        "image": "https://example.com/react.jpg",
    },
    {
        "id": "data-analysis",
        "title": "Data Analysis with Python",
        "description": "Data analysis with Pandas, NumPy and Matplotlib.",
        "level": "Beginner",
        "duration": "6 weeks",
        "category": "data-science",
        "prerequisites": [],
        "tags": ["python", "data-analysis", "pandas", "numpy", "matplotlib"],
        "image": "https://example.com/data-analysis.jpg",
    },
]


def _java_basics_page(subtopic_id: str, title: str, summary: str, code_title: str, code: str) -> dict:
    return {
        "subtopic_id": subtopic_id,
        "topic_id": "java-basics",
        "title": title,
        "description": summary,
        "estimated_time": "45 minutes",
        "content": [{"type": "text", "content": summary}],
        "code_examples": [
            {"title": code_title, "code": code, "language": "java", "description": summary},
        ],
        "resources": [
            {
                "title": "The Java Tutorials",
                "url": "https://docs.oracle.com/javase/tutorial/",
                "type": "documentation",
                "description": "Official Java tutorials",
                "level": "Beginner",
            },
        ],
        "quiz_questions": [],
    }


SUBTOPICS = [
    {
        "subtopic_id": "introduction",
        "topic_id": "java-basics",
        "title": "Getting Started with Java",
        "description": "Learn about Java basics and setup",
        "estimated_time": "2 hours",
        "content": [
            {"type": "text", "content": "Introduction to Java programming language and its features"},
            {"type": "text", "content": "Setting up Java Development Environment (JDK, IDE)"},
            {
                "type": "code",
                "language": "java",
                "content": 'System.out.println("Hello, World!");',
            },
        ],
        "code_examples": [
            {
                "title": "Hello World",
                "code": 'public class HelloWorld {\n    public static void main(String[] args) {\n        System.out.println("Hello, World!");\n    }\n}',
                "language": "java",
                "description": "A simple Java program that prints 'Hello, World!'",
            },
        ],
        "resources": [
            {
                "title": "Java Installation Guide",
                "url": "https://docs.oracle.com/javase/install/",
                "type": "tutorial",
                "description": "Step-by-step guide for installing Java",
                "level": "Beginner",
            },
        ],
        "quiz_questions": [
            {
                "question": "What is the main method in Java?",
                "options": [
                    "A method that runs when the program starts",
                    "A method that runs when the program ends",
                    "A method that runs when an error occurs",
                    "A method that runs when the program is paused",
                ],
                "correct_answer": 0,
                "explanation": "The main method is the entry point of a Java program",
                "difficulty": "easy",
                "time_limit": 30,
            },
            {
                "question": "Which of the following is a valid Java variable declaration?",
                "options": [
                    "int 123number = 42;",
                    "String my-text = 'Hello';",
                    "boolean is_valid = true;",
                    "double 3.14 = pi;",
                ],
                "correct_answer": 2,
                "explanation": "Variable names cannot start with a number or contain '-'",
                "difficulty": "medium",
                "time_limit": 45,
            },
        ],
    },
    _java_basics_page(
        "variables-and-types", "Variables and Data Types",
        "Primitive types, String and variable declarations",
        "Variables", 'int number = 42;\nString text = "Hello";\nboolean flag = true;',
    ),
    _java_basics_page(
        "control-flow", "Control Flow",
        "if/else, switch and loops",
        "Counting loop", "for (int i = 0; i < 3; i++) {\n    System.out.println(i);\n}",
    ),
    _java_basics_page(
        "methods", "Methods",
        "Declaring methods, parameters and return values",
        "A static method", "static int square(int x) {\n    return x * x;\n}",
    ),
    _java_basics_page(
        "arrays", "Arrays",
        "Creating, indexing and iterating arrays",
        "Array sum", "int[] values = {1, 2, 3};\nint sum = 0;\nfor (int v : values) sum += v;",
    ),
    {
        "subtopic_id": "classes-and-objects",
        "topic_id": "java-oop",
        "title": "Classes and Objects",
        "description": "Defining classes and creating objects",
        "estimated_time": "1 hour",
        "content": [
            {"type": "text", "content": "A class is a blueprint; an object is an instance of it."},
            {
                "type": "image",
                "content": "Class vs object diagram",
                "url": "https://example.com/class-object.png",
                "alt": "Class and object relationship",
            },
        ],
        "code_examples": [],
        "resources": [],
        "quiz_questions": [],
    },
    {
        "subtopic_id": "react-components",
        "topic_id": "react-basics",
        "title": "Introduction to React Components",
        "description": "Learn about React components and their lifecycle",
        "estimated_time": "3 hours",
        "content": [
            {"type": "text", "content": "Understanding React components and their importance"},
            {
                "type": "video",
                "content": "Components in 10 minutes",
                "url": "https://example.com/react-components.mp4",
                "caption": "Intro video",
            },
        ],
        "code_examples": [
            {
                "title": "Basic React Component",
                "code": "function Welcome(props) {\n    return <h1>Hello, {props.name}</h1>;\n}",
                "language": "jsx",
                "description": "A simple React functional component",
            },
        ],
        "resources": [
            {
                "title": "React Documentation",
                "url": "https://react.dev/learn",
                "type": "documentation",
                "description": "Official React documentation",
            },
        ],
        "quiz_questions": [
            {
                "question": "Which hook is used to manage state in functional components?",
                "options": ["useEffect", "useState", "useContext", "useReducer"],
                "correct_answer": 1,
                "explanation": "useState adds state to functional components",
                "difficulty": "medium",
                "time_limit": 45,
            },
        ],
    },
]


def static_catalog() -> Dict[str, List[str]]:
    """Topic id -> subtopic ids of the bundled content, for offline progress tracking"""
    catalog = {topic["id"]: [] for topic in TOPICS}
    for subtopic in SUBTOPICS:
        catalog.setdefault(subtopic["topic_id"], []).append(subtopic["subtopic_id"])
    return catalog


def clear_existing_data(db: Session):
    """Delete all content rows"""
    print("🗑️  Clearing existing data...")

    db.query(SubTopic).delete()
    db.query(Topic).delete()
    db.query(Category).delete()

    db.commit()
    print("✅ Cleared existing data")


def seed_categories(db: Session) -> List[Category]:
    print("\n📂 Creating Categories...")
    categories = []
    for data in CATEGORIES:
        category = category_service.create(db, CategoryCreate.model_validate(data).model_dump(mode="json"))
        categories.append(category)
        print(f"  ✅ {category.id}: {category.title}")
    return categories


def seed_topics(db: Session) -> List[Topic]:
    print("\n📚 Creating Topics...")
    results = topic_service.create_many(db, [TopicCreate.model_validate(t).model_dump(mode="json") for t in TOPICS])
    for topic in results["created"]:
        print(f"  ✅ {topic.id} → {topic.category}")
    for error in results["errors"]:
        print(f"  ⚠️ {error['id']}: {error['error']}")
    return results["created"]


def seed_subtopics(db: Session) -> int:
    print("\n📝 Creating Subtopics...")
    for data in SUBTOPICS:
        payload = SubTopicUpsert.model_validate(data).model_dump(mode="json")
        result = subtopic_service.upsert(db, data["topic_id"], payload)
        print(f"  ✅ {result.subtopic.topic_id}/{result.subtopic.subtopic_id}")
    return len(SUBTOPICS)


def run_seed(db: Session):
    """Clear and reseed all content in one session"""
    clear_existing_data(db)
    categories = seed_categories(db)
    topics = seed_topics(db)
    subtopic_count = seed_subtopics(db)
    return {"categories": len(categories), "topics": len(topics), "subtopics": subtopic_count}


def main():
    """Entry point for `python -m byteforge.seeding.seed_data`"""
    print("=" * 60)
    print("🌱 SEEDING DATABASE WITH SAMPLE DATA")
    print("=" * 60)

    init_db()
    db = SessionLocal()

    try:
        summary = run_seed(db)

        print("\n" + "=" * 60)
        print("✅ SEEDING COMPLETED SUCCESSFULLY!")
        print("=" * 60)

        print("\n📊 Summary:")
        print(f"  - Categories: {summary['categories']}")
        print(f"  - Topics: {summary['topics']}")
        print(f"  - Subtopics: {summary['subtopics']}")

    except Exception as e:
        print(f"\n❌ Error during seeding: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
