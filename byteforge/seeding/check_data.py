"""
Check Data Script - Print the content currently in the database

Usage:
    python -m byteforge.seeding.check_data
"""
from byteforge.database import SessionLocal
from byteforge.services import category_service, subtopic_service, topic_service


def main():
    db = SessionLocal()

    try:
        print("\n=== CATEGORIES ===")
        categories = category_service.list(db)
        print(f"Found {len(categories)} categories:")
        for category in categories:
            print(f"- {category.title} (ID: {category.id}, topics: {', '.join(category.topics or []) or '-'})")

        print("\n=== TOPICS ===")
        topics = topic_service.list(db)
        print(f"Found {len(topics)} topics:")
        for topic in topics:
            print(f"- {topic.title} (ID: {topic.id}, Category: {topic.category})")

        print("\n=== SUBTOPICS ===")
        subtopics = subtopic_service.list(db)
        print(f"Found {len(subtopics)} subtopics:")
        for subtopic in subtopics:
            print(f"- {subtopic.title} (ID: {subtopic.subtopic_id}, Topic: {subtopic.topic_id})")
    finally:
        db.close()


if __name__ == "__main__":
    main()
