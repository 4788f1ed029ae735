"""
ByteForge content backend - categories, topics, subtopics and learner progress
"""
