"""create content tables

Revision ID: 3f2a9c1e7b40
Revises: 
Create Date: 2026-10-19 20:40:00.000000

Categories, topics and subtopics. Cross-references (category.topics,
topic.category, subtopic.topic_id) are business keys kept in sync by the
services, so there are no foreign keys.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql

# Microsecond timestamps for topic and subtopic ordering
PRECISE_DATETIME = sa.DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")

# revision identifiers, used by Alembic.
revision: str = '3f2a9c1e7b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create categories, topics and subtopics"""
    op.create_table(
        'categories',
        sa.Column('pk', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('id', sa.String(100), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('icon', sa.String(100), nullable=False),
        sa.Column('color', sa.String(50), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('topics', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('ix_categories_id', 'categories', ['id'], unique=True)
    op.create_index('ix_categories_order', 'categories', ['order'])

    op.create_table(
        'topics',
        sa.Column('pk', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('id', sa.String(100), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('level', sa.Enum('Beginner', 'Intermediate', 'Advanced', name='topiclevel'), nullable=False),
        sa.Column('duration', sa.String(100), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('prerequisites', sa.JSON(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('image', sa.String(500), nullable=False),
        sa.Column('created_at', PRECISE_DATETIME, nullable=True),
        sa.Column('updated_at', PRECISE_DATETIME, nullable=True),
    )
    op.create_index('ix_topics_id', 'topics', ['id'], unique=True)
    op.create_index('ix_topics_level', 'topics', ['level'])
    op.create_index('ix_topics_category', 'topics', ['category'])
    op.create_index('ix_topics_updated_at', 'topics', ['updated_at'])

    op.create_table(
        'subtopics',
        sa.Column('pk', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('subtopic_id', sa.String(100), nullable=False),
        sa.Column('topic_id', sa.String(100), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('estimated_time', sa.String(100), nullable=False),
        sa.Column('content', sa.JSON(), nullable=False),
        sa.Column('code_examples', sa.JSON(), nullable=False),
        sa.Column('resources', sa.JSON(), nullable=False),
        sa.Column('quiz_questions', sa.JSON(), nullable=False),
        sa.Column('created_at', PRECISE_DATETIME, nullable=True),
        sa.Column('updated_at', PRECISE_DATETIME, nullable=True),
        sa.UniqueConstraint('topic_id', 'subtopic_id', name='uq_subtopics_topic_subtopic'),
    )
    op.create_index('ix_subtopics_subtopic_id', 'subtopics', ['subtopic_id'], unique=True)
    op.create_index('ix_subtopics_topic_id', 'subtopics', ['topic_id'])


def downgrade() -> None:
    """Drop the content tables"""
    op.drop_index('ix_subtopics_topic_id', table_name='subtopics')
    op.drop_index('ix_subtopics_subtopic_id', table_name='subtopics')
    op.drop_table('subtopics')

    op.drop_index('ix_topics_updated_at', table_name='topics')
    op.drop_index('ix_topics_category', table_name='topics')
    op.drop_index('ix_topics_level', table_name='topics')
    op.drop_index('ix_topics_id', table_name='topics')
    op.drop_table('topics')

    op.drop_index('ix_categories_order', table_name='categories')
    op.drop_index('ix_categories_id', table_name='categories')
    op.drop_table('categories')
