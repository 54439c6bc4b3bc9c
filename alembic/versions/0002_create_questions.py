"""Create questions table with embedded answers

Revision ID: 0002_create_questions
Revises: 0001_create_users
Create Date: 2026-10-19
"""
from alembic import op

revision = '0002_create_questions'
down_revision = '0001_create_users'
branch_labels = None
depends_on = None

def upgrade():
    # answers holds the ordered answer documents, each with its own comments
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS questions (
            id SERIAL PRIMARY KEY,
            title TEXT NOT NULL,
            description TEXT NOT NULL,
            tags TEXT[] NOT NULL DEFAULT '{}',
            author TEXT,
            answers JSONB NOT NULL DEFAULT '[]'::jsonb,
            created_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP
        );
        CREATE INDEX IF NOT EXISTS idx_questions_created_at ON questions(created_at);
        CREATE INDEX IF NOT EXISTS idx_questions_tags ON questions USING GIN(tags);
        """
    )

def downgrade():
    op.execute(
        """
        DROP TABLE IF EXISTS questions;
        """
    )
