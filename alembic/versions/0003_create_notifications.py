"""Create notifications table

Revision ID: 0003_create_notifications
Revises: 0002_create_questions
Create Date: 2026-10-19
"""
from alembic import op

revision = '0003_create_notifications'
down_revision = '0002_create_questions'
branch_labels = None
depends_on = None

def upgrade():
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS notifications (
            id SERIAL PRIMARY KEY,
            user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            type TEXT NOT NULL CHECK (type IN ('answer', 'comment', 'mention')),
            related_id TEXT,
            message TEXT,
            read BOOLEAN NOT NULL DEFAULT FALSE,
            created_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP
        );
        CREATE INDEX IF NOT EXISTS idx_notifications_user_id ON notifications(user_id, created_at DESC);
        """
    )

def downgrade():
    op.execute(
        """
        DROP TABLE IF EXISTS notifications;
        """
    )
