"""Create users table

Revision ID: 0001_create_users
Revises: 
Create Date: 2026-10-19
"""
from alembic import op

revision = '0001_create_users'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    # Idempotent raw SQL to allow re-run without failure
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS users (
            id SERIAL PRIMARY KEY,
            username TEXT NOT NULL UNIQUE,
            email TEXT NOT NULL UNIQUE,
            hashed_password TEXT NOT NULL,
            bio TEXT,
            location TEXT,
            profile_image TEXT,
            created_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP
        );
        CREATE INDEX IF NOT EXISTS idx_users_email ON users(email);
        """
    )

def downgrade():
    op.execute(
        """
        DROP TABLE IF EXISTS users;
        """
    )
