#!/usr/bin/env python3
"""
Database setup script.
Creates the users, questions and notifications tables without Alembic.
"""
import os
import sys
import psycopg2
import logging

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from app.config import get_settings

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SCHEMA_SQL = """
    CREATE TABLE IF NOT EXISTS users (
        id SERIAL PRIMARY KEY,
        username TEXT NOT NULL UNIQUE,
        email TEXT NOT NULL UNIQUE,
        hashed_password TEXT NOT NULL,
        bio TEXT,
        location TEXT,
        profile_image TEXT,
        created_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP
    );

    -- answers holds the ordered answer documents, each with its own comments
    CREATE TABLE IF NOT EXISTS questions (
        id SERIAL PRIMARY KEY,
        title TEXT NOT NULL,
        description TEXT NOT NULL,
        tags TEXT[] NOT NULL DEFAULT '{}',
        author TEXT,
        answers JSONB NOT NULL DEFAULT '[]'::jsonb,
        created_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP
    );

    CREATE TABLE IF NOT EXISTS notifications (
        id SERIAL PRIMARY KEY,
        user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
        type TEXT NOT NULL CHECK (type IN ('answer', 'comment', 'mention')),
        related_id TEXT,
        message TEXT,
        read BOOLEAN NOT NULL DEFAULT FALSE,
        created_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP
    );

    CREATE INDEX IF NOT EXISTS idx_users_email ON users(email);
    CREATE INDEX IF NOT EXISTS idx_questions_created_at ON questions(created_at);
    CREATE INDEX IF NOT EXISTS idx_questions_tags ON questions USING GIN(tags);
    CREATE INDEX IF NOT EXISTS idx_notifications_user_id ON notifications(user_id, created_at DESC);
"""


def create_tables(conn_params):
    """Create database tables."""
    try:
        conn = psycopg2.connect(**conn_params)
        cur = conn.cursor()

        logger.info("Creating database tables...")
        cur.execute(SCHEMA_SQL)

        conn.commit()
        cur.close()
        conn.close()

        logger.info("Database tables created successfully")

    except psycopg2.Error as e:
        logger.error(f"Database setup failed: {e}")
        sys.exit(1)


def main():
    """Main function to set up the database."""
    logger.info("Setting up database for StackIt API...")
    create_tables(get_settings().db_config)
    logger.info("Database setup completed successfully!")


if __name__ == "__main__":
    main()
