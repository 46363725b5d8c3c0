"""
Shared pytest fixtures for Milk Tracker tests.
"""

import pytest
import os
import sys
from unittest.mock import MagicMock, patch

# Ensure the project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import Config


def make_test_config(**overrides):
    """Build a config class backed by a throwaway SQLite file unless overridden."""
    attrs = {
        'SECRET_KEY': 'test-secret-key-for-testing-only',
        'TESTING': True,
        'DATABASE_BACKEND': 'sqlite',
    }
    attrs.update(overrides)
    return type('TestConfig', (Config,), attrs)


def make_mock_connection():
    """Create a mock MySQL connection and cursor."""
    conn = MagicMock()
    cursor = MagicMock()
    conn.cursor.return_value = cursor
    return conn, cursor


def login_session(client):
    """Helper to set up a logged-in session."""
    with client.session_transaction() as sess:
        sess['logged_in'] = True


@pytest.fixture
def app(tmp_path):
    """Create application backed by a temporary SQLite database."""
    from app import create_app
    application = create_app(config_class=make_test_config(SQLITE_PATH=str(tmp_path / 'milk_test.db')))
    yield application


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def logged_in_client(client):
    """Client whose session has passed the PIN gate."""
    login_session(client)
    return client


@pytest.fixture
def mysql_app():
    """Application on the MySQL backend with the connection pool mocked out."""
    from app import create_app
    config = make_test_config(
        DATABASE_BACKEND='mysql',
        MYSQL_HOST='db.example.com',
        MYSQL_USER='milk',
        MYSQL_PASSWORD='secret',
        MYSQL_DATABASE='milk_tracker',
    )
    with patch('db.pooling.MySQLConnectionPool') as pool_cls:
        application = create_app(config_class=config)
        application.db.schema_ready = True
        yield application, pool_cls


@pytest.fixture
def mock_db(mysql_app):
    """Provide mock MySQL connection and cursor handed out by the pool."""
    application, pool_cls = mysql_app
    conn, cursor = make_mock_connection()
    pool_cls.return_value.get_connection.return_value = conn
    return conn, cursor


@pytest.fixture
def app_factory():
    """Build an application from config overrides."""
    from app import create_app

    def factory(**overrides):
        return create_app(config_class=make_test_config(**overrides))
    return factory
