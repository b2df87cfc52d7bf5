"""Shared test configuration and fixtures for Training Signup tests"""

import logging

import pytest
from fastapi.testclient import TestClient

from tests.config import test_config
from training_signup.backends.change_feed import InMemoryChangeFeed
from training_signup.main import create_app
from training_signup.models.database import create_db_engine
from training_signup.models.registration import TrainingRegistration
from training_signup.services.registration_store import RegistrationStore, StoreError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class RecordingStore:
    """Store double that keeps every create call in memory"""

    def __init__(self):
        self.created = []

    def create(self, submission):
        self.created.append(submission)
        return TrainingRegistration(**submission.to_record_fields())


class FailingStore:
    """Store double whose every operation fails like an unreachable database"""

    def __init__(self):
        self.change_feed = InMemoryChangeFeed()
        self.create_calls = 0

    def create(self, submission):
        self.create_calls += 1
        raise StoreError("Failed to create registration")

    def list_all(self):
        raise StoreError("Failed to list registrations")

    def ping(self):
        raise StoreError("Database unreachable")

    def subscribe(self):
        return self.change_feed.subscribe()


@pytest.fixture
def change_feed():
    return InMemoryChangeFeed()


@pytest.fixture
def store(change_feed):
    """RegistrationStore over a fresh in-memory SQLite database"""
    engine = create_db_engine(test_config["database_url"])
    registration_store = RegistrationStore(engine, change_feed)
    registration_store.create_tables()

    yield registration_store

    engine.dispose()


@pytest.fixture
def recording_store():
    return RecordingStore()


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def client(store):
    """Test client for an app wired to the in-memory store"""
    app = create_app(test_config, store=store)
    return TestClient(app)


@pytest.fixture
def failing_client(failing_store):
    """Test client for an app whose store is unreachable"""
    app = create_app(test_config, store=failing_store)
    return TestClient(app)
