import mongomock
import pytest

from app import create_app
from config import TestingConfig
from utils.db import MongoStore

PHOTO_URL = "https://res.cloudinary.com/demo/image/upload/employees/photo.jpg"


class FakeUploader:
    """Stands in for Cloudinary and remembers what it was given."""

    def __init__(self, url=PHOTO_URL):
        self.url = url
        self.calls = []

    def __call__(self, payload):
        if hasattr(payload, "read"):
            payload = payload.read()
        self.calls.append(payload)
        return self.url


@pytest.fixture
def store():
    store = MongoStore(mongomock.MongoClient().db)
    store.ensure_indexes()
    return store


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
def app(store, uploader):
    return create_app(TestingConfig, store=store, uploader=uploader)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def employee_input():
    return {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane.doe@company.com",
        "gender": "Female",
        "designation": "Engineer",
        "salary": 5000.0,
        "date_of_joining": "2024-01-15",
        "department": "IT",
    }


@pytest.fixture
def signup_input():
    return {"username": "jdoe", "email": "JDoe@Company.com", "password": "secret123"}
