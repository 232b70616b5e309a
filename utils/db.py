"""
utils/db.py
-----------------
This module initializes the MongoDB connection for the Flask application
and exposes MongoStore, the store object every operation receives.
"""

import logging
import re

from bson import ObjectId
from bson.errors import InvalidId
from flask_pymongo import PyMongo
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from utils.errors import ConflictError, UpstreamError

logger = logging.getLogger(__name__)

# Create a global MongoDB instance
mongo = PyMongo()

DUPLICATE_KEY_CODE = 11000

# Unique fields per collection, in the order conflicts are reported
UNIQUE_FIELDS = {
    "users": ("username", "email"),
    "employees": ("email",),
}

NEWEST_FIRST = [("created_at", DESCENDING), ("_id", DESCENDING)]

_INDEX_IN_MESSAGE = re.compile(r"index:\s+(?:\S+\.\$)?(\w+?)_-?1")


def to_object_id(value):
    """Return an ObjectId for `value`, or None when it is not a valid id."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


class MongoStore:
    """CRUD access to the users and employees collections."""

    def __init__(self, db):
        self.db = db

    def collection(self, name):
        return self.db[name]

    def ensure_indexes(self):
        for name, fields in UNIQUE_FIELDS.items():
            for field in fields:
                self.collection(name).create_index([(field, ASCENDING)], unique=True)

    # -------------------------------------------------------------
    # READ
    # -------------------------------------------------------------
    def find(self, name, filter=None, sort=None):
        cursor = self.collection(name).find(filter or {})
        if sort:
            cursor = cursor.sort(sort)
        return list(cursor)

    def find_one(self, name, filter):
        return self.collection(name).find_one(filter)

    def find_by_id(self, name, document_id):
        oid = to_object_id(document_id)
        if oid is None:
            return None
        return self.collection(name).find_one({"_id": oid})

    # -------------------------------------------------------------
    # WRITE
    # -------------------------------------------------------------
    def create(self, name, document):
        try:
            result = self.collection(name).insert_one(dict(document))
        except PyMongoError as err:
            raise self.classify_error(err, name, document) from err
        return self.collection(name).find_one({"_id": result.inserted_id})

    def update_by_id(self, name, document_id, changes):
        oid = to_object_id(document_id)
        if oid is None:
            return None
        try:
            return self.collection(name).find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as err:
            raise self.classify_error(err, name, changes, exclude_id=oid) from err

    def delete_by_id(self, name, document_id):
        oid = to_object_id(document_id)
        if oid is None:
            return None
        try:
            return self.collection(name).find_one_and_delete({"_id": oid})
        except PyMongoError as err:
            raise self.classify_error(err, name) from err

    # -------------------------------------------------------------
    # ERRORS
    # -------------------------------------------------------------
    def classify_error(self, err, name=None, attempted=None, exclude_id=None):
        """
        Map a driver error to ConflictError(field) or UpstreamError.
        Missing documents are not errors here: the by-id methods return
        None for them. The conflicting field comes from the error details
        when the server sends them, then from the index name in the
        message, then by probing the collection's unique fields.
        """
        is_duplicate = isinstance(err, DuplicateKeyError) or getattr(err, "code", None) == DUPLICATE_KEY_CODE
        if not is_duplicate:
            return UpstreamError(err)

        details = getattr(err, "details", None) or {}
        keys = list(details.get("keyPattern") or details.get("keyValue") or {})
        if keys:
            return ConflictError(keys[0])

        match = _INDEX_IN_MESSAGE.search(str(err))
        if match:
            return ConflictError(match.group(1))

        field = self._probe_conflict(name, attempted or {}, exclude_id)
        return ConflictError(field or "field")

    def _probe_conflict(self, name, attempted, exclude_id):
        for field in UNIQUE_FIELDS.get(name, ()):
            if field not in attempted:
                continue
            query = {field: attempted[field]}
            if exclude_id is not None:
                query["_id"] = {"$ne": exclude_id}
            if self.collection(name).find_one(query) is not None:
                return field
        return None


def init_db_connection(app):
    """
    Initialize MongoDB connection with Flask app.
    Loads settings from config.py (like MONGO_URI).
    """
    mongo.init_app(app)
    store = MongoStore(mongo.db)
    store.ensure_indexes()

    logger.info("MongoDB connection initialized for %s", mongo.db.name)
    return store
