from utils.auth import hash_password, verify_password
from utils.datetime_utils import utcnow


class User:

    COLLECTION = "users"

    def __init__(self, username, email, password):
        self.username = (username or "").strip()
        self.email = (email or "").strip().lower()
        self.password = hash_password(password)
        self.created_at = utcnow()
        self.updated_at = self.created_at

    # Convert to dictionary for MongoDB
    def to_dict(self):
        return {
            "username": self.username,
            "email": self.email,
            "password": self.password,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }

    # Save new user, returns the stored document without the password
    def save(self, store):
        return User.public(store.create(User.COLLECTION, self.to_dict()))

    # Find user by username, or by email compared in lowercase
    @staticmethod
    def find_by_identifier(store, identifier):
        identifier = (identifier or "").strip()
        return store.find_one(User.COLLECTION, {
            "$or": [{"username": identifier}, {"email": identifier.lower()}]
        })

    # Verify password against the stored hash
    @staticmethod
    def check_password(user, password):
        return verify_password(user.get("password"), password)

    # Replace the password hash, e.g. after a reset
    @staticmethod
    def set_password(store, user_id, password):
        return User.public(store.update_by_id(User.COLLECTION, user_id, {
            "password": hash_password(password),
            "updated_at": utcnow()
        }))

    # Strip the password hash before the user leaves the server
    @staticmethod
    def public(document):
        if document is None:
            return None
        user = {k: v for k, v in document.items() if k != "password"}
        user["_id"] = str(user["_id"])
        return user
