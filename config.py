import os

from dotenv import load_dotenv

# Read a local .env file if there is one
load_dotenv()


class Config:
    DEBUG = bool(int(os.environ.get("DEBUG", "0")))
    TESTING = False

    PORT = int(os.environ.get("PORT", "4000"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # MongoDB
    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/employee_management")

    # Cloudinary
    CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET")
    CLOUDINARY_FOLDER = os.environ.get("CLOUDINARY_FOLDER", "employees")

    # Upload size limit for /api/upload
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024


class TestingConfig(Config):
    TESTING = True
    MONGO_URI = "mongodb://localhost:27017/employee_management_test"
    LOG_LEVEL = "WARNING"
