import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    # Flask
    DEBUG = os.getenv("FLASK_DEBUG", "0") == "1"
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # CORS
    CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "*")

    # Sample records loaded on startup
    SEED_DATA = os.getenv("SEED_DATA", "1") == "1"

    # Fallback for /api/test/delay when ?ms is missing or unusable
    DEFAULT_DELAY_MS = int(os.getenv("DEFAULT_DELAY_MS", "1000"))


class TestConfig(Config):
    __test__ = False

    TESTING = True
    DEBUG = False
    LOG_LEVEL = "WARNING"
    SEED_DATA = True
