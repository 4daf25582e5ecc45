"""Pytest configuration and shared fixtures."""

# Load environment variables from .env file at test startup so Settings
# picks up any CONTENT_STORE_* overrides before fixtures are created
from dotenv import load_dotenv
load_dotenv()

pytest_plugins = [
    "tests.fixtures.store",
    "tests.fixtures.api",
]
