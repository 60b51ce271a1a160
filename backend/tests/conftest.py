"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or model server
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("OLLAMA_BASE_URL", "http://ollama.invalid:11434")
os.environ.setdefault("LOG_FORMAT", "text")
