"""Root conftest: shared test configuration."""

import os

# Tests never follow a developer's .env into live mode
os.environ.setdefault("MOCK_ENABLED", "true")
os.environ.setdefault("LOG_FORMAT", "text")
