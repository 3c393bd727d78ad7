import os

import pytest

# Use in-memory sqlite for tests; must be set before app.db is imported
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")


@pytest.fixture
def client():
    from fastapi.testclient import TestClient  # noqa: WPS433
    from app.main import app  # noqa: WPS433
    from app.db import Base, engine  # noqa: WPS433

    # Fresh tables per test
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())

    return TestClient(app)
