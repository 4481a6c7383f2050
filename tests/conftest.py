import os
import tempfile
from pathlib import Path

import pytest

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix='skillswap-tests-'))
TEST_DB_URL = os.getenv("TEST_DB_URL", f"sqlite:///{_TEST_DB_DIR / 'test.db'}")
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ.setdefault("SECRET_KEY", "test-secret")

from sqlmodel import Session  # noqa: E402

from app.core.config import settings  # noqa: E402
from app.db.init_db import init_db  # noqa: E402
from app.db.session import engine  # noqa: E402

settings.DATABASE_URL = TEST_DB_URL


@pytest.fixture(autouse=True)
def _reset_database():
    init_db(drop_all=True)
    yield


@pytest.fixture
def session():
    with Session(engine) as db_session:
        yield db_session
