import os
import tempfile

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_wanrun.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["SECRET_KEY"] = "test-secret-key-min-32-characters-long-for-testing"
os.environ["ALGORITHM"] = "HS256"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["CHECKIN_TIMEZONE"] = "Asia/Tokyo"
os.environ["MAX_BATCH_SIZE"] = "20"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session

from wanrun.main import app
from wanrun.core.security import create_access_token
from wanrun.identity import Identity
from wanrun.db.models.dog import Dog as DogModel
from wanrun.db.models.dog_owner import DogOwner as DogOwnerModel
from wanrun.db.models.dogrun import Dogrun as DogrunModel


def _save(db: Session, instance):
    """Persist a seed row and return it refreshed."""
    db.add(instance)
    db.commit()
    db.refresh(instance)
    return instance


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    # Use a temporary file for SQLite database
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        # Dispose the engine to close all connections
        test_engine.dispose()

        # Clean up - remove test database file and WAL files
        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from wanrun.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def owner(db: Session) -> dict:
    """The authenticated dog owner used by most tests."""
    dog_owner = _save(db, DogOwnerModel(name="Hanako", email="hanako@example.com"))
    return {"id": dog_owner.id, "name": dog_owner.name}


@pytest.fixture(scope="function")
def other_owner(db: Session) -> dict:
    """A second dog owner, used to check ownership rules."""
    dog_owner = _save(db, DogOwnerModel(name="Taro", email="taro@example.com"))
    return {"id": dog_owner.id, "name": dog_owner.name}


@pytest.fixture(scope="function")
def owner_token(owner: dict) -> str:
    return create_access_token(data={"sub": owner["id"]})


@pytest.fixture(scope="function")
def auth_headers(owner_token: str) -> dict:
    return {"Authorization": f"Bearer {owner_token}"}


@pytest.fixture(scope="function")
def owner_identity(owner: dict) -> Identity:
    return Identity(dog_owner_id=owner["id"])


@pytest.fixture(scope="function")
def dogruns(db: Session) -> list[int]:
    """Three stored dogruns, returned as IDs."""
    return [
        _save(db, DogrunModel(name="Yoyogi Park Dogrun", place_id="place-yoyogi")).id,
        _save(db, DogrunModel(name="Komazawa Dogrun", place_id="place-komazawa")).id,
        _save(db, DogrunModel(name="Kinuta Dogrun")).id,
    ]


@pytest.fixture(scope="function")
def owner_dogs(db: Session, owner: dict) -> list[int]:
    """Two dogs owned by ``owner``."""
    return [
        _save(db, DogModel(dog_owner_id=owner["id"], name="Pochi")).id,
        _save(db, DogModel(dog_owner_id=owner["id"], name="Hachi")).id,
    ]


@pytest.fixture(scope="function")
def other_dog(db: Session, other_owner: dict) -> int:
    """A dog owned by ``other_owner``."""
    return _save(db, DogModel(dog_owner_id=other_owner["id"], name="Shiro")).id
