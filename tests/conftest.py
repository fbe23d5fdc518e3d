import os
import tempfile

_TMP = tempfile.mkdtemp(prefix="apego-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP, 'apego.db')}"
os.environ["UPLOAD_FOLDER"] = os.path.join(_TMP, "uploads")
os.environ["PRICING_MODE"] = "mensal"

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from database import Base, build_engine, get_db
from main import app
from repository import property_repository
from routers.auth import AuthContext, require_admin
from storage import UploadStorage, get_storage


@pytest.fixture(autouse=True)
def clean_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def storage(tmp_path):
    return UploadStorage(str(tmp_path / "uploads"), {"png", "jpg", "jpeg"})


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_client(client, db_session, storage):
    """Test client logged in as administrator 1, backed by the test database."""
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[require_admin] = lambda: AuthContext(admin_id=1)
    return client


@pytest.fixture
def make_property(db_session):
    def _make(title="Casa A", price="1000.00", address="Rua das Flores, 10"):
        prop = property_repository.create_property(
            db_session, title=title, address=address, description="", price=Decimal(price)
        )
        db_session.commit()
        return prop
    return _make
