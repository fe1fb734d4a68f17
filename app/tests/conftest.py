import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.db.base import Database
from app.main import app
from app.tests.fakes import FakeObjectStorage


@pytest.fixture
def storage():
    return FakeObjectStorage()


@pytest.fixture
def database():
    # 内存SQLite，所有连接共享同一个数据库
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db = Database("sqlite://", engine=engine)
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def client(database, storage):
    """不触发启动事件，直接把测试用的数据库和存储挂到应用状态上"""
    app.state.database = database
    app.state.object_storage = storage
    return TestClient(app)
