import pytest
from fastapi.testclient import TestClient

from product_api.app.core.db import init_db
from product_api.app.main import create_app
from product_api.app.repositories.product_repository import SQLiteProductRepository
from product_api.app.services.product_service import ProductService
from tests.fakes import FakeProductRepository


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "products.db")


@pytest.fixture
def sqlite_repo(db_path):
    init_db(db_path)
    return SQLiteProductRepository(db_path)


@pytest.fixture
def service():
    return ProductService(FakeProductRepository())


@pytest.fixture
def client(db_path):
    app = create_app(db_path)
    with TestClient(app) as test_client:
        yield test_client
