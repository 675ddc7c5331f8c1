import mongomock
import pytest
from fastapi.testclient import TestClient

from productstore.api import create_app
from productstore.data.database import Database
from productstore.utils.settings import API_KEY, API_KEY_HEADER

AUTH = {API_KEY_HEADER: API_KEY}


def make_product(**overrides):
    product = {
        "name": "Pen",
        "description": "Blue pen",
        "price": 1.5,
        "category": "stationery",
        "inStock": True,
    }
    product.update(overrides)
    return product


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def database(mongo_client):
    return Database(name="productstore_test", client=mongo_client)


@pytest.fixture
def app(database):
    return create_app(database=database)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def create(client):
    def _create(**overrides):
        resp = client.post("/api/products", json=make_product(**overrides), headers=AUTH)
        assert resp.status_code == 201
        return resp.json()

    return _create
