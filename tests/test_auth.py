from bson import ObjectId
from fastapi.testclient import TestClient

from productstore.api import create_app
from productstore.utils.settings import API_KEY_HEADER
from tests.conftest import AUTH, make_product

FORBIDDEN = {"error": "Forbidden", "message": "Forbidden - Invalid API KEY"}


def test_create_without_key_is_forbidden(client, database):
    for headers in ({}, {API_KEY_HEADER: "wrong"}, {API_KEY_HEADER: ""}):
        resp = client.post("/api/products", json=make_product(), headers=headers)
        assert resp.status_code == 403
        assert resp.json() == FORBIDDEN

    assert database.products.count_documents({}) == 0


def test_update_and_delete_without_key_are_forbidden(client, create):
    product = create()
    pid = product.pop("id")

    resp = client.put(f"/api/products/{pid}", json=make_product(name="Hacked"))
    assert resp.status_code == 403
    assert resp.json() == FORBIDDEN

    resp = client.delete(f"/api/products/{pid}", headers={API_KEY_HEADER: "wrong"})
    assert resp.status_code == 403

    assert client.get(f"/api/products/{pid}").json() == {"id": pid, **product}


def test_key_is_checked_before_body_and_id(client):
    resp = client.post("/api/products", json={"price": "free"})
    assert resp.status_code == 403

    resp = client.put("/api/products/not-an-id", json={})
    assert resp.status_code == 403

    resp = client.delete(f"/api/products/{ObjectId()}")
    assert resp.status_code == 403


def test_reads_need_no_key(client, create):
    pid = create()["id"]
    assert client.get("/api/products").status_code == 200
    assert client.get(f"/api/products/{pid}").status_code == 200


class PrefixVerifier:
    def verify(self, value):
        return bool(value) and value.startswith("client-")


def test_custom_verifier_replaces_static_key(database):
    app = create_app(database=database, verifier=PrefixVerifier())

    with TestClient(app) as client:
        resp = client.post("/api/products", json=make_product(), headers=AUTH)
        assert resp.status_code == 403

        resp = client.post("/api/products", json=make_product(), headers={API_KEY_HEADER: "client-42"})
        assert resp.status_code == 201
