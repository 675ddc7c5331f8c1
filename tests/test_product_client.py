import pytest
import requests

from productstore.services.product_client import ProductClient
from productstore.utils.settings import API_KEY_HEADER
from tests.conftest import make_product


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = body if body is not None else {}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        return self.body


class FakeSession:
    """Records requests and replays queued responses or exceptions."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture(autouse=True)
def no_backoff(monkeypatch):
    monkeypatch.setattr("time.sleep", lambda _: None)


def test_list_products_builds_query():
    session = FakeSession(FakeResponse(body={"page": 2, "limit": 5, "total": 0, "data": []}))
    client = ProductClient(base_url="http://store/", session=session)

    body = client.list_products(page=2, limit=5, category="stationery", in_stock=False)

    assert body["page"] == 2
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "http://store/api/products")
    assert kwargs["params"] == {"page": 2, "limit": 5, "category": "stationery", "inStock": "false"}


def test_writes_send_api_key():
    product = {"id": "abc", **make_product()}
    session = FakeSession(FakeResponse(201, product), FakeResponse(200, product), FakeResponse(200, {}))
    client = ProductClient(base_url="http://store", api_key="k", session=session)

    assert client.create_product(make_product()) == product
    client.update_product("abc", make_product())
    client.delete_product("abc")

    assert [(m, u) for m, u, _ in session.calls] == [
        ("POST", "http://store/api/products"),
        ("PUT", "http://store/api/products/abc"),
        ("DELETE", "http://store/api/products/abc"),
    ]
    assert all(kw["headers"] == {API_KEY_HEADER: "k"} for _, _, kw in session.calls)


def test_reads_retry_connection_errors():
    session = FakeSession(
        requests.ConnectionError("refused"),
        requests.ConnectionError("refused"),
        FakeResponse(body={"id": "abc"}),
    )
    client = ProductClient(base_url="http://store", session=session)

    assert client.fetch_product("abc") == {"id": "abc"}
    assert len(session.calls) == 3


def test_writes_are_not_retried():
    session = FakeSession(requests.ConnectionError("refused"), FakeResponse(201, {}))
    client = ProductClient(base_url="http://store", api_key="k", session=session)

    with pytest.raises(requests.ConnectionError):
        client.create_product(make_product())
    assert len(session.calls) == 1


def test_error_status_raises():
    session = FakeSession(FakeResponse(403, {"error": "Forbidden"}))
    client = ProductClient(base_url="http://store", session=session)

    with pytest.raises(requests.HTTPError):
        client.delete_product("abc")
