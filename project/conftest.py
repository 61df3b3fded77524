"""Shared fakes: a requests-like session that serves canned Dog CEO responses."""

import pytest
import requests


class FakeResponse:
    def __init__(self, url, status_code=200, payload=None, body_error=False):
        self.url = url
        self.status_code = status_code
        self._payload = payload
        self._body_error = body_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}", response=self)

    def json(self):
        if self._body_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Maps URL suffixes to (status_code, payload); unknown URLs get a 404."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        for suffix, route in self.routes.items():
            if url.endswith(suffix):
                if isinstance(route, Exception):
                    raise route
                if callable(route):
                    route = route()
                status_code, payload = route
                return FakeResponse(url, status_code, payload)
        return FakeResponse(url, 404, {"status": "error", "message": "Breed not found", "code": 404})


def ok(message):
    return 200, {"message": message, "status": "success"}


@pytest.fixture
def catalog_payload():
    return {"affenpinscher": [], "bulldog": ["boston", "english", "french"], "poodle": ["miniature", "standard", "toy"]}


@pytest.fixture
def fake_session(catalog_payload):
    return FakeSession({
        "/breeds/list/all": ok(catalog_payload),
        "/breeds/image/random/6": ok([f"https://images.dog.ceo/breeds/random/{i}.jpg" for i in range(6)]),
        "/breed/poodle/images/random/2": ok(["https://images.dog.ceo/breeds/poodle/p1.jpg", "https://images.dog.ceo/breeds/poodle/p2.jpg"]),
        "/breed/bulldog/images/random/2": ok(["https://images.dog.ceo/breeds/bulldog/b1.jpg", "https://images.dog.ceo/breeds/bulldog/b2.jpg"]),
    })
