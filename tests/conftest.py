"""Shared test fixtures."""

import json

import httpx
import pytest

from firebase_store import ClientManager, FirebaseDatabase, ManagerOptions
from firebase_store.stores import InMemoryDatabase

DATABASE_URL = "https://demo-default-rtdb.firebaseio.com"


class FakeFirebase:
    """A document tree answering the Realtime Database REST API."""

    def __init__(self) -> None:
        self.tree: dict = {}
        self.requests: list[httpx.Request] = []
        self.fail_status: int | None = None
        self.fail_body = ""
        self.fail_methods: set[str] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_status is not None and (
            self.fail_methods is None or request.method in self.fail_methods
        ):
            return httpx.Response(self.fail_status, text=self.fail_body)

        path = request.url.path
        if not path.endswith(".json"):
            return httpx.Response(400, json={"error": "missing .json suffix"})
        segments = [s for s in path[: -len(".json")].split("/") if s]

        if request.method == "GET":
            return httpx.Response(200, json=self._get(segments))
        if request.method == "DELETE":
            self._delete(segments)
            return httpx.Response(200, json=None)

        body = json.loads(request.content)
        if request.method == "PATCH":
            if not isinstance(body, dict):
                return httpx.Response(400, json={"error": "Invalid data; couldn't parse JSON object"})
            node = self._get(segments)
            merged = dict(node) if isinstance(node, dict) else {}
            merged.update(body)
            self._put(segments, merged)
        elif request.method == "PUT":
            self._put(segments, body)
        else:
            return httpx.Response(405)
        return httpx.Response(200, json=body)

    def _get(self, segments):
        node = self.tree
        for segment in segments:
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return node

    def _put(self, segments, value):
        if not segments:
            self.tree = value
            return
        node = self.tree
        for segment in segments[:-1]:
            if not isinstance(node.get(segment), dict):
                node[segment] = {}
            node = node[segment]
        node[segments[-1]] = value

    def _delete(self, segments):
        node = self.tree
        for segment in segments[:-1]:
            if not isinstance(node, dict) or segment not in node:
                return
            node = node[segment]
        if isinstance(node, dict):
            node.pop(segments[-1], None)


@pytest.fixture
def database_url():
    return DATABASE_URL


@pytest.fixture
def firebase():
    return FakeFirebase()


@pytest.fixture
async def http_client(firebase):
    client = httpx.AsyncClient(transport=httpx.MockTransport(firebase.handler))
    yield client
    await client.aclose()


@pytest.fixture
def db(database_url, http_client):
    return FirebaseDatabase(database_url, client_id="user.1#a", client=http_client)


@pytest.fixture
def memory_db():
    return InMemoryDatabase(client_id="user.1#a")


@pytest.fixture
def manager():
    return ClientManager(ManagerOptions(client_id="bot-1"))
