"""
Tests for request logging middleware helpers
"""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from bookshelf.logging import get_request_id, operation_ctx
from bookshelf.middleware import LoggingContextMiddleware, operation_name_from_query


@pytest.mark.unit
@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("query GetBook { book(id: 1) { id } }", "GetBook"),
        ("mutation Rename { updateBook(id: 1, title: \"x\") { book { id } } }", "mutation:Rename"),
        ("{ books { id } }", "unnamed_operation"),
        ("query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
        ("", None),
        (None, None),
    ],
)
def test_operation_name_from_query(query, expected):
    assert operation_name_from_query(query) == expected


@pytest.fixture
def probe_client() -> TestClient:
    app = FastAPI()
    app.add_middleware(LoggingContextMiddleware)

    @app.post("/graphql")
    async def probe(request: Request):
        await request.body()
        return {"request_id": get_request_id(), "operation": operation_ctx.get()}

    return TestClient(app)


@pytest.mark.unit
def test_middleware_binds_request_context(probe_client):
    response = probe_client.post(
        "/graphql", json={"query": "query GetBook { book(id: 1) { id } }"}
    )

    body = response.json()
    assert body["operation"] == "GetBook"
    assert len(body["request_id"]) == 14


@pytest.mark.unit
def test_middleware_prefers_explicit_operation_name(probe_client):
    response = probe_client.post(
        "/graphql",
        json={"query": "query A { books { id } }", "operationName": "Explicit"},
    )

    assert response.json()["operation"] == "Explicit"


@pytest.mark.unit
def test_non_graphql_paths_have_no_operation():
    app = FastAPI()
    app.add_middleware(LoggingContextMiddleware)

    @app.post("/other")
    async def other():
        return {"operation": operation_ctx.get()}

    response = TestClient(app).post("/other", json={"query": "query GetBook { book }"})

    assert response.json() == {"operation": None}
