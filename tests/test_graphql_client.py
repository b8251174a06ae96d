"""
GraphQLClient against a mocked requests session.
"""

import json
from unittest.mock import Mock

import pytest

from apc_progress.network.graphql_client import GraphQLClient, GraphQLError
from apc_progress.network.http_client import create_session


def _response(status_code=200, body=None, text=""):
    response = Mock(status_code=status_code, text=text)
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


def _client(response):
    session = Mock()
    session.post.return_value = response
    return GraphQLClient("https://example.test/graphql", session, timeout=5), session


def test_query_posts_document_and_returns_data():
    client, session = _client(_response(body={"data": {"me": {"initId": "1"}}}))

    data = client.query("query GetMe { me { initId } }", {"a": 1}, headers={"X-Test": "yes"})

    assert data == {"me": {"initId": "1"}}
    kwargs = session.post.call_args.kwargs
    assert kwargs["url"] == "https://example.test/graphql"
    assert json.loads(kwargs["data"]) == {"query": "query GetMe { me { initId } }", "variables": {"a": 1}}
    assert kwargs["headers"] == {"X-Test": "yes"}
    assert kwargs["timeout"] == 5


def test_query_defaults_variables_to_empty_object():
    client, session = _client(_response(body={"data": {}}))

    client.query("query GetMe { me { initId } }")

    assert json.loads(session.post.call_args.kwargs["data"])["variables"] == {}


def test_graphql_errors_are_raised():
    errors = [{"message": "Not authorised"}, {"message": "Bad field"}]
    client, _ = _client(_response(body={"data": None, "errors": errors}))

    with pytest.raises(GraphQLError) as excinfo:
        client.query("query GetMe { me { initId } }")

    assert str(excinfo.value) == "Not authorised; Bad field"
    assert excinfo.value.errors == errors


def test_unauthorised_status_mentions_token():
    client, _ = _client(_response(status_code=401, text="nope"))

    with pytest.raises(GraphQLError, match="token") as excinfo:
        client.query("query GetMe { me { initId } }")

    assert excinfo.value.status_code == 401


def test_server_error_status():
    client, _ = _client(_response(status_code=502, text="Bad gateway"))

    with pytest.raises(GraphQLError, match="HTTP 502"):
        client.query("query GetMe { me { initId } }")


def test_non_json_body():
    client, _ = _client(_response(body=ValueError("no json"), text="<html>"))

    with pytest.raises(GraphQLError, match="Non-JSON"):
        client.query("query GetMe { me { initId } }")


def test_missing_data_object():
    client, _ = _client(_response(body={}))

    with pytest.raises(GraphQLError, match="no data"):
        client.query("query GetMe { me { initId } }")


def test_session_carries_bearer_token():
    session = create_session("tok123")

    assert session.headers["Authorization"] == "Bearer tok123"
    assert session.headers["Content-Type"] == "application/json"
    assert session.trust_env is False
