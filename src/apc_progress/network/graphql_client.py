import json
from typing import Any, Dict, List, Optional

import requests


class GraphQLError(Exception):
    """HTTP-level or GraphQL-level failure of a single operation."""

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.errors = errors or []
        self.status_code = status_code


class GraphQLClient:
    """
    Thin GraphQL-over-HTTP client bound to one endpoint.

    Authentication lives on the ``requests.Session`` passed in, so the same
    session (and bearer token) can back several endpoints.
    """

    def __init__(self, endpoint: str, session: requests.Session, timeout: Optional[float] = None):
        self.endpoint = endpoint
        self.session = session
        self.timeout = timeout

    def query(
        self,
        document: str,
        variables: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Run a query or mutation and return its ``data`` object.

        Raises ``GraphQLError`` on a non-200 status, a non-JSON body, a
        non-empty ``errors`` list or a missing ``data`` object. Transport
        errors from ``requests`` propagate unchanged.
        """
        payload = {"query": document, "variables": variables or {}}
        response = self.session.post(
            url=self.endpoint,
            data=json.dumps(payload),
            headers=headers,
            timeout=self.timeout,
        )

        if response.status_code == 401:
            raise GraphQLError(
                "Bearer token rejected or expired (HTTP 401).",
                status_code=response.status_code,
            )
        if response.status_code != 200:
            raise GraphQLError(
                f"HTTP {response.status_code} from {self.endpoint}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise GraphQLError(
                f"Non-JSON response from {self.endpoint}: {response.text[:200]}",
                status_code=response.status_code,
            ) from exc

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )
            raise GraphQLError(messages, errors=errors, status_code=response.status_code)

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise GraphQLError(
                f"Response from {self.endpoint} has no data object.",
                status_code=response.status_code,
            )
        return data
