"""
Pytest fixtures: an in-memory GraphQL client and canned API payloads.
"""

import json
import re

import pytest

from apc_progress.utils import config_utils


_OPERATION_RE = re.compile(r"(?:query|mutation)\s+(\w+)")


class FakeGraphQLClient:
    """
    Stand-in for ``GraphQLClient``.

    ``responses`` maps an operation name (``GetMe``, ``CourseOutline``, ...)
    to a data dict, an exception to raise, or a callable taking the
    variables and returning either of those.
    """

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def query(self, document, variables=None, headers=None):
        operation = _OPERATION_RE.search(document).group(1)
        variables = variables or {}
        self.calls.append((operation, variables))
        response = self.responses[operation]
        if callable(response):
            response = response(variables)
        if isinstance(response, Exception):
            raise response
        return response

    def calls_for(self, operation):
        return [variables for name, variables in self.calls if name == operation]


# ============================================
# Payload builders
# ============================================

def me_payload(user_id="42", import_id="ABC123", subjects=None, period="25"):
    return {
        "me": {"initId": user_id, "importId": import_id},
        "studentSubjects": subjects if subjects is not None else [{"id": "sub1", "name": "Bio"}],
        "currentEducationPeriod": {"id": period},
    }


def video_resource(video_id, name="Video"):
    return {"__typename": "EmbeddedVideoResource", "videoId": video_id, "displayName": name}


def outline_payload(units):
    return {"courseOutline": {"units": units}}


def unit(display_name, resources, title=None):
    return {"displayName": display_name, "title": title, "subunits": [{"resources": resources}]}


def progress_payload(record=None):
    return {"videoProgress": json.dumps({"dailyVideoProgress": {"videoProgress": record}})}


def store_payload(ok=True):
    return {"storeDailyVideoProgress": {"ok": ok, "__typename": "StoreDailyVideoProgress"}}


# ============================================
# Fixtures
# ============================================

@pytest.fixture(autouse=True)
def reset_config_cache(monkeypatch):
    """Each test reads config.yml afresh."""
    monkeypatch.setattr(config_utils, "_CONFIG_CACHE", None)
