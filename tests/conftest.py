"""Shared fixtures recording the requests sent to a stubbed service."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from frs_client.access import FrsAccess
from frs_client.service import FaceService

from stub_service import ENDPOINT, PROJECT_ID, RequestRecorder


@pytest.fixture
def recorder() -> RequestRecorder:
    return RequestRecorder()


@pytest.fixture
def make_access(recorder: RequestRecorder) -> Callable[..., FrsAccess]:
    def _make(**kwargs: Any) -> FrsAccess:
        return FrsAccess(ENDPOINT, transport=httpx.MockTransport(recorder), **kwargs)

    return _make


@pytest.fixture
def face_service(make_access: Callable[..., FrsAccess]) -> FaceService:
    return FaceService(make_access(), PROJECT_ID)
