"""Entry point bundling the transport and the service classes."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from frs_client.access import FrsAccess
from frs_client.common.constants import DEFAULT_API_VERSION, FaceUris
from frs_client.config.settings import FrsSettings, get_settings
from frs_client.service.face_service import FaceService

logger = logging.getLogger(__name__)


class FrsClient:
    """Client for the face recognition service of one project."""

    def __init__(
        self,
        endpoint: str,
        project_id: str,
        *,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 30.0,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not project_id:
            raise ValueError("Project id is not configured.")

        uris = FaceUris(api_version)
        self._access = FrsAccess(endpoint, timeout=timeout, headers=headers, transport=transport)
        self._face_service = FaceService(self._access, project_id, uris)
        logger.debug("FRS client created for project %s at %s (%s)", project_id, endpoint, api_version)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[FrsSettings] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "FrsClient":
        """Build a client from environment based settings."""

        settings = settings or get_settings()
        return cls(
            settings.endpoint,
            settings.project_id,
            api_version=settings.api_version,
            timeout=settings.request_timeout,
            headers=headers,
            transport=transport,
        )

    @property
    def face_service(self) -> FaceService:
        return self._face_service

    async def close(self) -> None:
        await self._access.close()

    async def __aenter__(self) -> "FrsClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
