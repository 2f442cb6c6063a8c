"""Connectivity checks against the face recognition service."""

from __future__ import annotations

from dataclasses import dataclass

from frs_client.client import FrsClient
from frs_client.errors import DecodingError, ServiceError, TransportError


@dataclass(slots=True)
class IntegrationCheckResult:
    """Structured result describing the integration check outcome."""

    name: str
    success: bool
    message: str


async def check_face_set(client: FrsClient, face_set_name: str) -> IntegrationCheckResult:
    """List one face of ``face_set_name`` and report whether the call succeeded."""

    name = f"face set {face_set_name}"
    try:
        result = await client.face_service.get_faces(face_set_name, offset=0, limit=1)
    except ServiceError as exc:
        code = f" {exc.error_code}" if exc.error_code else ""
        return IntegrationCheckResult(
            name=name,
            success=False,
            message=f"Service responded with HTTP {exc.status_code}{code}.",
        )
    except TransportError as exc:
        return IntegrationCheckResult(name=name, success=False, message=f"Service unreachable: {exc}")
    except DecodingError as exc:
        return IntegrationCheckResult(name=name, success=False, message=f"Unexpected payload: {exc}")

    return IntegrationCheckResult(
        name=name,
        success=True,
        message=f"Face set is reachable ({len(result.faces)} face(s) in first page).",
    )
