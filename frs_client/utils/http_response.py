"""Conversion of HTTP responses into result models or errors."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from frs_client.errors import DecodingError, ServiceError
from frs_client.results import ErrorBody

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)

SUCCESS_STATUS = 200


def _parse_json(response: httpx.Response) -> Any:
    if not response.content:
        return None
    return response.json()


def _to_service_error(response: httpx.Response) -> ServiceError:
    try:
        body = _parse_json(response)
    except ValueError:
        body = response.text

    error = ErrorBody()
    if isinstance(body, dict):
        try:
            error = ErrorBody.model_validate(body)
        except ValidationError:
            logger.warning("Unexpected error payload from service: %s", body)

    logger.warning(
        "Service returned HTTP %s: %s",
        response.status_code,
        error.error_msg or body,
    )
    return ServiceError(
        response.status_code,
        error_code=error.error_code,
        error_msg=error.error_msg,
        body=body,
    )


def response_to_result(
    response: httpx.Response,
    result_type: type[ResultT],
    *,
    expected_status: int = SUCCESS_STATUS,
) -> ResultT:
    """Decode ``response`` into ``result_type``.

    Raises:
        ServiceError: the status code differs from ``expected_status``.
        DecodingError: the body is not JSON or does not match ``result_type``.
    """

    if response.status_code != expected_status:
        raise _to_service_error(response)

    try:
        payload = _parse_json(response)
    except ValueError as exc:
        logger.warning("Response body is not JSON: %s", response.text)
        raise DecodingError(
            f"Expected a JSON {result_type.__name__} payload.",
            status_code=response.status_code,
            body=response.text,
        ) from exc

    try:
        return result_type.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Invalid %s payload: %s", result_type.__name__, payload)
        raise DecodingError(
            f"Payload does not match {result_type.__name__}: {exc}",
            status_code=response.status_code,
            body=payload,
        ) from exc
