"""Check that a face set of the configured project is reachable."""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

from frs_client import FrsClient
from frs_client.integrations import IntegrationCheckResult, check_face_set
from frs_client.monitoring.logging import configure_logging


def _format_result(result: IntegrationCheckResult) -> str:
    status = "OK" if result.success else "FAIL"
    return f"[{status}] {result.name}: {result.message}"


async def _run(face_set_name: str, token: str | None) -> IntegrationCheckResult:
    headers = {"X-Auth-Token": token} if token else None
    try:
        client = FrsClient.from_settings(headers=headers)
    except ValueError as exc:
        return IntegrationCheckResult(
            name=f"face set {face_set_name}",
            success=False,
            message=f"Invalid configuration: {exc}",
        )
    async with client:
        return await check_face_set(client, face_set_name)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("face_set_name", help="Name of the face set to query")
    parser.add_argument("--token", help="Value sent as the X-Auth-Token header")
    args = parser.parse_args(argv)

    configure_logging()
    result = asyncio.run(_run(args.face_set_name, args.token))
    print(_format_result(result))
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
