#!/usr/bin/env python3
import os
import sys
from typing import Any

import httpx

BRIEF_SAMPLE = "# Product Brief\n\n## Problem Statement\n\nOnboarding takes 14 days.\n"
ARCHITECTURE_SAMPLE = "# Architecture\n\n## System Overview\n\nA layered monolith exposing a REST api.\n"


def _required_env(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise SystemExit(f"Missing required environment variable: {name}")
    return value


def _json_body(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _assert_status(endpoint: str, response: httpx.Response, expected: int) -> dict[str, Any]:
    body = _json_body(response)
    if response.status_code != expected:
        code = body.get("code", "unknown")
        raise SystemExit(f"{endpoint} expected {expected}, got {response.status_code} (code={code})")
    return body


def _print_result(endpoint: str, status_code: int, request_id: str = "", extra: str = "") -> None:
    parts = [f"{endpoint} -> {status_code}"]
    if request_id:
        parts.append(f"request_id={request_id}")
    if extra:
        parts.append(extra)
    print(" ".join(parts))


def main() -> int:
    base_url = _required_env("SMOKE_BASE_URL").rstrip("/")
    timeout_sec = float(os.getenv("SMOKE_TIMEOUT_SEC", "30"))

    with httpx.Client(timeout=timeout_sec) as client:
        health = client.get(f"{base_url}/health")
        _assert_status("GET /health", health, 200)
        _print_result("GET /health", health.status_code, request_id=health.headers.get("X-Request-Id", ""))

        for kind, sample in (("brief", BRIEF_SAMPLE), ("architecture", ARCHITECTURE_SAMPLE)):
            endpoint = f"POST /validate/{kind}"
            response = client.post(f"{base_url}/validate/{kind}", json={"markdown": sample})
            body = _assert_status(endpoint, response, 200)
            if not body.get("verdict"):
                raise SystemExit(f"{endpoint} missing verdict")
            _print_result(
                endpoint,
                response.status_code,
                request_id=str(body.get("request_id", "")),
                extra=f"verdict={body['verdict']}",
            )

    print("Smoke completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
