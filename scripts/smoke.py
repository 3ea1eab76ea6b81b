#!/usr/bin/env python3
import os
import sys
from typing import Any

import httpx


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
    expected_mode = os.getenv("SMOKE_EXPECT_MODE", "").strip()
    timeout_sec = float(os.getenv("SMOKE_TIMEOUT_SEC", "10"))

    with httpx.Client(timeout=timeout_sec) as client:
        health = client.get(f"{base_url}/health")
        health_body = _assert_status("GET /health", health, 200)
        if health_body.get("status") != "ok":
            raise SystemExit("GET /health did not report status=ok")
        _print_result("GET /health", health.status_code, request_id=health.headers.get("X-Request-Id", ""))

        version = client.get(f"{base_url}/version")
        version_body = _assert_status("GET /version", version, 200)
        mode = str(version_body.get("mode", ""))
        if expected_mode and mode != expected_mode:
            raise SystemExit(f"GET /version reported mode={mode!r}, expected {expected_mode!r}")
        _print_result(
            "GET /version",
            version.status_code,
            request_id=version.headers.get("X-Request-Id", ""),
            extra=f"version={version_body.get('version', '')} mode={mode}",
        )

    print("Smoke completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
