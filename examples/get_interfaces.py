#!/usr/bin/env python3
"""Smoke-test script: connect to a PAN-OS firewall and print get_interfaces().

Environment variables
---------------------
PANOS_HOST        Firewall base URL or IP (e.g. https://192.0.2.1)
PANOS_USERNAME    Login username          (required unless PANOS_API_KEY)
PANOS_PASSWORD    Login password          (required unless PANOS_API_KEY)
PANOS_API_KEY     Pre-generated API key   (optional)
PANOS_VERIFY_TLS  Set to "true" to verify TLS (default: false)
"""

from __future__ import annotations

import json
import os
import sys

from napalm_panfw.driver import PanFWDriver


def _require(name: str) -> str:
    print(f"ERROR: required environment variable {name!r} is not set.", file=sys.stderr)
    sys.exit(1)


def main() -> None:
    host = os.environ.get("PANOS_HOST", "")
    if not host:
        print("ERROR: PANOS_HOST is not set.", file=sys.stderr)
        sys.exit(1)

    api_key = os.environ.get("PANOS_API_KEY")
    username = os.environ.get("PANOS_USERNAME") or ("" if api_key else _require("PANOS_USERNAME"))
    password = os.environ.get("PANOS_PASSWORD") or ("" if api_key else _require("PANOS_PASSWORD"))
    verify_tls = os.environ.get("PANOS_VERIFY_TLS", "false").lower() == "true"

    optional_args: dict[str, object] = {"verify_tls": verify_tls}
    if api_key:
        optional_args["api_key"] = api_key

    driver = PanFWDriver(
        hostname=host,
        username=username,
        password=password,
        optional_args=optional_args,
    )
    try:
        driver.open()
        facts = driver.get_facts()
        interfaces = driver.get_interfaces()
    except Exception as exc:  # noqa: BLE001
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        driver.close()

    print(json.dumps({"facts": facts, "interfaces": interfaces}, indent=2))


if __name__ == "__main__":
    main()
