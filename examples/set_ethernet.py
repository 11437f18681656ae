#!/usr/bin/env python3
"""Configure one layer3 ethernet interface and import it into a vsys.

Writes go to the candidate configuration; commit them on the firewall.

Usage::

    PANOS_HOST=192.0.2.1 PANOS_USERNAME=admin PANOS_PASSWORD=secret \\
        python examples/set_ethernet.py ethernet1/3 10.0.3.1/24 [vsys1]
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
import sys

from napalm_panfw.client.errors import PanosError
from napalm_panfw.driver import PanFWDriver
from napalm_panfw.model.eth import EthernetInterface


def main() -> None:
    if len(sys.argv) < 3:
        print(f"usage: {sys.argv[0]} IFNAME CIDR [VSYS]", file=sys.stderr)
        sys.exit(2)
    name, cidr = sys.argv[1], sys.argv[2]
    vsys = sys.argv[3] if len(sys.argv) > 3 else ""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    driver = PanFWDriver(
        hostname=os.environ["PANOS_HOST"],
        username=os.environ.get("PANOS_USERNAME", ""),
        password=os.environ.get("PANOS_PASSWORD", ""),
        optional_args={"api_key": os.environ.get("PANOS_API_KEY")},
    )
    try:
        driver.open()
        eth = driver.ethernet
        eth.set(vsys, EthernetInterface(name=name, mode="layer3", static_ips=[cidr]))
        record = eth.get(name)
    except PanosError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        driver.close()

    print(json.dumps(dataclasses.asdict(record), indent=2))


if __name__ == "__main__":
    main()
