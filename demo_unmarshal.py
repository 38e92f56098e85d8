#!/usr/bin/env python3
"""
Demo: Populate the example service config from the environment.

Reads the process environment (and optionally a .env file), then prints
which variables the config consumes and the effective values as YAML.

    SERVICE_NAME=api WORKERS=8 python demo_unmarshal.py
    python demo_unmarshal.py --dotenv .env
"""

import argparse
import logging
import sys

from envstruct import EnvError, unmarshal, unmarshal_dotenv
from envstruct.examples import ServiceConfig, build_example_config
from envstruct.serialization import record_env_keys, record_to_yaml


def main():
    parser = argparse.ArgumentParser(description="Unmarshal the example config from the environment")
    parser.add_argument("--dotenv", help="Path to a .env file merged under the process environment")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each field as it is set")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    print("=" * 70)
    print("VARIABLES")
    print("=" * 70)
    for path, tag in record_env_keys(ServiceConfig).items():
        default = f" (default {tag.default!r})" if tag.has_default else ""
        print(f"  {tag.key:<22} -> {path}{default}")

    config = build_example_config()
    try:
        if args.dotenv:
            unmarshal_dotenv(config, args.dotenv)
        else:
            unmarshal(config)
    except EnvError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    print()
    print("=" * 70)
    print("EFFECTIVE CONFIG")
    print("=" * 70)
    print(record_to_yaml(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
