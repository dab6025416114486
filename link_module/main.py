from __future__ import annotations

import argparse
import json
import sys

from .auth import VERSION
from .config import REQUIRED_KEYS, Config
from .exceptions import LinkModuleError
from .log import setup_logging
from .requestor import ApiRequestor


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="link-module")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    sub = p.add_subparsers(dest="cmd", required=False)

    p_config = sub.add_parser("config", help="Config commands")
    sub_config = p_config.add_subparsers(dest="config_cmd", required=True)

    sub_config.add_parser("keys", help="List required environment variables")
    sub_config.add_parser("check", help="Validate the environment is filled")

    for verb in ("get", "delete"):
        p_verb = sub.add_parser(verb, help=f"Send a {verb.upper()} request")
        p_verb.add_argument("uri", help="Path relative to LINK_MODULE_BASE_URI, or a full URL")
        p_verb.add_argument("-p", "--param", action="append", default=[], metavar="KEY=VALUE",
                            help="Query parameter (repeatable)")
        p_verb.add_argument("-H", "--header", action="append", default=None, metavar="NAME:VALUE",
                            help="Extra header (repeatable)")

    for verb in ("post", "patch"):
        p_verb = sub.add_parser(verb, help=f"Send a {verb.upper()} request")
        p_verb.add_argument("uri", help="Path relative to LINK_MODULE_BASE_URI, or a full URL")
        p_verb.add_argument("--json", dest="body", default="{}", help="JSON object to send as the body")
        p_verb.add_argument("-H", "--header", action="append", default=None, metavar="NAME:VALUE",
                            help="Extra header (repeatable)")

    return p


def parse_params(pairs: list[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        out[key] = value
    return out


def parse_headers(lines: list[str] | None) -> dict[str, str] | None:
    # None keeps the requestor's "no headers given" path.
    if lines is None:
        return None
    out: dict[str, str] = {}
    for line in lines:
        name, sep, value = line.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Expected NAME:VALUE, got {line!r}")
        out[name.strip()] = value.strip()
    return out


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if args.version:
        print(VERSION)
        return 0

    if args.cmd is None:
        p.print_help()
        return 0

    if args.cmd == "config":
        if args.config_cmd == "keys":
            for k in REQUIRED_KEYS:
                print(k)
            return 0

        if args.config_cmd == "check":
            # Intentionally do not print secret values
            cfg = Config.load_from_env()
            print(f"OK: config present for {cfg.base_uri}")
            return 0

    try:
        headers = parse_headers(args.header)
        if args.cmd in ("get", "delete"):
            params = parse_params(args.param)
        else:
            params = json.loads(args.body)
            if not isinstance(params, dict):
                raise ValueError("--json must be a JSON object")
    except ValueError as e:
        p.error(str(e))

    cfg = Config.load_from_env()
    setup_logging(cfg.log_level, cfg.log_format)
    requestor = ApiRequestor.from_config(cfg)

    send = getattr(requestor, args.cmd)
    try:
        data = send(args.uri, params, headers)
    except LinkModuleError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        requestor.get_transport().close()

    print(json.dumps(data, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
