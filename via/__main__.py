# via/__main__.py
from __future__ import annotations
import argparse
import json
import sys

from via.config.loader import loadConfigFile
from via.core.errors import ViaError
from via.core.logging import configureLogging
from via.registry import AliasRegistry

SUMMARY = "Resolve path aliases from a JSON5 registry config"



def buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="via", description=SUMMARY)
    parser.add_argument("--config", required=True, metavar="PATH", help="JSON5 registry config file")
    parser.add_argument("--json", action="store_true", help="Print machine-readable JSON")
    parser.add_argument("--dev", action="store_true", help="Log registry activity to stderr in dev format")

    commands = parser.add_subparsers(dest="command", required=True)
    resolveCmd = commands.add_parser("resolve", help="Resolve one dot-path (e.g. local.data.logs)")
    resolveCmd.add_argument("dotPath")
    resolveCmd.add_argument("additionalPath", nargs="?", default=None)
    commands.add_parser("list", help="List every alias with its resolved paths")
    return parser



def _printList(entries: dict[str, dict[str, str]]) -> None:
    for alias, paths in entries.items():
        rendered = "  ".join(f"{kind}={value}" for kind, value in paths.items())
        print(f"{alias}  {rendered}")



def main(argv: list[str] | None = None) -> int:
    args = buildParser().parse_args(argv)

    try:
        config = loadConfigFile(args.config)
        if args.dev:
            configureLogging(devMode=True)
        elif config.logging is not None:
            configureLogging(
                devMode=config.logging.devMode,
                logFile=config.logging.file,
                suppressRecurring=config.logging.suppressRecurring,
            )

        registry = AliasRegistry()
        registry.initialize(config)

        if args.command == "resolve":
            resolved = registry.resolve(args.dotPath, args.additionalPath)
            print(json.dumps({"dotPath": args.dotPath, "path": resolved}) if args.json else resolved)
            return 0

        entries = registry.listAll()
        if args.json:
            print(json.dumps(entries, indent=2))
        else:
            _printList(entries)
        return 0
    except (ViaError, OSError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 2



if __name__ == "__main__":
    sys.exit(main())
