from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from typing import Any, Dict, List, Optional

from github_api_actions.config_models import ClientSettings, load_and_validate_config
from github_api_actions.core.factory import ComponentFactory
from github_api_actions.core.workflow import run_workflow
from github_api_actions.errors import InvalidArgument, RemoteError, UnknownOperation
from github_api_actions.operations import get_registered_operations, register_all
from github_api_actions.utils.logging import setup_logging


def parse_assignments(items: List[str]) -> Dict[str, Any]:
    """
    Parse ``key=value`` command-line arguments.

    Values that look like JSON arrays or objects are decoded; everything else
    stays a string and is converted by the operation's parameter types.
    """
    params: Dict[str, Any] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise InvalidArgument(f"Expected key=value, got '{item}'")
        if value[:1] in ("[", "{"):
            try:
                params[key] = json.loads(value)
                continue
            except ValueError as e:
                raise InvalidArgument(f"Invalid JSON for '{key}': {e}") from e
        params[key] = value
    return params


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


def cmd_list() -> int:
    register_all()
    for spec in get_registered_operations():
        print(f"{spec.name:42} {spec.method:6} {spec.path}")
    return 0


def cmd_call(operation: str, assignments: List[str]) -> int:
    params = parse_assignments(assignments)
    built = ComponentFactory(ClientSettings.from_env()).build()
    name = operation if operation.startswith("github_") else f"github_{operation}"
    result = built.runner.run(name, **params)
    _print_json(result.as_dict())
    return 0


def cmd_request(method: str, path: str, assignments: List[str]) -> int:
    params = parse_assignments(assignments)
    settings = ClientSettings.from_env(
        api_token=params.pop("api_token", None),
        server_url=params.pop("server_url", None),
    )
    accept = params.pop("accept", None)
    built = ComponentFactory(settings).build()
    response = built.client.perform(
        method,
        path,
        settings.api_token,
        settings.server_url,
        params=params or None,
        headers={"Accept": accept} if accept else None,
    )
    _print_json(dataclasses.asdict(response))
    return 0 if response.ok else 1


def cmd_run(workflow_path: str) -> int:
    config = load_and_validate_config(workflow_path)
    built = ComponentFactory(config.client_settings()).build()
    report = run_workflow(config, built.runner)
    print(f"DONE: {report.steps_succeeded}/{report.steps_total} steps succeeded")
    for label, message in report.failures.items():
        print(f"FAILED {label}: {message}")
    return 0 if report.ok else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="github-api", description="Call GitHub REST API operations.")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every HTTP request")
    parser.add_argument("--logging-config", default=None, help="path to a YAML logging config")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("list", help="list available operations")

    call = sub.add_parser("call", help="run one operation")
    call.add_argument("operation")
    call.add_argument("params", nargs="*", metavar="key=value")

    request = sub.add_parser("request", help="send a raw request to an API path")
    request.add_argument("method")
    request.add_argument("path")
    request.add_argument("params", nargs="*", metavar="key=value")

    run = sub.add_parser("run", help="run a YAML workflow")
    run.add_argument("workflow")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the github-api command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_usage()
        return 2

    setup_logging(args.logging_config, verbose=args.verbose)

    try:
        if args.command == "list":
            return cmd_list()
        if args.command == "call":
            return cmd_call(args.operation, args.params)
        if args.command == "request":
            return cmd_request(args.method, args.path, args.params)
        return cmd_run(args.workflow)
    except UnknownOperation as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (InvalidArgument, RemoteError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
