"""
Main CLI entry point for todosync.

Every command runs the startup load first, then its action, then renders
the resulting state.
"""

import argparse
import asyncio
import logging
import sys

from todosync.cli.exit_codes import ExitCode
from todosync.cli.logging_utils import setup_logging
from todosync.cli.render import render
from todosync.config import Config
from todosync.controller import TodoController
from todosync.errors import ActionResult, Outcome
from todosync.exceptions import TodosyncConfigError
from todosync.models import AppState, Todo
from todosync.transport import AiohttpTransport, Transport

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todosync",
        description="Synchronize with a remote todo service.",
    )
    parser.add_argument("--api-base", help="Base URL of the todo service")
    parser.add_argument("--log-level", help="Console log level (default: WARNING)")
    parser.add_argument("--json", action="store_true", help="Render state as JSON")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="Load and show all todos")

    ping = commands.add_parser("ping", help="GET an arbitrary path and show the response")
    ping.add_argument("path", help="Path appended to the API base, e.g. /health")

    add = commands.add_parser("add", help="Create a todo")
    add.add_argument("title", nargs="+", help="Title of the new todo")

    toggle = commands.add_parser("toggle", help="Flip a todo's done flag")
    toggle.add_argument("id", help="Todo id")

    delete = commands.add_parser("delete", help="Delete a todo")
    delete.add_argument("id", help="Todo id")
    return parser


def find_todo(state: AppState, todo_id: str) -> Todo | None:
    for todo in state.todos:
        if str(todo.id) == todo_id:
            return todo
    return None


async def run_command(
    args: argparse.Namespace, config: Config, transport: Transport | None = None
) -> int:
    """
    Run one command against the service and render the outcome.

    Args:
        args: Parsed command-line arguments
        config: Resolved configuration
        transport: Transport to use; an AiohttpTransport is created and closed if omitted

    Returns:
        Exit code
    """
    owns_transport = transport is None
    if transport is None:
        transport = AiohttpTransport()

    try:
        controller = TodoController(transport, config.api_base)
        result = await controller.init()

        if args.command == "ping":
            result = await controller.ping(args.path)
        elif args.command == "add":
            controller.set_new_title(" ".join(args.title))
            result = await controller.create_todo()
            if result.outcome == Outcome.SKIPPED:
                print("Error: title is blank", file=sys.stderr)
                return ExitCode.ERROR
        elif args.command in ("toggle", "delete"):
            if not result.ok:
                render(controller.state, json_output=args.json)
                return ExitCode.ERROR
            todo = find_todo(controller.state, args.id)
            if todo is None:
                print(f"Error: no todo with id {args.id!r}", file=sys.stderr)
                return ExitCode.ERROR
            if args.command == "toggle":
                result = await controller.toggle_todo(todo)
            else:
                result = await controller.delete_todo(todo)
    finally:
        if owns_transport:
            await transport.close()

    render(controller.state, json_output=args.json)
    return _exit_code(result)


def _exit_code(result: ActionResult) -> int:
    if not result.ok:
        return ExitCode.ERROR
    if result.refresh is not None and not result.refresh.ok:
        return ExitCode.ERROR
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env(api_base=args.api_base, log_level=args.log_level)
    except TodosyncConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitCode.CONFIG_ERROR

    setup_logging(config.log_level)
    logger.debug(f"Using API base {config.api_base}")

    try:
        return asyncio.run(run_command(args, config))
    except KeyboardInterrupt:
        return ExitCode.INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
