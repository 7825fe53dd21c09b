"""Command-line interface for termfolio.

Provides the main entry point for running the shell in the terminal,
serving it over HTTP, or driving a running endpoint.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="termfolio",
        description="Interactive terminal-style portfolio shell",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/termfolio.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    repl_parser = subparsers.add_parser("repl", help="Run the shell in this terminal")
    repl_parser.add_argument(
        "--no-color", action="store_true",
        help="Disable ANSI colors and screen clearing",
    )

    subparsers.add_parser("endpoint", help="Serve the shell session over HTTP")

    send_parser = subparsers.add_parser("send", help="Send input to a running endpoint")
    send_parser.add_argument(
        "lines", nargs="*",
        help="Lines to type and submit, in order",
    )
    send_parser.add_argument(
        "--key", action="append", default=[],
        help="Key to press after the lines (repeatable, e.g. --key ArrowUp)",
    )
    send_parser.add_argument(
        "--quick", type=str, default=None,
        help="Run a registered command directly without touching the input line",
    )

    return parser.parse_args(argv)


async def _repl(settings, color: bool = True) -> None:
    """Read lines from stdin and play each result back with typewriter delays."""
    from termfolio.content.source import load_content
    from termfolio.interpreter.base import Interpreter
    from termfolio.interpreter.commands import CommandRegistry
    from termfolio.render.console import TypewriterConsole
    from termfolio.render.text import render_prompt
    from termfolio.session.shell import ShellSession

    content = load_content(settings.shell.content_path)
    interpreter = Interpreter(
        CommandRegistry(reveal_step_ms=settings.shell.reveal_step_ms), content
    )
    session = ShellSession(interpreter, clear_line_modifiers=settings.shell.clear_line_modifiers)

    # The typed line is already on screen, so the console does not echo it
    console = TypewriterConsole(
        content.identity,
        step_ms=settings.shell.reveal_step_ms,
        color=color,
        echo=False,
    )
    for entry in session.history:
        await console.show(entry)
    session.subscribe(console)

    prompt = render_prompt(content.identity)
    loop = asyncio.get_running_loop()
    while True:
        try:
            line = await loop.run_in_executor(None, input, prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        session.submit_line(line)
        await console.flush()

    logger.info("Session ended after %d entries", len(session.history))


async def _send(settings, args) -> None:
    """Drive a running endpoint and print the resulting screen."""
    from termfolio.keyboard.http_backend import HttpKeyboardOutput

    keyboard = HttpKeyboardOutput(
        base_url=settings.client.base_url,
        timeout=settings.client.timeout,
    )
    async with keyboard:
        for line in args.lines:
            await keyboard.send_line(line)
        for key in args.key:
            await keyboard.send_keystroke(key)
        if args.quick:
            await keyboard.run_command(args.quick)
        print(await keyboard.fetch_screen())


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the termfolio CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from termfolio.config.settings import load_settings
    from termfolio.content.source import ContentError
    from termfolio.keyboard.base import KeyboardOutputError
    from termfolio.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    try:
        if args.command == "repl":
            logger.info("Starting shell with content from %s", settings.shell.content_path)
            asyncio.run(_repl(settings, color=not args.no_color))

        elif args.command == "endpoint":
            logger.info("Starting endpoint server")
            from termfolio.endpoint.server import create_app
            import uvicorn
            app = create_app(
                content_path=settings.shell.content_path,
                reveal_step_ms=settings.shell.reveal_step_ms,
                clear_line_modifiers=settings.shell.clear_line_modifiers,
            )
            uvicorn.run(
                app,
                host=settings.endpoint.host,
                port=settings.endpoint.port,
            )

        elif args.command == "send":
            asyncio.run(_send(settings, args))

    except (ContentError, KeyboardOutputError) as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
