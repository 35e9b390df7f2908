"""Composition root for the purchasing service.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Interactive command loop
"""

import json
import logging
import sys
from typing import Any

from purchasing.adapters.cli.commands import CLICommandHandler
from purchasing.adapters.events.jsonl import JsonLinesEventPublisher
from purchasing.adapters.events.stdout import StdoutEventPublisher
from purchasing.adapters.events.webhook import WebhookEventPublisher
from purchasing.adapters.session.static import StaticSessionContext
from purchasing.adapters.store.sqlite import SQLiteOrderStore
from purchasing.config import Settings, load_settings
from purchasing.core.cancellation_service import OrderCancellationService
from purchasing.core.ports import EventPublisherPort

logger = logging.getLogger(__name__)


def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("purchasing> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            try:
                result = _execute_cli_command(cli_handler, command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _execute_cli_command(
    cli_handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Execute a CLI command.

    Args:
        cli_handler: CLICommandHandler instance.
        command: Command name.
        args: Command arguments.

    Returns:
        Command result dictionary.

    Raises:
        ValueError: If command is not recognized or arguments are missing.
    """
    if command == "cancel":
        if "order_id" not in args:
            raise ValueError("Missing required parameter: order_id")
        return cli_handler.cancel_order(
            order_id=args["order_id"],
            verbose=args.get("verbose", False),
        )

    raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  cancel
    Cancel a purchase order and publish a cancellation notification.
    Unknown order ids are ignored.
    Required: order_id
    Optional: verbose

    Example: cancel {"order_id": 100}

  help
    Show this help message.

  exit
    Exit the CLI.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_publisher(settings: Settings) -> EventPublisherPort:
    """Instantiate the event publisher selected by configuration.

    Raises:
        ValueError: If the webhook backend is selected without a URL.
    """
    if settings.publisher_backend == "stdout":
        logger.info("Event publisher: Stdout")
        return StdoutEventPublisher(verbose=settings.log_level == "DEBUG")
    if settings.publisher_backend == "jsonl":
        logger.info(f"Event publisher: JSON Lines ({settings.publisher_output_path})")
        return JsonLinesEventPublisher(output_path=settings.publisher_output_path)
    if settings.publisher_backend == "webhook":
        if not settings.webhook_url:
            raise ValueError("Webhook backend selected but WEBHOOK_URL not set")
        logger.info(f"Event publisher: Webhook ({settings.webhook_url})")
        return WebhookEventPublisher(
            url=settings.webhook_url,
            timeout_seconds=settings.webhook_timeout_seconds,
        )
    raise ValueError(f"Unknown publisher backend: {settings.publisher_backend}")


def build_service(
    settings: Settings,
) -> tuple[OrderCancellationService, SQLiteOrderStore, EventPublisherPort]:
    """Wire adapters and the cancellation service from settings.

    Returns:
        The service together with the store and publisher, so the
        caller can release their resources.
    """
    store = SQLiteOrderStore(db_path=settings.store_sqlite_path)
    logger.info(f"Order store initialized: {settings.store_sqlite_path}")

    publisher = build_publisher(settings)
    session = StaticSessionContext(session_id=settings.session_id)

    service = OrderCancellationService(
        store=store,
        publisher=publisher,
        session=session,
    )
    return service, store, publisher


def bootstrap() -> None:
    """Load configuration, wire adapters, and start the command loop.

    Raises:
        ValidationError: If configuration is invalid.
        ValueError: If an adapter cannot be configured.
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger.info("Loading purchasing service...")

    service, store, publisher = build_service(settings)

    try:
        _run_cli_interactive(CLICommandHandler(service))
    finally:
        store.close()
        if isinstance(publisher, WebhookEventPublisher):
            publisher.close()


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
