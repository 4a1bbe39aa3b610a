#!/usr/bin/env python
"""CLI for the AI search bot."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from ai_search_bot.config import create_from_config, get_default_config_path, load_config
from ai_search_bot.config.factory import create_telegram_channel
from ai_search_bot.messaging import ConsoleChannel

logger = logging.getLogger(__name__)

CONSOLE_CHAT_ID = "console"


class CLIArgs(BaseModel):
    """Arguments shared by every subcommand."""

    config: Path

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


class SearchArgs(CLIArgs):
    """Validated arguments for the search subcommand."""

    query: str
    chat_id: int | None = None

    @field_validator("query")
    @classmethod
    def query_must_not_be_command(cls, v: str) -> str:
        if not v.strip() or v.startswith("/"):
            raise ValueError("Query must be non-empty text that does not start with '/'")
        return v


class WebhookArgs(CLIArgs):
    """Validated arguments for the set-webhook subcommand."""

    webhook_url: str

    @field_validator("webhook_url")
    @classmethod
    def webhook_must_be_https(cls, v: str) -> str:
        if not v.startswith("https://"):
            raise ValueError("Webhook URL must use https://")
        return v


async def run_search(args: SearchArgs) -> None:
    """Run one query through the pipeline.

    Results go to the console unless a Telegram chat ID is given.
    """
    config = load_config(args.config)
    if args.chat_id is None:
        bot = create_from_config(config, channel=ConsoleChannel())
        target: int | str = CONSOLE_CHAT_ID
    else:
        bot = create_from_config(config)
        target = args.chat_id

    logger.info(f"Running search for: {args.query}")
    logger.info(f"Config: {args.config}")

    state = await bot.handle_text(target, args.query)
    logger.info(f"Finished with state: {state}")


async def run_set_webhook(args: WebhookArgs) -> None:
    """Register the Telegram webhook URL."""
    config = load_config(args.config)
    channel = create_telegram_channel(config.telegram)
    result = await channel.set_webhook(args.webhook_url)
    logger.info(f"Webhook set: {result}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Search the web with AI-annotated results.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Run a single search query")
    search_parser.add_argument("query", help="Search query, plain or with operators")
    search_parser.add_argument(
        "--chat-id",
        type=int,
        default=None,
        help="Deliver results to this Telegram chat instead of the console",
    )

    webhook_parser = subparsers.add_parser("set-webhook", help="Register the Telegram webhook")
    webhook_parser.add_argument("url", help="Public HTTPS URL of the webhook endpoint")

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        if ns.command == "search":
            runner = run_search(
                SearchArgs(config=config_path, query=ns.query, chat_id=ns.chat_id)
            )
        else:
            runner = run_set_webhook(WebhookArgs(config=config_path, webhook_url=ns.url))
    except ValidationError as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(runner)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
