from __future__ import annotations
import argparse
import logging
import os
import sys

from ooo_app.config import EXIT_FAILURE, EXIT_NEUTRAL, EXIT_SUCCESS, HANDLED_EVENT, Settings
from ooo_app.errors import ConfigError
from ooo_app.github import GitHubClient, load_event
from ooo_app.models import Outcome
from ooo_app.runner import run
from ooo_app.sheets import SheetGateway

log = logging.getLogger("ooo_app")

EXIT_CODES = {"success": EXIT_SUCCESS, "neutral": EXIT_NEUTRAL, "failure": EXIT_FAILURE}

def init_logging(level: str) -> None:
    numeric_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Mark OOO days on the services sheet from an issue comment.")
    ap.add_argument("--event-path", default=os.environ.get("GITHUB_EVENT_PATH", ""),
                    help="Path to the webhook payload JSON (defaults to $GITHUB_EVENT_PATH).")
    ap.add_argument("--event-name", default=os.environ.get("GITHUB_EVENT_NAME", ""),
                    help="Webhook event name (defaults to $GITHUB_EVENT_NAME).")
    return ap.parse_args(argv)

def handle(event_name: str, payload: dict) -> Outcome:
    name_action = (event_name, payload.get("action", ""))
    if name_action != HANDLED_EVENT:
        return Outcome.neutral(f"This event is not handled: {name_action[0]}.{name_action[1]}")

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        return Outcome.failure(str(e))

    return run(payload, settings, SheetGateway.from_settings, GitHubClient.for_payload)

def main(argv=None) -> int:
    args = parse_args(argv)
    init_logging(os.environ.get("LOG_LEVEL", "INFO"))
    try:
        _, payload = load_event(args.event_path)
        outcome = handle(args.event_name, payload)
    except Exception as e:
        log.exception("Run aborted")
        outcome = Outcome.failure(f"{type(e).__name__}: {e}")

    log.info("%s: %s", outcome.status.upper(), outcome.message)
    return EXIT_CODES[outcome.status]

if __name__ == "__main__":
    sys.exit(main())
