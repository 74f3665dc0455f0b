"""
Interactive CLI adapter for the Wit client.

Architectural role:
- Builds a `Wit` client from the environment (or `--token` / `--token-file`).
- Reads lines from stdin and prints the `GET /message` parse for each.

Request lifecycle (per line):
1. Read stdin.
2. Skip empty input.
3. Call `client.message(text)` and print the JSON result.

Error handling strategy:
- `WitError` is logged at ERROR level and the loop continues.
- EOF and keyboard interrupts end the loop without traceback output.
- A missing access token aborts startup with exit code 2.
"""

import argparse
import json
import logging
import sys

from witclient.client import Wit
from witclient.config import LOG_LEVEL, WIT_API_HOST, WIT_API_VERSION
from witclient.errors import ConfigurationError, WitError


logger = logging.getLogger(__name__)

PROMPT = "> "


def format_result(result) -> str:
    return json.dumps(result, indent=2, ensure_ascii=False)


def run_repl(client: Wit, read_line=input, write=print) -> None:
    """Run the read/parse/print loop until EOF or Ctrl-C."""
    while True:
        try:
            text = read_line(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            write("")
            break

        if not text:
            continue

        try:
            write(format_result(client.message(text)))
        except WitError as exc:
            client.logger.error("error: %s", exc)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="witclient",
        description="Interactive Wit.ai message parser.",
    )
    parser.add_argument("--token", help="Server access token (default: WIT_ACCESS_TOKEN)")
    parser.add_argument("--token-file", help="File holding the server access token")
    parser.add_argument("--host", default=WIT_API_HOST, help="API host")
    parser.add_argument("--api-version", default=WIT_API_VERSION, help="API version")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
    )

    try:
        client = Wit(
            access_token=args.token,
            token_file=args.token_file,
            api_host=args.host,
            api_version=args.api_version,
        )
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2

    run_repl(client)
    return 0


if __name__ == "__main__":
    sys.exit(main())
