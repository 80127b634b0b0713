"""Command line entry point: validate one Pod manifest and exit with its status."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from podvalidator import __version__
from podvalidator.service.driver import FatalError, ManifestValidator, Outcome, to_result
from podvalidator.settings import LOG_LEVELS, Settings

logger = logging.getLogger(__name__)

STDIN_NAME = "<stdin>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="podvalidator",
        description="Validate a v1/Pod YAML manifest and report every violation.",
    )
    parser.add_argument("file", help="Manifest to validate ('-' reads standard input)")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level for diagnostics on stderr (default: from settings)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def render_text(outcome: Outcome, source: str) -> list[str]:
    """One output line per finding, or a single line for a fatal error."""
    if isinstance(outcome, FatalError):
        return [f"{source}: {outcome.message}"]
    return [finding.render(source) for finding in outcome.findings]


def render_json(outcome: Outcome, source: str) -> str:
    if isinstance(outcome, FatalError):
        payload = {"file": source, "error": outcome.message, "reason": str(outcome.reason)}
    else:
        payload = {"file": source, **to_result(outcome).model_dump()}
    return json.dumps(payload, indent=2)


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, validate, print, and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as exc:
        errors = "; ".join(
            f"PODVALIDATOR_{'_'.join(map(str, err['loc'])).upper()}: {err['msg']}"
            for err in exc.errors()
        )
        parser.error(f"invalid settings: {errors}")
    logging.basicConfig(level=args.log_level or settings.log_level)
    logger.debug("podvalidator v%s", __version__)

    validator = ManifestValidator()
    if args.file == "-":
        source = STDIN_NAME
        outcome = validator.validate_bytes(sys.stdin.buffer.read())
    else:
        path = Path(args.file)
        source = path.name
        outcome = validator.validate_file(path)

    if args.format == "json":
        print(render_json(outcome, source))
    else:
        for line in render_text(outcome, source):
            print(line)
    return outcome.exit_code


def main(argv: list[str] | None = None) -> None:
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
