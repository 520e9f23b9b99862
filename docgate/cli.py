import logging
import sys

from docgate.gate.document import DocumentNotFoundError, load_document
from docgate.gate.report import render_report
from docgate.gate.validators import VALIDATORS
from docgate.observability.logging import log_event, setup_logging
from docgate.observability.timing import Timer

logger = logging.getLogger("docgate.cli")

PROGRAMS = {
    "architecture": {
        "prog": "validate-architecture",
        "metavar": "path-to-architecture-document",
        "example": "docs/architecture-myproject-2025-12-09.md",
    },
    "brief": {
        "prog": "validate-brief",
        "metavar": "product-brief-file",
        "example": "docs/product-brief-my-project.md",
    },
}


def target_path(argv: list[str]) -> str | None:
    """The first argument is the document path, taken verbatim; the rest are ignored."""
    return argv[0] if argv and argv[0] else None


def _usage_error(kind: str) -> int:
    program = PROGRAMS[kind]
    log_event(logger, {"event": "validation.usage_error", "kind": kind}, logging.WARNING)
    print("Error: No file specified")
    print(f"Usage: {program['prog']} <{program['metavar']}>")
    print("")
    print(f"Example: {program['prog']} {program['example']}")
    return 1


def run(kind: str, argv: list[str] | None = None, *, color: bool = True) -> int:
    setup_logging()
    path = target_path(sys.argv[1:] if argv is None else argv)
    if path is None:
        return _usage_error(kind)

    try:
        document = load_document(path)
    except DocumentNotFoundError as exc:
        log_event(logger, {"event": "validation.not_found", "kind": kind}, logging.WARNING)
        red, reset = ("\033[0;31m", "\033[0m") if color else ("", "")
        print(f"{red}Error: File not found: {exc.path}{reset}")
        return 1

    report = VALIDATORS[kind](document)
    timer = Timer()
    with timer.phase("render"):
        output = render_report(report, color=color)
    print(output)
    log_event(
        logger,
        {
            "event": "validation.reported",
            "kind": kind,
            "verdict": report.verdict.value,
            "exit_code": report.exit_code,
            **timer.durations_ms,
        },
    )
    return report.exit_code


def architecture_main() -> int:
    return run("architecture")


def brief_main() -> int:
    return run("brief")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] not in PROGRAMS:
        kinds = "|".join(sorted(PROGRAMS))
        print(f"Usage: docgate {{{kinds}}} <path>")
        return 1
    return run(args[0], args[1:])


if __name__ == "__main__":
    sys.exit(main())
