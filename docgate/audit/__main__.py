import argparse
import sys
from pathlib import Path

from docgate.audit.runner import run_audit
from docgate.gate.config import VALIDATOR_KINDS
from docgate.observability.logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate a batch of documents and write an audit report.")
    parser.add_argument("--kind", choices=VALIDATOR_KINDS, required=True)
    parser.add_argument("--out-dir", default="reports/audit")
    parser.add_argument("--fail-on-error", action=argparse.BooleanOptionalAction, default=True)
    parser.add_argument("paths", nargs="+")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = parse_args(argv)
    _, exit_code = run_audit(
        kind=args.kind,
        paths=[Path(path) for path in args.paths],
        out_dir=Path(args.out_dir),
        fail_on_error=bool(args.fail_on_error),
    )
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
