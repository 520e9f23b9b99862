import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from docgate.gate.document import DocumentNotFoundError, load_document
from docgate.gate.rules import Outcome
from docgate.gate.validators import VALIDATORS
from docgate.observability.logging import log_event

logger = logging.getLogger("docgate.audit")


def _audit_row(kind: str, path: Path) -> dict[str, Any]:
    try:
        document = load_document(path)
    except DocumentNotFoundError:
        return {"source": str(path), "pass": False, "verdict": None, "exit_code": 1, "errors": ["not_found"]}

    report = VALIDATORS[kind](document)
    row: dict[str, Any] = {
        "source": str(path),
        "pass": report.verdict.passed,
        "verdict": report.verdict.value,
        "exit_code": report.exit_code,
        "errors": [],
    }
    if kind == "architecture":
        row["pass_rate"] = report.tally.pass_rate
        row["errors"] = [f"fail:{result.rule.name}" for result in report.results if result.outcome is Outcome.FAIL]
    else:
        row["completeness"] = report.coverage.completeness
        row["errors"] = [f"missing:{section}" for section in report.coverage.missing]
        row["errors"].extend(f"placeholder:{token}" for token in report.placeholders.tokens)
    return row


def _render_markdown_report(report: dict[str, Any]) -> str:
    lines = []
    lines.append("# Documentation Audit")
    lines.append("")
    lines.append(f"- kind: `{report['kind']}`")
    lines.append(f"- generated_at: `{report['generated_at']}`")
    lines.append("")
    lines.append("## Summary")
    lines.append("")
    lines.append("| documents | pass_count | fail_count |")
    lines.append("| ---: | ---: | ---: |")
    summary = report["summary"]
    lines.append(f"| {summary['documents']} | {summary['pass_count']} | {summary['fail_count']} |")
    lines.append("")
    lines.append("## Results")
    lines.append("")
    lines.append("| document | verdict |")
    lines.append("| --- | --- |")
    for row in report["results"]:
        lines.append(f"| `{row['source']}` | {row['verdict'] or 'NOT_FOUND'} |")
    lines.append("")
    lines.append("## Failures")
    lines.append("")
    failures = [row for row in report["results"] if not row["pass"]]
    if not failures:
        lines.append("- None")
    else:
        for row in failures:
            lines.append(f"- `{row['source']}`: {', '.join(row['errors']) or row['verdict']}")
    lines.append("")
    return "\n".join(lines)


def run_audit(
    *,
    kind: str,
    paths: list[Path],
    out_dir: Path = Path("reports/audit"),
    fail_on_error: bool = True,
) -> tuple[dict[str, Any], int]:
    if kind not in VALIDATORS:
        raise ValueError(f"unknown validator kind: {kind}")

    # Documents are independent; rows keep argument order.
    results = [_audit_row(kind, Path(path)) for path in paths]

    pass_count = sum(1 for row in results if row["pass"])
    fail_count = len(results) - pass_count
    report = {
        "kind": kind,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "summary": {
            "documents": len(results),
            "pass_count": pass_count,
            "fail_count": fail_count,
        },
        "results": results,
    }

    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / "audit_report.json").write_text(json.dumps(report, ensure_ascii=False, indent=2), encoding="utf-8")
    (out_dir / "audit_report.md").write_text(_render_markdown_report(report), encoding="utf-8")

    exit_code = 1 if (fail_on_error and fail_count > 0) else 0
    log_event(
        logger,
        {
            "event": "audit.completed",
            "kind": kind,
            "documents": len(results),
            "pass_count": pass_count,
            "fail_count": fail_count,
            "exit_code": exit_code,
        },
    )
    return report, exit_code
