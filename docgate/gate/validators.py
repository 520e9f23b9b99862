import logging
from dataclasses import dataclass, field
from typing import Any

from docgate.gate.catalog import ARCHITECTURE_CATEGORIES, ARCHITECTURE_RULES, BRIEF_RULES
from docgate.gate.document import Document
from docgate.gate.heuristics import Advisory, run_brief_heuristics
from docgate.gate.rules import CheckResult, Rule
from docgate.gate.scanner import scan
from docgate.gate.scoring import PlaceholderSet, SectionCoverage, Tally, find_placeholders, section_coverage, tally
from docgate.gate.verdict import Verdict, architecture_verdict, brief_verdict, exit_code_for
from docgate.observability.logging import log_event
from docgate.observability.timing import Timer

logger = logging.getLogger("docgate.validation")


@dataclass(frozen=True)
class ArchitectureReport:
    source: str
    results: tuple[CheckResult, ...]
    tally: Tally
    verdict: Verdict
    timings_ms: dict[str, int] = field(default_factory=dict)

    kind = "architecture"

    @property
    def exit_code(self) -> int:
        return exit_code_for(self.verdict)

    def grouped(self) -> list[tuple[str, list[CheckResult]]]:
        groups: list[tuple[str, list[CheckResult]]] = []
        for category in ARCHITECTURE_CATEGORIES:
            members = [result for result in self.results if result.rule.category == category]
            if members:
                groups.append((category, members))
        return groups

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "source": self.source,
            "verdict": self.verdict.value,
            "passed": self.verdict.passed,
            "exit_code": self.exit_code,
            "results": [result.to_dict() for result in self.results],
            "tally": self.tally.to_dict(),
        }


@dataclass(frozen=True)
class BriefReport:
    source: str
    results: tuple[CheckResult, ...]
    coverage: SectionCoverage
    placeholders: PlaceholderSet
    advisories: tuple[Advisory, ...]
    verdict: Verdict
    timings_ms: dict[str, int] = field(default_factory=dict)

    kind = "brief"

    @property
    def exit_code(self) -> int:
        return exit_code_for(self.verdict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "source": self.source,
            "verdict": self.verdict.value,
            "passed": self.verdict.passed,
            "exit_code": self.exit_code,
            "results": [result.to_dict() for result in self.results],
            "coverage": self.coverage.to_dict(),
            "placeholders": self.placeholders.to_dict(),
            "advisories": [advisory.to_dict() for advisory in self.advisories],
        }


def _log_completed(kind: str, verdict: Verdict, counts: dict[str, int], timer: Timer) -> None:
    # Document text stays out of the log stream.
    log_event(
        logger,
        {
            "event": "validation.completed",
            "kind": kind,
            "verdict": verdict.value,
            **counts,
            **timer.durations_ms,
        },
    )


def validate_architecture(document: Document, rules: tuple[Rule, ...] = ARCHITECTURE_RULES) -> ArchitectureReport:
    timer = Timer()
    with timer.phase("scan"):
        results = scan(document, rules)
    summary = tally(results)
    verdict = architecture_verdict(summary)
    _log_completed(
        "architecture",
        verdict,
        {"passed": summary.passed, "failed": summary.failed, "warned": summary.warned, "pass_rate": summary.pass_rate},
        timer,
    )
    return ArchitectureReport(
        source=document.source,
        results=results,
        tally=summary,
        verdict=verdict,
        timings_ms=dict(timer.durations_ms),
    )


def validate_brief(document: Document, rules: tuple[Rule, ...] = BRIEF_RULES) -> BriefReport:
    timer = Timer()
    with timer.phase("scan"):
        results = scan(document, rules)
        placeholders = find_placeholders(document.text)
    with timer.phase("heuristics"):
        advisories = run_brief_heuristics(document)
    coverage = section_coverage(results)
    verdict = brief_verdict(coverage, placeholders)
    _log_completed(
        "brief",
        verdict,
        {
            "sections_found": len(coverage.found),
            "sections_total": coverage.total,
            "completeness": coverage.completeness,
            "placeholders": placeholders.count,
        },
        timer,
    )
    return BriefReport(
        source=document.source,
        results=results,
        coverage=coverage,
        placeholders=placeholders,
        advisories=advisories,
        verdict=verdict,
        timings_ms=dict(timer.durations_ms),
    )


VALIDATORS = {
    "architecture": validate_architecture,
    "brief": validate_brief,
}
