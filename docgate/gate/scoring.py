from dataclasses import dataclass

from docgate.gate.config import PLACEHOLDER_PATTERN
from docgate.gate.rules import CheckResult, Outcome


def percentage(numerator: int, denominator: int) -> int:
    """Truncating integer percentage; 0 when nothing was counted."""
    if denominator <= 0:
        return 0
    return numerator * 100 // denominator


@dataclass(frozen=True)
class Tally:
    passed: int = 0
    failed: int = 0
    warned: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.warned

    @property
    def scored(self) -> int:
        return self.passed + self.failed

    @property
    def pass_rate(self) -> int:
        return percentage(self.passed, self.scored)

    def add(self, outcome: Outcome) -> "Tally":
        if outcome is Outcome.PASS:
            return Tally(self.passed + 1, self.failed, self.warned)
        if outcome is Outcome.FAIL:
            return Tally(self.passed, self.failed + 1, self.warned)
        return Tally(self.passed, self.failed, self.warned + 1)

    def to_dict(self) -> dict[str, int]:
        return {
            "passed": self.passed,
            "failed": self.failed,
            "warned": self.warned,
            "total": self.total,
            "pass_rate": self.pass_rate,
        }


def tally(results: tuple[CheckResult, ...] | list[CheckResult]) -> Tally:
    current = Tally()
    for result in results:
        current = current.add(result.outcome)
    return current


@dataclass(frozen=True)
class SectionCoverage:
    found: tuple[str, ...]
    missing: tuple[str, ...]

    @property
    def total(self) -> int:
        return len(self.found) + len(self.missing)

    @property
    def completeness(self) -> int:
        return percentage(len(self.found), self.total)

    def to_dict(self) -> dict:
        return {
            "found": list(self.found),
            "missing": list(self.missing),
            "total": self.total,
            "completeness": self.completeness,
        }


def section_coverage(results: tuple[CheckResult, ...] | list[CheckResult]) -> SectionCoverage:
    found = tuple(result.rule.name for result in results if result.passed)
    missing = tuple(result.rule.name for result in results if not result.passed)
    return SectionCoverage(found=found, missing=missing)


@dataclass(frozen=True)
class PlaceholderSet:
    tokens: tuple[str, ...]
    lines: tuple[tuple[int, str], ...]

    @property
    def count(self) -> int:
        return len(self.tokens)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "tokens": list(self.tokens),
            "lines": [{"line": number, "text": text} for number, text in self.lines],
        }


def find_placeholders(text: str) -> PlaceholderSet:
    tokens: list[str] = []
    lines: list[tuple[int, str]] = []
    for number, line in enumerate(text.splitlines(), start=1):
        found = PLACEHOLDER_PATTERN.findall(line)
        if not found:
            continue
        lines.append((number, line))
        for token in found:
            if token not in tokens:
                tokens.append(token)
    return PlaceholderSet(tokens=tuple(tokens), lines=tuple(lines))
