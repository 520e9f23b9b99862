import re
from dataclasses import dataclass

from docgate.gate.config import MIN_BRIEF_LINES
from docgate.gate.document import Document

METRIC_PATTERN = re.compile(r"\d+%|\d+ users|\d+ days|weeks|months")
TIMELINE_PATTERN = re.compile(r"Q[1-4] 20\d\d|20\d\d-\d\d-\d\d|timeline|deadline|launch", re.IGNORECASE)
STAKEHOLDER_PATTERN = re.compile(r"stakeholder|interview|consulted", re.IGNORECASE)
RISK_PATTERN = re.compile(r"risk|mitigation|assumption", re.IGNORECASE)


@dataclass(frozen=True)
class Advisory:
    name: str
    passed: bool
    message: str

    def to_dict(self) -> dict:
        return {"name": self.name, "passed": self.passed, "message": self.message}


def _advisory(name: str, passed: bool, pass_message: str, warn_message: str) -> Advisory:
    return Advisory(name=name, passed=passed, message=pass_message if passed else warn_message)


def check_length(document: Document) -> Advisory:
    lines = document.line_count
    return _advisory(
        "length",
        lines >= MIN_BRIEF_LINES,
        f"Document has sufficient length ({lines} lines)",
        f"Document is very short ({lines} lines). Consider adding more detail.",
    )


def check_metrics(document: Document) -> Advisory:
    return _advisory(
        "metrics",
        METRIC_PATTERN.search(document.text) is not None,
        "Document includes quantifiable metrics",
        "Consider adding more quantifiable metrics (%, users, timeframes)",
    )


def check_timeline(document: Document) -> Advisory:
    return _advisory(
        "timeline",
        TIMELINE_PATTERN.search(document.text) is not None,
        "Document includes timeline/dates",
        "Consider adding specific timelines and dates",
    )


def check_stakeholders(document: Document) -> Advisory:
    return _advisory(
        "stakeholders",
        STAKEHOLDER_PATTERN.search(document.text) is not None,
        "Document references stakeholders/interviews",
        "Consider documenting stakeholders consulted",
    )


def check_risks(document: Document) -> Advisory:
    return _advisory(
        "risks",
        RISK_PATTERN.search(document.text) is not None,
        "Document addresses risks and assumptions",
        "Document should include risk analysis",
    )


BRIEF_HEURISTICS = (check_length, check_metrics, check_timeline, check_stakeholders, check_risks)


def run_brief_heuristics(document: Document) -> tuple[Advisory, ...]:
    """Advisory content checks. They are reported only and never move the verdict."""
    return tuple(check(document) for check in BRIEF_HEURISTICS)
