from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from docgate.gate.catalog import REQUIRED_SECTIONS
from docgate.gate.config import (
    ARCHITECTURE_TEMPLATE_PATH,
    BRIEF_TEMPLATE_PATH,
    DISCOVERY_CHECKLIST_PATH,
    MAX_LISTED_PLACEHOLDER_LINES,
)
from docgate.gate.rules import CheckResult, Outcome
from docgate.gate.validators import ArchitectureReport, BriefReport

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

ANSI = {
    "red": "\033[0;31m",
    "green": "\033[0;32m",
    "yellow": "\033[1;33m",
    "blue": "\033[0;34m",
    "reset": "\033[0m",
}
PLAIN = {key: "" for key in ANSI}

ARCHITECTURE_FIXES = [
    "Ensure all required sections are present with clear headings",
    "Document NFR mapping explicitly in a table or section",
    "Include technology choice rationale for each major decision",
    "Document trade-offs for major architectural decisions",
    "Specify architectural pattern (monolith, microservices, etc.)",
]

BRIEF_NEXT_STEPS = [
    "Review content for accuracy and clarity",
    "Get stakeholder sign-off",
    "Hand off to Product Manager for PRD creation",
]

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


def describe(result: CheckResult) -> tuple[str, str, str]:
    """Return (tag, colour key, text) for one architecture check line."""
    rule = result.rule
    if result.outcome is Outcome.PASS:
        return "PASS", "green", rule.name
    if result.outcome is Outcome.FAIL:
        return "FAIL", "red", rule.missing_message or f"{rule.name} - MISSING"
    if rule.missing_message:
        return "WARN", "yellow", rule.missing_message
    if rule.category == REQUIRED_SECTIONS:
        return "WARN", "yellow", f"{rule.name} - Not found (optional)"
    return "WARN", "yellow", f"{rule.name} - Not found"


def render_architecture_report(report: ArchitectureReport, *, color: bool = True) -> str:
    groups = [
        (category, [(result.detected, *describe(result)) for result in results])
        for category, results in report.grouped()
    ]
    return _env.get_template("architecture_report.txt.j2").render(
        c=ANSI if color else PLAIN,
        source=report.source,
        groups=groups,
        tally=report.tally,
        passed=report.verdict.passed,
        fixes=ARCHITECTURE_FIXES,
        template_path=ARCHITECTURE_TEMPLATE_PATH,
    )


def render_brief_report(report: BriefReport, *, color: bool = True) -> str:
    placeholder_lines = report.placeholders.lines
    return _env.get_template("brief_report.txt.j2").render(
        c=ANSI if color else PLAIN,
        source=report.source,
        results=report.results,
        coverage=report.coverage,
        placeholders=report.placeholders,
        listed_lines=placeholder_lines[:MAX_LISTED_PLACEHOLDER_LINES],
        hidden_lines=max(0, len(placeholder_lines) - MAX_LISTED_PLACEHOLDER_LINES),
        advisories=report.advisories,
        verdict=report.verdict.value,
        next_steps=BRIEF_NEXT_STEPS,
        template_path=BRIEF_TEMPLATE_PATH,
        checklist_path=DISCOVERY_CHECKLIST_PATH,
    )


def render_report(report: ArchitectureReport | BriefReport, *, color: bool = True) -> str:
    if isinstance(report, ArchitectureReport):
        return render_architecture_report(report, color=color)
    return render_brief_report(report, color=color)
