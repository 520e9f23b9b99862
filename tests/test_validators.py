from docgate.gate.config import BRIEF_SECTIONS
from docgate.gate.document import Document
from docgate.gate.rules import Outcome
from docgate.gate.validators import validate_architecture, validate_brief
from docgate.gate.verdict import Verdict

from conftest import build_brief


def _outcomes(report) -> dict[str, Outcome]:
    return {result.rule.name: result.outcome for result in report.results}


def test_complete_brief_without_placeholders_is_complete():
    report = validate_brief(Document.from_text(build_brief()))
    assert report.coverage.completeness == 100
    assert report.placeholders.count == 0
    assert report.verdict is Verdict.COMPLETE
    assert report.exit_code == 0


def test_nine_sections_and_one_placeholder_is_mostly_complete():
    sections = BRIEF_SECTIONS[:4] + BRIEF_SECTIONS[5:9] + BRIEF_SECTIONS[10:]
    report = validate_brief(Document.from_text(build_brief(sections, extra="Owner: {{OWNER}}")))
    assert report.coverage.completeness == 81
    assert report.verdict is Verdict.MOSTLY_COMPLETE
    assert report.exit_code == 1
    assert report.coverage.missing == ("Market & Competition", "Dependencies")
    assert report.placeholders.tokens == ("{{OWNER}}",)


def test_three_sections_is_incomplete():
    report = validate_brief(Document.from_text(build_brief(BRIEF_SECTIONS[:3])))
    assert report.coverage.completeness == 27
    assert report.verdict is Verdict.INCOMPLETE
    assert report.exit_code == 1
    assert len(report.coverage.missing) == 8


def test_all_sections_with_placeholder_is_not_complete():
    report = validate_brief(Document.from_text(build_brief(extra="Due: {{DUE_DATE}}")))
    assert report.coverage.completeness == 100
    assert report.verdict is Verdict.MOSTLY_COMPLETE


def test_advisories_never_change_brief_verdict():
    short = validate_brief(Document.from_text(build_brief()))
    assert any(not advisory.passed for advisory in short.advisories)
    assert short.verdict is Verdict.COMPLETE


def test_empty_brief_is_incomplete_without_crashing():
    report = validate_brief(Document.from_text(""))
    assert report.coverage.completeness == 0
    assert report.verdict is Verdict.INCOMPLETE
    assert len(report.results) == 11


def test_architecture_without_pattern_family_is_invalid(architecture_base):
    report = validate_architecture(Document.from_text(architecture_base))
    outcomes = _outcomes(report)
    assert outcomes["Architectural pattern identified"] is Outcome.FAIL
    assert report.tally.failed >= 1
    assert report.verdict is Verdict.INVALID
    assert report.exit_code == 1


def test_layered_keyword_flips_pattern_family(architecture_base):
    report = validate_architecture(Document.from_text(architecture_base + "\nWe use a layered design.\n"))
    assert _outcomes(report)["Architectural pattern identified"] is Outcome.PASS


def test_complete_architecture_is_valid_despite_warnings(architecture_complete):
    report = validate_architecture(Document.from_text(architecture_complete))
    outcomes = _outcomes(report)
    assert report.tally.failed == 0
    assert outcomes["Availability NFRs addressed"] is Outcome.WARN
    assert report.tally.warned > 0
    assert report.verdict is Verdict.VALID
    assert report.exit_code == 0


def test_architecture_report_groups_follow_category_order(architecture_complete):
    report = validate_architecture(Document.from_text(architecture_complete))
    categories = [category for category, _ in report.grouped()]
    assert categories == [
        "Required Sections",
        "NFR Coverage",
        "Technical Completeness",
        "Architecture Quality",
        "Specific Architecture Patterns",
        "Integration Patterns",
    ]
    assert sum(len(results) for _, results in report.grouped()) == len(report.results)


def test_report_dicts_carry_verdict_and_counts(architecture_complete):
    payload = validate_architecture(Document.from_text(architecture_complete)).to_dict()
    assert payload["verdict"] == "VALID"
    assert payload["tally"]["failed"] == 0
    assert 0 <= payload["tally"]["pass_rate"] <= 100

    brief_payload = validate_brief(Document.from_text(build_brief())).to_dict()
    assert brief_payload["coverage"]["completeness"] == 100
    assert len(brief_payload["advisories"]) == 5
