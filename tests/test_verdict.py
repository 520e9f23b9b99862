import pytest

from docgate.gate.scoring import PlaceholderSet, SectionCoverage, Tally
from docgate.gate.verdict import Verdict, architecture_verdict, brief_verdict, exit_code_for

SECTIONS = tuple(f"S{i}" for i in range(11))


def _coverage(found: int) -> SectionCoverage:
    return SectionCoverage(found=SECTIONS[:found], missing=SECTIONS[found:])


def _placeholders(*tokens: str) -> PlaceholderSet:
    return PlaceholderSet(tokens=tokens, lines=tuple((i + 1, token) for i, token in enumerate(tokens)))


def test_architecture_valid_ignores_warnings():
    assert architecture_verdict(Tally(passed=20, failed=0, warned=5)) is Verdict.VALID


def test_architecture_invalid_on_any_failure():
    assert architecture_verdict(Tally(passed=20, failed=1, warned=0)) is Verdict.INVALID


@pytest.mark.parametrize(
    ("found", "tokens", "expected"),
    [
        (11, (), Verdict.COMPLETE),
        (11, ("{{OWNER}}",), Verdict.MOSTLY_COMPLETE),
        (9, (), Verdict.MOSTLY_COMPLETE),
        (9, ("{{OWNER}}",), Verdict.MOSTLY_COMPLETE),
        (8, (), Verdict.INCOMPLETE),
        (3, (), Verdict.INCOMPLETE),
        (0, (), Verdict.INCOMPLETE),
    ],
)
def test_brief_verdict_precedence(found, tokens, expected):
    assert brief_verdict(_coverage(found), _placeholders(*tokens)) is expected


def test_exit_codes():
    assert exit_code_for(Verdict.VALID) == 0
    assert exit_code_for(Verdict.COMPLETE) == 0
    for verdict in (Verdict.INVALID, Verdict.MOSTLY_COMPLETE, Verdict.INCOMPLETE):
        assert exit_code_for(verdict) == 1
