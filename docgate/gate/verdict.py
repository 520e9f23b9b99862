from enum import Enum

from docgate.gate.config import MOSTLY_COMPLETE_THRESHOLD
from docgate.gate.scoring import PlaceholderSet, SectionCoverage, Tally


class Verdict(str, Enum):
    VALID = "VALID"
    INVALID = "INVALID"
    COMPLETE = "COMPLETE"
    MOSTLY_COMPLETE = "MOSTLY_COMPLETE"
    INCOMPLETE = "INCOMPLETE"

    @property
    def passed(self) -> bool:
        return self in {Verdict.VALID, Verdict.COMPLETE}


def exit_code_for(verdict: Verdict) -> int:
    return 0 if verdict.passed else 1


def architecture_verdict(tally: Tally) -> Verdict:
    return Verdict.VALID if tally.failed == 0 else Verdict.INVALID


def brief_verdict(coverage: SectionCoverage, placeholders: PlaceholderSet) -> Verdict:
    completeness = coverage.completeness
    if completeness == 100 and placeholders.count == 0:
        return Verdict.COMPLETE
    if completeness >= MOSTLY_COMPLETE_THRESHOLD:
        return Verdict.MOSTLY_COMPLETE
    return Verdict.INCOMPLETE
