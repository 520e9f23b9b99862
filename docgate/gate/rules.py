import re
from dataclasses import dataclass, field
from enum import Enum


class Outcome(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


def compile_alternation(fragments: list[str] | tuple[str, ...], *, ignore_case: bool = True) -> re.Pattern[str]:
    """Compile literal fragments into one alternation searched anywhere in the text."""
    if not fragments:
        raise ValueError("at least one fragment is required")
    flags = re.IGNORECASE if ignore_case else 0
    return re.compile("|".join(re.escape(fragment) for fragment in fragments), flags)


def compile_section_header(section: str) -> re.Pattern[str]:
    return re.compile(rf"^#{{1,3}}[ \t]*{re.escape(section)}", re.IGNORECASE | re.MULTILINE)


@dataclass(frozen=True)
class Family:
    label: str
    pattern: re.Pattern[str]


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: re.Pattern[str]
    required: bool
    category: str = ""
    missing_message: str | None = None
    families: tuple[Family, ...] = field(default_factory=tuple)

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def detect_families(self, text: str) -> tuple[str, ...]:
        return tuple(family.label for family in self.families if family.pattern.search(text))


@dataclass(frozen=True)
class CheckResult:
    rule: Rule
    outcome: Outcome
    detected: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASS

    def to_dict(self) -> dict:
        return {
            "name": self.rule.name,
            "category": self.rule.category,
            "required": self.rule.required,
            "outcome": self.outcome.value,
            "detected": list(self.detected),
        }


def keyword_rule(name: str, fragments: list[str], *, required: bool, category: str, missing_message: str | None = None) -> Rule:
    return Rule(
        name=name,
        pattern=compile_alternation(fragments),
        required=required,
        category=category,
        missing_message=missing_message,
    )


def family_rule(name: str, families: dict[str, list[str]], *, category: str, missing_message: str) -> Rule:
    """A required rule that passes when any of the named keyword families is present."""
    compiled = tuple(Family(label=label, pattern=compile_alternation(fragments)) for label, fragments in families.items())
    union = [fragment for fragments in families.values() for fragment in fragments]
    return Rule(
        name=name,
        pattern=compile_alternation(union),
        required=True,
        category=category,
        missing_message=missing_message,
        families=compiled,
    )


def section_rule(section: str, *, category: str) -> Rule:
    return Rule(name=section, pattern=compile_section_header(section), required=True, category=category)
