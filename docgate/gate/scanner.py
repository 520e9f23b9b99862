from docgate.gate.document import Document
from docgate.gate.rules import CheckResult, Outcome, Rule


def evaluate_rule(rule: Rule, text: str) -> CheckResult:
    if rule.matches(text):
        return CheckResult(rule=rule, outcome=Outcome.PASS, detected=rule.detect_families(text))
    return CheckResult(rule=rule, outcome=Outcome.FAIL if rule.required else Outcome.WARN)


def scan(document: Document, rules: tuple[Rule, ...] | list[Rule]) -> tuple[CheckResult, ...]:
    """Evaluate every rule against the whole document, in catalog order.

    A miss never stops the scan; required misses become FAIL and optional
    misses become WARN.
    """
    return tuple(evaluate_rule(rule, document.text) for rule in rules)
