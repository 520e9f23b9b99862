from docgate.gate.config import BRIEF_SECTIONS
from docgate.gate.rules import Rule, family_rule, keyword_rule, section_rule

REQUIRED_SECTIONS = "Required Sections"
NFR_COVERAGE = "NFR Coverage"
TECHNICAL_COMPLETENESS = "Technical Completeness"
ARCHITECTURE_QUALITY = "Architecture Quality"
ARCHITECTURE_PATTERNS = "Specific Architecture Patterns"
INTEGRATION_PATTERNS = "Integration Patterns"

ARCHITECTURE_CATEGORIES = [
    REQUIRED_SECTIONS,
    NFR_COVERAGE,
    TECHNICAL_COMPLETENESS,
    ARCHITECTURE_QUALITY,
    ARCHITECTURE_PATTERNS,
    INTEGRATION_PATTERNS,
]

BRIEF_CATEGORY = "Required Sections"


def _section(name: str, fragments: list[str], required: bool = True) -> Rule:
    return keyword_rule(name, fragments, required=required, category=REQUIRED_SECTIONS)


def build_architecture_rules() -> tuple[Rule, ...]:
    # "trade-off" is checked by both Trade-off Analysis and Trade-offs documented.
    return (
        _section("System Overview", ["system overview", "overview", "introduction"]),
        _section("Architecture Pattern", ["architecture pattern", "architectural pattern", "pattern"]),
        _section("Component Design", ["component", "components", "modules"]),
        _section("Data Model", ["data model", "database", "data schema"]),
        _section("API Specifications", ["api", "endpoints", "interface"]),
        _section("NFR Mapping", ["nfr", "non-functional requirement"]),
        _section("Technology Stack", ["technology stack", "tech stack", "technologies"]),
        _section("Trade-off Analysis", ["trade-off", "tradeoff", "decisions"]),
        keyword_rule(
            "Performance NFRs addressed",
            ["performance", "caching", "response time", "latency"],
            required=True,
            category=NFR_COVERAGE,
        ),
        keyword_rule(
            "Scalability NFRs addressed",
            ["scalability", "scaling", "horizontal", "load"],
            required=True,
            category=NFR_COVERAGE,
        ),
        keyword_rule(
            "Security NFRs addressed",
            ["security", "authentication", "authorization", "encryption"],
            required=True,
            category=NFR_COVERAGE,
        ),
        keyword_rule(
            "Reliability NFRs addressed",
            ["reliability", "redundancy", "failover", "backup"],
            required=False,
            category=NFR_COVERAGE,
        ),
        keyword_rule(
            "Availability NFRs addressed",
            ["availability", "uptime", "monitoring"],
            required=False,
            category=NFR_COVERAGE,
        ),
        keyword_rule(
            "Maintainability addressed",
            ["maintainability", "testing", "documentation", "ci/cd"],
            required=False,
            category=NFR_COVERAGE,
        ),
        keyword_rule(
            "Technology choices justified",
            ["rationale", "reason", "because", "chosen", "selected"],
            required=True,
            category=TECHNICAL_COMPLETENESS,
        ),
        keyword_rule(
            "Component interfaces defined",
            ["interface", "api", "contract", "endpoint"],
            required=True,
            category=TECHNICAL_COMPLETENESS,
        ),
        keyword_rule(
            "Data entities specified",
            ["entity", "entities", "table", "schema", "model"],
            required=True,
            category=TECHNICAL_COMPLETENESS,
        ),
        keyword_rule(
            "Deployment described",
            ["deployment", "deploy", "infrastructure", "hosting"],
            required=False,
            category=TECHNICAL_COMPLETENESS,
        ),
        keyword_rule(
            "Architectural drivers identified",
            ["driver", "constraint", "requirement", "nfr"],
            required=False,
            category=ARCHITECTURE_QUALITY,
        ),
        keyword_rule(
            "Alternatives considered",
            ["alternative", "option", "considered", "vs", "versus"],
            required=False,
            category=ARCHITECTURE_QUALITY,
        ),
        keyword_rule(
            "Trade-offs documented",
            ["trade-off", "tradeoff", "cost", "benefit"],
            required=True,
            category=ARCHITECTURE_QUALITY,
        ),
        keyword_rule(
            "Future considerations",
            ["future", "scalability", "growth", "evolution"],
            required=False,
            category=ARCHITECTURE_QUALITY,
        ),
        family_rule(
            "Architectural pattern identified",
            {
                "Monolith": ["monolith"],
                "Microservices": ["microservice"],
                "Serverless": ["serverless"],
                "Layered architecture": ["layered", "layer"],
            },
            category=ARCHITECTURE_PATTERNS,
            missing_message="No architectural pattern clearly identified",
        ),
        keyword_rule(
            "Integration pattern specified",
            ["rest", "restful", "graphql", "grpc", "message queue", "kafka", "event"],
            required=True,
            category=INTEGRATION_PATTERNS,
            missing_message="Integration pattern not clearly specified",
        ),
    )


def build_brief_rules() -> tuple[Rule, ...]:
    return tuple(section_rule(section, category=BRIEF_CATEGORY) for section in BRIEF_SECTIONS)


ARCHITECTURE_RULES: tuple[Rule, ...] = build_architecture_rules()
BRIEF_RULES: tuple[Rule, ...] = build_brief_rules()
