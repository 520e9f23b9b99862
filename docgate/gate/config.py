import re

ARCHITECTURE_TEMPLATE_PATH = "skills/bmad-architect/templates/architecture.template.md"
BRIEF_TEMPLATE_PATH = "templates/product-brief.template.md"
DISCOVERY_CHECKLIST_PATH = "scripts/discovery-checklist.sh"

BRIEF_SECTIONS: list[str] = [
    "Problem Statement",
    "Target Users",
    "Proposed Solution",
    "Success Metrics",
    "Market & Competition",
    "Business Model",
    "Technical Considerations",
    "Risks & Mitigation",
    "Resource Estimates",
    "Dependencies",
    "Next Steps",
]

PLACEHOLDER_PATTERN = re.compile(r"\{\{[A-Z_]+\}\}")
MAX_LISTED_PLACEHOLDER_LINES = 10

MIN_BRIEF_LINES = 100
MOSTLY_COMPLETE_THRESHOLD = 80

VALIDATOR_KINDS = ["architecture", "brief"]
