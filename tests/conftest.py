import logging

import pytest

from docgate.gate.config import BRIEF_SECTIONS

ARCHITECTURE_BASE = """# Architecture: Ledger Service

## System Overview
The ledger service records payments for the billing team.

## Component Design
Each component owns a single bounded context.

## Data Model
The data model stores accounts and transfers.

## API Specifications
The public api exposes transfer creation.

## NFR Mapping
Every nfr is mapped to a component below.

## Technology Stack
The technology stack is Python with Postgres.

## Trade-off Analysis
The main trade-off is simplicity over throughput.
"""

ARCHITECTURE_COMPLETE_EXTRAS = """
## Quality Attributes
Performance budget: p95 latency under 200 ms.
Scalability is horizontal behind the balancer.
Security relies on token authentication.

## Rationale
Postgres was chosen because the team already operates it.
Every endpoint follows a versioned contract; each entity maps to one table.

## Integration
Services talk over REST.
"""


def build_brief(sections: list[str] | None = None, *, extra: str = "") -> str:
    chosen = BRIEF_SECTIONS if sections is None else sections
    parts = ["# Product Brief: Atlas", ""]
    for section in chosen:
        parts.append(f"## {section}")
        parts.append("")
        parts.append(f"Details about {section.lower()}.")
        parts.append("")
    if extra:
        parts.append(extra)
    return "\n".join(parts)


@pytest.fixture
def architecture_base() -> str:
    return ARCHITECTURE_BASE


@pytest.fixture
def architecture_complete() -> str:
    return ARCHITECTURE_BASE + ARCHITECTURE_COMPLETE_EXTRAS + "\n## Architecture Pattern\nThe codebase is a layered application.\n"


@pytest.fixture
def write_doc(tmp_path):
    def _write(text: str, name: str = "doc.md"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _drop_json_log_handlers():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_docgate_json", False):
            root.removeHandler(handler)
