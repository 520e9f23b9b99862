from docgate.gate.document import Document, DocumentNotFoundError, load_document
from docgate.gate.validators import ArchitectureReport, BriefReport, validate_architecture, validate_brief
from docgate.gate.verdict import Verdict

__all__ = [
    "ArchitectureReport",
    "BriefReport",
    "Document",
    "DocumentNotFoundError",
    "Verdict",
    "load_document",
    "validate_architecture",
    "validate_brief",
]
