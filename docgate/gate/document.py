from dataclasses import dataclass
from pathlib import Path


class DocumentNotFoundError(Exception):
    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


@dataclass(frozen=True)
class Document:
    source: str
    text: str

    @property
    def line_count(self) -> int:
        # Newline count, so an unterminated last line is not counted.
        return self.text.count("\n")

    @classmethod
    def from_text(cls, text: str, source: str = "<memory>") -> "Document":
        return cls(source=source, text=text)


def load_document(path: str | Path) -> Document:
    """Read the target file once. Invalid UTF-8 bytes are replaced rather than rejected."""
    target = Path(path)
    if not target.is_file():
        raise DocumentNotFoundError(str(path))
    try:
        text = target.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise DocumentNotFoundError(str(path)) from exc
    return Document(source=str(path), text=text)
