"""
Raw document handling for the Intake context.

A RawDocument is already-decoded text plus what kind of document it is.
Binary formats (PDF, DOCX) are decoded by the caller; this module only
reads files that are plain UTF-8 text and rejects anything else with
UnreadableDocumentError before the parsers ever see it.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from atlas.contexts.intake.logger import _log_debug
from atlas.exceptions import UnreadableDocumentError


class DocumentKind(str, Enum):
    RESUME = "resume"
    JOB_POSTING = "job_posting"


@dataclass(frozen=True)
class RawDocument:
    """Decoded document text. Consumed once by the segmenter or extractor."""

    text: str
    kind: DocumentKind
    name: str = ""


def read_document(file_path: Path, kind: DocumentKind) -> RawDocument:
    """
    Read a plain-text document from disk.

    Args:
        file_path: Path to a UTF-8 text file
        kind: Whether the file holds a resume or a job posting

    Returns:
        RawDocument with the decoded text and the file stem as name

    Raises:
        UnreadableDocumentError: If the file is missing, binary, or not UTF-8
    """
    file_path = Path(file_path)

    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise UnreadableDocumentError("Could not read document", file_path, e) from e

    if b"\x00" in data:
        raise UnreadableDocumentError(
            "Document looks binary; decode it to plain text first", file_path
        )

    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise UnreadableDocumentError("Document is not valid UTF-8 text", file_path, e) from e

    _log_debug(f"Read {kind.value} document {file_path.name} ({len(text)} chars)")

    return RawDocument(text=text, kind=kind, name=file_path.stem)
