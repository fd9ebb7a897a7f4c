from __future__ import annotations

import hashlib
import logging
import re
from io import BytesIO

from docx import Document
from fastapi import UploadFile
from pypdf import PdfReader

from .models import ParsedDoc

logger = logging.getLogger(__name__)

PROCESSING_FAILED_MESSAGE = "There was a problem processing your CV."
UNSUPPORTED_TYPE_MESSAGE = "Please upload a PDF, DOC, DOCX, or TXT file."

CONTENT_TYPE_SOURCE_TYPES = {
    "application/pdf": "pdf",
    "application/msword": "doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "text/plain": "txt",
}
EXTENSION_SOURCE_TYPES = {"pdf": "pdf", "doc": "doc", "docx": "docx", "txt": "txt"}
_GENERIC_CONTENT_TYPES = {"", "application/octet-stream"}
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]+")
_READ_CHUNK_BYTES = 64 * 1024


class DocumentProcessingError(RuntimeError):
    def __init__(self, message: str = PROCESSING_FAILED_MESSAGE, *, status_code: int = 422):
        super().__init__(message)
        self.status_code = status_code


def _compute_doc_id(text: str, filename: str) -> str:
    seed = text if text.strip() else filename
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def resolve_source_type(content_type: str | None, filename: str | None) -> str:
    """Map a declared content type (or, for generic uploads, the extension) to a source type."""
    declared = (content_type or "").split(";")[0].strip().lower()
    source_type = CONTENT_TYPE_SOURCE_TYPES.get(declared)
    if source_type:
        return source_type
    if declared in _GENERIC_CONTENT_TYPES:
        name = filename or ""
        ext = name.rsplit(".", 1)[-1].lower() if "." in name else ""
        source_type = EXTENSION_SOURCE_TYPES.get(ext)
        if source_type:
            return source_type
    raise DocumentProcessingError(UNSUPPORTED_TYPE_MESSAGE, status_code=415)


async def read_upload_bytes(upload: UploadFile, max_bytes: int) -> bytes:
    chunks: list[bytes] = []
    total = 0
    try:
        while True:
            chunk = await upload.read(_READ_CHUNK_BYTES)
            if not chunk:
                break
            total += len(chunk)
            if total > max_bytes:
                raise DocumentProcessingError(
                    f"File too large. Maximum allowed size is {max_bytes // (1024 * 1024)} MB.",
                    status_code=413,
                )
            chunks.append(chunk)
    except OSError as exc:
        logger.warning("upload_read_failed filename=%s error=%s", upload.filename, exc)
        raise DocumentProcessingError() from exc
    return b"".join(chunks)


def _parse_txt(content: bytes) -> tuple[str, list[str]]:
    return content.decode("utf-8-sig"), []


def _parse_doc(content: bytes) -> tuple[str, list[str]]:
    # Legacy .doc is binary; keep the readable runs only.
    text = content.decode("utf-8", errors="ignore")
    cleaned = _CONTROL_CHARS_RE.sub(" ", text)
    return cleaned, ["Legacy .doc files are decoded as plain text; formatting is lost."]


def _parse_pdf(content: bytes) -> tuple[str, list[str]]:
    warnings: list[str] = []
    reader = PdfReader(BytesIO(content))
    text_parts: list[str] = []
    for page in reader.pages:
        page_text = (page.extract_text() or "").strip()
        if page_text:
            text_parts.append(page_text)
    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return "\n".join(text_parts), warnings


def _parse_docx(content: bytes) -> tuple[str, list[str]]:
    warnings: list[str] = []
    document = Document(BytesIO(content))
    paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    if not paragraphs:
        warnings.append("No extractable text found in DOCX.")
    return "\n".join(paragraphs), warnings


_PARSERS = {
    "txt": _parse_txt,
    "doc": _parse_doc,
    "pdf": _parse_pdf,
    "docx": _parse_docx,
}


def parse_document_bytes(content: bytes, *, source_type: str, filename: str = "") -> ParsedDoc:
    """Decode uploaded bytes into text. Fails as a whole; never returns partial text."""
    parser = _PARSERS.get(source_type)
    if parser is None:
        raise DocumentProcessingError(UNSUPPORTED_TYPE_MESSAGE, status_code=415)

    try:
        text, warnings = parser(content)
    except Exception as exc:
        logger.warning("document_parse_failed filename=%s type=%s error=%s", filename, source_type, exc)
        raise DocumentProcessingError() from exc

    return ParsedDoc(
        doc_id=_compute_doc_id(text=text, filename=filename),
        filename=filename,
        source_type=source_type,
        text=text,
        parsing_warnings=warnings,
    )
