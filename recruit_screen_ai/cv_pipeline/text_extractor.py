"""Extract raw text from uploaded résumé files (PDF, DOCX, DOC, TXT). In-memory only."""

import re
import unicodedata
from io import BytesIO
from typing import Optional

from recruit_screen_ai.config import MAX_CV_CHARS
from recruit_screen_ai.utils.logger import get_logger

logger = get_logger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class DocumentDecodeError(Exception):
    """Raised when an uploaded document cannot be turned into text."""


def _normalize_unicode(text: str) -> str:
    """Normalize unicode (NFC) and replace problematic chars."""
    if not text:
        return ""
    return unicodedata.normalize("NFC", text)


def _clean_cv_text(text: str, max_chars: int = MAX_CV_CHARS) -> str:
    """Remove excessive whitespace and normalize unicode for CV content."""
    if not text or not text.strip():
        return ""
    t = _normalize_unicode(text)
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    t = t.strip()
    if len(t) > max_chars:
        t = t[:max_chars] + "\n\n[Content truncated.]"
    return t


def _extract_pdf(bytes_io: BytesIO) -> str:
    """Extract text from PDF using pdfplumber, one page per line block."""
    try:
        import pdfplumber
    except ImportError as e:
        raise DocumentDecodeError("pdfplumber not installed; install with: pip install pdfplumber") from e
    try:
        with pdfplumber.open(bytes_io) as pdf:
            parts = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        raise DocumentDecodeError(f"PDF extraction failed: {e}") from e
    return "\n".join(parts)


def _extract_docx(bytes_io: BytesIO) -> str:
    """Extract text from DOCX using python-docx."""
    try:
        from docx import Document
    except ImportError as e:
        raise DocumentDecodeError("python-docx not installed; install with: pip install python-docx") from e
    try:
        doc = Document(bytes_io)
    except Exception as e:
        raise DocumentDecodeError(f"DOCX extraction failed: {e}") from e
    return "\n".join(p.text for p in doc.paragraphs)


def _extract_plain(file_bytes: bytes) -> str:
    """UTF-8 decode with replacement characters; never fails."""
    return file_bytes.decode("utf-8", errors="replace")


def _extract_word_or_plain(file_bytes: bytes, filename: str) -> str:
    """Word parser first; plain text for .doc files and corrupt .docx."""
    try:
        return _clean_cv_text(_extract_docx(BytesIO(file_bytes)))
    except DocumentDecodeError as e:
        logger.warning("Word parsing failed for %s, reading as text: %s", filename, e)
        return _extract_plain(file_bytes)


def extract_text_from_file(file_bytes: bytes, filename: str, content_type: Optional[str] = None) -> str:
    """
    Decode an uploaded résumé into plain text.
    Type is taken from the MIME type or, failing that, the file extension; unknown
    types are read as plain text. Raises DocumentDecodeError when a PDF cannot be read.
    """
    name_lower = (filename or "").lower().strip()
    mime = (content_type or "").lower()
    file_bytes = file_bytes or b""

    if mime == PDF_MIME or name_lower.endswith(".pdf"):
        return _clean_cv_text(_extract_pdf(BytesIO(file_bytes)))
    if mime == DOCX_MIME or name_lower.endswith(".docx"):
        return _extract_word_or_plain(file_bytes, filename)
    if "text" in mime or name_lower.endswith(".txt"):
        return _extract_plain(file_bytes)
    if name_lower.endswith(".doc"):
        return _extract_word_or_plain(file_bytes, filename)

    logger.info("Unrecognized file type for %s (%s); reading as text", filename, content_type)
    return _extract_plain(file_bytes)
