from __future__ import annotations

import hashlib
from io import BytesIO

from docx import Document
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .models import ParsedDoc


class ResumeParseError(ValueError):
    pass


def _compute_doc_id(text: str, filename: str) -> str:
    seed = text if text.strip() else filename
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def _parse_text(content: bytes) -> tuple[str, list[str]]:
    try:
        return content.decode("utf-8-sig"), []
    except UnicodeDecodeError as exc:
        raise ResumeParseError("Resume text is not valid UTF-8.") from exc


def _parse_pdf(content: bytes) -> tuple[str, list[str]]:
    warnings: list[str] = []
    try:
        reader = PdfReader(BytesIO(content))
        text_parts: list[str] = []
        for page in reader.pages:
            page_text = (page.extract_text() or "").strip()
            if page_text:
                text_parts.append(page_text)
    except (PdfReadError, ValueError, KeyError) as exc:
        raise ResumeParseError(f"PDF parsing failed: {exc}") from exc
    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return "\n".join(text_parts), warnings


def _parse_docx(content: bytes) -> tuple[str, list[str]]:
    warnings: list[str] = []
    try:
        document = Document(BytesIO(content))
    except Exception as exc:
        raise ResumeParseError(f"DOCX parsing failed: {exc}") from exc
    paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    if not paragraphs:
        warnings.append("No extractable text found in DOCX.")
    return "\n".join(paragraphs), warnings


def parse_document(filename: str, content: bytes) -> ParsedDoc:
    extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if extension in {"txt", "md"}:
        text, warnings = _parse_text(content)
    elif extension == "pdf":
        text, warnings = _parse_pdf(content)
    elif extension == "docx":
        text, warnings = _parse_docx(content)
    else:
        raise NotImplementedError(
            f"Unsupported file type '.{extension}'. Supported types: .txt, .md, .pdf, .docx"
        )

    return ParsedDoc(
        doc_id=_compute_doc_id(text, filename),
        filename=filename,
        source_type=extension,
        text=text,
        parsing_warnings=warnings,
    )
