"""Utility for extracting bounded text excerpts from report attachments.

This module turns an uploaded attachment into a short, labeled plain-text
excerpt that can be embedded in an analysis prompt. Each file type has its
own handler; every handler caps its output so that a large upload cannot
blow up the prompt.

Extraction never raises. A missing, unreadable or unsupported file is
reported as a descriptive placeholder so that a single bad attachment does
not abort the analysis of the whole report.

Created: 2026-10-12
Version: 1.0.0
License: MIT

Functions:
    classify_file: Decide which handler applies to a file.
    resolve_attachment_path: Resolve a stored attachment path.
    extract_file_content: Produce the excerpt for one attachment.

Example:
    >>> from utils.file_content_extractor import extract_file_content
    >>>
    >>> excerpt = extract_file_content("budget.csv", "text/csv")
    >>> print(excerpt.splitlines()[0])
    CSV File Content (first 50 rows):
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List

from .config import config

logger = logging.getLogger(__name__)

TEXT_CHAR_LIMIT = 5000
GENERIC_CHAR_LIMIT = 3000
CSV_ROW_LIMIT = 50
SPREADSHEET_ROW_LIMIT = 20

SPREADSHEET_EXTENSIONS = {".xlsx", ".xls"}


class FileKind(str, Enum):
    """Attachment categories with a dedicated extraction handler."""
    PDF = "pdf"
    TEXT = "text"
    CSV = "csv"
    SPREADSHEET = "spreadsheet"
    JSON = "json"
    XML = "xml"
    IMAGE = "image"
    OTHER = "other"


def classify_file(file_path: str, declared_type: str) -> FileKind:
    """Classify an attachment by its declared MIME type.

    Matching is by substring on the declared type. Spreadsheets are also
    recognised by their .xlsx/.xls extension, since browsers frequently
    upload them as application/octet-stream.

    Args:
        file_path: Path or filename of the attachment.
        declared_type: MIME type reported at upload time (may be empty).

    Returns:
        The FileKind whose handler should process the file.
    """
    mime = (declared_type or "").lower()
    suffix = Path(file_path).suffix.lower()

    if "pdf" in mime:
        return FileKind.PDF
    if "csv" in mime:
        return FileKind.CSV
    if "spreadsheet" in mime or "excel" in mime or suffix in SPREADSHEET_EXTENSIONS:
        return FileKind.SPREADSHEET
    if "json" in mime:
        return FileKind.JSON
    # openxmlformats documents are zip archives, not XML text
    if "/xml" in mime or "+xml" in mime:
        return FileKind.XML
    if "text/plain" in mime:
        return FileKind.TEXT
    if "image" in mime:
        return FileKind.IMAGE
    return FileKind.OTHER


def resolve_attachment_path(file_path: str) -> Path:
    """Resolve a stored attachment path.

    Absolute paths are used as-is; anything else is taken relative to the
    uploads directory under the current working directory.
    """
    path = Path(file_path)
    if path.is_absolute():
        return path
    return config.get_uploads_dir() / path


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _extract_pdf(path: Path, declared_type: str) -> str:
    # PDF text extraction is disabled; the reviewer must know nothing was read.
    return f"PDF File: {path.name} (PDF parsing disabled - content not extracted)"


def _extract_text(path: Path, declared_type: str) -> str:
    text = _read_text(path)
    return f"Text File Content:\n{text[:TEXT_CHAR_LIMIT]}"


def _extract_csv(path: Path, declared_type: str) -> str:
    lines = _read_text(path).splitlines()
    rows = "\n".join(lines[:CSV_ROW_LIMIT])
    return f"CSV File Content (first {CSV_ROW_LIMIT} rows):\n{rows[:TEXT_CHAR_LIMIT]}"


def _format_cell(value) -> str:
    return "" if value is None else str(value)


def _read_xlsx_sheets(path: Path) -> tuple[List[str], List[List[str]]]:
    """Return sheet names and the leading rows of the first sheet (.xlsx)."""
    import openpyxl

    workbook = openpyxl.load_workbook(str(path), read_only=True, data_only=True)
    try:
        sheet_names = list(workbook.sheetnames)
        first_sheet = workbook.worksheets[0]
        rows = []
        for row in first_sheet.iter_rows(values_only=True):
            if len(rows) >= SPREADSHEET_ROW_LIMIT:
                break
            rows.append([_format_cell(value) for value in row])
        return sheet_names, rows
    finally:
        workbook.close()


def _read_xls_sheets(path: Path) -> tuple[List[str], List[List[str]]]:
    """Return sheet names and the leading rows of the first sheet (.xls)."""
    import xlrd

    workbook = xlrd.open_workbook(str(path))
    try:
        sheet_names = workbook.sheet_names()
        first_sheet = workbook.sheet_by_index(0)
        rows = [
            [_format_cell(value) for value in first_sheet.row_values(row_idx)]
            for row_idx in range(min(first_sheet.nrows, SPREADSHEET_ROW_LIMIT))
        ]
        return sheet_names, rows
    finally:
        workbook.release_resources()


def _extract_spreadsheet(path: Path, declared_type: str) -> str:
    legacy = path.suffix.lower() == ".xls" or (
        "ms-excel" in (declared_type or "").lower() and path.suffix.lower() != ".xlsx"
    )
    sheet_names, rows = _read_xls_sheets(path) if legacy else _read_xlsx_sheets(path)

    body = "\n".join("\t".join(row) for row in rows)
    first_sheet = sheet_names[0] if sheet_names else "Sheet1"
    result = (
        f"Excel File Content ({len(sheet_names)} sheets):\n"
        f"Sheet: {first_sheet} (first {SPREADSHEET_ROW_LIMIT} rows)\n"
        f"{body}"
    )
    return result[:TEXT_CHAR_LIMIT]


def _extract_json(path: Path, declared_type: str) -> str:
    raw = _read_text(path)
    try:
        content = json.dumps(json.loads(raw), indent=2, ensure_ascii=False)
    except json.JSONDecodeError:
        logger.debug(f"Invalid JSON in {path.name}, using raw text")
        content = raw
    return f"JSON File Content:\n{content[:TEXT_CHAR_LIMIT]}"


def _extract_xml(path: Path, declared_type: str) -> str:
    return f"XML File Content:\n{_read_text(path)[:TEXT_CHAR_LIMIT]}"


def _extract_image(path: Path, declared_type: str) -> str:
    return f"Image File: {path.name} (image attached - visual content not analyzed)"


def _extract_other(path: Path, declared_type: str) -> str:
    try:
        text = _read_text(path)
    except (UnicodeDecodeError, OSError) as e:
        logger.debug(f"Could not read {path.name} as text: {e}")
        return (
            f"File attached: {path.name} (type: {declared_type or 'unknown'}) "
            "- content could not be parsed"
        )
    return f"File Content ({declared_type or 'unknown type'}):\n{text[:GENERIC_CHAR_LIMIT]}"


HANDLERS: Dict[FileKind, Callable[[Path, str], str]] = {
    FileKind.PDF: _extract_pdf,
    FileKind.TEXT: _extract_text,
    FileKind.CSV: _extract_csv,
    FileKind.SPREADSHEET: _extract_spreadsheet,
    FileKind.JSON: _extract_json,
    FileKind.XML: _extract_xml,
    FileKind.IMAGE: _extract_image,
    FileKind.OTHER: _extract_other,
}


def extract_file_content(file_path: str, declared_type: str) -> str:
    """Extract a bounded, labeled text excerpt from an attachment.

    Args:
        file_path: Absolute path, or path relative to the uploads directory.
        declared_type: MIME type reported at upload time.

    Returns:
        A labeled excerpt, or a placeholder describing why no content was
        read. Never raises.

    Example:
        >>> extract_file_content("/nonexistent/path", "text/plain")
        'File not found: /nonexistent/path'
    """
    try:
        path = resolve_attachment_path(file_path)
        if not path.exists():
            logger.warning(f"Attachment not found: {path}")
            return f"File not found: {file_path}"

        kind = classify_file(file_path, declared_type)
        logger.debug(f"Extracting {path.name} as {kind.value}")
        excerpt = HANDLERS[kind](path, declared_type)
        logger.info(f"Extracted {len(excerpt)} characters from {path.name}")
        return excerpt

    except Exception as e:
        logger.warning(f"Error reading attachment {file_path}: {e}")
        return f"Error reading file: {file_path}"
