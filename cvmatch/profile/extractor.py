"""Résumé text extraction (PDF via pymupdf, DOCX via python-docx; both optional)."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = (".txt", ".md")


def extract_text(path: str | Path) -> str:
    """Extract plain text from a résumé file, dispatching on its suffix.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is not supported.
        ImportError: If the optional library for the format is missing.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Resume file not found: {path}"
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()
    if suffix in TEXT_SUFFIXES:
        text = path.read_text(encoding="utf-8")
    elif suffix == ".pdf":
        text = extract_text_from_pdf(path)
    elif suffix == ".docx":
        text = extract_text_from_docx(path)
    else:
        msg = f"Unsupported resume format: {path.suffix or '(no extension)'}"
        raise ValueError(msg)

    logger.debug("Extracted %d characters from %s", len(text), path.name)
    return text


def extract_text_from_pdf(path: str | Path) -> str:
    """Extract plain text from a PDF file.

    Args:
        path: Path to the PDF file.

    Returns:
        Concatenated text from all pages.

    Raises:
        FileNotFoundError: If the PDF file does not exist.
        ImportError: If pymupdf is not installed.
    """
    path = Path(path)
    if not path.exists():
        msg = f"PDF file not found: {path}"
        raise FileNotFoundError(msg)

    try:
        import pymupdf
    except ImportError:
        msg = (
            "pymupdf is required for PDF extraction. "
            "Install with: pip install 'cvmatch[extract]'"
        )
        raise ImportError(msg) from None

    doc = pymupdf.open(str(path))
    text_parts: list[str] = []
    for page in doc:
        text_parts.append(page.get_text())
    doc.close()

    return "\n".join(text_parts)


def extract_text_from_docx(path: str | Path) -> str:
    """Extract the non-blank paragraphs of a DOCX file, one per line.

    Raises:
        FileNotFoundError: If the DOCX file does not exist.
        ImportError: If python-docx is not installed.
    """
    path = Path(path)
    if not path.exists():
        msg = f"DOCX file not found: {path}"
        raise FileNotFoundError(msg)

    try:
        import docx
    except ImportError:
        msg = (
            "python-docx is required for DOCX extraction. "
            "Install with: pip install 'cvmatch[extract]'"
        )
        raise ImportError(msg) from None

    document = docx.Document(str(path))
    return "\n".join(p.text for p in document.paragraphs if p.text.strip())
