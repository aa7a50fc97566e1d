import io
import logging
import os
from typing import Dict, Optional

import PyPDF2

from skillnest.core.config import settings
from skillnest.core.exceptions import ExtractionError, UnsupportedFileError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".pdf"}


def validate_pdf(filename: Optional[str], size: int) -> None:
    """Reject anything that is not a PDF under the upload size cap."""
    if not filename:
        raise UnsupportedFileError("No file provided")
    file_ext = os.path.splitext(filename)[1].lower()
    if file_ext not in ALLOWED_EXTENSIONS:
        raise UnsupportedFileError("Only PDF files are supported")
    if size > settings.max_pdf_bytes:
        raise UnsupportedFileError(
            f"File size must be less than {settings.max_pdf_bytes // (1024 * 1024)}MB"
        )


def extract_text_from_pdf(data: bytes) -> str:
    try:
        pdf_reader = PyPDF2.PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in pdf_reader.pages]
    except (PyPDF2.errors.PyPdfError, ValueError) as e:
        logger.warning(f"Unreadable PDF: {e}")
        raise ExtractionError()
    return "\n".join(p.strip() for p in pages if p.strip()).strip()


def extract_pdf_text(filename: Optional[str], data: bytes) -> Dict[str, str]:
    validate_pdf(filename, len(data))
    logger.info(f"Extracting text from {filename} ({len(data)} bytes)")
    text = extract_text_from_pdf(data)
    if not text:
        # Scanned/image-only PDFs have no text layer
        raise ExtractionError()
    return {"text": text, "fileName": filename}
