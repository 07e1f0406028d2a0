"""Upload ingestion: validate, decode, extract, build records.

Decoding PDF/DOC/DOCX bytes is delegated to a caller-supplied decoder so the
package itself carries no document libraries.
"""

import logging
from typing import Callable

from pydantic import BaseModel

from nurse_match.config import settings
from nurse_match.models.schemas.profile_records import ProfileRecords
from nurse_match.models.schemas.structured_resume import StructuredResume
from nurse_match.services.profile_records import build_profile_records
from nurse_match.services.resume_extractor import extract_resume_data

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = frozenset({"pdf", "doc", "docx"})

# (content, extension) -> decoded text
Decoder = Callable[[bytes, str], str]


class ResumeDecodeError(ValueError):
    """The upload could not be turned into résumé text."""


class IngestResult(BaseModel):
    filename: str
    file_type: str
    extracted_text: str
    parsed_data: StructuredResume
    records: ProfileRecords


def file_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def ingest_resume(content: bytes, filename: str, decoder: Decoder) -> IngestResult:
    """Decode an uploaded résumé and extract its structured data.

    Raises ResumeDecodeError for unsupported or oversized files, decoder
    failures, and documents without any text. Extraction only runs on
    successfully decoded text.
    """
    ext = file_extension(filename)
    if ext not in SUPPORTED_EXTENSIONS:
        raise ResumeDecodeError("Only PDF, DOC and DOCX files are accepted")

    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise ResumeDecodeError(f"File too large. Max size: {settings.max_upload_size_mb}MB")

    try:
        text = decoder(content, ext)
    except Exception as exc:
        logger.warning("Text extraction failed for %s: %s", filename, exc)
        raise ResumeDecodeError(f"Text extraction failed: {exc}") from exc

    if not text or not text.strip():
        raise ResumeDecodeError("No text could be extracted from the file")

    parsed = extract_resume_data(text)
    records = build_profile_records(parsed)
    logger.info(
        "Ingested %s: %d experience, %d education, %d certification records",
        filename,
        len(records.experience),
        len(records.education),
        len(records.certifications),
    )
    return IngestResult(
        filename=filename,
        file_type=ext,
        extracted_text=text,
        parsed_data=parsed,
        records=records,
    )
