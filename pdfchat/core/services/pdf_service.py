# pdfchat/core/services/pdf_service.py
import io
import logging
from pypdf import PdfReader

from pdfchat.core.errors import ExtractionError

logger = logging.getLogger(__name__)


class PdfTextExtractor:
    """Turns raw PDF bytes into plain text with pypdf."""

    def extract(self, data: bytes) -> str:
        if not data:
            raise ExtractionError("the file is empty")
        try:
            reader = PdfReader(io.BytesIO(data))
            if reader.is_encrypted and not reader.decrypt(""):
                raise ExtractionError("the PDF is password protected")
            pages = []
            for i, page in enumerate(reader.pages):
                text = page.extract_text()
                if text and text.strip():
                    pages.append(text)
                else:
                    logger.debug("Page %d has no extractable text", i + 1)
        except ExtractionError:
            raise
        except Exception as e:
            # pypdf raises arbitrary exception types on malformed input
            raise ExtractionError(str(e) or type(e).__name__) from e

        if not pages:
            raise ExtractionError("could not extract text from PDF")
        logger.debug("Extracted text from %d page(s)", len(pages))
        return "\n".join(pages)
