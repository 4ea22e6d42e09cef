from functools import lru_cache
from pdfchat.core.config import settings
from pdfchat.core.session import ChatSession
from pdfchat.core.services.pdf_service import PdfTextExtractor
from pdfchat.core.services.answer_service import GroqAnswerProvider

def get_answer_provider() -> GroqAnswerProvider:
    return GroqAnswerProvider(
        api_key=settings.groq_api_key,
        model=settings.llm_model,
        max_tokens=settings.llm_max_tokens,
        timeout=settings.llm_timeout,
    )

@lru_cache(maxsize=None)
def get_chat_session() -> ChatSession:
    """The single process-wide session, built on first request."""
    return ChatSession(
        extractor=PdfTextExtractor(),
        provider=get_answer_provider(),
        document_mode=settings.document_mode,
        max_context_chars=settings.max_context_chars,
    )
