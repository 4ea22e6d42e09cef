# pdfchat/core/session.py
"""
In-memory chat session shared by every request of the process.

The session owns three things: the uploaded documents' text keyed by
identifier, the system prompt derived from that text, and the transcript of
user/assistant turns sent to the language model on every question.

All reads and writes of that state go through ``ingest`` and ``ask``, which
take ``_lock`` around their read-modify-write steps. ``ask`` additionally
holds ``_turn_lock`` for its whole duration so two questions cannot
interleave their user and assistant turns, while ``_lock`` is released during
the provider call so uploads are not blocked by a slow answer.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from pdfchat.core.errors import ExtractionError, ValidationError

logger = logging.getLogger(__name__)

PROMPT_PREAMBLE = "You are an assistant that answers questions based on the following content:"
DOCUMENT_DELIMITER = "\n\n---\n\n"

NO_QUESTION_MESSAGE = "No question provided."
NO_DOCUMENT_MESSAGE = "Please upload a PDF first."


class TextExtractor(Protocol):
    def extract(self, data: bytes) -> str: ...


class AnswerProvider(Protocol):
    def complete(self, system_prompt: str, transcript: List[Dict[str, str]]) -> str: ...


@dataclass(frozen=True)
class Turn:
    role: str  # "user" or "assistant"
    content: str

    def as_message(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class IngestResult:
    stored: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)  # identifier -> reason


def build_system_prompt(texts: Iterable[str], max_chars: Optional[int] = None) -> str:
    """Join document texts under the fixed preamble; optionally cap the joined text at max_chars."""
    content = DOCUMENT_DELIMITER.join(texts)
    if max_chars is not None and len(content) > max_chars:
        content = content[:max_chars]
    return f"{PROMPT_PREAMBLE}\n\n{content}"


class ChatSession:
    def __init__(
        self,
        extractor: TextExtractor,
        provider: AnswerProvider,
        document_mode: str = "multi",
        max_context_chars: Optional[int] = None,
    ):
        if document_mode not in ("single", "multi"):
            raise ValueError(f"Unknown document mode: {document_mode}")
        self.extractor = extractor
        self.provider = provider
        self.document_mode = document_mode
        self.max_context_chars = max_context_chars

        self._documents: Dict[str, str] = {}
        self._system_prompt = ""
        self._transcript: List[Turn] = []
        # Bumped on every transcript reset; lets an in-flight ask notice it.
        self._generation = 0

        self._lock = threading.Lock()
        # Held across the provider call: questions queue behind the upstream
        # latency (and each waiting /ask occupies a threadpool worker), in
        # exchange for a transcript whose user/assistant turns never interleave.
        # Uploads only need _lock and are not queued behind it.
        self._turn_lock = threading.Lock()

    @property
    def documents(self) -> List[str]:
        with self._lock:
            return list(self._documents)

    @property
    def system_prompt(self) -> str:
        with self._lock:
            return self._system_prompt

    @property
    def transcript(self) -> List[Turn]:
        with self._lock:
            return list(self._transcript)

    def ingest(self, items: Iterable[Tuple[str, bytes]]) -> IngestResult:
        """
        Extract every (identifier, bytes) pair and store the texts that succeed.

        A failing item is skipped and reported in ``failed``; it never aborts
        the batch. The transcript is reset even when nothing was stored.
        """
        result = IngestResult()
        extracted: List[Tuple[str, str]] = []
        for identifier, data in items:
            try:
                text = self.extractor.extract(data)
            except ExtractionError as e:
                logger.warning("Skipping %s: %s", identifier, e.reason)
                result.failed[identifier] = e.reason
                continue
            extracted.append((identifier, text))

        with self._lock:
            for identifier, text in extracted:
                if self.document_mode == "single":
                    self._documents.clear()
                    result.stored.clear()
                self._documents[identifier] = text
                if identifier in result.stored:
                    result.stored.remove(identifier)
                result.stored.append(identifier)
            self._system_prompt = build_system_prompt(self._documents.values(), self.max_context_chars)
            self._transcript = []
            self._generation += 1
            total = len(self._documents)

        logger.info(
            "Ingested %d document(s), %d failed, %d in store; conversation reset",
            len(result.stored), len(result.failed), total,
        )
        return result

    def ask(self, question: str) -> str:
        """
        Record the question, ask the provider with the full transcript and record the answer.

        If the provider fails, the user turn stays in the transcript without a
        matching assistant turn and the ProviderError propagates.
        """
        if question is None or not question.strip():
            logger.info("Rejected ask: empty question")
            raise ValidationError(NO_QUESTION_MESSAGE)

        with self._turn_lock:
            with self._lock:
                if not self._documents:
                    logger.info("Rejected ask: no documents uploaded")
                    raise ValidationError(NO_DOCUMENT_MESSAGE)
                self._transcript.append(Turn("user", question))
                system_prompt = self._system_prompt
                messages = [turn.as_message() for turn in self._transcript]
                generation = self._generation

            logger.info("Asking provider: question of %d chars, %d turn(s) of history", len(question), len(messages))
            answer = self.provider.complete(system_prompt, messages)

            with self._lock:
                if generation == self._generation:
                    self._transcript.append(Turn("assistant", answer))
                else:
                    logger.info("Conversation was reset while answering; answer not recorded")
        return answer
