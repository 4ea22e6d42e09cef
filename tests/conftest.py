# tests/conftest.py
import pytest

from pdfchat.core.errors import ProviderError
from pdfchat.core.session import ChatSession
from tests.fakes import FakeExtractor, FakeProvider


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def session(provider):
    return ChatSession(extractor=FakeExtractor(), provider=provider)


@pytest.fixture
def provider_failure():
    return ProviderError("Failed to get response from the language model API: overloaded", status_code=529)
