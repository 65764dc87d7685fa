"""
Shared fixtures for the invoice batch extractor tests.
"""

import logging
from pathlib import Path

import pytest

from config import CONFIG_DIR, ConfigurationManager
from invoice_batch.extraction import RuleSet, load_rules
from invoice_batch.utils.exceptions import UnreadableDocumentError
from invoice_batch.utils.logger import LOGGER_NAMESPACE


SAMPLE_INVOICE = """\
Empresa de Aluguer, S.A.
Fatura Nº: FT 2023/12345
Cliente: ACME Lda
Viatura com matricula AB-12-CD
Data de Início: 26/10/2023
Valor Total: € 1.234,56
Prazo: 36 meses
"""


@pytest.fixture(autouse=True)
def reset_configuration():
    """Give every test a fresh configuration singleton and logger."""
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()

    app_logger = logging.getLogger(LOGGER_NAMESPACE)
    app_logger.handlers.clear()
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)


@pytest.fixture
def template_path() -> Path:
    return CONFIG_DIR / "template.json"


@pytest.fixture
def rules(template_path) -> RuleSet:
    """Bundled rule set."""
    return load_rules(template_path)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_INVOICE


def make_invoice(number: int, client: str = "Cliente Teste") -> str:
    """Invoice text matching the bundled rules."""
    return (
        f"Fatura Nº: FT 2023/{number}\n"
        f"Cliente: {client}\n"
        f"Data de Início: 01/02/2024\n"
        f"Valor Total: 1.{number % 1000:03d},00\n"
        f"Prazo: 12 meses\n"
    )


class FakeDocumentStore:
    """
    In-memory stand-in for PDF text extraction.

    Documents listed in ``broken`` raise UnreadableDocumentError.
    """

    def __init__(self, texts: dict, broken: tuple = ()):
        self.texts = texts
        self.broken = set(broken)

    @property
    def documents(self) -> list:
        return list(self.texts) + sorted(self.broken)

    def extract_text(self, document) -> str:
        if document in self.broken:
            raise UnreadableDocumentError(str(document), "corrupted")
        return self.texts[document]


@pytest.fixture
def document_store() -> FakeDocumentStore:
    texts = {f"doc_{n:03d}.pdf": make_invoice(n) for n in (1001, 12345, 7, 250, 99)}
    return FakeDocumentStore(texts, broken=("broken_1.pdf", "broken_2.pdf"))
