"""Port: Document extractor. Turns a document package into a model."""

from abc import ABC, abstractmethod

from mla_checker.domain.models.document import DocumentModel


class DocumentExtractorPort(ABC):
    """Contract for building a DocumentModel from raw package bytes."""

    @abstractmethod
    def extract(self, data: bytes) -> DocumentModel:
        """Parse *data* into a model or raise ``ParseError``."""
        ...
