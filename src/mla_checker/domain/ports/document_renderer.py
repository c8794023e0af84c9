"""Port: Document renderer. Generates formatted output files.

This is a domain-level contract. Infrastructure adapters (docx)
implement this interface.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from mla_checker.domain.models.paper import MLAPaper


class DocumentRendererPort(ABC):
    """Contract for rendering an MLA paper to a file."""

    @abstractmethod
    def render(self, paper: MLAPaper, output_path: Path) -> Path:
        """Generate the formatted document and return the output path."""
        ...
