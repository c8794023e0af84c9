"""Document renderers."""

from mla_checker.infrastructure.renderers.docx_renderer import DocxRenderer

__all__ = ["DocxRenderer"]
