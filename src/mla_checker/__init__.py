"""MLA 9 compliance checker for Word (.docx) documents."""

__version__ = "0.1.0"
