"""Content of a sample MLA paper, rendered by the DOCX renderer."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class MLAPaper(BaseModel):
    """An MLA 9 student paper: heading block, title, body and Works Cited."""

    student: str = Field(..., description="Full name, e.g. 'Jane Smith'")
    instructor: str = Field(..., description="With title, e.g. 'Professor Jones'")
    course: str
    due_date: date
    title: str
    body: list[str] = Field(default_factory=list)
    works_cited: list[str] = Field(default_factory=list)

    @property
    def surname(self) -> str:
        """Last name used in the running header."""
        return self.student.split()[-1]

    @property
    def heading_date(self) -> str:
        """Date in MLA day-month-year form (``15 October 2024``)."""
        return f"{self.due_date.day} {self.due_date:%B %Y}"
