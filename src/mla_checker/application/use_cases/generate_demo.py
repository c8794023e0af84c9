"""Use Case: Generate Demo Paper.

Builds a sample MLA 9 student paper that satisfies every rule the
engine checks, for showcase and for exercising the checker end to end.
"""

from datetime import date
from typing import Optional

from mla_checker.domain.models.paper import MLAPaper


class GenerateDemoUseCase:
    """Build a sample MLA 9 paper with realistic content."""

    def execute(self, due_date: Optional[date] = None) -> MLAPaper:
        """Return a fully populated demo paper.

        Args:
            due_date: Date shown in the heading block; today when omitted.
        """
        return MLAPaper(
            student="Jane Smith",
            instructor="Professor Jones",
            course="English 101",
            due_date=due_date or date.today(),
            title="Memory and Place in Twentieth-Century American Fiction",
            body=self._build_body(),
            works_cited=self._build_works_cited(),
        )

    @staticmethod
    def _build_body() -> list[str]:
        return [
            "Novelists of the last century returned again and again to the places that "
            "formed them, treating a town or a neighborhood as a record of what its people "
            "chose to remember. Morrison describes this as an act of rememory, in which a "
            "place holds an event long after its witnesses are gone (Morrison 43).",
            "Faulkner's Yoknapatawpha County is the clearest early example. Its courthouse, "
            "its roads and its ruined plantations carry the weight of a history the "
            "characters cannot escape, and critics have long read the county as a single "
            "extended memory (Brooks 12).",
            "Later writers turned the same attention to cities. Baldwin's Harlem is at once "
            "a home and a trap, a place whose streets hold both comfort and grievance "
            "(Baldwin 87). The tension between the two gives his essays much of their force.",
            "Memory in these works is rarely private. It belongs to families and to whole "
            "communities, and it is passed on through stories told on porches and in "
            "kitchens (Walker 114).",
            "Read together, these novels and essays suggest that American fiction of the "
            "period treats place as a form of evidence. The land remembers what people would "
            "rather forget, and the writer's task is to read it closely.",
        ]

    @staticmethod
    def _build_works_cited() -> list[str]:
        # Kept in alphabetical order by author surname
        return [
            "Baldwin, James. Notes of a Native Son. Beacon Press, 1955.",
            "Brooks, Cleanth. William Faulkner: The Yoknapatawpha Country. "
            "Yale University Press, 1963.",
            "Morrison, Toni. Beloved. Alfred A. Knopf, 1987.",
            "Walker, Alice. In Search of Our Mothers' Gardens. Harcourt Brace Jovanovich, 1983.",
        ]
