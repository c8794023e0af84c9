"""End-to-end tests: render a sample paper, read it back, check it."""

from datetime import date

import pytest

from mla_checker.application.use_cases import (
    AnalyzeDocumentUseCase,
    CheckComplianceUseCase,
    GenerateDemoUseCase,
)
from mla_checker.bootstrap import Container
from mla_checker.domain.errors import ParseError, UnsupportedFormatError
from mla_checker.domain.models import Alignment, CheckStatus
from mla_checker.infrastructure.checkers import DocxComplianceChecker
from mla_checker.infrastructure.extractors import DocxStructuralExtractor
from mla_checker.infrastructure.renderers import DocxRenderer
from mla_checker.validators import MLARulesEngine


@pytest.fixture
def demo_paper():
    return GenerateDemoUseCase().execute(due_date=date(2024, 10, 15))


@pytest.fixture
def demo_docx(demo_paper, tmp_path):
    return DocxRenderer().render(demo_paper, tmp_path / "demo")


# ---------------------------------------------------------------------------
# Sample paper
# ---------------------------------------------------------------------------


class TestDemoPaper:
    def test_demo_content(self, demo_paper):
        assert demo_paper.surname == "Smith"
        assert demo_paper.heading_date == "15 October 2024"
        assert len(demo_paper.body) >= 5
        assert demo_paper.works_cited == sorted(demo_paper.works_cited)

    def test_render_adds_suffix(self, demo_docx):
        assert demo_docx.suffix == ".docx"
        assert demo_docx.exists()

    def test_rendered_structure(self, demo_docx, demo_paper):
        model = DocxStructuralExtractor().extract_file(demo_docx)
        texts = [p.text for p in model.non_empty_paragraphs()]
        assert texts[:4] == ["Jane Smith", "Professor Jones", "English 101", "15 October 2024"]
        assert texts[4] == demo_paper.title
        assert model.paragraphs[4].alignment == Alignment.CENTER
        assert model.headers[0].content == "Smith 1"
        assert model.page_settings.from_section
        assert model.page_settings.margins.left == 1440
        assert model.page_settings.page_size.width == 12240

    def test_rendered_paper_is_fully_compliant(self, demo_docx):
        report = DocxComplianceChecker().check(demo_docx)
        failing = [(r.rule.id, r.status.value, r.details) for r in report.results if not r.passed]
        assert failing == []
        assert report.overall_score == 100
        assert report.total_rules == 15
        assert report.results_by_status(CheckStatus.UNABLE_TO_VERIFY) == []


# ---------------------------------------------------------------------------
# Hand-built package
# ---------------------------------------------------------------------------


class TestHandBuiltPackage:
    @pytest.fixture
    def compliant_bytes(self, make_docx, wml):
        body = {"first_line": 720}
        entry = {"hanging": 720, "left": 720}
        paragraphs = [
            wml.paragraph("John Doe"),
            wml.paragraph("Dr. Rivera"),
            wml.paragraph("History 210"),
            wml.paragraph("March 5, 2024"),
            wml.paragraph("The River Towns", align="center"),
            wml.paragraph("Trade shaped the towns along the river (Hall 4).", **body),
            wml.paragraph("Floods shaped them as well (Ortiz 19).", **body),
            wml.paragraph("Both forces appear in local records (Hall 22).", **body),
            wml.paragraph("Town charters changed little over the century.", **body),
            wml.paragraph("The river still sets the rhythm of local life.", **body),
            wml.paragraph("Works Cited", align="center"),
            wml.paragraph("Hall, Mary. River Commerce. Delta Press, 1999.", **entry),
            wml.paragraph("Ortiz, Luis. Floodplain. Gulf Books, 2004.", **entry),
        ]
        return make_docx(
            paragraphs, styles=wml.styles(), headers=[wml.header("Doe 1")]
        )

    def test_scores_100(self, compliant_bytes):
        report = AnalyzeDocumentUseCase(DocxStructuralExtractor(), MLARulesEngine()).execute(
            compliant_bytes
        )
        failing = [(r.rule.id, r.details) for r in report.results if not r.passed]
        assert failing == []
        assert report.overall_score == 100

    def test_oversized_run_lowers_score(self, make_docx, wml):
        data = make_docx([wml.paragraph("Too big", size=28)], styles=wml.styles())
        report = AnalyzeDocumentUseCase(DocxStructuralExtractor(), MLARulesEngine()).execute(data)
        result = report.result_for("font-size")
        assert result.status == CheckStatus.FAILED
        assert result.affected_elements == ("Paragraph 1",)
        assert report.overall_score < 100

    def test_corrupt_bytes(self):
        use_case = AnalyzeDocumentUseCase(DocxStructuralExtractor(), MLARulesEngine())
        with pytest.raises(ParseError):
            use_case.execute(b"\x00\x01not a package")


# ---------------------------------------------------------------------------
# File checker and container
# ---------------------------------------------------------------------------


class TestFileChecker:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DocxComplianceChecker().check(tmp_path / "nope.docx")

    def test_directory_named_like_a_paper(self, tmp_path):
        folder = tmp_path / "paper.docx"
        folder.mkdir()
        with pytest.raises(FileNotFoundError):
            DocxComplianceChecker().check(folder)

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "paper.txt"
        path.write_text("hello")
        with pytest.raises(UnsupportedFormatError):
            DocxComplianceChecker().check(path)

    def test_use_case_delegates(self, demo_docx):
        report = CheckComplianceUseCase(DocxComplianceChecker()).execute(demo_docx)
        assert report.overall_score == 100


class TestContainer:
    def test_wiring(self, demo_docx):
        container = Container()
        assert len(container.engine.all_rules()) == 15
        assert container.check_compliance().execute(demo_docx).overall_score == 100
        report = container.analyze_document().execute(demo_docx.read_bytes())
        assert report.overall_score == 100

    def test_render_through_container(self, tmp_path):
        container = Container()
        paper = container.generate_demo().execute()
        path = container.renderer.render(paper, tmp_path / "paper.docx")
        assert path == tmp_path / "paper.docx"
        assert path.exists()
