"""
Tests for CSV and PDF exports of a packing plan.
"""

import csv
import io

import pytest

from cubeload.core.solution import Solution
from cubeload.core.solver import solve
from cubeload.report.csv_export import CSV_COLUMNS, placements_to_csv, write_placements_csv
from cubeload.report.pdf_generator import generate_pdf_report


@pytest.fixture
def demo_solution(demo_container, demo_skus):
    return solve(demo_container, demo_skus)


class TestCsvExport:
    def test_header_and_rows(self, demo_solution):
        text = placements_to_csv(demo_solution.placements)
        rows = list(csv.DictReader(io.StringIO(text)))

        assert text.splitlines()[0] == ",".join(CSV_COLUMNS)
        assert len(rows) == len(demo_solution.placements)

        first = demo_solution.placements[0]
        assert rows[0]["instance_id"] == first.instance_id
        assert float(rows[0]["x"]) == pytest.approx(first.position.x)
        assert float(rows[0]["H"]) == pytest.approx(first.dims[2])
        assert float(rows[0]["weight"]) == pytest.approx(first.weight)

    def test_empty_plan_has_header_only(self):
        assert placements_to_csv([]).splitlines() == [",".join(CSV_COLUMNS)]

    def test_write_to_disk(self, demo_solution, tmp_path):
        path = write_placements_csv(demo_solution.placements, tmp_path / "out" / "plan.csv")
        assert path.read_text(encoding="utf-8") == placements_to_csv(demo_solution.placements)


class TestPdfReport:
    def test_report_is_written(self, demo_container, demo_solution, tmp_path):
        path = generate_pdf_report(tmp_path / "plan.pdf", demo_container, demo_solution)
        assert path.exists()
        assert path.read_bytes().startswith(b"%PDF")

    def test_missing_images_are_skipped(self, demo_container, demo_solution, tmp_path):
        path = generate_pdf_report(
            tmp_path / "plan.pdf",
            demo_container,
            demo_solution,
            layout_images=[tmp_path / "missing.png"],
        )
        assert path.exists()

    def test_empty_solution(self, demo_container, tmp_path):
        path = generate_pdf_report(tmp_path / "empty.pdf", demo_container, Solution())
        assert path.read_bytes().startswith(b"%PDF")
