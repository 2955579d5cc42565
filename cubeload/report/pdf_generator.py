"""
PDF packing plan generator using ReportLab.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    Image,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from cubeload.core.solution import Solution, metrics_summary
from cubeload.models.container import Container


def _build_table(data: Sequence[Sequence[str]], column_widths: Sequence[float]) -> Table:
    table = Table(data, colWidths=column_widths, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#F1F1F1")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.HexColor("#333333")),
                ("ALIGN", (0, 0), (-1, -1), "LEFT"),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.HexColor("#DDDDDD")),
            ]
        )
    )
    return table


def _container_table(container: Container) -> Table:
    headers = ["Parameter", "Value"]
    rows = [
        ("Container Name", container.name),
        ("Inner Dimensions (mm)", f"{container.length:g} x {container.width:g} x {container.height:g}"),
        ("Max Weight (kg)", f"{container.max_weight:,.1f}"),
        ("Clearance (mm)", f"{container.clearance:g}"),
    ]
    data = [headers] + [[left, right] for left, right in rows]
    return _build_table(data, column_widths=[70 * mm, 110 * mm])


def _metrics_table(solution: Solution) -> Table:
    headers = ["Metric", "Value"]
    data = [headers] + [[str(left), str(right)] for left, right in metrics_summary(solution).items()]
    return _build_table(data, column_widths=[80 * mm, 100 * mm])


def _placements_table(solution: Solution) -> Table:
    headers = ["Item", "Instance", "x", "y", "z", "L", "W", "H", "kg"]
    data = [headers]
    for placement in solution.placements:
        data.append(
            [
                placement.name,
                placement.instance_id,
                f"{placement.position.x:g}",
                f"{placement.position.y:g}",
                f"{placement.position.z:g}",
                f"{placement.dims[0]:g}",
                f"{placement.dims[1]:g}",
                f"{placement.dims[2]:g}",
                f"{placement.weight:g}",
            ]
        )
    widths = [50 * mm, 40 * mm] + [20 * mm] * 7
    return _build_table(data, column_widths=widths)


def generate_pdf_report(
    output_path: str | Path,
    container: Container,
    solution: Solution,
    layout_images: Iterable[str | Path] = (),
) -> Path:
    """
    Generate a packing plan PDF for client sign-off and return the output path.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=landscape(A4),
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title="Packing Plan",
    )

    styles = getSampleStyleSheet()
    title_style = styles["Title"]
    subtitle_style = ParagraphStyle(
        "Subtitle",
        parent=styles["Heading2"],
        textColor=colors.HexColor("#2D5B88"),
    )

    story: list = [
        Paragraph("Packing Plan", title_style),
        Spacer(1, 8 * mm),
        Paragraph("Container", subtitle_style),
        Spacer(1, 4 * mm),
        _container_table(container),
        Spacer(1, 6 * mm),
        Paragraph("Load Summary", subtitle_style),
        Spacer(1, 4 * mm),
        _metrics_table(solution),
    ]

    for image_path in layout_images:
        image_path = Path(image_path)
        if image_path.exists():
            story.extend(
                [
                    Spacer(1, 6 * mm),
                    Paragraph(image_path.stem.replace("_", " ").title(), subtitle_style),
                    Spacer(1, 4 * mm),
                    Image(str(image_path), width=180 * mm, height=110 * mm),
                ]
            )

    story.extend(
        [
            Spacer(1, 6 * mm),
            Paragraph("Placements", subtitle_style),
            Spacer(1, 4 * mm),
        ]
    )
    if solution.placements:
        story.append(_placements_table(solution))
    else:
        story.append(Paragraph("No items could be placed.", styles["Normal"]))

    doc.build(story)
    return output_path
