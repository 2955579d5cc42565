"""
Simple CLI script to execute the container loading pipeline end-to-end.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from cubeload.core.solver import solve
from cubeload.logger import configure_logging
from cubeload.models.container import Container
from cubeload.models.sku import Sku
from cubeload.report.csv_export import write_placements_csv
from cubeload.report.pdf_generator import generate_pdf_report
from cubeload.visualization import layout_plot


def load_config(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as file:
        return json.load(file)


def main() -> None:
    configure_logging()
    base_dir = Path(__file__).resolve().parent
    config_dir = base_dir / "config"
    output_dir = base_dir / "artifacts"
    output_dir.mkdir(parents=True, exist_ok=True)

    job = load_config(config_dir / "demo_job.json")
    container = Container.from_dict(job["container"])
    skus = [Sku.from_dict(item) for item in job["skus"]]

    solution = solve(container, skus)

    csv_path = write_placements_csv(solution.placements, output_dir / "packing_plan.csv")

    layout_fig = layout_plot.container_layout_figure(container, solution)
    layout_image_path = output_dir / "container_layout.png"
    layout_plot.save_figure_image(layout_fig, layout_image_path)

    pdf_path = generate_pdf_report(
        output_dir / "packing_plan.pdf",
        container=container,
        solution=solution,
        layout_images=[layout_image_path],
    )

    cog = solution.center_of_gravity
    print("=== Container Loading Summary ===")
    print(f"Placed Items: {len(solution.placements)}")
    print(f"Unplaced Items: {solution.unplaced_count}")
    print(f"Volume Utilisation: {solution.utilization:.2f}%")
    print(f"Weight Utilisation: {solution.weight_utilization:.2f}%")
    print(f"Total Weight: {solution.total_weight:.1f} kg")
    if cog is not None:
        print(f"Center of Gravity: {cog.x:.1f}, {cog.y:.1f}, {cog.z:.1f}")
    print(f"CSV: {csv_path}")
    print(f"PDF: {pdf_path}")


if __name__ == "__main__":
    main()
