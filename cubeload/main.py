"""
Streamlit entrypoint for the container loading planner.
"""

from __future__ import annotations

import json
import sys
import tempfile
import uuid
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List

import streamlit as st

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from cubeload.core.geometry import Placement, Vec3
from cubeload.core.override import apply_override
from cubeload.core.solution import Solution, metrics_summary
from cubeload.core.solver import solve
from cubeload.logger import configure_logging
from cubeload.models.container import Container
from cubeload.models.sku import Sku
from cubeload.report.csv_export import placements_to_csv
from cubeload.report.pdf_generator import generate_pdf_report
from cubeload.storage.job_store import clear_job, default_job_path, load_job, save_job
from cubeload.visualization import layout_plot

BASE_DIR = Path(__file__).resolve().parent
CONFIG_DIR = BASE_DIR / "config"

SKU_COLUMNS = [
    "id",
    "name",
    "length",
    "width",
    "height",
    "weight",
    "qty",
    "upright_only",
    "fragile",
    "stack_limit",
]


@st.cache_data
def load_json_config(filename: str) -> Dict[str, Any]:
    with open(CONFIG_DIR / filename, "r", encoding="utf-8") as file:
        return json.load(file)


def _init_session_state() -> None:
    if "container" in st.session_state:
        return
    job = load_json_config("demo_job.json")
    saved = load_job(default_job_path())
    if saved is not None:
        container, skus = saved
        st.session_state.container = container.to_dict()
        st.session_state.sku_rows = [sku.to_dict() for sku in skus]
    else:
        st.session_state.container = dict(job["container"])
        st.session_state.sku_rows = [Sku.from_dict(item).to_dict() for item in job["skus"]]
    st.session_state.editor_version = 0


def build_container_inputs(container_templates: Dict[str, Any]) -> Container:
    with st.expander("Container / Shipper", expanded=True):
        template_options = {value["name"]: value for value in container_templates.values()}
        template_names = ["Custom"] + list(template_options.keys())
        selected_template = st.selectbox(
            "Container Template",
            template_names,
            index=0,
            help="Start from a predefined container or keep the current values",
        )
        current = st.session_state.container
        if selected_template != "Custom":
            current = dict(template_options[selected_template])

        name = st.text_input("Container Name", value=str(current.get("name", "Container")))

        st.markdown("**Inner Dimensions**")
        col1, col2, col3 = st.columns(3)
        length = col1.number_input("Length (mm)", min_value=0.0, value=float(current["length"]), step=10.0)
        width = col2.number_input("Width (mm)", min_value=0.0, value=float(current["width"]), step=10.0)
        height = col3.number_input("Height (mm)", min_value=0.0, value=float(current["height"]), step=10.0)

        col4, col5 = st.columns(2)
        max_weight = col4.number_input(
            "Max Weight (kg)",
            min_value=0.0,
            value=float(current["max_weight"]),
            step=10.0,
        )
        clearance = col5.number_input(
            "Clearance (mm)",
            min_value=0.0,
            value=float(current.get("clearance", 0)),
            step=1.0,
            help="Gap reserved between neighbouring items",
        )

        volume = length * width * height / 1_000_000_000  # Convert to m³
        st.caption(f"Container Volume: {volume:.3f} m³")

    return Container(
        length=float(length),
        width=float(width),
        height=float(height),
        max_weight=float(max_weight),
        clearance=float(clearance),
        name=name,
    )


def build_sku_inputs() -> List[Sku]:
    with st.expander("SKUs", expanded=True):
        edited = st.data_editor(
            st.session_state.sku_rows,
            column_order=SKU_COLUMNS,
            num_rows="dynamic",
            use_container_width=True,
            key=f"sku_editor_{st.session_state.editor_version}",
            column_config={
                "length": st.column_config.NumberColumn("L (mm)", min_value=0.0),
                "width": st.column_config.NumberColumn("W (mm)", min_value=0.0),
                "height": st.column_config.NumberColumn("H (mm)", min_value=0.0),
                "weight": st.column_config.NumberColumn("Weight (kg)", min_value=0.0),
                "qty": st.column_config.NumberColumn("Qty", min_value=0, step=1),
                "upright_only": st.column_config.CheckboxColumn("Upright only"),
                "fragile": st.column_config.CheckboxColumn("Fragile (prefer top)"),
                "stack_limit": st.column_config.NumberColumn("Stack limit", min_value=0, step=1),
            },
        )

    skus: List[Sku] = []
    for row in edited:
        if row.get("length") is None or row.get("width") is None or row.get("height") is None:
            continue
        payload = {
            "id": row.get("id") or uuid.uuid4().hex[:8],
            "name": row.get("name") or "New SKU",
            "length": row["length"],
            "width": row["width"],
            "height": row["height"],
            "weight": row.get("weight") or 0,
            "qty": row.get("qty") or 0,
            "upright_only": bool(row.get("upright_only")),
            "fragile": bool(row.get("fragile")),
            "stack_limit": row.get("stack_limit"),
        }
        skus.append(Sku.from_dict(payload))
    return skus


def _current_solution(container: Container, skus: List[Sku]) -> Solution:
    """Re-solve only when the inputs change so accepted overrides survive reruns."""
    signature = json.dumps(
        {"container": container.to_dict(), "skus": [sku.to_dict() for sku in skus]},
        sort_keys=True,
    )
    if st.session_state.get("solve_signature") != signature:
        st.session_state.solve_signature = signature
        st.session_state.solution = solve(container, skus)
    return st.session_state.solution


def render_job_controls(container: Container, skus: List[Sku]) -> None:
    job_path = default_job_path()
    col1, col2, col3 = st.columns(3)
    if col1.button("Save Job", use_container_width=True):
        save_job(job_path, container, skus)
        st.success(f"Job saved to {job_path}")
    if col2.button("Load", use_container_width=True):
        saved = load_job(job_path)
        if saved is None:
            st.warning("No saved job found.")
        else:
            loaded_container, loaded_skus = saved
            st.session_state.container = loaded_container.to_dict()
            st.session_state.sku_rows = [sku.to_dict() for sku in loaded_skus]
            st.session_state.editor_version += 1
            st.rerun()
    if col3.button("Clear Saved", use_container_width=True):
        if clear_job(job_path):
            st.info("Saved job cleared.")


def render_metrics(solution: Solution) -> None:
    summary = metrics_summary(solution)
    cols = st.columns(len(summary))
    for col, (label, value) in zip(cols, summary.items()):
        col.metric(label, value)


def render_override_form(container: Container, solution: Solution) -> None:
    if not solution.placements:
        return
    with st.expander("Manual Adjustment", expanded=False):
        instance_ids = [placement.instance_id for placement in solution.placements]
        instance_id = st.selectbox("Item", instance_ids)
        placement = solution.placement_for(instance_id)
        with st.form("override_form"):
            col1, col2, col3 = st.columns(3)
            x = col1.number_input("x (mm)", value=float(placement.position.x), step=5.0)
            y = col2.number_input("y (mm)", value=float(placement.position.y), step=5.0)
            z = col3.number_input("z (mm)", value=float(placement.position.z), step=5.0)
            submitted = st.form_submit_button("Move Item")

        moved_message = st.session_state.pop("override_message", None)
        if moved_message:
            st.success(moved_message)

        if submitted:
            candidate = replace(placement, position=Vec3(float(x), float(y), float(z)))
            if not commit_override(container, solution, candidate):
                st.error("Move rejected: the item would leave the container or collide with another item.")


def commit_override(container: Container, solution: Solution, candidate: Placement) -> bool:
    """Apply a manual move and rerun so the metrics and 3D view pick it up."""
    if not apply_override(solution, candidate, container):
        return False
    # Metrics and the 3D view above the form were drawn before the move.
    st.session_state["override_message"] = f"Moved {candidate.instance_id}."
    st.rerun()
    return True


def render_exports(container: Container, solution: Solution) -> None:
    col1, col2 = st.columns(2)
    col1.download_button(
        label="Download CSV",
        data=placements_to_csv(solution.placements),
        file_name="packing_plan.csv",
        mime="text/csv",
        use_container_width=True,
    )

    try:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmpdir_path = Path(tmpdir)
            layout_image = tmpdir_path / "container_layout.png"
            layout_plot.save_figure_image(layout_plot.container_layout_figure(container, solution), layout_image)
            pdf_path = generate_pdf_report(
                tmpdir_path / "packing_plan.pdf",
                container=container,
                solution=solution,
                layout_images=[layout_image],
            )
            pdf_bytes = pdf_path.read_bytes()
    except Exception as exc:  # noqa: BLE001
        col2.error(f"PDF export failed: {exc}")
        return

    col2.download_button(
        label="Download PDF",
        data=pdf_bytes,
        file_name="packing_plan.pdf",
        mime="application/pdf",
        use_container_width=True,
        help="Summary sheet for client sign-off",
    )


def main() -> None:
    configure_logging()
    st.set_page_config(page_title="Cubeload Planner", layout="wide")
    st.title("Container Loading Planner")

    _init_session_state()
    container_templates = load_json_config("containers.json")

    input_col, result_col = st.columns([1, 2])

    with input_col:
        try:
            container = build_container_inputs(container_templates)
            skus = build_sku_inputs()
        except ValueError as exc:
            st.error(f"Invalid input: {exc}")
            st.stop()
        render_job_controls(container, skus)

    solution = _current_solution(container, skus)

    with result_col:
        render_metrics(solution)
        st.plotly_chart(layout_plot.container_layout_figure(container, solution), use_container_width=True)
        render_override_form(container, solution)

        if solution.unplaced:
            st.markdown("### Unplaced Items")
            st.dataframe(
                [item.to_dict() for item in solution.unplaced],
                use_container_width=True,
            )

        st.divider()
        st.markdown("## Exports")
        render_exports(container, solution)


if __name__ == "__main__":
    main()
