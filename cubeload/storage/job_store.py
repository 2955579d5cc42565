"""
JSON persistence for planning jobs (container + SKUs) and solved plans.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from cubeload.core.solution import Solution
from cubeload.models.container import Container
from cubeload.models.sku import Sku

logger = logging.getLogger(__name__)

DEFAULT_JOB_PATH = Path.home() / ".cubeload" / "job.json"


def default_job_path() -> Path:
    """Job file location, overridable through ``CUBELOAD_JOB_PATH``."""
    configured = os.environ.get("CUBELOAD_JOB_PATH")
    return Path(configured).expanduser() if configured else DEFAULT_JOB_PATH


def _write_json(path: Path, payload: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as file:
        json.dump(payload, file, indent=2)
    return path


def save_job(path: str | Path, container: Container, skus: Sequence[Sku]) -> Path:
    payload = {
        "container": container.to_dict(),
        "skus": [sku.to_dict() for sku in skus],
    }
    return _write_json(Path(path), payload)


def load_job(path: str | Path) -> Optional[Tuple[Container, List[Sku]]]:
    """
    Load a saved job, or return None when there is nothing usable on disk.
    """
    path = Path(path)
    if not path.exists():
        return None
    try:
        with open(path, "r", encoding="utf-8") as file:
            payload = json.load(file)
        container = Container.from_dict(payload["container"])
        skus = [Sku.from_dict(item) for item in payload.get("skus", [])]
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
        logger.warning("Ignoring unreadable job file %s: %s", path, exc)
        return None
    return container, skus


def clear_job(path: str | Path) -> bool:
    """Delete the saved job; returns False when there was none."""
    path = Path(path)
    if not path.exists():
        return False
    path.unlink()
    return True


def save_solution(path: str | Path, solution: Solution) -> Path:
    return _write_json(Path(path), solution.to_dict())


def load_solution(path: str | Path) -> Solution:
    with open(path, "r", encoding="utf-8") as file:
        return Solution.from_dict(json.load(file))
