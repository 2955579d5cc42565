import pytest

from cubeload.core.geometry import Placement, Vec3
from cubeload.models.container import Container
from cubeload.models.sku import Sku


@pytest.fixture
def cube_container():
    """1 m cube, no clearance."""
    return Container(length=1000, width=1000, height=1000, max_weight=100, name="Cube")


@pytest.fixture
def demo_container():
    """Container used by the demo job."""
    return Container(length=1200, width=1000, height=1200, max_weight=1000, clearance=5, name="Demo Shipper")


@pytest.fixture
def demo_skus():
    return [
        Sku(id="box-a", name="Box A", length=400, width=300, height=300, weight=10, qty=4),
        Sku(id="box-b", name="Box B", length=600, width=400, height=250, weight=14, qty=3, upright_only=True),
        Sku(id="fragile-c", name="Fragile C", length=300, width=300, height=200, weight=6, qty=4, fragile=True),
    ]


def make_placement(instance_id, x, y, z, dims=(100.0, 100.0, 100.0), weight=10.0, sku_id="box"):
    return Placement(
        instance_id=instance_id,
        sku_id=sku_id,
        name=sku_id.title(),
        position=Vec3(float(x), float(y), float(z)),
        dims=tuple(float(d) for d in dims),
        weight=float(weight),
    )
