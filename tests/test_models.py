"""
Tests for the input records and instance expansion.
"""

import pytest

from cubeload.models.container import Container
from cubeload.models.sku import ItemInstance, Sku, expand_skus


class TestContainer:
    def test_values_are_coerced_to_float(self):
        container = Container(length=1200, width=1000, height=1200, max_weight=1000, clearance=5)
        assert container.dimensions == (1200.0, 1000.0, 1200.0)
        assert container.volume == pytest.approx(1_440_000_000)

    @pytest.mark.parametrize("field", ["length", "width", "height", "max_weight", "clearance"])
    def test_negative_values_rejected(self, field):
        values = dict(length=10, width=10, height=10, max_weight=10, clearance=0)
        values[field] = -1
        with pytest.raises(ValueError):
            Container(**values)

    def test_dict_round_trip(self, demo_container):
        assert Container.from_dict(demo_container.to_dict()) == demo_container

    def test_clearance_defaults_to_zero(self):
        container = Container.from_dict({"length": 1, "width": 2, "height": 3, "max_weight": 4})
        assert container.clearance == 0.0
        assert container.name == "Container"


class TestSku:
    def test_defaults(self):
        sku = Sku(id=7, name="Box", length=1, width=2, height=3, weight=4, qty=2)
        assert sku.id == "7"
        assert not sku.upright_only and not sku.fragile
        assert sku.stack_limit is None
        assert sku.volume == pytest.approx(6)

    def test_negative_dimension_rejected(self):
        with pytest.raises(ValueError):
            Sku(id="x", name="X", length=-1, width=2, height=3, weight=4, qty=1)

    def test_fractional_quantity_rejected(self):
        with pytest.raises(ValueError):
            Sku(id="x", name="X", length=1, width=2, height=3, weight=4, qty=1.5)

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValueError):
            Sku(id="x", name="X", length=1, width=2, height=3, weight=4, qty=-1)

    def test_fractional_quantity_from_dict_rejected(self):
        payload = {"id": "x", "name": "X", "length": 1, "width": 2, "height": 3, "weight": 4, "qty": 2.5}
        with pytest.raises(ValueError):
            Sku.from_dict(payload)

    def test_whole_float_quantity_accepted(self):
        payload = {"id": "x", "name": "X", "length": 1, "width": 2, "height": 3, "weight": 4, "qty": 3.0}
        sku = Sku.from_dict(payload)
        assert sku.qty == 3
        assert isinstance(sku.qty, int)

    def test_fractional_stack_limit_rejected(self):
        with pytest.raises(ValueError):
            Sku(id="x", name="X", length=1, width=2, height=3, weight=4, qty=1, stack_limit=2.7)
        with pytest.raises(ValueError):
            Sku.from_dict(
                {"id": "x", "name": "X", "length": 1, "width": 2, "height": 3, "weight": 4, "qty": 1, "stack_limit": 2.7}
            )

    def test_stack_limit_is_preserved(self):
        sku = Sku(id="x", name="X", length=1, width=2, height=3, weight=4, qty=1, stack_limit=3)
        assert Sku.from_dict(sku.to_dict()).stack_limit == 3

    def test_dict_round_trip(self, demo_skus):
        assert [Sku.from_dict(sku.to_dict()) for sku in demo_skus] == demo_skus


class TestExpansion:
    def test_one_instance_per_unit(self, demo_skus):
        instances = expand_skus(demo_skus)
        assert len(instances) == sum(sku.qty for sku in demo_skus)
        assert len({item.instance_id for item in instances}) == len(instances)

    def test_ids_are_stable(self, demo_skus):
        assert expand_skus(demo_skus) == expand_skus(demo_skus)
        assert [item.instance_id for item in expand_skus(demo_skus)[:5]] == [
            "box-a-1",
            "box-a-2",
            "box-a-3",
            "box-a-4",
            "box-b-5",
        ]

    def test_shared_sku_ids_still_give_unique_instances(self):
        skus = [
            Sku(id="dup", name="One", length=1, width=1, height=1, weight=1, qty=2),
            Sku(id="dup", name="Two", length=2, width=2, height=2, weight=1, qty=2),
        ]
        ids = [item.instance_id for item in expand_skus(skus)]
        assert len(set(ids)) == 4

    def test_instance_exposes_sku_fields(self, demo_skus):
        instance = expand_skus(demo_skus)[-1]
        assert instance.sku_id == "fragile-c"
        assert instance.fragile
        assert instance.dimensions == (300.0, 300.0, 200.0)
        assert ItemInstance.from_dict(instance.to_dict()) == instance
