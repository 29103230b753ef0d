"""Tests for Traffic records and the Location/Corridor/Event value types."""

import os

import pytest

from venueplan.model import Corridor, Event, Location, Traffic

LINE_SEPARATOR = os.linesep


def _corridor(start, end, capacity=100):
    return Corridor(Location(start), Location(end), capacity)


class TestValueTypes:
    def test_location_equality_by_name(self):
        assert Location("a") == Location("a")
        assert hash(Location("a")) == hash(Location("a"))
        assert Location("a") != Location("b")
        assert str(Location("St. Lucia")) == "St. Lucia"

    def test_location_requires_name(self):
        with pytest.raises(TypeError):
            Location(None)

    def test_corridor_identity_ignores_capacity(self):
        # Corridor identity is (start, end) only
        assert _corridor("a", "b", 10) == _corridor("a", "b", 20)
        assert hash(_corridor("a", "b", 10)) == hash(_corridor("a", "b", 20))
        assert _corridor("a", "b") != _corridor("b", "a")

    def test_corridor_self_loop_accepted(self):
        loop = _corridor("a", "a", 5)
        assert loop.start == loop.end

    def test_corridor_validation(self):
        with pytest.raises(TypeError):
            Corridor(None, Location("b"), 1)
        with pytest.raises(ValueError):
            _corridor("a", "b", -1)
        with pytest.raises(TypeError):
            Corridor(Location("a"), Location("b"), 1.5)

    def test_corridor_str(self):
        assert str(_corridor("l0", "l1", 100)) == "Corridor l0 to l1 (100)"

    def test_event_validation(self):
        assert Event("Adele", 0).size == 0
        with pytest.raises(ValueError):
            Event("Adele", -1)
        with pytest.raises(TypeError):
            Event(None, 1)
        with pytest.raises(TypeError):
            Event("Adele", "10")


class TestTraffic:
    def test_absent_corridor_reads_zero(self):
        assert Traffic().get_traffic(_corridor("a", "b")) == 0

    def test_update_overwrites(self):
        traffic = Traffic()
        corridor = _corridor("a", "b")
        traffic.update_traffic(corridor, 5)
        traffic.update_traffic(corridor, 3)
        assert traffic.get_traffic(corridor) == 3

    def test_update_rejects_negative_and_none(self):
        traffic = Traffic()
        with pytest.raises(ValueError):
            traffic.update_traffic(_corridor("a", "b"), -1)
        with pytest.raises(TypeError):
            traffic.update_traffic(None, 1)

    @pytest.mark.parametrize("value", [2.5, 3.0, True, "3"])
    def test_update_rejects_non_int(self, value):
        traffic = Traffic()
        corridor = _corridor("a", "b")
        with pytest.raises(TypeError):
            traffic.update_traffic(corridor, value)
        assert corridor not in traffic

    def test_add_traffic_rejects_non_int_change(self):
        traffic = Traffic()
        corridor = _corridor("a", "b")
        traffic.update_traffic(corridor, 1)
        with pytest.raises(TypeError):
            traffic.add_traffic(corridor, 0.5)
        assert traffic.get_traffic(corridor) == 1

    def test_add_traffic_increments(self):
        traffic = Traffic()
        corridor = _corridor("a", "b")
        traffic.add_traffic(corridor, 5)
        traffic.add_traffic(corridor, 2)
        traffic.add_traffic(corridor, -4)
        assert traffic.get_traffic(corridor) == 3
        with pytest.raises(ValueError):
            traffic.add_traffic(corridor, -4)
        assert traffic.get_traffic(corridor) == 3

    def test_add_merges_records(self):
        ab, bc = _corridor("a", "b"), _corridor("b", "c")
        first, second = Traffic(), Traffic()
        first.update_traffic(ab, 1)
        second.update_traffic(ab, 2)
        second.update_traffic(bc, 3)
        first.add(second)
        assert first.get_traffic(ab) == 3
        assert first.get_traffic(bc) == 3

    def test_copy_is_independent(self):
        corridor = _corridor("a", "b")
        original = Traffic()
        original.update_traffic(corridor, 5)
        for copy in (Traffic(original), original.copy()):
            copy.update_traffic(corridor, 1)
            assert original.get_traffic(corridor) == 5

    def test_copy_rejects_other_types(self):
        with pytest.raises(TypeError):
            Traffic({"a": 1})

    def test_corridors_with_traffic_excludes_zero_and_is_sorted(self):
        traffic = Traffic()
        traffic.update_traffic(_corridor("c", "a"), 1)
        traffic.update_traffic(_corridor("a", "c"), 2)
        traffic.update_traffic(_corridor("a", "b"), 3)
        traffic.update_traffic(_corridor("b", "c"), 0)
        keys = [c.key for c in traffic.corridors_with_traffic()]
        assert keys == [("a", "b"), ("a", "c"), ("c", "a")]
        assert len(traffic) == 3
        assert _corridor("b", "c") not in traffic
        assert _corridor("a", "b") in traffic

    def test_same_traffic_treats_zero_as_absent(self):
        with_zero, without = Traffic(), Traffic()
        with_zero.update_traffic(_corridor("a", "b"), 0)
        assert with_zero.same_traffic(without)
        assert without.same_traffic(with_zero)

        without.update_traffic(_corridor("b", "c"), 1)
        assert not with_zero.same_traffic(without)

    def test_same_traffic_compares_values(self):
        first, second = Traffic(), Traffic()
        first.update_traffic(_corridor("a", "b"), 1)
        second.update_traffic(_corridor("a", "b", 999), 1)
        assert first.same_traffic(second)
        second.update_traffic(_corridor("a", "b"), 2)
        assert not first.same_traffic(second)

    def test_str_lists_corridors_with_traffic(self):
        traffic = Traffic()
        traffic.update_traffic(_corridor("l1", "l2", 200), 100)
        traffic.update_traffic(_corridor("l0", "l1", 100), 50)
        traffic.update_traffic(_corridor("l2", "l0", 200), 0)
        assert str(traffic) == (
            "Corridor l0 to l1 (100): 50"
            + LINE_SEPARATOR
            + "Corridor l1 to l2 (200): 100"
            + LINE_SEPARATOR
        )
        assert str(Traffic()) == ""

    def test_update_keeps_latest_corridor_capacity(self):
        traffic = Traffic()
        traffic.update_traffic(_corridor("a", "b", 10), 1)
        traffic.update_traffic(_corridor("a", "b", 20), 2)
        (corridor,) = traffic.corridors_with_traffic()
        assert corridor.capacity == 20
