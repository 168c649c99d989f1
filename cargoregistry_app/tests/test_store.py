"""Tests for the in-memory cargo registry."""

from __future__ import annotations

import pytest

from cargoregistry_app.config.limits import MAX_CARGO, MAX_ITEMS
from cargoregistry_app.errors import (
    CapacityExceededError,
    DuplicateIdError,
    DuplicateTrackingNumberError,
)
from cargoregistry_app.models import Cargo, CargoItem
from cargoregistry_app.repositories import CargoStore, ascii_fold_equals
from cargoregistry_app.services.tracking import TrackingNumberAllocator


class TestAdd:
    def test_add_assigns_tracking_and_total(self, store, sample_cargo):
        added = store.add(sample_cargo)
        assert added.tracking_number == "TRK1000"
        assert added.total_weight_kg == pytest.approx(15.5)
        assert len(store) == 1

    def test_add_does_not_alias_candidate(self, store, sample_cargo):
        added = store.add(sample_cargo)
        assert sample_cargo.tracking_number == ""
        sample_cargo.items.append(CargoItem("Extra", 1, 100.0))
        assert added.item_count == 1
        assert store.find_by_id(1).total_weight_kg == pytest.approx(15.5)

    def test_tracking_numbers_increase(self, store, make_cargo):
        codes = [store.add(make_cargo(i)).tracking_number for i in range(1, 4)]
        assert codes == ["TRK1000", "TRK1001", "TRK1002"]

    def test_duplicate_id_rejected(self, store, make_cargo):
        store.add(make_cargo(1))
        store.add(make_cargo(2))
        before = store.all()
        with pytest.raises(DuplicateIdError) as exc:
            store.add(make_cargo(2, destination="Elsewhere"))
        assert exc.value.cargo_id == 2
        assert store.all() == before
        assert len(store) == 2

    def test_capacity_exceeded(self, store, make_cargo):
        for i in range(MAX_CARGO):
            store.add(make_cargo(i))
        assert store.is_full()
        before = store.all()
        with pytest.raises(CapacityExceededError) as exc:
            store.add(make_cargo(MAX_CARGO))
        assert exc.value.limit == MAX_CARGO
        assert len(store) == MAX_CARGO
        assert store.all() == before

    def test_too_many_items_rejected(self, store, make_cargo):
        items = [CargoItem(f"I{n}", 1, 1.0) for n in range(MAX_ITEMS + 1)]
        with pytest.raises(CapacityExceededError):
            store.add(make_cargo(1, items=items))
        assert len(store) == 0

    def test_max_items_accepted(self, store, make_cargo):
        items = [CargoItem(f"I{n}", 1, 2.0) for n in range(MAX_ITEMS)]
        added = store.add(make_cargo(1, items=items))
        assert added.item_count == MAX_ITEMS
        assert added.total_weight_kg == pytest.approx(20.0)

    def test_injected_allocator_is_used(self, make_cargo):
        alloc = TrackingNumberAllocator(seed=5000)
        store = CargoStore(allocator=alloc)
        assert store.add(make_cargo(1)).tracking_number == "TRK5000"
        assert alloc.peek() == 5001


class TestRestore:
    def test_restore_keeps_tracking_and_advances_allocator(self, store, make_cargo):
        record = make_cargo(1)
        record.tracking_number = "TRK1005"
        store.restore(record)
        assert store.find_by_tracking_number("TRK1005") is not None
        assert store.add(make_cargo(2)).tracking_number == "TRK1006"

    def test_restore_duplicate_tracking_rejected(self, store, make_cargo):
        first = make_cargo(1)
        first.tracking_number = "TRK1000"
        second = make_cargo(2)
        second.tracking_number = "TRK1000"
        store.restore(first)
        with pytest.raises(DuplicateTrackingNumberError):
            store.restore(second)
        assert len(store) == 1


class TestTotalWeight:
    def test_empty(self, store):
        assert store.total_weight() == 0.0

    def test_sum(self, store, make_cargo):
        store.add(make_cargo(1, items=[CargoItem("A", 2, 5.0)]))
        store.add(make_cargo(2, items=[CargoItem("B", 3, 1.5), CargoItem("C", 1, 0.25)]))
        assert store.total_weight() == pytest.approx(14.75)


class TestSearch:
    def test_destination_exact_case_insensitive(self, store, make_cargo):
        store.add(make_cargo(1, destination="Springfield"))
        store.add(make_cargo(2, destination="springfield East"))
        found = list(store.find_by_destination("SPRINGFIELD"))
        assert [c.id for c in found] == [1]

    def test_prefix_and_suffix_do_not_match(self, store, make_cargo):
        store.add(make_cargo(1, destination="Springfield"))
        assert list(store.find_by_destination("Spring")) == []
        assert list(store.find_by_destination("field")) == []
        assert list(store.find_by_destination("Springfield ")) == []

    def test_status_search_keeps_store_order(self, store, make_cargo):
        store.add(make_cargo(3, status="Delivered"))
        store.add(make_cargo(1, status="in transit"))
        store.add(make_cargo(2, status="In Transit"))
        found = list(store.find_by_status("IN TRANSIT"))
        assert [c.id for c in found] == [1, 2]

    def test_search_is_lazy_and_reenumerable(self, store, make_cargo):
        store.add(make_cargo(1, destination="Oslo"))
        results = store.find_by_destination("oslo")
        assert len(list(results)) == 1
        assert list(results) == []
        assert len(list(store.find_by_destination("oslo"))) == 1

    def test_find_by_id(self, store, make_cargo):
        store.add(make_cargo(10))
        assert store.find_by_id(10).id == 10
        assert store.find_by_id(11) is None

    def test_find_by_tracking_number_is_exact(self, store, make_cargo):
        store.add(make_cargo(1))
        assert store.find_by_tracking_number("TRK1000").id == 1
        assert store.find_by_tracking_number("trk1000") is None
        assert store.find_by_tracking_number("TRK100") is None

    def test_all_is_read_only_snapshot(self, store, make_cargo):
        store.add(make_cargo(1))
        snapshot = store.all()
        assert isinstance(snapshot, tuple)
        store.add(make_cargo(2))
        assert len(snapshot) == 1
        assert [c.id for c in store.all()] == [1, 2]

    def test_returned_records_do_not_alias_store(self, store, make_cargo):
        first = store.add(make_cargo(1))
        store.add(make_cargo(2))
        first.id = 2
        first.items.extend(CargoItem(f"X{n}", 1, 1.0) for n in range(20))
        for found in (store.find_by_id(2), store.all()[1], next(store.find_by_destination("Springfield"))):
            found.items.clear()

        assert [c.id for c in store.all()] == [1, 2]
        assert [c.item_count for c in store] == [1, 1]
        assert store.total_weight() == pytest.approx(20.0)
        with pytest.raises(DuplicateIdError):
            store.add(make_cargo(2))


class TestAsciiFold:
    def test_equal_ignoring_ascii_case(self):
        assert ascii_fold_equals("In Transit", "IN TRANSIT")

    def test_length_mismatch(self):
        assert not ascii_fold_equals("abc", "abcd")
        assert not ascii_fold_equals("", "a")

    def test_only_ascii_is_folded(self):
        assert not ascii_fold_equals("MÜNCHEN", "münchen")
        assert ascii_fold_equals("MüNCHEN", "münchen")
