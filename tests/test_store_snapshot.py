"""
Snapshot persistence: versioned JSON written atomically, loaded at startup,
and backed up when the file cannot be read.
"""

import json
from decimal import Decimal

from carrental.models.store import Store
from carrental.services.loans import LoanService
from carrental.services.rental_service import RentalService
from carrental.utils.constants import SNAPSHOT_VERSION


def test_fresh_store_is_seeded(store):
    assert [v.vehicle_id for v in store.catalog.list()] == ["C1", "T1", "B1"]
    assert len(store.directory) == 0


def test_unseeded_store_starts_empty(data_path):
    assert len(Store(data_path, seed=False).catalog) == 0


def test_save_and_reload(store, data_path):
    u1 = store.directory.register("U1", "Alice", "pw1")
    RentalService.rent(store.catalog, u1, "C1", 3)
    LoanService.request_loan(u1, 1000)
    store.save()

    raw = json.loads(data_path.read_text(encoding="utf-8"))
    assert raw["version"] == SNAPSHOT_VERSION
    assert "pw1" not in data_path.read_text(encoding="utf-8")
    assert not (data_path.parent / "data.json.tmp").exists()

    again = Store(data_path)
    u1b = again.directory.authenticate("U1", "pw1")
    assert u1b.loan_balance == Decimal("1000.00")
    assert u1b.history[0].total == Decimal("5700.00")
    assert u1b.history[0].created_at == u1.history[0].created_at
    assert not again.catalog.find("C1").available


def test_corrupt_file_is_backed_up(data_path):
    data_path.write_text("{not json", encoding="utf-8")
    st = Store(data_path)
    assert (data_path.parent / "data.json.bak").exists()
    assert not data_path.exists()
    assert len(st.catalog) == 3


def test_wrong_version_is_backed_up(data_path):
    data_path.write_text(json.dumps({"version": 99, "vehicles": [], "customers": []}), encoding="utf-8")
    Store(data_path)
    assert (data_path.parent / "data.json.bak").exists()


def test_clear_and_save_empty(store, data_path):
    store.clear()
    store.save()
    st = Store(data_path)
    # an empty snapshot is reseeded on load
    assert len(st.catalog) == 3
    assert len(Store(data_path, seed=False).catalog) == 0


def test_wrong_shape_is_backed_up(data_path):
    for payload in (
        {"version": 1, "vehicles": ["x"], "customers": []},
        {"version": 1, "vehicles": {"C1": {}}, "customers": []},
        {"version": 1, "vehicles": [], "customers": [42]},
    ):
        data_path.write_text(json.dumps(payload), encoding="utf-8")
        st = Store(data_path)
        assert (data_path.parent / "data.json.bak").exists()
        assert not data_path.exists()
        assert len(st.catalog) == 3
