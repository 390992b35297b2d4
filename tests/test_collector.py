from __future__ import annotations

from typing import Dict, Optional, Tuple

import pytest

from collector import VersionEntry, VersionLimitError, collect_addresses, normalize_missing
from records import folder_lookup


def _store(data: Dict[Tuple[str, str], str]):
    calls = []

    def lookup(name: str, suffix: str = "") -> Optional[str]:
        calls.append((name, suffix))
        return data.get((name, suffix))

    lookup.calls = calls
    return lookup


def test_empty_store_gives_empty_history_and_absent_current() -> None:
    current, history = collect_addresses(_store({}), ["A", "B", "C"])
    assert current == {"A": None, "B": None, "C": None}
    assert history == []


def test_history_is_ascending_and_stops_at_first_all_absent_version() -> None:
    data = {
        ("A", "-v1"): "0x1",
        ("A", "-v2"): "0x2",
        ("B", "-v3"): "0x3",
        # v4 all absent, v5 must never be reached
        ("A", "-v5"): "0x5",
    }
    current, history = collect_addresses(_store(data), ["A", "B"])
    assert [e.version for e in history] == [1, 2, 3]
    assert history[0].addresses == {"A": "0x1", "B": "none"}
    assert history[2].addresses == {"A": "none", "B": "0x3"}


def test_scenario_single_version_with_missing_entry() -> None:
    lookup = _store({("A", "-v1"): "0x1"})
    current, history = collect_addresses(lookup, ["A", "B"])
    assert history == [VersionEntry(version=1, addresses={"A": "0x1", "B": "none"})]
    assert ("A", "-v3") not in lookup.calls
    assert ("A", "-v2") in lookup.calls


def test_current_record_keeps_absent_as_none() -> None:
    current, _ = collect_addresses(_store({("A", ""): "0xCAFE"}), ["A", "B"])
    assert current == {"A": "0xCAFE", "B": None}


def test_custom_missing_marker() -> None:
    _, history = collect_addresses(_store({("B", "-v1"): "0xB"}), ["A", "B"], missing_marker="n/a")
    assert history[0].addresses["A"] == "n/a"


def test_version_ceiling_raises_when_records_keep_resolving() -> None:
    def lookup(name: str, suffix: str = "") -> Optional[str]:
        return "0xdead"

    with pytest.raises(VersionLimitError):
        collect_addresses(lookup, ["A"], max_versions=5)


def test_ceiling_not_hit_when_history_ends_exactly_below_it() -> None:
    data = {("A", f"-v{v}"): f"0x{v}" for v in range(1, 5)}
    _, history = collect_addresses(_store(data), ["A"], max_versions=5)
    assert len(history) == 4


def test_invalid_ceiling() -> None:
    with pytest.raises(ValueError):
        collect_addresses(_store({}), ["A"], max_versions=0)


def test_normalize_missing() -> None:
    assert normalize_missing({"A": None, "B": "0x1"}) == {"A": "none", "B": "0x1"}


def test_version_entry_lookup_has_id() -> None:
    entry = VersionEntry(version=2, addresses={"A": "0x1"})
    assert entry.as_lookup() == {"A": "0x1", "id": "2"}
    assert entry.as_lookup("version") == {"A": "0x1", "version": "2"}


def test_collects_from_deployment_folder(deployments) -> None:
    deployments("Mangrove", "0xNEW")
    deployments("Mangrove", "0xOLD1", "-v1")
    deployments("MgvReader", "0xR1", "-v1")
    deployments("Mangrove", "0xOLD2", "-v2")
    current, history = collect_addresses(folder_lookup(str(deployments.folder)), ["Mangrove", "MgvReader"])
    assert current == {"Mangrove": "0xNEW", "MgvReader": None}
    assert [e.version for e in history] == [1, 2]
    assert history[1].addresses == {"Mangrove": "0xOLD2", "MgvReader": "none"}


def test_exactly_max_versions_is_accepted() -> None:
    data = {("A", f"-v{v}"): f"0x{v}" for v in range(1, 6)}
    lookup = _store(data)
    _, history = collect_addresses(lookup, ["A"], max_versions=5)
    assert [e.version for e in history] == [1, 2, 3, 4, 5]
    assert ("A", "-v6") in lookup.calls
    assert ("A", "-v7") not in lookup.calls


def test_one_version_above_ceiling_raises() -> None:
    data = {("A", f"-v{v}"): f"0x{v}" for v in range(1, 7)}
    with pytest.raises(VersionLimitError):
        collect_addresses(_store(data), ["A"], max_versions=5)
