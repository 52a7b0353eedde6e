"""Favourite location stores."""

import json
from pathlib import Path

from memory.favorites import InMemoryFavoritesStore, JSONFavoritesStore


def test_json_store_persists_ordered_unique_cities(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "favorites.json"
    store = JSONFavoritesStore(str(path))

    assert store.list_favorites() == []
    assert store.add_favorite(" Lisbon ")
    assert store.add_favorite("Oslo")
    assert not store.add_favorite("Lisbon")
    assert not store.add_favorite("   ")

    reloaded = JSONFavoritesStore(str(path))
    assert reloaded.list_favorites() == ["Lisbon", "Oslo"]
    assert json.loads(path.read_text()) == {"favorites": ["Lisbon", "Oslo"]}


def test_json_store_remove(tmp_path: Path) -> None:
    store = JSONFavoritesStore(str(tmp_path / "favorites.json"))
    store.add_favorite("Lisbon")

    assert store.remove_favorite("Lisbon")
    assert not store.remove_favorite("Lisbon")
    assert store.list_favorites() == []


def test_in_memory_store_matches_json_semantics() -> None:
    store = InMemoryFavoritesStore(["Paris"])

    assert not store.add_favorite("Paris")
    assert store.add_favorite("Rome")
    assert store.remove_favorite("Paris")
    assert store.list_favorites() == ["Rome"]

    listed = store.list_favorites()
    listed.append("Berlin")
    assert store.list_favorites() == ["Rome"]


def test_json_store_reads_bare_list_and_rewrites_object(tmp_path: Path) -> None:
    path = tmp_path / "favorites.json"
    path.write_text(json.dumps(["Lisbon", "Oslo"]))
    store = JSONFavoritesStore(str(path))

    assert store.list_favorites() == ["Lisbon", "Oslo"]
    assert store.add_favorite("Rome")
    assert json.loads(path.read_text()) == {"favorites": ["Lisbon", "Oslo", "Rome"]}
