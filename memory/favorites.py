"""Preference store for a user's saved locations."""

import json
from pathlib import Path
from typing import List


class FavoritesStore:
    """Interface for durable favourite-location persistence."""

    def list_favorites(self) -> List[str]:
        raise NotImplementedError

    def add_favorite(self, city: str) -> bool:
        """Save ``city``; return False when it was already saved."""
        raise NotImplementedError

    def remove_favorite(self, city: str) -> bool:
        """Forget ``city``; return False when it was not saved."""
        raise NotImplementedError


class InMemoryFavoritesStore(FavoritesStore):
    def __init__(self, initial: List[str] | None = None) -> None:
        self._cities: List[str] = list(initial or [])

    def list_favorites(self) -> List[str]:
        return list(self._cities)

    def add_favorite(self, city: str) -> bool:
        city = city.strip()
        if not city or city in self._cities:
            return False
        self._cities.append(city)
        return True

    def remove_favorite(self, city: str) -> bool:
        if city not in self._cities:
            return False
        self._cities.remove(city)
        return True


class JSONFavoritesStore(FavoritesStore):
    """Simple JSON-backed store holding one ordered list of city names."""

    def __init__(self, path: str = "data/favorites.json") -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _load(self) -> List[str]:
        if not self.path.exists():
            return []
        data = json.loads(self.path.read_text())
        cities = data if isinstance(data, list) else data.get("favorites", [])
        return [str(city) for city in cities]

    def _save(self, cities: List[str]) -> None:
        self.path.write_text(json.dumps({"favorites": cities}, indent=2))

    def list_favorites(self) -> List[str]:
        return self._load()

    def add_favorite(self, city: str) -> bool:
        city = city.strip()
        cities = self._load()
        if not city or city in cities:
            return False
        cities.append(city)
        self._save(cities)
        return True

    def remove_favorite(self, city: str) -> bool:
        cities = self._load()
        if city not in cities:
            return False
        cities.remove(city)
        self._save(cities)
        return True


__all__ = ["FavoritesStore", "InMemoryFavoritesStore", "JSONFavoritesStore"]
