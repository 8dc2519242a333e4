"""Resolve free-text food names to canonical catalog names."""

from dataclasses import dataclass

from nutrition_advisor.services.catalog import FoodCatalog


@dataclass(frozen=True)
class AliasResolver:
    """Match a free-text name against the catalog.

    Order: exact key, first key in table order that contains or is contained
    by the name, then the alias map. Substring ties go to the key that comes
    first in the table, not to the closest one. A returned name is not
    guaranteed to exist in the table when it came from the alias map.
    """

    catalog: FoodCatalog

    def resolve(self, raw_name: str) -> str | None:
        """Return a canonical name for ``raw_name`` or None when unresolved."""
        name = normalize_name(raw_name)
        if not name:
            return None
        if name in self.catalog.foods:
            return name
        for key in self.catalog.foods:
            if name in key or key in name:
                return key
        return self.catalog.aliases.get(name)


def normalize_name(raw_name: str) -> str:
    """Trim surrounding whitespace and lowercase."""
    return raw_name.strip().lower()
