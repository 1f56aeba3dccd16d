# Area: Engine
"""
trivia_duel._engine.category — Category registry
================================================

Categories are unique by name and by id. A registry is owned by one
match service; tests build their own so no state leaks between them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional
import logging
import uuid

from ..errors import DuplicateError, NotFoundError

logger = logging.getLogger("trivia_duel.category")


@dataclass(frozen=True)
class Category:
    id: str
    name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


class CategoryRegistry:
    """Append-only lookup of categories by id and by name."""

    def __init__(self):
        self._by_id: Dict[str, Category] = {}
        self._by_name: Dict[str, Category] = {}

    def __len__(self) -> int:
        return len(self._by_id)

    def get_by_id(self, category_id: str) -> Optional[Category]:
        return self._by_id.get(category_id)

    def get_by_id_or_raise(self, category_id: str) -> Category:
        category = self.get_by_id(category_id)
        if category is None:
            raise NotFoundError(
                f"Category with id={category_id} not found",
                category_id=category_id,
            )
        return category

    def get_by_name(self, name: str) -> Optional[Category]:
        return self._by_name.get(name)

    def get_by_name_or_raise(self, name: str) -> Category:
        category = self.get_by_name(name)
        if category is None:
            raise NotFoundError(
                f"Category with name='{name}' not found",
                category_name=name,
            )
        return category

    def get_or_create(self, name: str) -> Category:
        """Return the category called `name`, creating it on first use."""
        existing = self._by_name.get(name)
        if existing is not None:
            return existing
        return self._insert(Category(id=str(uuid.uuid4()), name=name))

    def register(self, category_id: str, name: str) -> Category:
        """
        Register a category under a known id (used when restoring).

        Raises:
            DuplicateError: If the id or the name is already taken by a
                category with a different name or id.
        """
        by_id = self._by_id.get(category_id)
        if by_id is not None:
            if by_id.name != name:
                raise DuplicateError(
                    f"Category id={category_id} already exists with a different "
                    f"name ('{by_id.name}' != '{name}')",
                    category_id=category_id,
                )
            return by_id

        by_name = self._by_name.get(name)
        if by_name is not None:
            raise DuplicateError(
                f"Category name='{name}' already exists with a different id "
                f"({by_name.id} != {category_id})",
                category_name=name,
            )
        return self._insert(Category(id=category_id, name=name))

    def all(self) -> List[Category]:
        return list(self._by_id.values())

    def _insert(self, category: Category) -> Category:
        self._by_id[category.id] = category
        self._by_name[category.name] = category
        logger.debug(f"Registered category '{category.name}' ({category.id})")
        return category
