"""Territory containment graph (parent region -> member territories).

Supports:
    - Parent -> children lookup (declared order preserved)
    - Child -> parents lookup (sorted, via a reverse index)
    - Direct containment test
    - Transitive ancestor / descendant walks

The hierarchy is not a tree: a country can sit under a continental
region and a political union at the same time (GB -> 154, EU, UN).
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Collection, Iterable, Mapping, Sequence
from enum import Enum

from territory_kb.data.codes import normalize, normalize_keys
from territory_kb.errors import DatasetError, NotFoundError

logger = logging.getLogger(__name__)


class ContainmentGraph:
    """Static containment graph built once from the containment table."""

    def __init__(
        self,
        containment: Mapping[str, Sequence[str]],
        known_codes: Collection[str] | None = None,
    ) -> None:
        """Build forward and reverse lookup tables.

        Args:
            containment: parent code -> ordered list of child codes.
            known_codes: Universe every parent and child must belong to.
                If None, no dangling-reference check is made.

        Raises:
            DatasetError: If an edge references a code outside known_codes,
                or two parent keys normalize to the same code.
        """
        self._children: dict[str, tuple[str, ...]] = {}
        reverse: dict[str, set[str]] = {}

        for parent_code, children in normalize_keys(containment, "containment").items():
            child_codes = tuple(normalize(c) for c in children)
            self._children[parent_code] = child_codes
            for child in child_codes:
                reverse.setdefault(child, set()).add(parent_code)

        self._parents: dict[str, tuple[str, ...]] = {
            child: tuple(sorted(parents)) for child, parents in reverse.items()
        }

        if known_codes is not None:
            self._check_references(known_codes)

        logger.debug(
            "Built containment graph: %d parents, %d children",
            len(self._children), len(self._parents),
        )

    def _check_references(self, known_codes: Collection[str]) -> None:
        known = {normalize(c) for c in known_codes}
        dangling = sorted(
            (set(self._children) | set(self._parents)) - known
        )
        if dangling:
            raise DatasetError(
                f"Containment table references unknown territory codes: "
                f"{', '.join(dangling)}"
            )

    # -----------------------------------------------------------------
    # Direct lookups
    # -----------------------------------------------------------------

    def children(self, territory_code: str | Enum) -> list[str]:
        """Child codes of a parent, in declared order.

        'EU' -> ['AT', 'BE', ..., 'BG', 'RO'].

        Raises:
            NotFoundError: If the code is not a parent in the table.
        """
        code = normalize(territory_code)
        try:
            return list(self._children[code])
        except KeyError:
            raise NotFoundError(
                f"territory code: {code} not available"
            ) from None

    def parents(self, territory_code: str | Enum) -> list[str]:
        """Parent codes of a child, sorted.

        'GB' -> ['154', 'EU', 'UN'].

        Raises:
            NotFoundError: If the code is nobody's child.
        """
        code = normalize(territory_code)
        try:
            return list(self._parents[code])
        except KeyError:
            raise NotFoundError(
                f"territory code: {code} not available"
            ) from None

    def contains(self, parent: str | Enum, child: str | Enum) -> bool:
        """Direct containment only; False for unknown parents."""
        children = self._children.get(normalize(parent))
        if children is None:
            return False
        return normalize(child) in children

    # -----------------------------------------------------------------
    # Transitive walks
    # -----------------------------------------------------------------

    def ancestors(self, territory_code: str | Enum) -> list[str]:
        """Every code reachable through parent links, sorted."""
        seen = self._walk(normalize(territory_code), self._parents)
        return sorted(seen)

    def descendants(self, territory_code: str | Enum) -> list[str]:
        """Every code reachable through child links, breadth-first.

        Each code appears once, at its first (shallowest) position.
        """
        return self._walk(normalize(territory_code), self._children)

    def is_within(self, child: str | Enum, ancestor: str | Enum) -> bool:
        """Transitive containment test."""
        return normalize(ancestor) in self.ancestors(child)

    @staticmethod
    def _walk(start: str, edges: Mapping[str, Iterable[str]]) -> list[str]:
        order: list[str] = []
        seen = {start}
        queue = deque(edges.get(start, ()))
        while queue:
            code = queue.popleft()
            if code in seen:
                continue
            seen.add(code)
            order.append(code)
            queue.extend(edges.get(code, ()))
        return order

    # -----------------------------------------------------------------
    # Code sets
    # -----------------------------------------------------------------

    @property
    def parent_codes(self) -> frozenset[str]:
        return frozenset(self._children)

    @property
    def child_codes(self) -> frozenset[str]:
        return frozenset(self._parents)

    def __contains__(self, territory_code: object) -> bool:
        if not isinstance(territory_code, (str, Enum)):
            return False
        code = normalize(territory_code)
        return code in self._children or code in self._parents

    def __len__(self) -> int:
        return len(self._children)
