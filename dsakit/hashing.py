"""Student SAP-ID hashing into ten families by digital root."""

from __future__ import annotations

from dataclasses import dataclass, field

FAMILY_COUNT = 10


def digital_root(n: int) -> int:
    """Repeatedly sum decimal digits until one digit remains; non-positive gives 0."""
    while n >= 10:
        n = sum(int(digit) for digit in str(n))
    return max(n, 0)


def family_of(sapid: int) -> int:
    """Return the family (0-9) of a SAP ID: digital root of its last three digits."""
    if sapid < 0:
        return 0
    return digital_root(sapid % 1000) % FAMILY_COUNT


def _check_family(family: int) -> None:
    if not 0 <= family < FAMILY_COUNT:
        raise IndexError(f"family {family} out of range 0..{FAMILY_COUNT - 1}")


@dataclass
class FamilyTable:
    """Buckets that accept every insert, newest entry first."""

    _buckets: list[list[int]] = field(
        default_factory=lambda: [[] for _ in range(FAMILY_COUNT)], init=False, repr=False
    )

    def insert(self, sapid: int) -> int:
        """Add ``sapid`` and return the family it went into."""
        family = family_of(sapid)
        self._buckets[family].insert(0, sapid)
        return family

    def bucket(self, family: int) -> list[int]:
        _check_family(family)
        return list(self._buckets[family])

    def collisions(self) -> dict[int, int]:
        """Map each family holding more than one entry to its entry count."""
        return {
            family: len(entries)
            for family, entries in enumerate(self._buckets)
            if len(entries) > 1
        }

    def format(self) -> str:
        lines = ["--- Family Buckets ---"]
        for family, entries in enumerate(self._buckets):
            line = f"Family {family}: " + "".join(f"{sapid} -> " for sapid in entries) + "NULL"
            if len(entries) > 1:
                line += f"  [Collision detected: {len(entries)} entries]"
            lines.append(line)
        return "\n".join(lines)


@dataclass
class ChainedHashTable:
    """Separate-chaining table of unique SAP IDs, oldest entry first."""

    _buckets: list[list[int]] = field(
        default_factory=lambda: [[] for _ in range(FAMILY_COUNT)], init=False, repr=False
    )

    def insert(self, sapid: int) -> int:
        """Add ``sapid`` and return its family; a duplicate raises ValueError."""
        family = family_of(sapid)
        chain = self._buckets[family]
        if sapid in chain:
            raise ValueError(f"SAP ID {sapid} already exists.")
        chain.append(sapid)
        return family

    def search(self, sapid: int) -> int | None:
        """Return the family holding ``sapid``, or None."""
        family = family_of(sapid)
        return family if sapid in self._buckets[family] else None

    def delete(self, sapid: int) -> int:
        """Remove ``sapid`` and return its family; a missing ID raises KeyError."""
        family = family_of(sapid)
        chain = self._buckets[family]
        if sapid not in chain:
            raise KeyError(f"SAP ID {sapid} not found for deletion")
        chain.remove(sapid)
        return family

    def bucket(self, family: int) -> list[int]:
        _check_family(family)
        return list(self._buckets[family])

    def __contains__(self, sapid: object) -> bool:
        return isinstance(sapid, int) and self.search(sapid) is not None

    def format(self) -> str:
        lines = ["Hash Table (Separate Chaining):"]
        for family, chain in enumerate(self._buckets):
            body = "".join(f"{sapid} -> " for sapid in chain) if chain else "EMPTY"
            lines.append(f"Family {family}: {body}NULL")
        return "\n".join(lines)