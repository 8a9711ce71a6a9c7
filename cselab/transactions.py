"""Chained hash table of sales records keyed by sale id."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, Union

MAX_LINE_LEN = 100
_HASH_MASK = (1 << 64) - 1
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class TableLoadError(Exception):
    """Raised when a sales file cannot be loaded into a table."""


@dataclass(frozen=True)
class Sale:
    """One sales record."""

    sale_id: str
    purchased_item: str
    cost: float


@dataclass(frozen=True)
class TableStats:
    """Bucket statistics of a transaction table."""

    table_size: int
    total_entries: int
    longest_chain: int
    shortest_chain: int
    empty_buckets: int


def hash_string(text: str) -> int:
    """Hash a string byte by byte: ``h = c + (h << 6) + (h << 16) - h``, in 64 bits."""
    value = 0
    for byte in text.encode("utf-8", "surrogateescape"):
        value = (byte + (value << 6) + (value << 16) - value) & _HASH_MASK
    return value


def format_stats(stats: TableStats) -> str:
    """Render table statistics as the five-line report."""
    return (
        f"Table size: {stats.table_size}\n"
        f"Total entries: {stats.total_entries}\n"
        f"Longest chain: {stats.longest_chain}\n"
        f"Shortest chain: {stats.shortest_chain}\n"
        f"Empty buckets: {stats.empty_buckets}\n"
    )


def _parse_float(text: str) -> float:
    """Parse the leading number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _read_chunks(handle, limit: int = MAX_LINE_LEN) -> Iterator[str]:
    """Yield lines, splitting any line longer than ``limit`` characters."""
    for line in handle:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        yield line


class TransactionTable:
    """Separate-chaining hash table of sales; newest entries sit at a chain's front."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("table size must be at least 1")
        self.size = size
        self._buckets: list[list[Sale]] = [[] for _ in range(size)]

    def bucket_index(self, sale_id: str) -> int:
        """Index of the chain that holds ``sale_id``."""
        return hash_string(sale_id) % self.size

    def insert(self, sale_id: str, purchased_item: str, cost: float) -> Sale:
        """Add a sale to the front of its chain and return it."""
        sale = Sale(sale_id, purchased_item, cost)
        self._buckets[self.bucket_index(sale_id)].insert(0, sale)
        return sale

    def lookup(self, sale_id: str) -> Optional[Sale]:
        """Return the first sale in its chain with this id, or None."""
        for sale in self._buckets[self.bucket_index(sale_id)]:
            if sale.sale_id == sale_id:
                return sale
        return None

    def load(self, filename: Union[str, os.PathLike]) -> list[str]:
        """Load ``id,item,cost`` lines from a file; return the ids skipped as duplicates."""
        try:
            handle = open(filename, "r", encoding="utf-8", errors="surrogateescape")
        except OSError as exc:
            raise TableLoadError(
                f"error in load_table while opening file {os.fspath(filename)}"
            ) from exc

        duplicates = []
        with handle:
            for line in _read_chunks(handle):
                fields = [field for field in line.split(",") if field]
                if not fields:
                    continue
                sale_id = fields[0]
                purchased_item = fields[1] if len(fields) > 1 else ""
                cost = _parse_float(fields[2]) if len(fields) > 2 else 0.0
                if sale_id in self:
                    duplicates.append(sale_id)
                    continue
                self.insert(sale_id, purchased_item, cost)
        return duplicates

    def clear(self) -> None:
        """Remove every entry from every chain."""
        for bucket in self._buckets:
            bucket.clear()

    def stats(self) -> TableStats:
        """Compute chain statistics.

        The shortest chain is zero once an empty bucket has been seen; it is
        seeded from bucket 0 and bucket 1 never lowers it.
        """
        total = longest = shortest = empty = 0
        for index, bucket in enumerate(self._buckets):
            length = len(bucket)
            if not bucket:
                shortest = 0
                empty += 1
                continue
            total += length
            longest = max(longest, length)
            if index == 0:
                shortest = length
            if length < shortest and index != 1:
                shortest = length
        return TableStats(self.size, total, longest, shortest, empty)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, sale_id: object) -> bool:
        return isinstance(sale_id, str) and self.lookup(sale_id) is not None