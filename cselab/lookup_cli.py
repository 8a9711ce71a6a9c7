"""Command that loads a sales file and answers id queries read from stdin."""

from __future__ import annotations

import getopt
import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, TextIO

from cselab.transactions import TableLoadError, TransactionTable, format_stats

MIN_TABLE_SIZE = 3
DEFAULT_TABLE_SIZE = 1873
MAX_QUERY_LEN = 100


@dataclass(frozen=True)
class _Options:
    show_stats: bool
    table_size: int
    filename: str


def _leading_int(text: str) -> int:
    """Integer value of the leading digits of ``text`` (with optional sign); 0 if none."""
    stripped = text.lstrip()
    sign = 1
    if stripped[:1] in ("+", "-"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    digits = ""
    for char in stripped:
        if not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def parse_args(argv: list[str]) -> _Options:
    """Parse ``[-s] [-t table_size] <filename>``; raise ValueError on bad usage."""
    try:
        opts, args = getopt.gnu_getopt(argv, "st:")
    except getopt.GetoptError as exc:
        raise ValueError(str(exc)) from exc

    show_stats = False
    table_size = 0
    for flag, value in opts:
        if flag == "-s":
            show_stats = True
        elif flag == "-t":
            requested = _leading_int(value)
            if requested > MIN_TABLE_SIZE:
                table_size = requested
    if not args:
        raise ValueError("missing filename")
    return _Options(show_stats, table_size or DEFAULT_TABLE_SIZE, args[0])


def _query_chunks(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        while len(line) > MAX_QUERY_LEN:
            yield line[:MAX_QUERY_LEN]
            line = line[MAX_QUERY_LEN:]
        yield line


def run_queries(table: TransactionTable, lines: Iterable[str], out: TextIO) -> int:
    """Look up each line's id, write the result to ``out``; return the hit count."""
    successes = 0
    for line in _query_chunks(lines):
        query = line.split("\n", 1)[0]
        sale = table.lookup(query)
        if sale is None:
            out.write(f"could not find sale with id={query}\n")
            continue
        successes += 1
        out.write(
            f"found sale id={sale.sale_id}, purchased_item={sale.purchased_item}, "
            f"cost={sale.cost:.5f}\n"
        )
    return successes


def main(argv: Optional[list[str]] = None) -> int:
    """Run the lookup command; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "transaction_lookup"
    try:
        options = parse_args(argv)
    except ValueError:
        sys.stderr.write(f"{prog} [-s] [-t table_size] <filename>\n")
        return 1

    table = TransactionTable(options.table_size)
    try:
        duplicates = table.load(options.filename)
    except TableLoadError as exc:
        sys.stderr.write(f"{exc}\n")
        sys.stderr.write("error in load_table\n")
        return 1
    for sale_id in duplicates:
        sys.stderr.write(f"load_table duplicate entry: {sale_id}\n")

    successes = run_queries(table, sys.stdin, sys.stdout)
    sys.stdout.write(f"{successes} successful queries\n")
    if options.show_stats:
        sys.stdout.write(format_stats(table.stats()))
    table.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())