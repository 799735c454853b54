"""Lazy CSV row sources for the seeders."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterator, Sequence


class CsvRows:
    """
    Restartable lazy sequence of CSV rows as dicts.

    Each iteration reopens the file, so the same source can be consumed more
    than once. Iteration ends at end of file; I/O and parse errors are raised
    to the consumer.

    headers: explicit column names (the file's own header row is used when None)
    skip_lines: lines dropped before parsing, e.g. a header being replaced
    """

    def __init__(
        self,
        path: Path | str,
        headers: Sequence[str] | None = None,
        skip_lines: int = 0,
        encoding: str = "utf-8-sig",
    ):
        self.path = Path(path)
        self.headers = list(headers) if headers else None
        self.skip_lines = skip_lines
        self.encoding = encoding

    def __iter__(self) -> Iterator[dict]:
        with open(self.path, "r", encoding=self.encoding, newline="") as f:
            for _ in range(self.skip_lines):
                if not f.readline():
                    return
            reader = csv.DictReader(f, fieldnames=self.headers)
            for row in reader:
                yield {k.strip(): (v.strip() if isinstance(v, str) else v) for k, v in row.items() if k}

    def __repr__(self) -> str:
        return f"CsvRows({str(self.path)!r})"
