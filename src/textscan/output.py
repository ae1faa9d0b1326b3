"""Result sink — render scan batches in the order they arrive."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

from textscan.model import FileScanBatch


@dataclass(frozen=True, slots=True)
class RenderSummary:
    """Counts gathered while rendering a batch stream."""

    files: int = 0
    matches: int = 0
    failures: int = 0

    @property
    def ok(self) -> bool:
        return self.failures == 0


def render_batch(
    batch: FileScanBatch,
    *,
    line_numbers: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Write one batch in full and return the number of matches written.

    A failed batch produces a single ``path: error: reason`` line on *err*.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    if not batch.ok:
        print(f"{batch.path}: error: {batch.error}", file=err)
        return 0
    if batch.matches:
        out.write("".join(m.render(line_numbers) + "\n" for m in batch.matches))
    return len(batch.matches)


def render(
    batches: Iterable[FileScanBatch],
    *,
    line_numbers: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> RenderSummary:
    """Consume *batches* until exhausted, writing one line per match.

    Output order is arrival order.  Each batch is written with a single
    ``write`` call so lines from different files never interleave.
    """
    files = matches = failures = 0
    for batch in batches:
        files += 1
        if not batch.ok:
            failures += 1
        matches += render_batch(batch, line_numbers=line_numbers, out=out, err=err)
    return RenderSummary(files=files, matches=matches, failures=failures)
