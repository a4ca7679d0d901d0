"""
Ordered reassembly of per-chunk results.
"""

from typing import Sequence


def assemble(slots: Sequence[str | None]) -> str:
    """
    Concatenate result slots strictly in index order.

    *slots* must be complete: a ``None`` entry means a worker result
    never arrived, which the dispatcher rules out before calling this.
    """
    missing = [i for i, s in enumerate(slots) if s is None]
    if missing:
        raise ValueError(f"Result slots not filled: {missing}")
    return "".join(slots)
