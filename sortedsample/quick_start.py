"""Draw weighted indices from a small population and report the frequencies."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence

from sortedsample.sampling import sample_indices

DEFAULT_WEIGHTS = (1.0, 3.0, 2.0, 4.0)

_HEADER = (
    "idx  weight   p(idx)   count   p̂(count)",
    "---  ------   ------   -----   --------",
)


def tally(indices: Iterable[int], size: int) -> list[int]:
    """Count how often each index in ``range(size)`` occurs."""
    counts = [0] * size
    for idx in indices:
        if not 0 <= idx < size:
            raise IndexError(f"index {idx} out of range for {size} entries")
        counts[idx] += 1
    return counts


def format_report(weights: Sequence[float], counts: Sequence[int], draws: int) -> str:
    """Tabulate each index's weight, probability, count and observed frequency."""
    if draws <= 0:
        raise ValueError("draws must be positive")
    total_weight = sum(weights)
    lines = list(_HEADER)
    for i, (w, c) in enumerate(zip(weights, counts, strict=True)):
        p = w / total_weight
        p_hat = c / draws
        lines.append(f"{i:3}  {w:6.1f}   {p:6.3f}   {c:5}   {p_hat:6.3f}")
    return "\n".join(lines)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Sample from a fixed population and print the frequency table."""
    parser = argparse.ArgumentParser(
        description="Sample weighted indices and compare counts with the weights."
    )
    parser.add_argument("--seed", type=int, default=42, help="random seed")
    parser.add_argument("--draws", type=_positive_int, default=1000, help="number of indices to draw")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    weights = list(DEFAULT_WEIGHTS)
    out = list(sample_indices(rng, weights, args.draws))
    counts = tally(out, len(weights))
    print(format_report(weights, counts, len(out)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())