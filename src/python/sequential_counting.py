"""
Correctness checks and timings for counting sort on a single core.

Run with something like:
    python sequential_counting.py --n 10000 100000 --max 1000 --verify
"""

from __future__ import annotations

import argparse
import json
import random
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from counting_sort import counting_sort, counting_sort_with_bounds, resolve_int_type

Row = Dict[str, object]


def check_correctness() -> bool:
    """Basic correctness tests using Python's sorted() as reference."""
    tests = [
        [],
        [5],
        [3, 1, 2],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [5, 5, 5, 5],
        [2, -2, 1, -6],
        [10, 0, 100, 7, 7, 3, 999],
        [170, 45, 75, 90, 802, 24, 2, 66],
    ]

    for idx, arr in enumerate(tests):
        original = list(arr)
        result = counting_sort(arr)
        if result != sorted(original) or arr != original:
            print(f"❌ Test {idx} FAILED")
            print("  Original:", original)
            print("  Got:     ", result)
            print("  Expected:", sorted(original))
            return False
    print("✅ All basic correctness tests PASSED")
    return True


def show_sample(n: int = 20, lo: int = 0, hi: int = 999) -> List[int]:
    """Print an unsorted sample of n integers next to its sorted copy."""
    A = [random.randint(lo, hi) for _ in range(n)]
    print(f"\n=== Sample of {n} integers ===")
    print("Unsorted:", A)
    result = counting_sort(A)
    print("Sorted:  ", result)
    return result


def time_sort(func: Callable[[List[int]], List[int]], data: List[int], repeat: int = 1) -> float:
    """Best wall-clock time of func(data) over repeat runs."""
    best = float("inf")
    for _ in range(repeat):
        start = time.perf_counter()
        func(data)
        best = min(best, time.perf_counter() - start)
    return best


def benchmark(sizes: Sequence[int], lo: int, hi: int, repeat: int = 1,
              seed: Optional[int] = None, value_type: Optional[str] = None,
              verify: bool = False) -> List[Row]:
    """Time counting sort against sorted() for every size; one row per (n, algorithm)."""
    rng = random.Random(seed)
    algorithms: Dict[str, Callable[[List[int]], List[int]]] = {
        "counting_sort": lambda A: counting_sort(A, value_type),
        "counting_sort_with_bounds": lambda A: counting_sort_with_bounds(A, lo, hi, value_type),
        "sorted": sorted,
    }

    rows: List[Row] = []
    for n in sizes:
        A = [rng.randint(lo, hi) for _ in range(n)]
        if verify and counting_sort(A, value_type) != sorted(A):
            raise AssertionError(f"Result is not sorted correctly for n = {n}")
        for name, func in algorithms.items():
            rows.append({"n": n, "algorithm": name, "seconds": time_sort(func, A, repeat)})
    return rows


def print_rows(rows: List[Row]) -> None:
    for row in rows:
        print(f"{row['algorithm']:<26} n = {row['n']:>10,}  →  time = {row['seconds']:.3f} s")


def write_rows(rows: List[Row], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(rows, indent=2))
    print(f"Wrote {len(rows)} timings to {path}")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sequential counting sort demo")
    parser.add_argument("--n", type=int, nargs="+", default=[10_000, 100_000, 1_000_000],
                        help="Input sizes to benchmark.")
    parser.add_argument("--min", dest="lo", type=int, default=0, help="Smallest random value.")
    parser.add_argument("--max", dest="hi", type=int, default=65_535, help="Largest random value.")
    parser.add_argument("--type", dest="value_type", default=None,
                        help="Declared integer type of the values, e.g. u8 or i32.")
    parser.add_argument("--repeat", type=int, default=1, help="Runs per measurement; the best is kept.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--verify", action="store_true", help="Check results against sorted().")
    parser.add_argument("--sample", type=int, default=0, help="Print a sample of this many integers first.")
    parser.add_argument("--json", type=Path, default=None, help="Write timings as JSON to this path.")
    args = parser.parse_args(argv)

    if args.lo > args.hi:
        parser.error("--min must not be larger than --max")
    try:
        resolve_int_type(args.value_type)
    except ValueError as exc:
        parser.error(str(exc))
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.seed is not None:
        random.seed(args.seed)

    if args.verify and not check_correctness():
        return 1
    if args.sample:
        show_sample(args.sample, args.lo, args.hi)

    print("\n=== Sequential Counting Sort Performance ===")
    rows = benchmark(args.n, args.lo, args.hi, args.repeat, args.seed, args.value_type, args.verify)
    print_rows(rows)
    if args.json is not None:
        write_rows(rows, args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
