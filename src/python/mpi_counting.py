"""
Spread a counting sort benchmark sweep across MPI ranks using mpi4py.

Each rank runs whole, single-threaded sorts for its share of the input
sizes; rank 0 gathers and prints the timings.

Run with something like:
    mpiexec -n 4 python mpi_counting.py --n 10000 100000 1000000 10000000 --verify
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from mpi4py import MPI

from sequential_counting import Row, benchmark, print_rows, write_rows


def deal(sizes: Sequence[int], ranks: int) -> List[List[int]]:
    """Deal sizes round-robin so large inputs are not all on one rank."""
    return [list(sizes[r::ranks]) for r in range(ranks)]


def mpi_benchmark(sizes: Optional[Sequence[int]], lo: int, hi: int, repeat: int = 1,
                  seed: Optional[int] = None, value_type: Optional[str] = None,
                  verify: bool = False, comm: MPI.Comm = MPI.COMM_WORLD) -> Optional[List[Row]]:
    """Scatter sizes → local benchmark → gather on rank 0 (other ranks get None)."""
    rank = comm.Get_rank()
    size = comm.Get_size()

    shares = deal(sizes, size) if rank == 0 else None
    local_sizes: List[int] = comm.scatter(shares, root=0)

    local_seed = None if seed is None else seed + rank
    local_rows = benchmark(local_sizes, lo, hi, repeat, local_seed, value_type, verify)

    gathered = comm.gather(local_rows, root=0)
    if rank != 0:
        return None

    rows = [row for part in gathered for row in part]
    rows.sort(key=lambda row: (row["n"], row["algorithm"]))
    return rows


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="MPI counting sort benchmark sweep")
    parser.add_argument("--n", type=int, nargs="+", default=[10_000, 100_000, 1_000_000, 10_000_000],
                        help="Input sizes to benchmark, dealt across ranks.")
    parser.add_argument("--min", dest="lo", type=int, default=0, help="Smallest random value.")
    parser.add_argument("--max", dest="hi", type=int, default=65_535, help="Largest random value.")
    parser.add_argument("--type", dest="value_type", default=None, help="Declared integer type, e.g. u16.")
    parser.add_argument("--repeat", type=int, default=1, help="Runs per measurement; the best is kept.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--verify", action="store_true", help="Check results against sorted().")
    parser.add_argument("--json", type=Path, default=None, help="Write gathered timings as JSON (rank 0).")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    comm = MPI.COMM_WORLD
    rank = comm.Get_rank()
    args = parse_args(argv)

    comm.barrier()
    t0 = MPI.Wtime()
    rows = mpi_benchmark(args.n, args.lo, args.hi, args.repeat, args.seed,
                         args.value_type, args.verify, comm=comm)
    comm.barrier()
    t1 = MPI.Wtime()

    if rank == 0:
        print(f"Benchmarked {len(args.n)} sizes across {comm.Get_size()} ranks in {t1 - t0:.3f} s.")
        print_rows(rows)
        if args.json is not None:
            write_rows(rows, args.json)


if __name__ == "__main__":
    main()
