"""
Single-rank tests for the MPI benchmark sweep; skipped without mpi4py.
"""

import pytest

pytest.importorskip("mpi4py")

from mpi4py import MPI  # noqa: E402

from mpi_counting import deal, mpi_benchmark  # noqa: E402


def test_deal_round_robin():
    assert deal([1, 2, 3, 4, 5], 2) == [[1, 3, 5], [2, 4]]
    assert deal([1], 3) == [[1], [], []]


def test_mpi_benchmark_single_rank():
    comm = MPI.COMM_SELF
    rows = mpi_benchmark([200, 20], 0, 99, seed=5, verify=True, comm=comm)
    assert [row["n"] for row in rows] == [20, 20, 20, 200, 200, 200]
    assert {row["algorithm"] for row in rows} == {
        "counting_sort", "counting_sort_with_bounds", "sorted",
    }
