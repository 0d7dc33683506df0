"""Command-line entry point for ring diffusion load balancing."""

import argparse
import sys
from typing import List, Optional, Tuple
from balance_config import MAX_CYCLES, SimulationConfig
from balance_types import BalanceError
from sweep import RING_SIZES, run_sweep
from trials import CSV_HEADER, RUNS, run_batch, summarize


def print_snapshot(snapshot: List[Tuple[int, int]]):
    for position, load in snapshot:
        print(f"  Node {position}: {load}")


def run_verbose(config: SimulationConfig, runs: int):
    """Run a batch on one ring size, showing each ring before and after."""
    results = run_batch(config, runs)

    for i, result in enumerate(results):
        print(f"\n---- Run {i + 1} ----")
        print("System configuration before load balancing:")
        print_snapshot(result.initial_snapshot)
        print(f"Max balanced load difference = {result.balanced_load}")
        print("\nSystem configuration after load balancing:")
        print_snapshot(result.final_snapshot)
        print(
            f"Outcome: {result.outcome.value}, time = {result.current_time}, "
            f"activities = {result.iterations}, total load = {result.final_load}"
        )

    summary = summarize(config, results)
    print("\n**** Averaged Data ****")
    print(f"Average load = {summary.avg_load}")
    print(f"Average time cycles = {summary.avg_time}")
    print(f"Average load balancing activities = {summary.avg_iterations}")
    print(f"Converged runs = {summary.converged_runs}/{summary.runs}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Simulate diffusion load balancing on a ring of processors."
    )
    ap.add_argument("k", type=int, help="number of processors in the ring (> 0)")
    ap.add_argument("-v", "--verbose", action="store_true", help="show ring contents")
    ap.add_argument("--runs", type=int, default=RUNS)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--horizon", type=int, default=MAX_CYCLES)
    ap.add_argument(
        "--sweep", action="store_true", help="run every ring size in the sweep list"
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = SimulationConfig(k=args.k, seed=args.seed, horizon=args.horizon)
    try:
        config.validate()
        if args.runs <= 0:
            raise BalanceError(f"runs should be > 0, got {args.runs}")

        sizes = RING_SIZES if args.sweep else [args.k]
        if args.verbose:
            for k in sizes:
                if args.sweep:
                    print(f"\n==== k = {k} ====")
                run_verbose(config.with_k(k), args.runs)
        else:
            print(CSV_HEADER)
            for summary in run_sweep(config, sizes, args.runs):
                print(summary.csv_row())
    except BalanceError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
