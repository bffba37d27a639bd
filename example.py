#!/usr/bin/env python3
"""Example usage of the rotation matcher."""

import logging
import numpy as np
from rotation_matcher import (
    solve_rotation,
    solve_with_restarts,
    optimize_pause_range,
    expand_rotation,
    is_valid,
    parse_slots,
    parse_pool,
)


def example_pinned_slots():
    """Option 1: Two pinned slots, four teams from the pool."""
    print("=" * 60)
    print("OPTION 1: Pinned slots plus free teams")
    print("=" * 60)

    slots = parse_slots(["Anna, Till", "", "", "Miri, Jamie", "", ""])
    pool = parse_pool(["Eva, Finn", "Gina, Hugo", "Ida, Jan", "Kim, Lea"])

    print(f"\nSlots: {slots}")
    print(f"Pool:  {pool}")

    print("\nSolving...")
    result = solve_rotation(slots, pool, pause=2, rng=np.random.default_rng(7))

    print(f"\nStatus: {result['status']} after {result['attempts']} attempts")
    print(f"\nSchedule:")
    print(result['schedule'].to_string(index=False))

    print(f"\nLeader Rules:")
    for name, rule in result['leader_rules'].items():
        print(f"  {name}: {rule}")

    return result


def example_impossible():
    """Option 2: Every team shares a leader, so no rotation exists."""
    print("\n" + "=" * 60)
    print("OPTION 2: Unsatisfiable input")
    print("=" * 60)

    slots = [None, None, None]
    pool = [["Anna", "Till"], ["Anna", "Miri"], ["Anna", "Jamie"]]

    result = solve_rotation(slots, pool, pause=2, rng=np.random.default_rng(1))

    print(f"\nStatus: {result['status']} after {result['attempts']} attempts")
    print(f"Valid: {is_valid(result['solution'], 2)}")
    print(result['schedule'].to_string(index=False))

    return result


def example_restarts():
    """Option 3: Retry until a run is accepted."""
    print("\n" + "=" * 60)
    print("OPTION 3: Independent restarts")
    print("=" * 60)

    slots = [None] * 8
    pool = [["A", "B"], ["C", "D"], ["A", "E"], ["C", "F"],
            ["G", "H"], ["I", "J"], ["K", "L"], ["M", "N"]]

    results = solve_with_restarts(slots, pool, pause=3, n_restarts=20, rng=42)

    print("Runs:")
    print(results['summary'].to_string(index=False))
    print(f"\nBest status: {results['best']['status']}")
    print("\nFour weeks of the best rotation:")
    print(expand_rotation(results['best']['solution'], 28).to_string(index=False))

    return results


def example_pause_sweep():
    """Option 4: Find the longest pause that can be met."""
    print("\n" + "=" * 60)
    print("OPTION 4: Pause sweep")
    print("=" * 60)

    slots = parse_slots(["Anna", "", "", "", "Till", "", ""])
    pool = parse_pool(["Miri", "Jamie, Anna", "Sam", "Till, Kai", "Lou"])

    results = optimize_pause_range(slots, pool, pause_range=(1, 2, 3, 4), rng=3)

    print("Comparison:")
    print(results['summary'].to_string(index=False))

    if results['best'] is not None:
        print(f"\nLongest pause met: {results['best']['pause']}")
        print(results['best']['schedule'].to_string(index=False))
    else:
        print("\nNo pause value could be met.")

    return results


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    example_pinned_slots()
    example_impossible()
    example_restarts()
    example_pause_sweep()
