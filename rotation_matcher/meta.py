import logging
import pandas as pd
from .model import (
    solve_rotation,
    find_conflicts,
    make_rng,
    validate_params,
    DEFAULT_PAUSE,
    MAX_ATTEMPTS,
)

logger = logging.getLogger(__name__)


def solve_with_restarts(slots,
                        pool,
                        pause=DEFAULT_PAUSE,
                        n_restarts=10,
                        max_attempts=MAX_ATTEMPTS,
                        rng=None):
    """Run independent solver attempts until one is accepted.

    Args:
        slots: list where each entry is None (open) or a list of leader names
        pool: list of leader-name lists used to fill the open slots
        pause: Minimum cyclic distance between two appearances of a leader
        n_restarts: Maximum number of independent runs
        max_attempts: Iteration budget of each run
        rng: Shared generator, int seed or None

    Returns:
        dict with 'best' (the accepted result, or the run with the fewest
        conflicting slots), 'summary' (DataFrame, one row per run) and
        'results' (list of all results)
    """
    validate_params(pause, max_attempts)
    if n_restarts < 1:
        raise ValueError(f"n_restarts must be >= 1, got {n_restarts}")
    rng = make_rng(rng)

    results = []
    for run in range(n_restarts):
        res = solve_rotation(slots, pool, pause=pause, max_attempts=max_attempts, rng=rng)
        res["n_conflicts"] = len(find_conflicts(res["solution"], pause))
        results.append(res)
        if res["status"] == "Accepted":
            break

    summary = pd.DataFrame([
        {
            "run": i + 1,
            "status": r["status"],
            "attempts": r["attempts"],
            "n_conflicts": r["n_conflicts"],
            "n_free": len(r["free"]),
        }
        for i, r in enumerate(results)
    ])
    best = min(results, key=lambda r: (r["status"] != "Accepted", len(r["free"]), r["n_conflicts"]))
    logger.info("Best of %d runs: %s", len(results), best["status"])
    return {"summary": summary, "best": best, "results": results}


def optimize_pause_range(slots,
                         pool,
                         pause_range=(1, 2, 3),
                         n_restarts=10,
                         max_attempts=MAX_ATTEMPTS,
                         rng=None):
    """Sweep over pause values to find the longest cooldown that can be met.

    Args:
        slots: list where each entry is None (open) or a list of leader names
        pool: list of leader-name lists used to fill the open slots
        pause_range: Pause values to test
        n_restarts: Independent runs per pause value
        max_attempts: Iteration budget of each run
        rng: Shared generator, int seed or None

    Returns:
        dict with 'summary' (DataFrame), 'best' (result for the largest
        accepted pause, or None) and 'results' (list of all results)
    """
    rng = make_rng(rng)
    results = []
    for pause in pause_range:
        res = solve_with_restarts(
            slots,
            pool,
            pause=pause,
            n_restarts=n_restarts,
            max_attempts=max_attempts,
            rng=rng,
        )
        best = res["best"]
        results.append({
            "pause": pause,
            "status": best["status"],
            "runs": len(res["results"]),
            "n_conflicts": best["n_conflicts"],
            "solution": best["solution"],
            "schedule": best["schedule"],
            "leader_rules": best["leader_rules"],
        })
    summary = pd.DataFrame(
        [{k: r[k] for k in ["pause", "status", "runs", "n_conflicts"]} for r in results],
        columns=["pause", "status", "runs", "n_conflicts"],
    )
    accepted = [r for r in results if r["status"] == "Accepted"]
    best = max(accepted, key=lambda r: r["pause"]) if accepted else None
    return {"summary": summary, "best": best, "results": results}
