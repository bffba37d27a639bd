# Randomized swap search for cyclic leader rotations
import logging
import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 100
DEFAULT_PAUSE = 2


def includes_any_leader(a, b):
    """Return True if the two leader lists share at least one name."""
    return any(name in b for name in a)


def validate_pause(pause):
    """Validate the cooldown distance.

    Raises:
        ValueError: If pause is negative
    """
    if pause < 0:
        raise ValueError(f"pause must be non-negative, got {pause}")


def validate_params(pause, max_attempts):
    """Validate solver parameters.

    Raises:
        ValueError: If any parameter is invalid
    """
    validate_pause(pause)
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")


def validate_inputs(slots, pool, pause=DEFAULT_PAUSE):
    """Check slots and pool before handing them to the solver.

    The solver accepts mismatched input and simply fails to converge; this is
    for callers who want the mismatch reported instead.

    Args:
        slots: list where each entry is None (open) or a list of leader names
        pool: list of leader-name lists used to fill the open slots
        pause: Minimum cyclic distance between two appearances of a leader

    Raises:
        ValueError: If validation fails
    """
    validate_pause(pause)

    if len(slots) == 0:
        raise ValueError("At least one slot is required")

    # Pinned teams must name somebody
    for i, team in enumerate(slots):
        if team is not None and len(team) == 0:
            raise ValueError(f"Slot {i+1} is pinned to an empty team")
    for i, team in enumerate(pool):
        if team is None or len(team) == 0:
            raise ValueError(f"Pool entry {i+1} is empty")

    n_open = count_open_slots(slots)
    if len(pool) != n_open:
        raise ValueError(
            f"Expected {n_open} teams in the pool, got {len(pool)}. "
            f"Need one team for each of the {n_open} open slots."
        )


def count_open_slots(slots):
    return sum(1 for team in slots if team is None)


def find_conflicts(solution, pause=DEFAULT_PAUSE):
    """Indices of slots that break the cooldown rule.

    A slot conflicts if it has no team, or if any of its leaders also appears
    in a slot at cyclic distance 1..pause on either side.

    Args:
        solution: Cyclic list of leader lists (None for unfilled slots)
        pause: Minimum cyclic distance between two appearances of a leader

    Returns:
        Sorted list of conflicting slot indices
    """
    validate_pause(pause)
    n = len(solution)
    conflicts = []
    for i, today in enumerate(solution):
        if not today:
            conflicts.append(i)
            continue
        for d in range(1, pause + 1):
            before = solution[(i - d) % n] or []
            after = solution[(i + d) % n] or []
            if includes_any_leader(before, today) or includes_any_leader(after, today):
                conflicts.append(i)
                break
    return conflicts


def is_valid(solution, pause=DEFAULT_PAUSE):
    """Determine whether a solution meets the cooldown rule for every slot."""
    return not find_conflicts(solution, pause)


def draw_from_pool(solution, free, index):
    """Fill solution[index] from the front of the pool if the slot is empty.

    Returns the team now at index, which stays None once the pool is drained.
    """
    if solution[index] is None and free:
        solution[index] = free.pop(0)
    return solution[index]


def make_rng(rng=None):
    """Return a generator with an ``integers(low, high)`` method.

    None gives a fresh numpy Generator, an int seeds one, anything else is
    used as is.
    """
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    return rng


def format_leader_rules(solution):
    """Format a solution as per-leader slot listings.

    Args:
        solution: Cyclic list of leader lists

    Returns:
        dict mapping leader name to rule string
        e.g. {'Anna': 'Slot 1 -> Slot 4'}
    """
    rules = {}
    for i, team in enumerate(solution):
        for name in team or []:
            rules.setdefault(name, []).append(f"Slot {i+1}")
    return {name: " -> ".join(positions) for name, positions in rules.items()}


def build_schedule(solution, slots, pause=DEFAULT_PAUSE):
    """Tabulate a solution with one row per slot."""
    conflicts = set(find_conflicts(solution, pause))
    return pd.DataFrame({
        "slot": range(1, len(solution) + 1),
        "leaders": [", ".join(team) if team else "-" for team in solution],
        "pinned": [team is not None for team in slots],
        "conflict": [i in conflicts for i in range(len(solution))],
    })


def expand_rotation(solution, n_periods):
    """Expand a cyclic solution to n_periods consecutive slots by repeating it.

    Args:
        solution: Cyclic list of leader lists
        n_periods: Number of slots to cover

    Returns:
        DataFrame with 'period', 'slot' and 'leaders' columns
    """
    if n_periods < 0:
        raise ValueError(f"n_periods must be non-negative, got {n_periods}")
    cycle_length = len(solution)
    if cycle_length == 0:
        raise ValueError("Cannot expand an empty rotation")
    rows = []
    for t in range(n_periods):
        team = solution[t % cycle_length]
        rows.append({
            "period": t + 1,
            "slot": t % cycle_length + 1,
            "leaders": ", ".join(team) if team else "-",
        })
    return pd.DataFrame(rows, columns=["period", "slot", "leaders"])


def solve_rotation(slots,
                   pool,
                   pause=DEFAULT_PAUSE,
                   max_attempts=MAX_ATTEMPTS,
                   rng=None):
    """Assign pool teams to the open slots of a cyclic rotation.

    Picks two random slots per attempt, fills them from the front of the pool
    if they are still empty and swaps them. Pinned slots are never touched.
    Stops as soon as the pool is drained and every slot keeps its leaders
    more than ``pause`` slots away from their next appearance, or when
    ``max_attempts`` is spent. There is no guarantee of success even when a
    valid rotation exists.

    Args:
        slots: list where each entry is None (open) or a list of leader names
            (pinned)
        pool: list of leader-name lists used to fill the open slots
        pause: Minimum cyclic distance between two appearances of a leader
            (default 2)
        max_attempts: Iteration budget, discarded draws included (default 100)
        rng: numpy Generator (or any object with ``integers(low, high)``),
            an int seed, or None for a fresh generator

    Returns:
        dict with 'status' ('Accepted' or 'Exhausted'), 'solution', 'free',
        'attempts', 'schedule', 'leader_rules' and 'parameters'
    """
    validate_params(pause, max_attempts)
    n = len(slots)
    if n == 0:
        raise ValueError("At least one slot is required")
    rng = make_rng(rng)

    pinned = [team is not None for team in slots]
    solution = [list(team) if team is not None else None for team in slots]
    free = [list(team) for team in pool]

    logger.debug("Solving rotation: %d slots, %d open, %d pool teams, pause %d",
                 n, pinned.count(False), len(free), pause)

    accepted = False
    attempts = 0
    while attempts < max_attempts:
        attempts += 1

        a = int(rng.integers(0, n))
        b = int(rng.integers(0, n))
        if a != b and not pinned[a] and not pinned[b]:
            team_a = draw_from_pool(solution, free, a)
            team_b = draw_from_pool(solution, free, b)
            solution[a] = team_b
            solution[b] = team_a

        if not free and is_valid(solution, pause):
            accepted = True
            break

    if accepted:
        logger.info("Rotation accepted after %d attempts", attempts)
    else:
        logger.warning(
            "Rotation search exhausted after %d attempts: %d pool teams left, %d conflicting slots",
            attempts, len(free), len(find_conflicts(solution, pause)))

    return {
        "status": "Accepted" if accepted else "Exhausted",
        "solution": solution,
        "free": free,
        "attempts": attempts,
        "schedule": build_schedule(solution, slots, pause),
        "leader_rules": format_leader_rules(solution),
        "parameters": {
            "pause": pause,
            "max_attempts": max_attempts,
            "n_slots": n,
            "n_open": pinned.count(False),
            "n_pool": len(pool),
        },
    }
