from .model import (
    solve_rotation,
    is_valid,
    find_conflicts,
    draw_from_pool,
    count_open_slots,
    expand_rotation,
    format_leader_rules,
    validate_inputs,
    validate_params,
    MAX_ATTEMPTS,
    DEFAULT_PAUSE,
)
from .parsing import parse_leaders, parse_slots, parse_pool
from .meta import solve_with_restarts, optimize_pause_range
