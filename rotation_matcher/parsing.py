def parse_leaders(value):
    """Convert a comma-separated string of names to a list of trimmed names.

    A string without any names means the slot is open and gives None.
    """
    if value is None:
        return None
    names = [name.strip() for name in value.split(",")]
    return [name for name in names if name] or None


def parse_slots(values):
    """Parse one leader string per slot. Blank entries become open slots."""
    return [parse_leaders(value) for value in values]


def parse_pool(values):
    """Parse the free teams, skipping blank entries."""
    teams = [parse_leaders(value) for value in values]
    return [team for team in teams if team is not None]
