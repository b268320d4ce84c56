"""Binary unit multipliers."""

STEP = 1 << 10

# Leading letter of a unit token -> multiplier
UNIT_MULTIPLIERS = {
    "k": 1 << 10,
    "m": 1 << 20,
    "g": 1 << 30,
    "t": 1 << 40,
    "p": 1 << 50,
    "e": 1 << 60,
}

MULTIPLIERS = frozenset({1, *UNIT_MULTIPLIERS.values()})

# Ladder used when rendering a byte count
FORMAT_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB")


def resolve_multiplier(token: str) -> int:
    """Return the multiplier for an already matched unit token.
    
    Only the first character is inspected, so the token must have passed
    the unit grammar first. An empty token, "b" or "bytes" resolve to 1.
    
    Args:
        token: Unit token such as "KiB", "m" or ""
    
    Returns:
        One of the values in MULTIPLIERS
    """
    if not token:
        return 1
    return UNIT_MULTIPLIERS.get(token[0].lower(), 1)
