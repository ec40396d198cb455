def report(token) -> str:
    """Shape the copy confirmation into the handler's return value."""

    return str(token)
