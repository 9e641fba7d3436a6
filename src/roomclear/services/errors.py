"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a room, monster, player or game cannot be built from definitions."""
