"""Game rule violations raised by entity mutators."""


class InvalidOperationError(Exception):
    """Raised when an entity is asked to do something its current state forbids."""


class MonsterAlreadyDeadError(InvalidOperationError):
    """Raised when a dead monster is attacked again."""


class WeaponTooWeakError(InvalidOperationError):
    """Raised when a weapon ranks below the one a monster's kind requires."""


class PlayerDeadError(InvalidOperationError):
    """Raised when health, ammunition or weapons of a dead player are changed."""
