"""Factory helpers for runtime entities."""

from .game_factory import create_game_bot
from .monster_factory import create_monster
from .player_factory import create_player
from .room_factory import create_room

__all__ = [
    "create_game_bot",
    "create_monster",
    "create_player",
    "create_room",
]
