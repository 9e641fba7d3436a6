"""Runtime entity exports."""

from .monster import Monster
from .player import Player
from .room import Room, RoomReward

__all__ = [
    "Monster",
    "Player",
    "Room",
    "RoomReward",
]
