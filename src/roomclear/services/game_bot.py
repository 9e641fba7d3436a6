"""Game bot that plays through every room until no further progress is possible."""
from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from roomclear.domain.entities import Monster, Player, Room
from roomclear.domain.ordering import player_readiness, sort_monsters
from roomclear.services.kill_executor import kill_monster
from roomclear.services.kill_planner import can_kill

logger = logging.getLogger(__name__)


class GameBot:
    """Tries to kill every monster in every room with the given players.

    Rooms and players are visited in the order supplied, each once even if
    repeated. Each pass walks every live monster of every room and lets the
    first player able to kill it do so; passes repeat while they keep
    completing rooms.
    """

    def __init__(self, rooms: Iterable[Room], players: Iterable[Player]) -> None:
        self._rooms: Tuple[Room, ...] = tuple(dict.fromkeys(rooms))
        self._players: Tuple[Player, ...] = tuple(dict.fromkeys(players))
        self._monsters: Tuple[Monster, ...] = tuple(
            sort_monsters(monster for room in self._rooms for monster in room.monsters)
        )
        self._completed_rooms: List[Room] = []
        self._uncompleted_rooms: List[Room] = list(self._rooms)
        self._passes = 0

    # -----------------------
    # Read-only views
    # -----------------------
    @property
    def all_rooms(self) -> Tuple[Room, ...]:
        return self._rooms

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._players

    @property
    def monsters(self) -> Tuple[Monster, ...]:
        return self._monsters

    @property
    def completed_rooms(self) -> Tuple[Room, ...]:
        """Rooms cleared so far, in room order."""
        self._refresh_completed_rooms()
        return tuple(self._completed_rooms)

    @property
    def uncompleted_rooms(self) -> Tuple[Room, ...]:
        return tuple(self._uncompleted_rooms)

    @property
    def passes(self) -> int:
        """Number of passes made through the rooms so far."""
        return self._passes

    def live_players(self) -> Tuple[Player, ...]:
        """Players still alive, weakest first by weapon, rounds for it, then health."""
        return tuple(sorted((player for player in self._players if not player.is_dead), key=player_readiness))

    def live_players_with_weapon_and_ammunition(self, weapon_id: str, rounds: int) -> Tuple[Player, ...]:
        return tuple(
            player
            for player in self.live_players()
            if player.has_weapon(weapon_id) and player.ammunition_for(weapon_id) >= rounds
        )

    # -----------------------
    # Play
    # -----------------------
    def play(self) -> bool:
        """Make passes while rooms keep getting completed; True once every room is cleared."""
        completed_count = len(self.completed_rooms)
        while True:
            self.pass_through_rooms()
            new_completed_count = len(self._completed_rooms)
            if new_completed_count <= completed_count:
                break
            completed_count = new_completed_count

        cleared = not self._uncompleted_rooms
        if cleared:
            logger.info("All %d room(s) cleared after %d pass(es)", len(self._rooms), self._passes)
        else:
            logger.info(
                "Stuck after %d pass(es): %s still uncompleted",
                self._passes,
                ", ".join(room.name for room in self._uncompleted_rooms),
            )
        return cleared

    def pass_through_rooms(self) -> Tuple[Room, ...]:
        """Kill every monster that can be killed and return the rooms completed by this pass."""
        self._passes += 1
        already_completed = set(self._completed_rooms)
        for room in self._rooms:
            for monster in room.live_monsters:
                for player in self._players:
                    if not can_kill(player, monster, room):
                        continue
                    kill_monster(player, room, monster)
                    if room.is_completed:
                        self.reap_completion_rewards(player, room)

        self._refresh_completed_rooms()
        newly_completed = tuple(room for room in self._completed_rooms if room not in already_completed)
        logger.info(
            "Pass %d completed %d room(s); %d remain",
            self._passes,
            len(newly_completed),
            len(self._uncompleted_rooms),
        )
        return newly_completed

    def reap_completion_rewards(self, player: Player, room: Room) -> None:
        """Give ``player`` the weapons, ammunition and health for completing ``room``."""
        reward = room.reward
        for weapon in reward.weapons:
            player.add_weapon(weapon)
        for weapon_id, rounds in reward.ammunition.items():
            player.add_ammunition(weapon_id, rounds)
        player.change_health(reward.health)
        logger.debug("%s completed '%s' and collected its reward", player.name, room.name)

    def _refresh_completed_rooms(self) -> None:
        for room in self._uncompleted_rooms:
            if room.is_completed:
                self._completed_rooms.append(room)
        self._completed_rooms.sort(key=self._rooms.index)
        self._uncompleted_rooms = [room for room in self._uncompleted_rooms if not room.is_completed]
