from roomclear.domain.defs import MonsterKindDef, WeaponDef
from roomclear.domain.entities import Monster, Room
from roomclear.services.protectors import get_all_protectors_in_room

FIST = WeaponDef(id="fist", name="Fist", rank=0)


def _kind(kind_id: str, rank: int, protected_by: str | None = None) -> MonsterKindDef:
    return MonsterKindDef(
        id=kind_id,
        name=kind_id.title(),
        rank=rank,
        weapon_id="fist",
        ammunition=1,
        exposure_cost=1,
        protected_by=protected_by,
    )


IMP = _kind("imp", 0)
DEMON = _kind("demon", 1, protected_by="imp")
SPECTRE = _kind("spectre", 2, protected_by="demon")


def _monster(kind: MonsterKindDef, protected_by: str | None = None) -> Monster:
    return Monster(kind=kind, required_weapon=FIST, custom_protected_by=protected_by)


def test_unprotected_monster_has_no_protectors() -> None:
    imp = _monster(IMP)
    room = Room("Hall", [imp, _monster(DEMON)])

    assert get_all_protectors_in_room(imp, room) == []


def test_protectors_are_transitive_and_deepest_first() -> None:
    imp = _monster(IMP)
    demon = _monster(DEMON)
    spectre = _monster(SPECTRE)
    room = Room("Hall", [spectre, demon, imp])

    assert get_all_protectors_in_room(spectre, room) == [imp, demon]
    assert get_all_protectors_in_room(demon, room) == [imp]


def test_every_monster_of_the_protector_kind_is_included() -> None:
    first_imp = _monster(IMP)
    second_imp = _monster(IMP)
    demon = _monster(DEMON)
    room = Room("Hall", [demon, second_imp, first_imp])

    assert get_all_protectors_in_room(demon, room) == [first_imp, second_imp]


def test_dead_protectors_are_excluded() -> None:
    imp = _monster(IMP)
    demon = _monster(DEMON)
    spectre = _monster(SPECTRE)
    room = Room("Hall", [imp, demon, spectre])
    imp.attack(FIST, 1)
    room.monster_killed(imp)

    protectors = get_all_protectors_in_room(spectre, room)

    assert protectors == [demon]
    assert all(protector.is_alive for protector in protectors)


def test_protectors_in_other_rooms_are_ignored() -> None:
    demon = _monster(DEMON)
    room = Room("Hall", [demon])
    Room("Cellar", [_monster(IMP)])

    assert get_all_protectors_in_room(demon, room) == []


def test_custom_protector_is_followed() -> None:
    spectre = _monster(SPECTRE)
    imp = _monster(IMP, protected_by="spectre")
    room = Room("Hall", [imp, spectre, _monster(DEMON)])

    assert get_all_protectors_in_room(imp, room)[-1] is spectre
    assert len(get_all_protectors_in_room(imp, room)) == 2


def test_protector_cycle_terminates_without_including_the_monster_itself() -> None:
    warden = _monster(_kind("warden", 3, protected_by="keeper"))
    keeper = _monster(_kind("keeper", 4, protected_by="warden"))
    room = Room("Vault", [warden, keeper])

    assert get_all_protectors_in_room(warden, room) == [keeper]
    assert get_all_protectors_in_room(keeper, room) == [warden]


def test_resolver_does_not_mutate_room() -> None:
    imp = _monster(IMP)
    demon = _monster(DEMON)
    room = Room("Hall", [imp, demon])
    before = (room.live_monsters, room.dead_monsters, room.danger_level)

    get_all_protectors_in_room(demon, room)

    assert (room.live_monsters, room.dead_monsters, room.danger_level) == before
