import random

import pytest

from termarcade.entities import (
    Alien,
    AlienAttack,
    Barrier,
    FroggerPlayer,
    GameObject,
    Ground,
    Missile,
    Player,
)


class _FixedRoll:
    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        assert low <= self.value <= high
        return self.value


def test_game_object_cell_truncates():
    obj = GameObject(3.9, 7.2)
    assert obj.cell == (3, 7)
    obj.update()
    assert obj.cell == (3, 7)


def test_game_object_draw(capsys):
    GameObject().draw()
    assert capsys.readouterr().out == "called from base\n"


def test_alien_draw(capsys):
    Alien().draw()
    assert capsys.readouterr().out == "X"


def test_alien_default_speed_keeps_it_still():
    alien = Alien(6, 1)
    alien.update()
    assert (alien.x, alien.y) == (6, 1)
    assert alien.active is True


def test_aliens_share_default_motion():
    first, second = Alien(0, 1), Alien(3, 1)
    for _ in range(3):
        first.update()
        second.update()
    assert first.cell == (0, 1)
    assert second.cell == (3, 1)


def test_alien_move_down():
    alien = Alien(4, 1)
    alien.move_down()
    alien.move_down()
    assert alien.cell == (4, 3)


def test_attack_fires_on_low_roll():
    alien = Alien(9, 1)
    attack = AlienAttack(rng=_FixedRoll(1))
    attack.attack(alien)
    assert attack.active is True
    assert attack.cell == (alien.col, alien.row + 1)


def test_attack_holds_on_high_roll():
    attack = AlienAttack(rng=_FixedRoll(2))
    attack.attack(Alien(9, 1))
    assert attack.active is False


def test_attack_does_not_refire_while_active():
    attack = AlienAttack(x=5, y=10, active=True, rng=_FixedRoll(1))
    attack.attack(Alien(20, 1))
    assert attack.cell == (5, 10)


def test_attack_always_fires_at_full_chance():
    attack = AlienAttack(chance_to_fire=200, rng=random.Random(0))
    attack.attack(Alien(2, 4))
    assert attack.active is True


def test_attack_falls_and_expires_at_floor():
    attack = AlienAttack(x=1, y=27, active=True)
    attack.update()
    attack.update()
    assert attack.y == 29
    assert attack.active is True
    attack.update()
    assert attack.active is False
    assert attack.y == 29


def test_inactive_attack_does_not_move():
    attack = AlienAttack(x=1, y=5)
    attack.update()
    assert attack.y == 5


def test_barrier_defaults_active():
    barrier = Barrier(10, 22)
    assert barrier.active is True
    barrier.active = False
    assert barrier.cell == (10, 22)


def test_missile_fires_above_player():
    player = Player(15, 28)
    missile = Missile()
    missile.fire(player, {" "})
    assert missile.active is True
    assert missile.cell == (player.col, player.row - 1)


def test_missile_needs_fire_key():
    missile = Missile()
    missile.fire(Player(15, 28), {"a"})
    assert missile.active is False


def test_missile_rises_then_expires():
    missile = Missile(x=3, y=1, active=True)
    missile.update()
    assert missile.y == 0
    assert missile.active is True
    missile.update()
    assert missile.active is False


def test_player_defaults_and_moves():
    player = Player()
    assert player.cell == (10, 0)
    player.update({"A"})
    assert player.x == 9
    player.update({"d"})
    assert player.x == 10
    player.update(set())
    assert player.x == 10


def test_player_clamped_at_edges():
    left = Player(0, 28)
    left.update({"a"})
    assert left.x == 0
    right = Player(79, 28)
    right.update({"d"})
    assert right.x == 79


def test_player_left_takes_priority():
    player = Player(0, 28)
    player.update({"a", "d"})
    assert player.x == 0


def test_frogger_moves_once_per_press():
    frog = FroggerPlayer(15, 14)
    frog.update({"w"})
    frog.update({"w"})
    assert frog.y == 13
    frog.update(())
    assert frog.key_held is False
    frog.update({"w"})
    assert frog.y == 12


@pytest.mark.parametrize(
    "start, key",
    [((0, 5), "a"), ((29, 5), "d"), ((5, 14), "s"), ((5, 0), "w")],
)
def test_frogger_clamped(start, key):
    frog = FroggerPlayer(*start)
    frog.update({key})
    assert frog.cell == start


def test_frogger_all_directions():
    frog = FroggerPlayer(10, 10)
    for key in ("a", "", "d", "", "s", "", "w"):
        frog.update({key} if key else set())
    assert frog.cell == (10, 10)


def test_ground_draw(capsys):
    Ground().draw()
    assert capsys.readouterr().out == "_"