import io
import random

from cafelogico.ghosts import GHOST_SYMBOL, Ghost, GhostSquad
from cafelogico.screen import Screen


def test_reset_places_ghosts_and_origins():
    squad = GhostSquad()
    squad.reset(20, 15, random.Random(5))
    assert len(squad.ghosts) == 2
    assert [g.direction for g in squad.ghosts] == [1, -1]
    for ghost in squad.ghosts:
        assert 1 <= ghost.x <= 18
        assert (ghost.origin_x, ghost.origin_y) == (ghost.x, ghost.y)
    assert squad.ghosts[1].y - squad.ghosts[0].y == 3


def test_move_waits_for_delay():
    squad = GhostSquad(count=1, delay=3)
    squad.ghosts[0] = Ghost(x=5, y=5)
    assert squad.move_towards(10, 10, 20, 20) is False
    assert squad.move_towards(10, 10, 20, 20) is False
    assert (squad.ghosts[0].x, squad.ghosts[0].y) == (5, 5)
    assert squad.move_towards(10, 10, 20, 20) is True
    assert (squad.ghosts[0].x, squad.ghosts[0].y) == (6, 6)
    assert squad.move_towards(10, 10, 20, 20) is False


def test_move_towards_player_each_axis():
    squad = GhostSquad(count=1, delay=1)
    squad.ghosts[0] = Ghost(x=8, y=5)
    squad.move_towards(3, 5, 20, 20)
    assert (squad.ghosts[0].x, squad.ghosts[0].y) == (7, 5)


def test_occupied_blocks_move():
    squad = GhostSquad(count=2, delay=1)
    squad.ghosts[0] = Ghost(x=5, y=5)
    squad.ghosts[1] = Ghost(x=6, y=6)
    assert squad.occupied(6, 6, 0) is True
    assert squad.occupied(6, 6, 1) is False
    squad.move_towards(6, 6, 20, 20)
    assert (squad.ghosts[0].x, squad.ghosts[0].y) == (5, 5)


def test_move_clamps_to_map():
    squad = GhostSquad(count=1, delay=1)
    squad.ghosts[0] = Ghost(x=19, y=0)
    squad.move_towards(30, -5, 20, 10)
    assert squad.ghosts[0].x == 20 - 2
    assert squad.ghosts[0].y == 1


def test_collision_sends_ghosts_home():
    squad = GhostSquad(count=2, delay=1)
    squad.ghosts[0] = Ghost(x=4, y=4, origin_x=1, origin_y=2)
    squad.ghosts[1] = Ghost(x=9, y=9, origin_x=3, origin_y=5)
    assert squad.check_collision(4, 4) is True
    assert [(g.x, g.y) for g in squad.ghosts] == [(1, 2), (3, 5)]


def test_no_collision_keeps_positions():
    squad = GhostSquad(count=1, delay=1)
    squad.ghosts[0] = Ghost(x=4, y=4, origin_x=1, origin_y=2)
    assert squad.check_collision(4, 5) is False
    assert (squad.ghosts[0].x, squad.ghosts[0].y) == (4, 4)


def test_draw_writes_one_symbol_per_ghost():
    out = io.StringIO()
    squad = GhostSquad(count=3)
    squad.reset(30, 20, random.Random(2))
    squad.draw(Screen(out), 3, 1)
    assert out.getvalue().count(GHOST_SYMBOL) == len(squad.ghosts)