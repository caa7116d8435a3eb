import pytest

from snakestack.mechanics import GameMechs
from snakestack.objpos import ObjPos
from snakestack.player import Direction, Player


class FakeBin:
    def __init__(self):
        self.current = None
        self.generated = 0

    def item(self):
        return None if self.current is None else self.current.copy()

    def generate_item(self):
        self.generated += 1
        self.current = None


@pytest.fixture
def game():
    return GameMechs()


@pytest.fixture
def item_bin():
    return FakeBin()


def test_constructor_registers_and_places(game, item_bin):
    player = Player(3, 3, "@", game, item_bin, "wsad")
    assert game.players == (player,)
    assert player.positions() == [ObjPos(3, 3, -1, "\0", "@")]
    assert player.score == 0
    assert player.direction is Direction.STOP


def test_wrong_number_of_controls_raises(game, item_bin):
    with pytest.raises(ValueError):
        Player(3, 3, "@", game, item_bin, "wsa")


def test_is_my_control(game, item_bin):
    player = Player(3, 3, "@", game, item_bin, "ikjl")
    assert all(player.is_my_control(key) for key in "ikjl")
    assert not player.is_my_control("w")


def test_move_without_command_stays(game, item_bin):
    player = Player(3, 3, "@", game, item_bin, "wsad")
    player.move()
    assert player.positions() == [ObjPos(3, 3, -1, "\0", "@")]


def test_move_right(game, item_bin):
    player = Player(3, 3, "@", game, item_bin, "wsad")
    player.receive_command("d")
    player.move()
    positions = player.positions()
    assert len(positions) == 1
    assert (positions[0].x, positions[0].y) == (4, 3)
    assert player.direction is Direction.RIGHT


def test_direction_persists_between_moves(game, item_bin):
    player = Player(3, 3, "@", game, item_bin, "wsad")
    player.receive_command("s")
    player.move()
    player.move()
    head = player.positions()[0]
    assert (head.x, head.y) == (3, 5)


def test_wrap_right(game, item_bin):
    player = Player(game.size_x - 2, 3, "@", game, item_bin, "wsad")
    player.receive_command("d")
    player.move()
    head = player.positions()[0]
    assert (head.x, head.y) == (1, 3)


def test_wrap_up(game, item_bin):
    player = Player(5, 1, "@", game, item_bin, "wsad")
    player.receive_command("w")
    player.move()
    head = player.positions()[0]
    assert (head.x, head.y) == (5, game.size_y - 2)


def test_reverse_is_ignored(game, item_bin):
    player = Player(3, 3, "@", game, item_bin, "wsad")
    player.receive_command("d")
    player.move()
    player.receive_command("a")
    player.move()
    head = player.positions()[0]
    assert (head.x, head.y) == (5, 3)
    assert player.direction is Direction.RIGHT


def test_collision_grows_and_scores(game, item_bin):
    player = Player(3, 3, "@", game, item_bin, "wsad")
    item_bin.current = ObjPos(4, 3, 7, "k", "*")
    player.receive_command("d")
    player.move()
    assert [(p.x, p.y) for p in player.positions()] == [(4, 3), (3, 3)]
    assert player.score == 7
    assert item_bin.generated == 1


def test_self_collision_loses_game(game, item_bin):
    player = Player(3, 3, "@", game, item_bin, "wsad")
    player.receive_command("d")
    for x in range(4, 8):
        item_bin.current = ObjPos(x, 3, 1, "a", "*")
        player.move()
    assert len(player.positions()) == 5
    assert player.score == 4
    assert game.lose_flag is False
    for key in "saw":
        player.receive_command(key)
        player.move()
    assert game.lose_flag is True
    assert game.exit_flag is True


def test_draw_and_undraw(game, item_bin):
    player = Player(3, 3, "@", game, item_bin, "wsad")
    player.draw()
    assert game.board[3][3] == "@"
    player.receive_command("d")
    player.move()
    assert game.board[3][3] == " "
    player.draw()
    assert game.board[3][4] == "@"


def test_full_queue_drops_commands(game, item_bin):
    player = Player(3, 3, "@", game, item_bin, "wsad")
    for _ in range(100):
        player.receive_command("d")
    player.receive_command("w")
    for _ in range(101):
        player.move()
    head = player.positions()[0]
    assert head.y == 3
    assert player.direction is Direction.RIGHT


def test_increase_score(game, item_bin):
    player = Player(3, 3, "@", game, item_bin, "wsad")
    player.increase_score()
    player.increase_score()
    assert player.score == 2


def test_positions_are_copies(game, item_bin):
    player = Player(3, 3, "@", game, item_bin, "wsad")
    player.positions()[0].x = 20
    assert player.positions()[0].x == 3