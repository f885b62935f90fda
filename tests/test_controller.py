import pytest

from brickfall.game import Action, BrickType, EventSource, GameController


def test_controller_spawns_first_brick(make_game):
    game = make_game(BrickType.T)
    controller = GameController(game)
    assert controller.game.view_data() is not None
    assert (game.view_data().x, game.view_data().y) == (4, 0)


def test_down_locks_clears_and_respawns(make_game):
    game = make_game(BrickType.I, rows=5, columns=4, hidden_buffer_rows=1, spawn_x=0)
    controller = GameController(game)
    for _ in range(3):
        data = controller.on_down()
        assert data.clear_row is None
    data = controller.on_down()
    assert data.clear_row is not None
    assert data.clear_row.lines_removed == 1
    assert data.clear_row.score_bonus == 50
    assert game.score == 50
    assert not game.board_matrix.any()
    assert (data.view_data.x, data.view_data.y) == (0, 0)


def test_lock_without_full_row_reports_zero_lines(make_game):
    game = make_game(BrickType.O)
    controller = GameController(game)
    while game.move_down():
        pass
    data = controller.on_down()
    assert data.clear_row.lines_removed == 0
    assert game.board_matrix[24, 5] == int(BrickType.O)
    assert data.view_data.y == 0


def test_user_down_scores_per_cell(make_game):
    game = make_game(BrickType.O)
    controller = GameController(game)
    controller.on_down(EventSource.USER)
    controller.step(Action.DOWN)
    controller.step(Action.TICK)
    assert game.score == 2


def test_stacking_ends_the_game_and_blocks_input(make_game):
    game = make_game(BrickType.O, rows=5, columns=4, hidden_buffer_rows=1, spawn_x=0)
    controller = GameController(game)
    flags = []
    game.game_over_property.subscribe(lambda old, new: flags.append(new))
    for _ in range(20):
        controller.on_down()
        if game.game_over:
            break
    assert game.game_over
    assert flags == [True]

    board = game.board_matrix
    view = controller.on_left()
    assert (view.x, view.y) == (0, 0)
    assert controller.on_down().clear_row is None
    assert (game.board_matrix == board).all()

    view = controller.create_new_game()
    assert not game.game_over
    assert not game.board_matrix.any()
    assert view is not None


def test_step_dispatches_moves(make_game):
    game = make_game(BrickType.T)
    controller = GameController(game)
    assert controller.step(Action.LEFT).view_data.x == 3
    assert controller.step(Action.RIGHT).view_data.x == 4
    before = game.rotator.index
    controller.step(Action.ROTATE)
    assert game.rotator.index == (before + 1) % 4
    assert controller.step(Action.NONE).clear_row is None


def test_step_rejects_unknown_action(make_game):
    controller = GameController(make_game())
    with pytest.raises(ValueError):
        controller.step(42)
