from sunlife.framebuffer import BLACK, WHITE, Framebuffer
from sunlife.game_of_life import GameOfLife
from sunlife.patterns import Pattern, pattern_coordinates


def _alive_cells(game):
    return {
        (x, y)
        for y in range(game.height)
        for x in range(game.width)
        if game.is_alive(x, y)
    }


def test_new_game_is_empty():
    game = GameOfLife(6, 4)
    assert _alive_cells(game) == set()


def test_set_and_clear_cell():
    game = GameOfLife(5, 5)
    game.set_cell(2, 3, True)
    assert game.is_alive(2, 3)
    game.set_cell(2, 3, False)
    assert not game.is_alive(2, 3)


def test_out_of_bounds_cells():
    game = GameOfLife(3, 3)
    game.set_cell(3, 0, True)
    game.set_cell(0, 7, True)
    assert _alive_cells(game) == set()
    assert not game.is_alive(-1, 0)
    assert not game.is_alive(10, 10)


def test_lonely_cell_dies():
    game = GameOfLife(5, 5)
    game.set_cell(2, 2, True)
    game.update()
    assert _alive_cells(game) == set()


def test_block_survives():
    game = GameOfLife(6, 6)
    block = {(2, 2), (3, 2), (2, 3), (3, 3)}
    for x, y in block:
        game.set_cell(x, y, True)
    game.update()
    assert _alive_cells(game) == block


def test_line_keeps_only_middle_and_no_births():
    game = GameOfLife(5, 5)
    for x in (1, 2, 3):
        game.set_cell(x, 2, True)
    game.update()
    # Dead cells never come alive, so the middle is all that remains.
    assert _alive_cells(game) == {(2, 2)}


def test_overcrowded_cell_dies():
    game = GameOfLife(5, 5)
    plus = {(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)}
    for x, y in plus:
        game.set_cell(x, y, True)
    game.update()
    assert not game.is_alive(2, 2)


def test_live_cells_never_increase():
    game = GameOfLife(80, 60)
    game.initialize_with_pattern(Pattern.SUN, 15, 15)
    before = _alive_cells(game)
    for _ in range(5):
        game.update()
        after = _alive_cells(game)
        assert after <= before
        before = after


def test_initialize_with_pattern_sets_distinct_cells():
    game = GameOfLife(80, 60)
    game.initialize_with_pattern(Pattern.SUN, 15, 15)
    expected = {(15 + x, 15 + y) for x, y in pattern_coordinates(Pattern.SUN)}
    assert _alive_cells(game) == expected


def test_pattern_clipped_to_grid():
    game = GameOfLife(10, 10)
    game.initialize_with_pattern(Pattern.SUN, 0, 0)
    expected = {(x, y) for x, y in pattern_coordinates(Pattern.SUN) if x < 10 and y < 10}
    assert _alive_cells(game) == expected


def test_render_matches_cells():
    game = GameOfLife(4, 3)
    game.set_cell(1, 1, True)
    fb = Framebuffer(4, 3)
    fb.set_pixel(0, 0, WHITE)
    game.render(fb)
    assert fb.pixel_at(1, 1) == WHITE
    assert fb.pixel_at(0, 0) == BLACK