import pytest

from mohrechess.core import (
    EMPTY,
    King,
    Move,
    Pawn,
    Piece,
    Position,
    square_coords,
    square_name,
)


def setup(*specs):
    grid = [[EMPTY] * 8 for _ in range(8)]
    for _cls, kind, color, row, col in specs:
        grid[row][col] = kind + color
    position = Position(grid)
    pieces = []
    for cls, kind, color, row, col in specs:
        piece = cls(color, kind, position, row, col)
        position.add_piece(piece)
        pieces.append(piece)
    return position, pieces


def targets(moves):
    return [square_coords(move.target) for move in moves]


def snapshot(position):
    return [row[:] for row in position.grid]


def test_square_name_corners():
    assert square_name(0, 0) == "a8"
    assert square_name(7, 7) == "h1"


def test_square_coords_value():
    assert square_coords("e4") == (4, 4)


def test_square_round_trip():
    for row in range(8):
        for col in range(8):
            assert square_coords(square_name(row, col)) == (row, col)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, 8), (8, 3)])
def test_square_name_off_board(row, col):
    with pytest.raises(ValueError):
        square_name(row, col)


@pytest.mark.parametrize("name", ["i1", "a9", "a", "e44"])
def test_square_coords_invalid(name):
    with pytest.raises(ValueError):
        square_coords(name)


def test_move_string_concatenates_fields():
    move = Move("e2", "PW", "e4", "--")
    assert str(move) == "e2" + "PW" + "e4" + "--"


def test_position_rejects_bad_grid():
    with pytest.raises(ValueError):
        Position([[EMPTY] * 8 for _ in range(7)])
    with pytest.raises(ValueError):
        Position([["-"] * 8 for _ in range(8)])


def test_pieces_registry():
    position, (king, pawn, enemy) = setup(
        (King, "K", "W", 7, 4), (Pawn, "P", "W", 6, 0), (King, "K", "B", 0, 4)
    )
    assert position.pieces_of("W") == (king, pawn)
    assert position.pieces_of("B") == (enemy,)
    position.clear_pieces()
    assert position.pieces_of("W") == ()
    assert position.pieces_of("B") == ()
    with pytest.raises(ValueError):
        position.pieces_of("X")


def test_base_piece_has_no_moves():
    position, (piece,) = setup((Piece, "Q", "W", 3, 3))
    assert piece.legal_moves() == []
    assert piece.gives_check() is False


def test_white_pawn_start_moves():
    position, (pawn,) = setup((Pawn, "P", "W", 6, 4))
    assert targets(pawn.legal_moves()) == [(5, 4), (4, 4)]


def test_black_pawn_start_moves():
    position, (pawn,) = setup((Pawn, "P", "B", 1, 2))
    assert targets(pawn.legal_moves()) == [(2, 2), (3, 2)]


def test_pawn_double_step_blocked():
    position, (pawn, _) = setup((Pawn, "P", "W", 6, 4), (Pawn, "P", "B", 4, 4))
    assert targets(pawn.legal_moves()) == [(5, 4)]


def test_pawn_fully_blocked():
    position, (pawn, _) = setup((Pawn, "P", "W", 6, 4), (Pawn, "P", "B", 5, 4))
    assert pawn.legal_moves() == []


def test_pawn_capture_records_captured_piece():
    position, (pawn, _) = setup((Pawn, "P", "W", 4, 4), (Pawn, "P", "B", 3, 5))
    moves = pawn.legal_moves()
    assert targets(moves) == [(3, 4), (3, 5)]
    assert moves[1].captured == "PB"
    assert moves[1].piece == "PW"
    assert moves[1].origin == square_name(4, 4)


def test_pawn_does_not_capture_king_but_checks_it():
    position, (pawn, king) = setup((Pawn, "P", "W", 4, 4), (King, "K", "B", 3, 3))
    assert (3, 3) not in targets(pawn.legal_moves())
    assert pawn.gives_check() is True
    assert king.is_checked() is True


def test_check_detection():
    position, (king, attacker) = setup((King, "K", "W", 7, 4), (Pawn, "P", "B", 6, 3))
    assert attacker.gives_check() is True
    assert king.is_checked() is True

    position, (king, bystander) = setup((King, "K", "W", 7, 4), (Pawn, "P", "B", 5, 3))
    assert bystander.gives_check() is False
    assert king.is_checked() is False


def test_pawn_must_resolve_check():
    position, (king, pawn, attacker) = setup(
        (King, "K", "W", 7, 4), (Pawn, "P", "W", 7, 2), (Pawn, "P", "B", 6, 3)
    )
    moves = pawn.legal_moves()
    assert targets(moves) == [(6, 3)]
    assert moves[0].captured == "PB"


def test_king_avoids_enemy_king():
    position, (king, _) = setup((King, "K", "W", 7, 0), (King, "K", "B", 5, 0))
    assert targets(king.legal_moves()) == [(7, 1)]


def test_king_gives_check_when_adjacent():
    position, (white, black) = setup((King, "K", "W", 4, 4), (King, "K", "B", 3, 4))
    assert white.gives_check() is True
    assert black.gives_check() is True


def test_king_does_not_step_into_pawn_attack():
    position, (king, _) = setup((King, "K", "W", 7, 4), (Pawn, "P", "B", 5, 4))
    result = targets(king.legal_moves())
    assert (6, 3) not in result
    assert (6, 5) not in result
    assert (6, 4) in result


def test_king_move_count_in_open_board():
    position, (king,) = setup((King, "K", "W", 4, 4))
    moves = king.legal_moves()
    assert len(moves) == 8
    assert len(set(targets(moves))) == 8


def test_legal_moves_leave_position_unchanged():
    position, (king, pawn, attacker) = setup(
        (King, "K", "W", 7, 4), (Pawn, "P", "W", 7, 2), (Pawn, "P", "B", 6, 3)
    )
    before = snapshot(position)
    king.legal_moves()
    pawn.legal_moves()
    attacker.legal_moves()
    assert snapshot(position) == before
    assert (pawn.row, pawn.col) == (7, 2)
    assert (king.row, king.col) == (7, 4)


def test_do_and_undo_round_trip():
    position, (pawn, _) = setup((Pawn, "P", "W", 4, 4), (Pawn, "P", "B", 3, 5))
    before = snapshot(position)
    move = pawn.legal_moves()[1]
    pawn.do_move(move)
    assert position[3, 5] == "PW"
    assert position[4, 4] == EMPTY
    assert (pawn.row, pawn.col) == (3, 5)
    pawn.undo_move(move)
    assert snapshot(position) == before
    assert (pawn.row, pawn.col) == (4, 4)


def test_captured_piece_is_inert():
    position, (pawn, victim) = setup((Pawn, "P", "W", 4, 4), (Pawn, "P", "B", 3, 5))
    move = pawn.legal_moves()[1]
    pawn.do_move(move)
    assert victim.legal_moves() == []
    assert victim.gives_check() is False


def test_piece_off_its_square_is_inert():
    position, (pawn,) = setup((Pawn, "P", "W", 6, 4))
    position[6, 4] = EMPTY
    assert pawn.legal_moves() == []
    assert pawn.gives_check() is False