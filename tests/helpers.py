from tictactoe.rules import Mark


def board_from(text):
    """'XO.X.....' -> board tuple, '.' is an empty cell."""
    return tuple(None if c == "." else Mark(c) for c in text)


def play_all(state, cells):
    for cell in cells:
        state = state.apply_move(cell)
    return state
