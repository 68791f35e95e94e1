# tictactoe/utils.py

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from .rules import Mark, winning_line
from .state import Draw, RejectReason, Winner

EMPTY_SYMBOL = "⬜"
SYMBOLS = {Mark.X: "❌", Mark.O: "⭕"}
WIN_SYMBOLS = {Mark.X: "❎", Mark.O: "🅾️"}

REJECT_MESSAGES = {
    RejectReason.OUT_OF_RANGE: "There is no such cell!",
    RejectReason.GAME_OVER: "The game is over! Rewind to keep playing.",
    RejectReason.OCCUPIED: "This cell is taken!",
}


def cell_symbol(cell, highlighted=False):
    if cell is None:
        return EMPTY_SYMBOL
    return WIN_SYMBOLS[cell] if highlighted else SYMBOLS[cell]


def describe_step(game, step):
    """Label of a history button, e.g. 'Go to move #2 (1, 3)'."""
    if step == 0:
        return "Go to game start"
    cell = game.state.history[step].cell
    row, col = divmod(cell, game.dimension)
    return f"Go to move #{step} ({row + 1}, {col + 1})"


def build_board(game):
    state = game.state
    board = state.current_board()
    n = state.dimension
    gid = game.id
    highlight = winning_line(board, n) or ()

    buttons = []
    for i in range(0, n * n, n):
        row = [
            InlineKeyboardButton(
                cell_symbol(board[j], j in highlight),
                callback_data=f"move_{j}_{gid}",
            )
            for j in range(i, i + n)
        ]
        buttons.append(row)

    for step in range(len(state.history)):
        label = describe_step(game, step)
        if step == state.step_number:
            label = "▶ " + label
        buttons.append(
            [InlineKeyboardButton(label, callback_data=f"jump_{step}_{gid}")]
        )

    return InlineKeyboardMarkup(buttons)


def display_name(game, user_id):
    username = game.usernames.get(user_id)
    return f"@{username}" if username else f"user_{user_id}"


def status_text(game):
    state = game.state
    status = state.status()

    if isinstance(status, Winner):
        player = game.player_for(status.mark)
        text = f"🏆 Winner: {display_name(game, player)} {SYMBOLS[status.mark]}"
    elif isinstance(status, Draw):
        text = "🤝 Draw!"
    else:
        player = game.player_for(status.next_mark)
        text = f"Next player: {display_name(game, player)} {SYMBOLS[status.next_mark]}"

    return f"{text}\nMove {state.step_number} of {len(state.history) - 1}"


def parse_callback(data, prefix):
    """Split '<prefix>_<number>_<game id>' into (number, game id)."""
    parts = data.split("_")
    if len(parts) != 3 or parts[0] != prefix or not parts[2]:
        raise ValueError(f"Malformed callback data: {data!r}")
    return int(parts[1]), parts[2]
