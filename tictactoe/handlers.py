# tictactoe/handlers.py

from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import CallbackContext, CallbackQueryHandler, CommandHandler

from .exceptions import InvalidStep
from .game import TicTacToeGame, GAMES, WAITING
from .rules import DEFAULT_DIMENSION
from .state import InProgress
from .utils import (
    REJECT_MESSAGES,
    build_board,
    display_name,
    parse_callback,
    status_text,
)

import logging
logger = logging.getLogger(__name__)

READY_PATTERN = r"^ready_[-\d]+$"
MOVE_PATTERN = r"^move_\d+_[\w-]+$"
JUMP_PATTERN = r"^jump_\d+_[\w-]+$"


def ready_keyboard(chat_id):
    return InlineKeyboardMarkup([
        [InlineKeyboardButton("I'm ready 🎮", callback_data=f"ready_{chat_id}")]
    ])


def _dimension(context: CallbackContext):
    return context.bot_data.get("dimension", DEFAULT_DIMENSION)


async def start(update: Update, context: CallbackContext):
    message = update.effective_message
    chat_id = message.chat_id

    await message.reply_text(
        "Press the button below to join a game:",
        reply_markup=ready_keyboard(chat_id)
    )


async def solo(update: Update, context: CallbackContext):
    """Hotseat game: the caller plays both marks."""
    user = update.effective_user
    message = update.effective_message
    chat_id = message.chat_id

    game = TicTacToeGame(user.id, user.id, chat_id, _dimension(context))
    game.usernames[user.id] = user.username
    GAMES[game.id] = game
    logger.info("Hotseat game %s started by %s in chat %s", game.id, user.id, chat_id)

    await message.reply_text(
        text=f"🎮 Game started!\n{status_text(game)}",
        reply_markup=build_board(game)
    )


async def on_ready(update: Update, context: CallbackContext):
    query = update.callback_query

    user = query.from_user
    chat_id = query.message.chat_id

    waiting = WAITING.setdefault(chat_id, [])
    if user.id in waiting:
        await query.answer("You are already waiting for an opponent!")
        return

    await query.answer()
    waiting.append(user.id)
    logger.info("User %s is ready in chat %s", user.id, chat_id)

    if len(waiting) < 2:
        name = f"@{user.username}" if user.username else f"user_{user.id}"
        await query.edit_message_text(
            f"{name} is ready. Waiting for an opponent...",
            reply_markup=ready_keyboard(chat_id)
        )
        return

    p1 = waiting.pop(0)
    p2 = waiting.pop(0)

    game = TicTacToeGame(p1, p2, chat_id, _dimension(context))
    GAMES[game.id] = game

    game.usernames[p1] = (await context.bot.get_chat(p1)).username
    game.usernames[p2] = (await context.bot.get_chat(p2)).username
    logger.info("Game %s started between %s and %s in chat %s", game.id, p1, p2, chat_id)

    await query.edit_message_text(
        f"{display_name(game, p1)} vs {display_name(game, p2)}"
    )
    await context.bot.send_message(
        chat_id=chat_id,
        text=f"🎮 Game started!\n{status_text(game)}",
        reply_markup=build_board(game)
    )


async def _find_game(query, game_id):
    game = GAMES.get(game_id)

    if game is None:
        await query.answer()
        await query.edit_message_text("This game no longer exists.")
        return None

    if query.message.chat_id != game.chat_id:
        await query.answer("This game belongs to another chat.")
        return None

    return game


async def make_move(update: Update, context: CallbackContext):
    query = update.callback_query

    try:
        index, game_id = parse_callback(query.data, "move")
    except ValueError:
        logger.warning("Ignoring malformed move callback %r", query.data)
        await query.answer()
        return

    game = await _find_game(query, game_id)
    if game is None:
        return

    rejected = game.state.validate_move(index)
    if rejected is not None:
        logger.warning("Game %s: rejected cell %s (%s)", game.id, index, rejected.reason.value)
        await query.answer(REJECT_MESSAGES[rejected.reason])
        return

    user_id = query.from_user.id
    if user_id != game.get_current_player():
        await query.answer("It's not your turn!")
        return

    mark = game.state.next_mark
    game.play(index)
    await query.answer()
    logger.info("Game %s: %s played %s at cell %s", game.id, user_id, mark.value, index)

    status = game.state.status()
    if not isinstance(status, InProgress):
        logger.info("Game %s finished: %s", game.id, status)

    await query.edit_message_text(
        text=status_text(game),
        reply_markup=build_board(game)
    )


async def jump_to_step(update: Update, context: CallbackContext):
    query = update.callback_query

    try:
        step, game_id = parse_callback(query.data, "jump")
    except ValueError:
        logger.warning("Ignoring malformed jump callback %r", query.data)
        await query.answer()
        return

    game = await _find_game(query, game_id)
    if game is None:
        return

    user_id = query.from_user.id
    if not game.is_player(user_id):
        await query.answer("You are not playing in this game!")
        return

    if step == game.state.step_number:
        await query.answer("You are already here.")
        return

    try:
        game.jump_to(step)
    except InvalidStep as e:
        logger.error("Game %s: %s", game.id, e)
        await query.answer("That move is no longer in the history.")
        return

    await query.answer()
    logger.info("Game %s: %s rewound to move %s", game.id, user_id, step)

    await query.edit_message_text(
        text=status_text(game),
        reply_markup=build_board(game)
    )


async def on_error(update: object, context: CallbackContext):
    logger.error("Error while handling update %s", update, exc_info=context.error)


def register_handlers(app):
    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("solo", solo))
    app.add_handler(CallbackQueryHandler(on_ready, pattern=READY_PATTERN))
    app.add_handler(CallbackQueryHandler(make_move, pattern=MOVE_PATTERN))
    app.add_handler(CallbackQueryHandler(jump_to_step, pattern=JUMP_PATTERN))
    app.add_error_handler(on_error)
