# tictactoe/main.py
import logging
from telegram import Update
from telegram.ext import Application
from .config import BOT_TOKEN, BOARD_DIMENSION, LOG_LEVEL
from .handlers import register_handlers

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    app = Application.builder().token(BOT_TOKEN).build()
    app.bot_data["dimension"] = BOARD_DIMENSION
    register_handlers(app)

    logger.info("Bot started with a %dx%d board!", BOARD_DIMENSION, BOARD_DIMENSION)
    app.run_polling(allowed_updates=Update.ALL_TYPES, drop_pending_updates=True)


if __name__ == "__main__":
    main()
