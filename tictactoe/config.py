# tictactoe/config.py
import os
from dotenv import load_dotenv

load_dotenv()

BOT_TOKEN = os.getenv("BOT_TOKEN")
BOARD_DIMENSION = int(os.getenv("BOARD_DIMENSION", "3"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Board cells plus one history button per move must fit in Telegram's
# 100-button inline keyboard.
MIN_DIMENSION = 3
MAX_DIMENSION = 7

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

if not BOT_TOKEN:
    raise ValueError("❌ BOT_TOKEN not found! Add it to your .env file.")

if not MIN_DIMENSION <= BOARD_DIMENSION <= MAX_DIMENSION:
    raise ValueError(
        f"❌ BOARD_DIMENSION must be between {MIN_DIMENSION} and {MAX_DIMENSION}, "
        f"got {BOARD_DIMENSION}."
    )

if LOG_LEVEL not in LOG_LEVELS:
    raise ValueError(
        f"❌ LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {LOG_LEVEL}."
    )
