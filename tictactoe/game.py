# tictactoe/game.py

import uuid

from .rules import DEFAULT_DIMENSION, Mark
from .state import GameState


class TicTacToeGame:
    def __init__(self, player1, player2, chat_id, dimension=DEFAULT_DIMENSION):
        self.id = str(uuid.uuid4())
        self.chat_id = chat_id

        # player1 plays X. A hotseat game passes the same user twice.
        self.players = [player1, player2]
        self.usernames = {}

        self.state = GameState.new(dimension)

    @property
    def dimension(self):
        return self.state.dimension

    def player_for(self, mark):
        return self.players[0] if mark is Mark.X else self.players[1]

    def get_current_player(self):
        return self.player_for(self.state.next_mark)

    def is_player(self, user_id):
        return user_id in self.players

    def play(self, index):
        """Play `index` for the side to move. Returns the rejection, if any."""
        rejected = self.state.validate_move(index)
        if rejected is None:
            self.state = self.state.apply_move(index)
        return rejected

    def jump_to(self, step):
        self.state = self.state.jump_to(step)


# global state
GAMES = {}
WAITING = {}
