# tictactoe/exceptions.py


class InvalidStep(Exception):
    """Raised when rewinding to a step that is not in the history"""

    def __init__(self, step: int, history_length: int, *args: object) -> None:
        self.step = step
        self.history_length = history_length
        super().__init__(*args)

    def __str__(self) -> str:
        return (
            f"Step {self.step} is out of range, "
            f"history has {self.history_length} entries"
        )
