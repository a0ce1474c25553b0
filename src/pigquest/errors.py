class PigQuestError(Exception):
    """Base class for errors raised by pigquest."""


class GridFormatError(PigQuestError, ValueError):
    """Grid text is ragged, empty, or uses an unknown symbol."""


class LevelGenerationError(PigQuestError):
    """A composed level came out without a start-to-goal route."""

    def __init__(self, difficulty, level: int, message: str = "goal unreachable from start") -> None:
        super().__init__(f"{difficulty} level {level}: {message}")
        self.difficulty = difficulty
        self.level = level
