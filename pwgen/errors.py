class GenerationError(Exception):
    """Base class for password generation failures."""


class EmptyAlphabetError(GenerationError, ValueError):
    """The include/exclude settings leave no characters to draw from."""


class AttemptsExhaustedError(GenerationError, RuntimeError):
    """No candidate satisfied the constraints within the attempt cap."""

    def __init__(self, attempts: int):
        super().__init__(f"no acceptable password after {attempts} attempts")
        self.attempts = attempts
