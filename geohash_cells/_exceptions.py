class InvalidArgumentError(ValueError): ...


class InvalidCharacterError(ValueError):
    def __init__(self, message: str, character: str):
        super().__init__(message)
        self.character = character


class NotEnoughHashesWarning(Warning): ...
