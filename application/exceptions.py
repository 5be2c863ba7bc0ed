"""
Application-layer exceptions.

These exceptions are used across the core, infrastructure and CLI layers.
Unknown or misspelled names are NOT exceptional: they come back from the
resolver as a Rejected outcome.
"""


class NameResolutionError(Exception):
    """Base class for errors raised by the name resolution package."""

    pass


class DictionaryLoadError(NameResolutionError):
    """An embedded name dictionary is missing or malformed.

    The dictionaries ship inside the package, so this always points at a
    packaging or maintenance mistake rather than bad user input.
    """

    def __init__(self, path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid name dictionary {path}: {detail}")


class InvalidGenerationError(NameResolutionError):
    """The user's generation input does not name a known generation."""

    def __init__(self, generation_name: str):
        self.generation_name = generation_name
        super().__init__(f"'{generation_name}' isn't a valid pokemon generation")
