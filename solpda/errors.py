"""Errors raised while resolving keys, encoding seeds and deriving addresses."""

from __future__ import annotations


class PdaError(ValueError):
    """Base class for all solpda errors.

    ``source`` names the input that triggered the error (``program id``,
    ``seed #2``) and is prefixed to the message when set.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class UnknownSeedType(PdaError):
    pass


class ValueOutOfRange(PdaError):
    pass


class SeedTooLong(PdaError):
    pass


class MalformedToken(PdaError):
    pass


class TooManySeeds(PdaError):
    pass


class InvalidEncoding(PdaError):
    pass


class InvalidLiteral(PdaError):
    pass


class InvalidKey(PdaError):
    pass


class NoValidBumpFound(PdaError):
    pass
