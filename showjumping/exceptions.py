"""Custom exceptions raised at the data loading boundary."""


class ShowJumpingError(Exception):
    """Base exception for standings errors."""


class DataLoadError(ShowJumpingError):
    """The competition data set could not be loaded at all."""


class SheetParseError(DataLoadError):
    """A result sheet exists but could not be read."""
