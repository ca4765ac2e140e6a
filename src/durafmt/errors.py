"""Errors raised while building a duration formatter."""


class DurafmtError(ValueError):
    """Base class for durafmt errors."""


class InvalidDurationText(DurafmtError):
    """Text does not follow the compact duration grammar (e.g. ``1h2m3s``)."""

    def __init__(self, text: str, reason: str = "invalid duration"):
        self.text = text
        self.reason = reason
        super().__init__(f"durafmt: {reason} {text!r}")


class MissingUnit(DurafmtError):
    """A bare zero was given without a unit suffix."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"durafmt: missing unit in duration {text!r}")


class UnknownUnit(DurafmtError):
    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"durafmt: unknown unit {unit!r}")
