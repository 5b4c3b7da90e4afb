"""
Exception types raised by the state resolution engine.

Two tiers:
  - InputError and its subclasses are raised before any property is computed
    ("fix your form").
  - NonPhysicalStateError is raised after computation when the resolved state
    cannot exist ("this state is impossible").

Everything derives from ValueError so API routes can map the whole family to
HTTP 422 with a single except clause.
"""


class PsychroError(ValueError):
    """Base class for all resolution errors."""


class InputError(PsychroError):
    """Missing, identical, unknown or out-of-range input variables."""


class UnsupportedPairError(InputError):
    """The two input variables have no registered resolution strategy."""


class OrderingError(InputError):
    """Wet-bulb or dew point supplied above the dry-bulb temperature."""


class NonPhysicalStateError(PsychroError):
    """The computed state is physically impossible (negative W, supersaturation, ...)."""
