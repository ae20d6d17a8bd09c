"""panetree exceptions"""


class PanetreeError(Exception):
    """Base class for all panetree errors."""


class TopologyError(PanetreeError):
    """A topology precondition was violated.

    Raised when a mutation is asked to operate on a pane that has no record in
    the store. Callers must reconcile before mutating.
    """


class AdapterError(PanetreeError):
    """The host multiplexer could not be queried."""
