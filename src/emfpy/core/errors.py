"""Exceptions raised by the EMF core."""


class EncodingFailure(ValueError):
    """A document holds a value that cannot be encoded as JSON.

    Raised for cyclic structures and unsupported types. The encoder error is
    chained as ``__cause__``.
    """
