"""Exceptions raised by handlers."""


class EmissionError(Exception):
    """A handler could not write a record to its destination."""
