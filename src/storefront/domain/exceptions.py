"""Domain-level exceptions.

Every rule violation in the domain is raised as a subclass of
DomainException so callers can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object or entity invariant was violated."""
