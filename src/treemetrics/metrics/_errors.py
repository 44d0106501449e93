""" Kinds of errors reported in the result records of the tree measurements. """

__all__ = ["MetricErrorKind"]

import enum


class MetricErrorKind(enum.Enum):
    """Kinds of errors reported in the result records of the tree measurements."""

    INPUT_MISSING = "input_missing"
    """The input point set, skeleton graph, or mesh is empty."""

    INVALID_PARAMETER = "invalid_parameter"
    """A parameter is outside its valid range, e.g., a non-positive number of points to average."""

    INSUFFICIENT_DATA = "insufficient_data"
    """There are not enough points to compute the measurement, e.g., an empty height slice."""

    UNRESOLVED_FORK = "unresolved_fork"
    """The stem is forked at all heights at which the diameter may be measured."""

    CONDITION_NOT_MET = "condition_not_met"
    """The tree does not meet the preconditions of the measurement, e.g., the crown base is too low."""

    IO_ERROR = "io_error"
    """An input file could not be read or an output file could not be written."""
