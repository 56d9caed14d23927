"""Exceptions raised by the cut planning domain."""


class CutPlanError(Exception):
    """Base class for all cut planning errors."""


class InvalidCutError(CutPlanError):
    """Raised when a cut is committed to an interval that is not free.

    The allocation loop re-validates every candidate immediately before
    committing it, so reaching this error means an internal defect.
    """

    def __init__(self, start: float, end: float, bin_index: int) -> None:
        self.start = start
        self.end = end
        self.bin_index = bin_index
        super().__init__(
            f"Cannot cut [{start:.4f}, {end:.4f}] on bin {bin_index}: "
            "interval is out of bounds or overlaps an existing cut"
        )


class ConfigurationError(CutPlanError):
    """Raised when the inputs make a cut plan impossible to compute.

    Covers missing tool kerfs, malformed hole grids, invalid product
    fields and products that cannot be placed on an empty stock piece.
    """


class OptimizerStateError(CutPlanError):
    """Raised when an optimizer is used out of order (run twice, analyzed early)."""
