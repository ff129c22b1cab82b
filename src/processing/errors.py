"""Exceptions raised by the load case processing pipeline."""


class LoadCaseError(Exception):
    """Base class for load case processing failures."""


class ZeroOverloadFactorError(LoadCaseError):
    """An overload factor of 0 would divide a factored load by zero."""

    def __init__(self, load_case: str):
        self.load_case = load_case
        super().__init__(
            f'Calculation error: OLF value cannot be zero for load case "{load_case}". '
            "Please correct the value in the Overload Factors table."
        )
