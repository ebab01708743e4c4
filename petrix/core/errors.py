"""
Errors raised by the process algebra

All of them are construction-time programmer errors: the algebra is
deterministic, so they are raised immediately and never retried.
"""


class PetrixError(Exception):
    """Base class for process algebra errors"""
    pass


class ArityMismatch(PetrixError, ValueError):
    """Raised when sequential composition joins incompatible channels"""

    def __init__(self, left_outputs: int, right_inputs: int):
        self.left_outputs = left_outputs
        self.right_inputs = right_inputs
        super().__init__(
            f"Cannot compose {left_outputs} output channels "
            f"with {right_inputs} input channels"
        )


class InvalidFeedbackArity(PetrixError, ValueError):
    """Raised when feedback is applied to an odd number of inputs"""

    def __init__(self, input_arity: int):
        self.input_arity = input_arity
        super().__init__(
            f"Feedback requires an even input arity, got {input_arity}"
        )


class IndexOutOfRange(PetrixError, IndexError):
    """Raised on relation matrix access outside its declared bounds"""
    pass


class FrozenMatrixError(PetrixError, RuntimeError):
    """Raised when a sealed relation matrix is written to"""
    pass
