"""
Integer arithmetic operations.
"""
import logging
from typing import Callable, Dict, Tuple, Union

logger = logging.getLogger(__name__)

Number = Union[int, float]

OPERATIONS: Tuple[str, ...] = ("add", "subtract", "multiply", "divide")


class CalculatorError(ValueError):
    """Base class for calculator errors."""


class DivisionByZeroError(CalculatorError):
    """Raised when dividing by zero."""

    def __init__(self, message: str = "Cannot divide by zero"):
        super().__init__(message)


class QuotientOverflowError(CalculatorError):
    """Raised when a quotient is too large to represent as a float."""

    def __init__(self, message: str = "Quotient too large to represent"):
        super().__init__(message)


class UnknownOperationError(CalculatorError):
    """Raised when an operation name is not one of OPERATIONS."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Unknown operation: {operation}")


class Calculator:
    """Stateless calculator over integer operands."""

    def add(self, a: int, b: int) -> int:
        """Return a + b."""
        return a + b

    def subtract(self, a: int, b: int) -> int:
        """Return a - b."""
        return a - b

    def multiply(self, a: int, b: int) -> int:
        """Return a * b."""
        return a * b

    def divide(self, a: int, b: int) -> float:
        """
        Divide a by b.

        Args:
            a: Dividend
            b: Divisor

        Returns:
            The quotient as a float

        Raises:
            DivisionByZeroError: If b is zero
            QuotientOverflowError: If the quotient exceeds the float range
        """
        if b == 0:
            raise DivisionByZeroError()
        try:
            return a / b
        except OverflowError as e:
            raise QuotientOverflowError() from e

    def calculate(self, operation: str, a: int, b: int) -> Number:
        """
        Run an operation by name.

        Args:
            operation: One of OPERATIONS
            a: First operand
            b: Second operand

        Returns:
            The operation's result

        Raises:
            UnknownOperationError: If the operation name is not recognised
            DivisionByZeroError: If dividing by zero
        """
        handlers: Dict[str, Callable[[int, int], Number]] = {
            "add": self.add,
            "subtract": self.subtract,
            "multiply": self.multiply,
            "divide": self.divide,
        }
        handler = handlers.get(operation)
        if handler is None:
            raise UnknownOperationError(operation)

        logger.debug(f"Calculating {operation}({a}, {b})")
        return handler(a, b)


def create_calculator() -> Calculator:
    """Factory function to create a calculator instance."""
    return Calculator()
