"""Demonstration arithmetic tools that never touch the network."""

import logging
from typing import Literal

from mcp.types import TextContent

from ..errors import DomainError
from .base import error_content, format_value, text_content

logger = logging.getLogger(__name__)

Operation = Literal["add", "subtract", "multiply", "divide"]


def add(a: float, b: float) -> list[TextContent]:
    """Return the sum of two numbers as text."""
    return text_content(format_value(a + b))


def _compute(operation: Operation, a: float, b: float) -> float:
    if operation == "add":
        return a + b
    if operation == "subtract":
        return a - b
    if operation == "multiply":
        return a * b
    if operation == "divide":
        if b == 0:
            raise DomainError("Cannot divide by zero")
        return a / b
    raise DomainError(f"Unknown operation: {operation}")


def calculate(operation: Operation, a: float, b: float) -> list[TextContent]:
    """
    Apply one of add, subtract, multiply or divide to two numbers.

    Division by zero comes back as an ``Error:`` text block instead of raising.
    """
    try:
        result = _compute(operation, a, b)
    except DomainError as e:
        logger.info(f"calculate rejected: {e}")
        return error_content(str(e))
    return text_content(format_value(result))
