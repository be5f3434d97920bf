"""Errors raised by the request/response layer."""
from __future__ import annotations


class ExpressoError(Exception):
    """Base class for expresso errors."""


class ResponseFinalizedError(ExpressoError, RuntimeError):
    """Mutation or second finalize attempted on an already finalized response."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Response has already been finalized (attempted {operation}())")
