"""Algebraic function types."""

from .linear_function import LinearFunction, LinearFunctionType

__all__ = ["LinearFunction", "LinearFunctionType"]
