"""Arithmetic expression calculator: tokenizer, evaluator, keypad state and terminal command."""

__version__ = "0.1.0"
__all__ = ["__version__"]