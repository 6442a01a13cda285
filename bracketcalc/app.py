"""Calculator state machine driven by button and text-input messages."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from decimal import Decimal

from .evaluator import ParseError, evaluate_tokens
from .lexer import LexError, tokenize

BUTTON_GRID: tuple[tuple[str, ...], ...] = (
    ("7", "8", "9", "/", "C"),
    ("4", "5", "6", "*", "D"),
    ("1", "2", "3", "-", "("),
    ("0", ".", "=", "+", ")"),
)

INPUT_PLACEHOLDER = "Try 9*3!"


@dataclass(frozen=True)
class Color:
    """An RGBA colour with channels in the range 0.0 to 1.0."""

    r: float
    g: float
    b: float
    a: float = 1.0


def lighten_color(color: Color, amount: float) -> Color:
    """Raise each colour channel by ``amount``, capped at 1.0; alpha is kept."""
    return replace(
        color,
        r=min(color.r + amount, 1.0),
        g=min(color.g + amount, 1.0),
        b=min(color.b + amount, 1.0),
    )


def darken_color(color: Color, amount: float) -> Color:
    """Lower each colour channel by ``amount``, floored at 0.0; alpha is kept."""
    return replace(
        color,
        r=max(color.r - amount, 0.0),
        g=max(color.g - amount, 0.0),
        b=max(color.b - amount, 0.0),
    )


@dataclass(frozen=True)
class InputChanged:
    """The input text was replaced by ``value``."""

    value: str


@dataclass(frozen=True)
class AddInput:
    """A character was appended to the input."""

    char: str


@dataclass(frozen=True)
class DeleteLast:
    """The last input character was removed."""


@dataclass(frozen=True)
class ClearInput:
    """The whole input was cleared."""


@dataclass(frozen=True)
class Evaluate:
    """The current input should be evaluated."""


Message = InputChanged | AddInput | DeleteLast | ClearInput | Evaluate


def button_message(label: str) -> Message:
    """Return the message a calculator button with ``label`` sends."""
    if not label:
        raise ValueError("Button label must not be empty")
    if label == "C":
        return ClearInput()
    if label == "D":
        return DeleteLast()
    if label == "=":
        return Evaluate()
    return AddInput(label[0])


def _format_number(value: float) -> str:
    """Format a float in plain decimal notation, without a trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass
class Calculator:
    """Holds the input line, the last result and the last error."""

    input_value: str = ""
    output_value: str = ""
    error_message: str | None = None

    def update(self, message: Message) -> None:
        """Apply ``message`` to the state.

        Raises LexError if evaluation meets a character that is not a token.
        """
        if not self.input_value:
            self.output_value = "0"
            self.error_message = None

        match message:
            case InputChanged(value=value):
                self.input_value = value
            case AddInput(char=char):
                self.input_value += char
            case ClearInput():
                self.input_value = ""
            case DeleteLast():
                self.input_value = self.input_value[:-1]
            case Evaluate():
                tokens = tokenize(self.input_value)
                try:
                    result = evaluate_tokens(tokens)
                except ParseError as exc:
                    self.error_message = f"Error: {exc}"
                else:
                    self.output_value = _format_number(result)
            case _:
                raise TypeError(f"Unknown message: {message!r}")

    def display_text(self) -> str:
        """The text shown under the input: the error if any, else the result."""
        if self.error_message is not None:
            return self.error_message
        return self.output_value


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate expressions from the command line, or one per line from stdin."""
    parser = argparse.ArgumentParser(
        prog="bracketcalc",
        description="Evaluate arithmetic expressions with + - * / and brackets.",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="expressions to evaluate; read from standard input when omitted",
    )
    args = parser.parse_args(argv)

    lines = args.expressions or (line.rstrip("\n") for line in sys.stdin)
    calculator = Calculator()
    status = 0
    for expression in lines:
        if not expression.strip():
            continue
        calculator.update(ClearInput())
        calculator.update(InputChanged(expression))
        try:
            calculator.update(Evaluate())
        except LexError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            status = 1
            continue
        if calculator.error_message is not None:
            print(calculator.error_message, file=sys.stderr)
            status = 1
        else:
            print(calculator.display_text())
    return status


if __name__ == "__main__":
    sys.exit(main())