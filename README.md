# bracketcalc

A small calculator for arithmetic expressions. It understands numbers
(with an optional decimal point), the four operators `+`, `-`, `*`, `/`
and one level of round brackets. Multiplication and division bind
tighter than addition and subtraction. Spaces, tabs and newlines are
ignored.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## The `bracketcalc` command

Pass one or more expressions as arguments:

```
bracketcalc "9*3" "2 + 3 * 4"
```

```
27
14
```

With no arguments it reads standard input and evaluates each non-blank
line:

```
printf '8 / (1 + 3)\n1 / 4\n' | bracketcalc
```

```
2
0.25
```

Results are printed in plain decimal notation without a trailing `.0`.
When an expression cannot be evaluated, a line starting with `Error:`
is written to standard error, the remaining expressions are still
processed, and the command exits with status 1; otherwise it exits
with status 0.

## Using it as a library

```python
from bracketcalc.evaluator import evaluate

evaluate("9*3")          # 27.0
evaluate("2 + 3 * 4")    # 14.0
evaluate("(1 + 2) * 4")  # 12.0
```

A number written directly next to another number or a bracket is
multiplied by it, so `2(3 + 1)` gives `8.0`. Division by zero follows
floating-point rules and gives an infinity or NaN rather than raising.

Tokenizing and evaluating can also be done as separate steps:

```python
from bracketcalc.lexer import tokenize
from bracketcalc.evaluator import evaluate_tokens

tokens = tokenize("8 / (1 + 3)")
evaluate_tokens(tokens)  # 2.0
```

`tokenize` returns a list of `Token` objects, each with a `kind`
(a `TokenKind`) and, for numbers, a float `value`.

### The calculator state

`bracketcalc.app.Calculator` models a calculator keypad: it holds an
input line (`input_value`), the last result (`output_value`) and the
last error (`error_message`), and changes in response to messages:
`InputChanged`, `AddInput`, `DeleteLast`, `ClearInput` and `Evaluate`.

```python
from bracketcalc.app import AddInput, Calculator, Evaluate, button_message

calc = Calculator()
for label in ["9", "*", "3", "="]:
    calc.update(button_message(label))
calc.display_text()  # "27"
```

`button_message` maps the keypad labels `C` (clear), `D` (delete last
character) and `=` (evaluate) to their messages, and any other label to
`AddInput` of its first character. `display_text` returns the error
message if there is one, otherwise the last result.

## Errors

- `bracketcalc.lexer.LexError` (a `ValueError`) is raised for
  characters that are not part of an expression, such as letters, and
  for malformed numbers such as `1.2.3`. Its `position` attribute gives
  the offset in the text.
- `bracketcalc.evaluator.ParseError` is the base of the evaluation
  errors, each with a `position` attribute: `InvalidToken` (for example
  a nested bracket or an operator with nothing usable beside it),
  `UnclosedBracket` and `UnexpectedEndOfInput` (an operator at the
  start or end of an expression).

```python
from bracketcalc.evaluator import ParseError, evaluate

try:
    evaluate("3 *")
except ParseError as error:
    print(error)  # Expected Token after 1 but found end of input
```

Inside `Calculator.update`, a `ParseError` is stored in
`error_message`; a `LexError` is raised to the caller.

## What it does not do

There is no graphical window or on-screen keypad. `Calculator` and
`button_message` describe the keypad's behaviour, but the only front
end provided is the `bracketcalc` terminal command. Brackets cannot be
nested, and there is no unary minus.