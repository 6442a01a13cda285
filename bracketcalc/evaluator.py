"""Evaluate token lists with single-level brackets and implicit products."""

from __future__ import annotations

import logging
import math
import operator
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from .lexer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Base class for evaluation errors; carries the position involved."""

    _template = "Parse error at position {}"

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(self._template.format(position))


class InvalidToken(ParseError):
    _template = "Invalid token at position {}"


class UnclosedBracket(ParseError):
    _template = "Unclosed bracket at position {}"


class UnexpectedEndOfInput(ParseError):
    _template = "Expected Token after {} but found end of input"


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Operator:
    symbol: str


@dataclass(frozen=True)
class Bracket:
    contents: tuple[Number | Operator, ...]


Node = Number | Operator | Bracket

_OPERATOR_KINDS = {
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.MUL: "*",
    TokenKind.DIV: "/",
}
_SYMBOL_KINDS = {symbol: kind for kind, symbol in _OPERATOR_KINDS.items()}


def _divide(left: float, right: float) -> float:
    """IEEE division: a zero divisor gives an infinity or NaN."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


_MUL_DIV: dict[str, Callable[[float, float], float]] = {
    "*": operator.mul,
    "/": _divide,
}
_ADD_SUB: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
}


def node_from_token(token: Token, position: int) -> Number | Operator:
    """Convert a number or operator token to a node."""
    if token.kind is TokenKind.NUMBER:
        return Number(token.value)
    symbol = _OPERATOR_KINDS.get(token.kind)
    if symbol is None:
        raise InvalidToken(position)
    return Operator(symbol)


def tokens_from_nodes(nodes: Iterable[Node]) -> list[Token]:
    """Convert flat number and operator nodes back into tokens."""
    tokens = []
    for node in nodes:
        if isinstance(node, Number):
            tokens.append(Token(TokenKind.NUMBER, node.value))
        elif isinstance(node, Operator):
            kind = _SYMBOL_KINDS.get(node.symbol)
            if kind is None:
                raise ValueError(f"Invalid operator {node.symbol!r}")
            tokens.append(Token(kind))
        else:
            raise ValueError("Cannot convert a bracket to a token directly")
    return tokens


def _combine_adjacent(nodes: Sequence[Node]) -> list[Node]:
    """Multiply neighbouring numbers pairwise, left to right, without chaining."""
    combined: list[Node] = []
    just_merged = False
    for node in nodes:
        if (
            not just_merged
            and combined
            and isinstance(node, Number)
            and isinstance(combined[-1], Number)
        ):
            combined[-1] = Number(node.value * combined[-1].value)
            just_merged = True
        else:
            combined.append(node)
            just_merged = False
    return combined


def _reduce(nodes: list[Node], operations: dict[str, Callable[[float, float], float]]) -> None:
    """Apply the given binary operators in one left-to-right pass, in place."""
    i = 0
    while i < len(nodes):
        node = nodes[i]
        if isinstance(node, Operator) and node.symbol in operations:
            if i == 0 or i + 1 >= len(nodes):
                raise UnexpectedEndOfInput(i)
            left, right = nodes[i - 1], nodes[i + 1]
            if not isinstance(left, Number):
                raise InvalidToken(i - 1)
            if not isinstance(right, Number):
                raise InvalidToken(i + 1)
            result = operations[node.symbol](left.value, right.value)
            logger.debug("%s %s %s = %s", left.value, node.symbol, right.value, result)
            nodes[i - 1 : i + 2] = [Number(result)]
            continue
        i += 1


class Parser:
    """Evaluates one token list; brackets may not be nested."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens = list(tokens)
        self.position = 0
        self.result: float | None = None

    def evaluate(self) -> float:
        """Evaluate the remaining tokens and return the value."""
        self.result = self._parse_expression()
        return self.result

    def _parse_expression(self) -> float:
        nodes: list[Node] = []
        while self.position < len(self.tokens):
            self._read_node(nodes)

        nodes = [
            Number(Parser(tokens_from_nodes(node.contents)).evaluate())
            if isinstance(node, Bracket)
            else node
            for node in nodes
        ]
        nodes = _combine_adjacent(nodes)

        _reduce(nodes, _MUL_DIV)
        while len(nodes) > 1:
            before = len(nodes)
            _reduce(nodes, _ADD_SUB)
            if len(nodes) == before:
                # Numbers left side by side with no operator between them.
                raise InvalidToken(self.position)

        if nodes and isinstance(nodes[0], Number):
            logger.debug("result: %s", nodes[0].value)
            return nodes[0].value
        raise InvalidToken(self.position)

    def _read_node(self, nodes: list[Node]) -> None:
        token = self.tokens[self.position]
        if token.kind is TokenKind.NUMBER:
            nodes.append(Number(token.value))
            self.position += 1
        elif token.kind is TokenKind.OPEN:
            self.position += 1
            contents = []
            while True:
                if self.position >= len(self.tokens):
                    raise UnclosedBracket(self.position)
                inner = self.tokens[self.position]
                if inner.kind is TokenKind.CLOSE:
                    break
                contents.append(node_from_token(inner, self.position))
                self.position += 1
            nodes.append(Bracket(tuple(contents)))
        elif token.kind is TokenKind.CLOSE:
            self.position += 1
        else:
            nodes.append(node_from_token(token, self.position))
            self.position += 1


def evaluate_tokens(tokens: Iterable[Token]) -> float:
    """Evaluate a token list."""
    return Parser(tokens).evaluate()


def evaluate(text: str) -> float:
    """Tokenize and evaluate ``text``."""
    return evaluate_tokens(tokenize(text))