"""
Syntax validation for conditional expressions and variation text.

This module contains the validators invoked by the template body parser:
condition expressions on IF/ELSEIF lines, the bare ELSE marker, and
variation lines with interpolation and template-reference delimiters.
"""

import re

from mslg.core import markers
from mslg.exceptions import InvalidConditionError, InvalidVariationError

TOKEN_PATTERN = re.compile(
    r"\s*(?:"
    rf"(?P<reference>\{{\s*{markers.IDENTIFIER_PATH}\s*\}})"
    r"|(?P<number>\d+(?:\.\d+)?)"
    r"|(?P<string>\"(?:[^\"\\]|\\.)*\"|'(?:[^'\\]|\\.)*')"
    r"|(?P<op>==|!=|<=|>=|&&|\|\||[<>!+\-*/%(),])"
    rf"|(?P<name>{markers.IDENTIFIER_PATH})"
    r")"
)

COMPARISON_OPERATORS = {"==", "!=", "<", "<=", ">", ">="}
LITERAL_KEYWORDS = {"true", "false", "null"}
OR_OPERATORS = {"||", "or"}
AND_OPERATORS = {"&&", "and"}
NOT_OPERATORS = {"!", "not"}
KEYWORDS = LITERAL_KEYWORDS | {"and", "or", "not"}

DELIMITER_PAIRS = {"}": "{", "]": "["}


class _ExpressionChecker:
    """Recursive-descent syntax checker for condition expressions."""

    def __init__(self, expression: str, text: str):
        self.text = text  # Raw condition text, reported in errors
        self.tokens = self._tokenize(expression)
        self.position = 0

    def _tokenize(self, text: str) -> list[tuple[str, str]]:
        tokens = []
        index = 0
        while index < len(text):
            if text[index:].strip() == "":
                break
            match = TOKEN_PATTERN.match(text, index)
            if not match or match.end() == index:
                offending = text[index:].strip()[:1]
                raise InvalidConditionError(
                    self.text, f"unexpected character '{offending}'"
                )
            kind = match.lastgroup
            tokens.append((kind, match.group(kind)))
            index = match.end()
        return tokens

    def _peek(self) -> str | None:
        if self.position < len(self.tokens):
            return self.tokens[self.position][1]
        return None

    def _advance(self) -> tuple[str, str]:
        token = self.tokens[self.position]
        self.position += 1
        return token

    def _expect(self, value: str) -> None:
        if self._peek() != value:
            found = self._peek() or "end of expression"
            raise InvalidConditionError(
                self.text, f"expected '{value}' but found '{found}'"
            )
        self._advance()

    def check(self) -> None:
        if not self.tokens:
            raise InvalidConditionError(self.text, "empty expression")
        self._parse_or()
        if self.position < len(self.tokens):
            raise InvalidConditionError(
                self.text, f"unexpected token '{self._peek()}'"
            )

    def _parse_or(self) -> None:
        self._parse_and()
        while self._peek() in OR_OPERATORS:
            self._advance()
            self._parse_and()

    def _parse_and(self) -> None:
        self._parse_not()
        while self._peek() in AND_OPERATORS:
            self._advance()
            self._parse_not()

    def _parse_not(self) -> None:
        if self._peek() in NOT_OPERATORS:
            self._advance()
            self._parse_not()
            return
        self._parse_comparison()

    def _parse_comparison(self) -> None:
        self._parse_additive()
        if self._peek() in COMPARISON_OPERATORS:
            self._advance()
            self._parse_additive()
            if self._peek() in COMPARISON_OPERATORS:
                raise InvalidConditionError(
                    self.text, "chained comparisons are not allowed"
                )

    def _parse_additive(self) -> None:
        self._parse_term()
        while self._peek() in ("+", "-"):
            self._advance()
            self._parse_term()

    def _parse_term(self) -> None:
        self._parse_unary()
        while self._peek() in ("*", "/", "%"):
            self._advance()
            self._parse_unary()

    def _parse_unary(self) -> None:
        if self._peek() == "-":
            self._advance()
            self._parse_unary()
            return
        self._parse_primary()

    def _parse_primary(self) -> None:
        if self.position >= len(self.tokens):
            raise InvalidConditionError(self.text, "unexpected end of expression")

        kind, value = self._advance()

        if kind in ("number", "string", "reference"):
            return

        if kind == "name":
            if value in LITERAL_KEYWORDS:
                return
            if value in KEYWORDS:
                raise InvalidConditionError(
                    self.text, f"operator '{value}' is missing an operand"
                )
            if self._peek() == "(":
                self._parse_call_arguments()
            return

        if value == "(":
            self._parse_or()
            self._expect(")")
            return

        raise InvalidConditionError(self.text, f"operator '{value}' is missing an operand")

    def _parse_call_arguments(self) -> None:
        self._expect("(")
        if self._peek() == ")":
            self._advance()
            return
        self._parse_or()
        while self._peek() == ",":
            self._advance()
            self._parse_or()
        self._expect(")")


def _strip_expression_braces(text: str) -> str:
    """
    Remove one pair of {} when it encloses the whole condition expression.

    ``{x > 1}`` becomes ``x > 1``; ``{a} == {b}`` is returned unchanged since
    its first brace closes before the end of the expression.
    """
    stripped = text.strip()
    if not (stripped.startswith("{") and stripped.endswith("}")):
        return stripped

    depth = 0
    for index, char in enumerate(stripped):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0 and index < len(stripped) - 1:
                return stripped
    return stripped[1:-1].strip()


def validate_condition(text: str, requires_expression: bool) -> None:
    """
    Validate the text of a conditional response marker.

    For IF/ELSEIF branches the text must be a well-formed boolean or
    comparison expression, optionally wrapped in one pair of braces. For the
    ELSE branch the text must be the bare marker with nothing after it.

    Params:
        text: Normalized condition text (expression, or the ELSE marker)
        requires_expression: True for IF/ELSEIF, False for ELSE

    Raises:
        InvalidConditionError: When the text is malformed
    """
    if not requires_expression:
        residual = text.strip()
        if residual.startswith(markers.ELSE):
            residual = residual[len(markers.ELSE):].strip()
        if residual:
            raise InvalidConditionError(
                text, f"default branch cannot carry an expression ('{residual}')"
            )
        return

    _ExpressionChecker(_strip_expression_braces(text), text).check()


def _find_variation_problem(text: str) -> str | None:
    """Return a description of the first syntax problem, or None if valid."""
    if not text.strip():
        return "variation is empty"

    stack: list[tuple[str, int]] = []
    escaped = False
    for index, char in enumerate(text):
        if escaped:
            escaped = False
            continue
        if char == "\\":
            escaped = True
            continue
        if char in ("{", "["):
            stack.append((char, index))
        elif char in DELIMITER_PAIRS:
            if not stack or stack[-1][0] != DELIMITER_PAIRS[char]:
                return f"unbalanced '{char}'"
            opener, start = stack.pop()
            if opener == "{" and not text[start + 1:index].strip():
                return "empty interpolation '{}'"

    if stack:
        return f"unclosed '{stack[-1][0]}'"
    return None


def validate_variation_item(text: str, strict: bool = False) -> bool:
    """
    Check the syntax of a variation line payload.

    A valid variation is non-empty after trimming, has balanced ``{}``
    interpolation and ``[]`` template-reference delimiters, and contains no
    empty interpolation. Backslash-escaped delimiters are ignored.

    Params:
        text: Variation text with the list marker already removed
        strict: Raise instead of returning False

    Returns:
        True if the variation is valid, False otherwise (non-strict mode)

    Raises:
        InvalidVariationError: When invalid and ``strict`` is True
    """
    problem = _find_variation_problem(text)
    if problem is None:
        return True
    if strict:
        raise InvalidVariationError(text, problem)
    return False
