#!/usr/bin/env python3
"""
Grammar module with the composable text-matching rules used by every
extractor.

A rule is a pure function from input text to a parse result:
- Matched: the rule applied; carries its value and the unconsumed rest
- NoMatch: the rule did not apply; the input comes back untouched

Absence of a pattern is an ordinary outcome, never an exception, so the
extractors can chain fallbacks with plain conditionals.

Rules are built once at import time and hold no state, so they can be
shared freely between threads.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Union


@dataclass(frozen=True)
class Matched:
    """Successful parse: the matched value and the remaining input."""
    value: Any
    rest: str

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NoMatch:
    """Failed parse: a description of what was expected and the untouched input."""
    expected: str
    rest: str

    def __bool__(self) -> bool:
        return False


ParseResult = Union[Matched, NoMatch]
ParseFunction = Callable[[str], ParseResult]


class Rule:
    """A named parse function with combinator methods."""

    def __init__(self, parse: ParseFunction, name: str):
        self._parse = parse
        self.name = name

    def __call__(self, text: str) -> ParseResult:
        return self._parse(text)

    def __repr__(self) -> str:
        return f"Rule({self.name})"

    def or_else(self, other: "Rule") -> "Rule":
        """
        Try this rule, then `other` on the same input if this one fails.

        When this rule succeeds without consuming anything, `other` gets a
        chance too and wins if it matches.
        """
        def parse(text: str) -> ParseResult:
            first = self(text)
            if not first:
                second = other(text)
                return second if second else NoMatch(f"{self.name} or {other.name}", text)
            if len(first.rest) == len(text):
                second = other(text)
                return second if second else first
            return first

        return Rule(parse, f"({self.name} | {other.name})")

    def many(self) -> "Rule":
        """
        Zero or more repetitions; the value is the list of matched values.

        Stops at the first failure or at the first repetition that consumes
        no input, so it always succeeds and always terminates.
        """
        def parse(text: str) -> ParseResult:
            values: List[Any] = []
            rest = text
            while True:
                result = self(rest)
                if not result or len(result.rest) == len(rest):
                    break
                values.append(result.value)
                rest = result.rest
            return Matched(values, rest)

        return Rule(parse, f"{self.name}*")

    def at_least_once(self) -> "Rule":
        """One or more repetitions; the value is the list of matched values."""
        repeated = self.many()

        def parse(text: str) -> ParseResult:
            first = self(text)
            if not first:
                return NoMatch(self.name, text)
            tail = repeated(first.rest)
            return Matched([first.value] + tail.value, tail.rest)

        return Rule(parse, f"{self.name}+")

    def optional(self) -> "Rule":
        """Always succeeds; the value is None when this rule does not apply."""
        def parse(text: str) -> ParseResult:
            result = self(text)
            return result if result else Matched(None, text)

        return Rule(parse, f"{self.name}?")

    def token(self) -> "Rule":
        """Skip whitespace before and after this rule."""
        def parse(text: str) -> ParseResult:
            leading = _SPACES(text)
            result = self(leading.rest)
            if not result:
                return NoMatch(self.name, text)
            trailing = _SPACES(result.rest)
            return Matched(result.value, trailing.rest)

        return Rule(parse, self.name)

    def text(self) -> "Rule":
        """Join a list-valued result into a single string."""
        return self.map(lambda values: "".join(values))

    def map(self, transform: Callable[[Any], Any]) -> "Rule":
        """Transform the value of a successful match."""
        def parse(text: str) -> ParseResult:
            result = self(text)
            if not result:
                return result
            return Matched(transform(result.value), result.rest)

        return Rule(parse, self.name)

    def except_(self, excluded: "Rule") -> "Rule":
        """Apply this rule only where `excluded` does not match."""
        def parse(text: str) -> ParseResult:
            if excluded(text):
                return NoMatch(f"{self.name} except {excluded.name}", text)
            return self(text)

        return Rule(parse, f"{self.name} except {excluded.name}")

    def until(self, terminator: "Rule") -> "Rule":
        """
        Repeat this rule up to the next match of `terminator`.

        The terminator is consumed but is not part of the value. Fails when
        the terminator never occurs.
        """
        return sequence(self.except_(terminator).many(), terminator).map(
            lambda parts: parts[0]
        )


def sequence(*rules: Rule) -> Rule:
    """Apply rules one after another; the value is the tuple of their values."""
    name = " ".join(rule.name for rule in rules)

    def parse(text: str) -> ParseResult:
        values = []
        rest = text
        for rule in rules:
            result = rule(rest)
            if not result:
                return NoMatch(name, text)
            values.append(result.value)
            rest = result.rest
        return Matched(tuple(values), rest)

    return Rule(parse, name)


def satisfy(predicate: Callable[[str], bool], name: str) -> Rule:
    """Match a single character accepted by `predicate`."""
    def parse(text: str) -> ParseResult:
        if text and predicate(text[0]):
            return Matched(text[0], text[1:])
        return NoMatch(name, text)

    return Rule(parse, name)


def char(expected: str) -> Rule:
    return satisfy(lambda c: c == expected, repr(expected))


def char_except(*excluded: str) -> Rule:
    return satisfy(lambda c: c not in excluded, f"any character except {''.join(excluded)!r}")


def ignore_case(expected: str) -> Rule:
    lowered = expected.lower()
    return satisfy(lambda c: c.lower() == lowered, f"{expected!r} (any case)")


def _end_of_input(text: str) -> ParseResult:
    if text:
        return NoMatch("end of input", text)
    return Matched(None, text)


# ============================================================================
# Characters
# ============================================================================

ANY_CHAR = satisfy(lambda c: True, "any character")
LETTER = satisfy(str.isalpha, "letter")
DIGIT = satisfy(lambda c: "0" <= c <= "9", "digit")
LETTER_OR_DIGIT = satisfy(str.isalnum, "letter or digit")
WHITESPACE = satisfy(str.isspace, "whitespace")
END_OF_INPUT = Rule(_end_of_input, "end of input")

_SPACES = WHITESPACE.many()

# ============================================================================
# Runs and delimiters
# ============================================================================

LINE = ANY_CHAR.at_least_once().text()
IDENTIFIER = LETTER.at_least_once().text().token()
UNDERSCORE = char("_").at_least_once().text()
DASH = char("-").at_least_once().text()
NUMBER = DIGIT.at_least_once().text()

OPEN_PARENTHESIS = char("(")
CLOSED_PARENTHESIS = char(")")
OPEN_SQUARE_BRACKET = char("[")
CLOSED_SQUARE_BRACKET = char("]")


def enclosed(open_char: str, close_char: str, keep_delimiters: bool = False) -> Rule:
    """
    Build a rule for text wrapped in a pair of delimiters.

    The content is any run of characters other than the closing delimiter.
    Surrounding whitespace is skipped.

    Args:
        open_char: Opening delimiter, e.g. "["
        close_char: Closing delimiter, e.g. "]"
        keep_delimiters: Include the delimiters in the value. Needed when the
            matched text is later deleted from the source string.

    Returns:
        Rule whose value is the enclosed text
    """
    body = sequence(char(open_char), char_except(close_char).many().text(), char(close_char))
    if keep_delimiters:
        return body.map(lambda parts: "".join(parts)).token()
    return body.map(lambda parts: parts[1]).token()


SQUARE_BRACKET_ENCLOSED_TEXT = enclosed("[", "]")
SQUARE_BRACKET_ENCLOSED_TEXT_WITH_BRACKETS = enclosed("[", "]", keep_delimiters=True)
PARENTHESIS_ENCLOSED_TEXT = enclosed("(", ")")
PARENTHESIS_ENCLOSED_TEXT_WITH_PARENTHESES = enclosed("(", ")", keep_delimiters=True)

# ============================================================================
# Scan-until rules
# ============================================================================

IDENTIFIER_UNTIL_UNDERSCORE = LETTER.until(UNDERSCORE).text()
IDENTIFIER_UNTIL_UNDERSCORE_OR_FULL_WORD = IDENTIFIER_UNTIL_UNDERSCORE.or_else(IDENTIFIER)

IDENTIFIER_UNTIL_DASH = LETTER.until(DASH).text()
IDENTIFIER_UNTIL_DASH_OR_FULL_WORD = IDENTIFIER_UNTIL_DASH.or_else(IDENTIFIER)

LINE_UNTIL_DASH = ANY_CHAR.until(DASH).text()
LINE_UNTIL_DASH_OR_FULL_LINE = LINE_UNTIL_DASH.or_else(LINE)

LINE_UNTIL_UNDERSCORE = ANY_CHAR.until(UNDERSCORE).text()
LINE_UNTIL_UNDERSCORE_OR_FULL_LINE = LINE_UNTIL_UNDERSCORE.or_else(LINE)

LINE_UNTIL_OPEN_SQUARE_BRACKET = ANY_CHAR.until(OPEN_SQUARE_BRACKET).text()
LINE_UNTIL_OPEN_PARENTHESIS = ANY_CHAR.until(OPEN_PARENTHESIS).text()
LINE_UNTIL_SQUARE_BRACKET_OR_PARENTHESIS = LINE_UNTIL_OPEN_SQUARE_BRACKET.or_else(
    LINE_UNTIL_OPEN_PARENTHESIS
)

LINE_UNTIL_DIGIT = ANY_CHAR.until(NUMBER).text()
LINE_UNTIL_DIGIT_OR_FULL_LINE = LINE_UNTIL_DIGIT.or_else(LINE)

# ============================================================================
# Tokenizers
# ============================================================================

IDENTIFIERS_SEPARATED_BY_UNDERSCORE = IDENTIFIER_UNTIL_UNDERSCORE_OR_FULL_WORD.many()
IDENTIFIERS_SEPARATED_BY_DASH = IDENTIFIER_UNTIL_DASH_OR_FULL_WORD.many()

LINES_SEPARATED_BY_UNDERSCORE = LINE_UNTIL_UNDERSCORE_OR_FULL_LINE.many()
LINES_SEPARATED_BY_DASH = LINE_UNTIL_DASH_OR_FULL_LINE.many()

# ============================================================================
# Helpers
# ============================================================================

# Largest value accepted by parse_integer (signed 32-bit).
MAX_INTEGER = 2 ** 31 - 1

_INTEGER = sequence(char("+").optional(), NUMBER).map(lambda parts: parts[1]).token()


def try_parse(rule: Rule, text: str) -> ParseResult:
    """Apply a rule to the start of `text`; trailing input is allowed."""
    return rule(text)


def parse_all(rule: Rule, text: str) -> ParseResult:
    """Apply a rule that must consume the whole of `text`."""
    result = sequence(rule, END_OF_INPUT)(text)
    if not result:
        return NoMatch(f"{rule.name} then end of input", text)
    return Matched(result.value[0], result.rest)


def tokenize(rule: Rule, text: str) -> Optional[List[str]]:
    """
    Run a tokenizer rule and return its tokens.

    Args:
        rule: A list-valued rule such as LINES_SEPARATED_BY_DASH
        text: Input to split

    Returns:
        List of tokens, or None when tokenization produced nothing
    """
    result = rule(text)
    if not result or not result.value:
        return None
    return list(result.value)


def parse_integer(text: str) -> Optional[int]:
    """
    Parse an unsigned decimal integer, tolerating surrounding whitespace and
    a leading "+".

    Returns:
        The integer, or None when `text` is not an integer or exceeds MAX_INTEGER
    """
    result = parse_all(_INTEGER, text)
    if not result:
        return None
    value = int(result.value)
    if value > MAX_INTEGER:
        return None
    return value
