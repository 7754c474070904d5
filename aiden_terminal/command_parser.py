"""Tokenizer turning a raw terminal line into command, arguments and options."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

_QUOTES = ('"', "'")


@dataclass
class ParsedCommand:
    command: str = ""
    args: List[str] = field(default_factory=list)
    options: Dict[str, str] = field(default_factory=dict)


def split_tokens(line: str) -> List[str]:
    """Split *line* on whitespace while honouring single and double quotes.

    A quote only closes the run it opened; the other quote character is kept
    literally inside the run. A backslash directly before a quote turns the
    quote into an ordinary character. An unterminated quote swallows the rest
    of the line into the current token.
    """

    tokens: List[str] = []
    current: List[str] = []
    quote_char = ""

    for index, char in enumerate(line):
        escaped = index > 0 and line[index - 1] == "\\"
        if char in _QUOTES and not escaped:
            if not quote_char:
                quote_char = char
            elif char == quote_char:
                quote_char = ""
            else:
                current.append(char)
        elif char.isspace() and not quote_char:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens


def _takes_value(tokens: List[str], index: int) -> bool:
    return index + 1 < len(tokens) and not tokens[index + 1].startswith("-")


def tokenize(line: str) -> ParsedCommand:
    """Parse *line* into a :class:`ParsedCommand`.

    Malformed input never raises; the tokenizer recovers as best it can.
    """

    parsed = ParsedCommand()
    if not line or not line.strip():
        return parsed

    tokens = split_tokens(line)
    if not tokens:
        return parsed

    parsed.command = tokens[0]
    index = 1
    while index < len(tokens):
        token = tokens[index]
        if token.startswith("--"):
            name, sep, value = token[2:].partition("=")
            if sep:
                parsed.options[name] = value
            elif _takes_value(tokens, index):
                parsed.options[name] = tokens[index + 1]
                index += 1
            else:
                parsed.options[name] = "true"
        elif token.startswith("-") and len(token) > 1 and "=" not in token:
            flags = token[1:]
            for flag in flags[:-1]:
                parsed.options[flag] = "true"
            last = flags[-1]
            if _takes_value(tokens, index):
                parsed.options[last] = tokens[index + 1]
                index += 1
            else:
                parsed.options[last] = "true"
        else:
            parsed.args.append(token)
        index += 1
    return parsed


parse_command = tokenize


__all__ = ["ParsedCommand", "parse_command", "split_tokens", "tokenize"]
