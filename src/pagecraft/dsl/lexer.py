"""Tokenizer for the layout DSL."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pagecraft.models import DSLError


class TokenType(str, Enum):
    """Lexical categories."""

    IDENT = "identifier"
    STRING = "string"
    NUMBER = "number"
    BOOL = "boolean"
    COLON = "':'"
    COMMA = "','"
    LPAREN = "'('"
    RPAREN = "')'"
    LBRACE = "'{'"
    RBRACE = "'}'"
    EOF = "end of input"


@dataclass(frozen=True)
class Token:
    """A lexeme with its decoded value and 1-based source position."""

    type: TokenType
    value: Any
    line: int
    column: int


SINGLE_CHAR_TOKENS = {
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

SIMPLE_ESCAPES = {
    "\\": "\\",
    '"': '"',
    "'": "'",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
}

KEYWORDS = {"true": True, "false": False}


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9" and len(ch) == 1


def is_ident_start(ch: str) -> bool:
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def is_ident_char(ch: str) -> bool:
    return is_ident_start(ch) or ch == "-" or ("0" <= ch <= "9")


def is_identifier(text: str) -> bool:
    """True when ``text`` lexes as a single identifier (not a keyword)."""
    return (
        bool(text)
        and is_ident_start(text[0])
        and all(is_ident_char(ch) for ch in text[1:])
        and text not in KEYWORDS
    )


class Lexer:
    """Converts source text into tokens, collecting every lexical error."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []
        self.errors: list[DSLError] = []

    def tokenize(self) -> tuple[list[Token], list[DSLError]]:
        src = self.source
        while self.pos < len(src):
            ch = src[self.pos]

            if ch.isspace():
                self._advance()
                continue

            if src.startswith("//", self.pos):
                while self.pos < len(src) and src[self.pos] != "\n":
                    self._advance()
                continue

            if src.startswith("/*", self.pos):
                self._block_comment()
                continue

            if ch in SINGLE_CHAR_TOKENS:
                self._emit(SINGLE_CHAR_TOKENS[ch], ch, self.line, self.column)
                self._advance()
                continue

            if ch in "\"'":
                self._string()
                continue

            if is_digit(ch) or (ch == "-" and is_digit(self._peek(1))):
                self._number()
                continue

            if is_ident_start(ch):
                self._identifier()
                continue

            self._error(f"Unexpected character {ch!r}", self.line, self.column)
            self._advance()

        self._emit(TokenType.EOF, None, self.line, self.column)
        return self.tokens, self.errors

    # ── scanning helpers ──────────────────────────────────────────────────

    def _peek(self, offset: int = 0) -> str:
        idx = self.pos + offset
        return self.source[idx] if idx < len(self.source) else ""

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def _emit(self, type_: TokenType, value: Any, line: int, column: int) -> None:
        self.tokens.append(Token(type_, value, line, column))

    def _error(self, message: str, line: int, column: int) -> None:
        self.errors.append(DSLError(message=message, line=line, column=column))

    def _block_comment(self) -> None:
        line, column = self.line, self.column
        self._advance()
        self._advance()
        while self.pos < len(self.source):
            if self.source.startswith("*/", self.pos):
                self._advance()
                self._advance()
                return
            self._advance()
        self._error("Unterminated comment", line, column)

    def _string(self) -> None:
        line, column = self.line, self.column
        quote = self._advance()
        chars: list[str] = []
        while self.pos < len(self.source):
            ch = self._advance()
            if ch == quote:
                self._emit(TokenType.STRING, "".join(chars), line, column)
                return
            if ch == "\\":
                chars.append(self._escape())
                continue
            chars.append(ch)
        self._error("Unterminated string", line, column)

    def _escape(self) -> str:
        line, column = self.line, self.column - 1
        if self.pos >= len(self.source):
            return ""
        ch = self._advance()
        if ch in SIMPLE_ESCAPES:
            return SIMPLE_ESCAPES[ch]
        if ch == "u":
            digits = self.source[self.pos:self.pos + 4]
            if len(digits) == 4 and all(d in "0123456789abcdefABCDEF" for d in digits):
                for _ in range(4):
                    self._advance()
                return chr(int(digits, 16))
            self._error("Invalid \\u escape, expected 4 hex digits", line, column)
            return ""
        self._error(f"Invalid escape sequence '\\{ch}'", line, column)
        return ch

    def _number(self) -> None:
        line, column = self.line, self.column
        start = self.pos
        if self._peek() == "-":
            self._advance()
        self._digits()
        is_float = False
        if self._peek() == "." and is_digit(self._peek(1)):
            is_float = True
            self._advance()
            self._digits()
        if self._peek() in ("e", "E"):
            sign = self._peek(1)
            if is_digit(sign) or (sign in "+-" and is_digit(self._peek(2))):
                is_float = True
                self._advance()
                if sign in "+-":
                    self._advance()
                self._digits()
        text = self.source[start:self.pos]

        if self._peek() and (is_ident_char(self._peek()) or self._peek() == "."):
            while self._peek() and (is_ident_char(self._peek()) or self._peek() == "."):
                self._advance()
            self._error(f"Malformed number {self.source[start:self.pos]!r}", line, column)
            return

        try:
            value = float(text) if is_float else int(text)
        except ValueError:
            self._error(f"Number literal too long ({len(text)} characters)", line, column)
            return
        if is_float and not math.isfinite(value):
            self._error(f"Number out of range {text!r}", line, column)
            return
        self._emit(TokenType.NUMBER, value, line, column)

    def _digits(self) -> None:
        while is_digit(self._peek()):
            self._advance()

    def _identifier(self) -> None:
        line, column = self.line, self.column
        start = self.pos
        while self.pos < len(self.source) and is_ident_char(self.source[self.pos]):
            self._advance()
        text = self.source[start:self.pos]
        if text in KEYWORDS:
            self._emit(TokenType.BOOL, KEYWORDS[text], line, column)
        else:
            self._emit(TokenType.IDENT, text, line, column)


def tokenize(source: str) -> tuple[list[Token], list[DSLError]]:
    """Tokenize ``source``; the token list always ends with EOF."""
    return Lexer(source).tokenize()
