"""DSL Parser - layout source text to block instances."""

from typing import Any

from pagecraft.core import get_logger, validate_source_size, ValidationError
from pagecraft.models import BlockInstance, CompileResult, ConfigValue, DSLError
from .lexer import Token, TokenType, tokenize

logger = get_logger(__name__)

LAYOUT_KEYWORD = "layout"

# Closing token for each opening delimiter of a declaration body.
CLOSERS = {
    TokenType.LPAREN: TokenType.RPAREN,
    TokenType.LBRACE: TokenType.RBRACE,
}

VALUE_TOKENS = (TokenType.STRING, TokenType.NUMBER, TokenType.BOOL, TokenType.IDENT)


class DSLSyntaxError(Exception):
    """Internal signal carrying the first syntax error of a parse."""

    def __init__(self, error: DSLError):
        super().__init__(str(error))
        self.error = error


class DSLParser:
    """
    Recursive-descent parser over the token stream.

    Syntax::

        layout {
          navbar(brand: "MyApp", sticky)
          hero { title: "Hello World", cta: "Get Started" }
          faq
        }

    The ``layout { ... }`` wrapper is optional and only recognised as the
    first construct of a document.
    """

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    def parse(self) -> list[BlockInstance]:
        """Parse a whole document."""
        self.pos = 0
        blocks: list[BlockInstance] = []

        if self._at_layout_wrapper():
            self._consume(TokenType.IDENT)
            opener = self._consume(TokenType.LBRACE)
            while not self._check(TokenType.RBRACE):
                if self._check(TokenType.EOF):
                    self._fail(f"Unterminated '{LAYOUT_KEYWORD}' block, missing '}}'", opener)
                blocks.append(self._declaration())
            self._consume(TokenType.RBRACE)
            if not self._check(TokenType.EOF):
                self._fail(
                    f"Unexpected {self._describe(self._peek())} after '{LAYOUT_KEYWORD}' block",
                    self._peek(),
                )
            return blocks

        while not self._check(TokenType.EOF):
            blocks.append(self._declaration())
        return blocks

    # ── grammar rules ─────────────────────────────────────────────────────

    def _at_layout_wrapper(self) -> bool:
        first = self._peek()
        return (
            first.type == TokenType.IDENT
            and first.value == LAYOUT_KEYWORD
            and self._peek(1).type == TokenType.LBRACE
        )

    def _declaration(self) -> BlockInstance:
        name = self._expect(TokenType.IDENT, "a block name")
        config: dict[str, ConfigValue] = {}

        opener = self._peek()
        if opener.type in CLOSERS:
            self.pos += 1
            config = self._entries(opener, CLOSERS[opener.type])

        return BlockInstance(type_id=name.value, config=config)

    def _entries(self, opener: Token, closer: TokenType) -> dict[str, ConfigValue]:
        entries: dict[str, ConfigValue] = {}
        while True:
            token = self._peek()
            if token.type == closer:
                self.pos += 1
                return entries
            if token.type == TokenType.EOF:
                self._fail(
                    f"Unterminated configuration for block opened with {opener.type.value}, "
                    f"missing {closer.value}",
                    opener,
                )
            if token.type not in (TokenType.IDENT, TokenType.STRING):
                self._fail(f"Expected a configuration key, got {self._describe(token)}", token)

            self.pos += 1
            key = token.value
            if self._check(TokenType.COLON):
                colon = self._consume(TokenType.COLON)
                entries[key] = self._value(key, colon)
            else:
                entries[key] = True

            if self._check(TokenType.COMMA):
                self.pos += 1

    def _value(self, key: str, colon: Token) -> ConfigValue:
        token = self._peek()
        if token.type not in VALUE_TOKENS:
            self._fail(f"Missing value for '{key}' after ':'", token if token.type != TokenType.EOF else colon)
        self.pos += 1
        return token.value

    # ── token helpers ─────────────────────────────────────────────────────

    def _peek(self, offset: int = 0) -> Token:
        idx = min(self.pos + offset, len(self.tokens) - 1)
        return self.tokens[idx]

    def _check(self, type_: TokenType) -> bool:
        return self._peek().type == type_

    def _consume(self, type_: TokenType) -> Token:
        return self._expect(type_, type_.value)

    def _expect(self, type_: TokenType, what: str) -> Token:
        token = self._peek()
        if token.type != type_:
            self._fail(f"Expected {what}, got {self._describe(token)}", token)
        self.pos += 1
        return token

    @staticmethod
    def _describe(token: Token) -> str:
        if token.type in VALUE_TOKENS:
            return f"{token.type.value} {token.value!r}"
        return token.type.value

    @staticmethod
    def _fail(message: str, token: Token) -> Any:
        raise DSLSyntaxError(DSLError(message=message, line=token.line, column=token.column))


def compile_dsl(source: str, max_length: int | None = None) -> CompileResult:
    """
    Compile DSL source into block instances.

    Never raises for text input: every malformation is reported in
    ``errors``, and ``instances`` is empty whenever ``errors`` is not.

    Args:
        source: DSL text
        max_length: Optional cap on source length in characters

    Returns:
        CompileResult with instances or errors

    Raises:
        TypeError: If source is not a string
    """
    if not isinstance(source, str):
        raise TypeError(f"DSL source must be str, got {type(source).__name__}")

    if max_length is not None:
        try:
            validate_source_size(source, max_length)
        except ValidationError as e:
            logger.warning("dsl_source_too_large", length=len(source), limit=max_length)
            return CompileResult(errors=[DSLError(message=str(e))])

    tokens, errors = tokenize(source)
    if errors:
        logger.info("dsl_lex_failed", errors=len(errors))
        return CompileResult(errors=errors)

    try:
        instances = DSLParser(tokens).parse()
    except DSLSyntaxError as e:
        logger.info("dsl_parse_failed", error=str(e.error))
        return CompileResult(errors=[e.error])

    logger.debug("dsl_compiled", blocks=len(instances))
    return CompileResult(instances=instances)
