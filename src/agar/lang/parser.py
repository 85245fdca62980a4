# src/agar/lang/parser.py

import logging
from typing import Optional

from agar.core.config import DEFAULT_CONFIG, RecognizerConfig
from .errors import ParseError
from .tokens import TYPE_KEYWORDS, Token, TokenStream, TokenType, describe

# ==================== Constants ====================
logger = logging.getLogger("agar.lang.parser")

STATEMENT_GRAMMAR = r"""
    program     := statement* EOF
    statement   := declaration | assignment | if-stmt | return-stmt
                 | while-stmt | block
    block       := '{' statement* '}'
    declaration := type-keyword IDENT ';'
    assignment  := IDENT '=' expression ';'
    if-stmt     := COND '(' expression ')' statement [ELSE statement]
    return-stmt := RETURN expression ';'
    while-stmt  := WHILE '(' expression ')' statement
    expression  := term (('+'|'-') term)* [ '>' expression ]
    term        := factor (('*'|'/') factor)*
    factor      := NUM | IDENT | STRING | CHAR | '(' expression ')'
"""

FACTOR_TOKENS = frozenset(
    {
        TokenType.NUMBER,
        TokenType.IDENTIFIER,
        TokenType.STRING_LITERAL,
        TokenType.CHAR_LITERAL,
    }
)
ADDITIVE_TOKENS = frozenset({TokenType.PLUS, TokenType.MINUS})
MULTIPLICATIVE_TOKENS = frozenset({TokenType.STAR, TokenType.SLASH})


class Cursor:
    """Read position in a token stream.

    The position only moves forward and stops at the EOF token.
    """

    def __init__(self, tokens: TokenStream):
        self._tokens = tokens
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def current(self) -> Token:
        return self._tokens[self._pos]

    def at(self, *token_types: TokenType) -> bool:
        return self.current.type in token_types

    def advance(self) -> Token:
        token = self.current
        if token.type is not TokenType.EOF:
            self._pos += 1
        return token


class Recognizer:
    """Recursive-descent recognizer for the Agar statement language.

    One method per grammar rule (see STATEMENT_GRAMMAR). Each rule consumes
    tokens through the cursor and raises ParseError on the first mismatch;
    nothing else is recorded.

    Only real nesting counts towards max_nesting_depth: a statement inside
    another statement and an expression inside parentheses. Comparison
    chains and "else COND" chains are matched with loops, so their length is
    unbounded.
    """

    def __init__(self, tokens: TokenStream, config: Optional[RecognizerConfig] = None):
        if not isinstance(tokens, TokenStream):
            tokens = TokenStream(tokens)
        self.config = config or DEFAULT_CONFIG
        self._cursor = Cursor(tokens)
        self._depth = 0

    def recognize(self) -> None:
        """Check the whole token stream.

        Raises:
            ParseError: On the first token that does not fit the grammar, or when
                nesting outruns the interpreter stack before max_nesting_depth
        """
        try:
            self._program()
        except RecursionError:
            raise self._error("nesting too deep (recursion limit reached)") from None
        logger.debug("Recognized %d tokens", self._cursor.position + 1)

    # ==================== Helpers ====================
    def _describe(self, token_type: TokenType) -> str:
        return describe(token_type, self.config.conditional_keyword)

    def _error(self, message: str, expected: Optional[str] = None) -> ParseError:
        token = self._cursor.current
        return ParseError(message, token.display(), token.line, token.column, expected)

    def _unexpected(self, expected: str) -> ParseError:
        return self._error(f"unexpected token '{self._cursor.current.display()}'", expected)

    def _expect(self, token_type: TokenType) -> Token:
        if self._cursor.at(token_type):
            return self._cursor.advance()
        expected = self._describe(token_type)
        found = self._cursor.current.display()
        raise self._error(f"expected '{expected}' but found '{found}'", expected)

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > self.config.max_nesting_depth:
            raise self._error(
                f"nesting too deep (more than {self.config.max_nesting_depth} levels)"
            )

    def _leave(self) -> None:
        self._depth -= 1

    # ==================== Statements ====================
    def _program(self) -> None:
        while not self._cursor.at(TokenType.EOF):
            self._statement()

    def _statement(self) -> None:
        self._enter()
        current = self._cursor.current.type
        logger.debug("statement at %s", self._cursor.current)

        if current in TYPE_KEYWORDS:
            self._declaration()
        elif current is TokenType.IDENTIFIER:
            self._assignment()
        elif current is TokenType.IF:
            self._if_statement()
        elif current is TokenType.RETURN:
            self._return_statement()
        elif current is TokenType.WHILE:
            self._while_statement()
        elif current is TokenType.LBRACE:
            self._block()
        else:
            raise self._unexpected("statement")
        self._leave()

    def _block(self) -> None:
        self._expect(TokenType.LBRACE)
        while not self._cursor.at(TokenType.RBRACE, TokenType.EOF):
            self._statement()
        self._expect(TokenType.RBRACE)

    def _declaration(self) -> None:
        if not self._cursor.at(*TYPE_KEYWORDS):
            raise self._error(
                f"expected data type but found '{self._cursor.current.display()}'",
                "data type",
            )
        self._cursor.advance()
        self._expect(TokenType.IDENTIFIER)
        self._expect(TokenType.SEMICOLON)

    def _assignment(self) -> None:
        self._expect(TokenType.IDENTIFIER)
        self._expect(TokenType.ASSIGN)
        self._expression()
        self._expect(TokenType.SEMICOLON)

    def _if_statement(self) -> None:
        # An "else COND" arm continues the same chain instead of nesting
        while True:
            self._expect(TokenType.IF)
            self._expect(TokenType.LPAREN)
            self._expression()
            self._expect(TokenType.RPAREN)
            self._statement()
            if not self._cursor.at(TokenType.ELSE):
                return
            self._cursor.advance()
            if not self._cursor.at(TokenType.IF):
                self._statement()
                return

    def _return_statement(self) -> None:
        self._expect(TokenType.RETURN)
        self._expression()
        self._expect(TokenType.SEMICOLON)

    def _while_statement(self) -> None:
        self._expect(TokenType.WHILE)
        self._expect(TokenType.LPAREN)
        self._expression()
        self._expect(TokenType.RPAREN)
        self._statement()

    # ==================== Expressions ====================
    def _expression(self) -> None:
        # '>' binds loosest and chains to the right: a > b > c is a > (b > c)
        self._sum()
        while self._cursor.at(TokenType.GREATER):
            self._cursor.advance()
            self._sum()

    def _sum(self) -> None:
        self._term()
        while self._cursor.at(*ADDITIVE_TOKENS):
            self._cursor.advance()
            self._term()

    def _term(self) -> None:
        self._factor()
        while self._cursor.at(*MULTIPLICATIVE_TOKENS):
            self._cursor.advance()
            self._factor()

    def _factor(self) -> None:
        if self._cursor.at(*FACTOR_TOKENS):
            self._cursor.advance()
        elif self._cursor.at(TokenType.LPAREN):
            self._enter()
            self._expect(TokenType.LPAREN)
            self._expression()
            self._leave()
            self._expect(TokenType.RPAREN)
        else:
            raise self._unexpected("expression")


def recognize(tokens: TokenStream, config: Optional[RecognizerConfig] = None) -> None:
    """Check a token stream against the statement grammar.

    Args:
        tokens: Token stream produced by the lexer
        config: Optional recognizer configuration

    Raises:
        ParseError: On the first token that does not fit the grammar
    """
    Recognizer(tokens, config).recognize()
