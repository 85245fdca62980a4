"""
Unit tests for the Agar recursive-descent recognizer.
"""
import pytest

from agar.core.config import RecognizerConfig
from agar.enums import ErrorCategory
from agar.lang.errors import ParseError
from agar.lang.lexer import AgarLexer, tokenize
from agar.lang.parser import Cursor, Recognizer, recognize
from agar.lang.tokens import Token, TokenStream, TokenType


def _accepts(source, config=None):
    recognize(AgarLexer(config).tokenize(source), config)


def _rejects(source, config=None):
    with pytest.raises(ParseError) as exc_info:
        _accepts(source, config)
    return exc_info.value.diagnostic


# ==================== Cursor Tests ====================
class TestCursor:
    def test_advance_moves_forward(self):
        """Test that advancing returns the consumed token."""
        cursor = Cursor(tokenize("a b"))
        assert cursor.advance().value == "a"
        assert cursor.current.value == "b"
        assert cursor.position == 1

    def test_advance_stops_at_eof(self):
        """Test that the cursor never moves past EOF."""
        cursor = Cursor(tokenize("a"))
        cursor.advance()
        cursor.advance()
        cursor.advance()
        assert cursor.position == 1
        assert cursor.current.type == TokenType.EOF

    def test_at(self):
        """Test lookahead against one or several token types."""
        cursor = Cursor(tokenize("x"))
        assert cursor.at(TokenType.IDENTIFIER)
        assert cursor.at(TokenType.NUMBER, TokenType.IDENTIFIER)
        assert not cursor.at(TokenType.NUMBER)


# ==================== Accepted Programs ====================
class TestRecognizerAccepts:
    @pytest.mark.parametrize("source", ["", "   ", "\n\t\n", " \r\n "])
    def test_whitespace_only(self, source):
        """Test that an empty statement list is a valid program."""
        _accepts(source)

    @pytest.mark.parametrize("keyword", ["int", "float", "double", "string", "bool", "char"])
    def test_declarations(self, keyword):
        """Test that each type keyword starts a declaration."""
        _accepts(f"{keyword} x;")

    @pytest.mark.parametrize(
        "source",
        [
            "a = 5;",
            "a = b;",
            'a = "text";',
            "a = 'c';",
            "a = 1.5;",
            "a = (1);",
            "a = 1 + 2 - 3;",
            "a = 1 * 2 / 3;",
            "a = (1 + 2) * (3 - b) / c;",
            "a = ((((x))));",
        ],
    )
    def test_assignments(self, source):
        """Test assignments with literal, name and arithmetic right-hand sides."""
        _accepts(source)

    def test_comparison(self):
        """Test that a single '>' comparison is an expression."""
        _accepts("a = b > c;")

    def test_comparison_chains_to_the_right(self):
        """Test that a > b > c is accepted through the right-recursive rule."""
        _accepts("a = a > b > c;")
        _accepts("return a > b > c > d;")

    def test_comparison_binds_looser_than_arithmetic(self):
        """Test that both sides of '>' may be full sums."""
        _accepts("x = a + 1 > b * 2 - c;")

    def test_if_without_else(self):
        """Test that the else branch is optional."""
        _accepts("Agar (a > 0) a = 1;")

    def test_if_with_else(self):
        """Test an if statement with both branches."""
        _accepts("Agar (a) { a = 1; } else { a = 2; }")

    def test_dangling_else_binds_to_nearest_if(self):
        """Test that nested conditionals with a single else are accepted."""
        _accepts("Agar (a) Agar (b) x = 1; else x = 2;")

    def test_english_dialect(self, english_config):
        """Test that 'if' is the conditional keyword in the English dialect."""
        _accepts("if (a > 0) { return a; } else { return 0; }", english_config)

    def test_while(self):
        """Test a while loop with a block body."""
        _accepts("while (10 > i) { i = i + 1; }")

    def test_return(self):
        """Test return statements."""
        _accepts("return 0;")
        _accepts("return (a + b) * 2;")

    def test_blocks(self):
        """Test empty and nested blocks."""
        _accepts("{}")
        _accepts("{ { int a; } { } }")

    def test_literal_operands(self):
        """Test that string and char literals are factors."""
        _accepts("Agar (\"a\" > 'b') return \"yes\";")

    def test_recognizer_accepts_token_list(self):
        """Test that a plain token list is wrapped into a stream."""
        tokens = list(tokenize("int a;"))
        Recognizer(tokens).recognize()


# ==================== Rejected Programs ====================
class TestRecognizerRejects:
    def test_missing_semicolon_after_declaration(self):
        """Test that the error points at the token found instead of ';'."""
        diagnostic = _rejects("int a a = 5;")
        assert diagnostic.category == ErrorCategory.SYNTAX
        assert diagnostic.message == "expected ';' but found 'a'"
        assert diagnostic.text == "a"
        assert diagnostic.expected == ";"
        assert (diagnostic.line, diagnostic.column) == (1, 7)

    def test_unknown_type_name(self):
        """Test that a non-keyword type is read as an assignment target."""
        diagnostic = _rejects("foo x;")
        assert diagnostic.message == "expected '=' but found 'x'"
        assert (diagnostic.line, diagnostic.column) == (1, 5)

    def test_declaration_requires_identifier(self):
        """Test that a keyword cannot be declared."""
        diagnostic = _rejects("int while;")
        assert diagnostic.message == "expected 'identifier' but found 'while'"

    def test_statement_cannot_start_with_operator(self):
        """Test the statement dispatch error."""
        diagnostic = _rejects("int a;\n+ a;")
        assert diagnostic.message == "unexpected token '+'"
        assert diagnostic.expected == "statement"
        assert (diagnostic.line, diagnostic.column) == (2, 1)

    def test_else_without_if(self):
        """Test that else cannot start a statement."""
        diagnostic = _rejects("else a = 1;")
        assert diagnostic.message == "unexpected token 'else'"

    def test_missing_operand(self):
        """Test the factor error for a dangling operator."""
        diagnostic = _rejects("a = 1 + ;")
        assert diagnostic.message == "unexpected token ';'"
        assert diagnostic.expected == "expression"
        assert diagnostic.column == 9

    def test_empty_parentheses(self):
        """Test that () is not an expression."""
        diagnostic = _rejects("a = ();")
        assert diagnostic.message == "unexpected token ')'"

    def test_unbalanced_parentheses(self):
        """Test that a missing ')' is reported at the next token."""
        diagnostic = _rejects("a = (1 + 2;")
        assert diagnostic.message == "expected ')' but found ';'"

    def test_double_comparison_operator(self):
        """Test that '>' must be followed by an expression."""
        diagnostic = _rejects("a = b > > c;")
        assert diagnostic.message == "unexpected token '>'"
        assert diagnostic.column == 9

    def test_premature_end_of_input(self):
        """Test that running into EOF is a syntax error at EOF."""
        diagnostic = _rejects("a = 5")
        assert diagnostic.message == "expected ';' but found 'end of input'"
        assert diagnostic.text == "end of input"
        assert (diagnostic.line, diagnostic.column) == (1, 6)

    def test_unclosed_block(self):
        """Test that a block needs its closing brace."""
        diagnostic = _rejects("while (a) {\n  a = a - 1;\n")
        assert diagnostic.message == "expected '}' but found 'end of input'"
        assert (diagnostic.line, diagnostic.column) == (3, 1)

    def test_stray_closing_brace(self):
        """Test that '}' cannot start a statement."""
        diagnostic = _rejects("int a; }")
        assert diagnostic.message == "unexpected token '}'"

    def test_if_requires_parentheses(self):
        """Test that the condition must be parenthesized."""
        diagnostic = _rejects("Agar a > 0 { }")
        assert diagnostic.message == "expected '(' but found 'a'"

    def test_if_requires_body(self):
        """Test that a conditional needs a statement after the condition."""
        diagnostic = _rejects("Agar (a)")
        assert diagnostic.message == "unexpected token 'end of input'"
        assert diagnostic.expected == "statement"

    def test_english_keyword_in_default_dialect(self):
        """Test that 'if' is just an identifier when the keyword is 'Agar'."""
        diagnostic = _rejects("if (a) a = 1;")
        assert diagnostic.message == "expected '=' but found '('"

    def test_only_first_error_is_reported(self):
        """Test that recognition stops at the first mismatch."""
        diagnostic = _rejects("int ;\nint ;\n")
        assert (diagnostic.line, diagnostic.column) == (1, 5)

    def test_error_string(self):
        """Test the one-line rendering of a syntax error."""
        with pytest.raises(ParseError) as exc_info:
            _accepts("return;")
        assert str(exc_info.value) == "Syntax error: unexpected token ';' at line 1, column 7"


# ==================== Nesting Limit ====================
class TestNestingLimit:
    def test_deep_parentheses_within_limit(self):
        """Test that nesting up to the limit is accepted."""
        config = RecognizerConfig(max_nesting_depth=50)
        # One level for the statement, one per parenthesis
        _accepts("a = " + "(" * 49 + "1" + ")" * 49 + ";", config)

    def test_deep_parentheses_over_limit(self):
        """Test that nesting past the limit is a syntax error, not a crash."""
        config = RecognizerConfig(max_nesting_depth=50)
        diagnostic = _rejects("a = " + "(" * 60 + "1" + ")" * 60 + ";", config)
        assert diagnostic.message == "nesting too deep (more than 50 levels)"

    def test_default_limit_stops_runaway_nesting(self):
        """Test that very deep input fails cleanly with the default limit."""
        diagnostic = _rejects("{" * 5000 + "}" * 5000)
        assert diagnostic.message.startswith("nesting too deep")

    def test_limit_reported_at_opening_parenthesis(self):
        """Test that the error points at the parenthesis that crosses the limit."""
        config = RecognizerConfig(max_nesting_depth=3)
        diagnostic = _rejects("a = (((1)));", config)
        assert diagnostic.text == "("
        assert diagnostic.column == 7

    def test_long_comparison_chain_is_not_nesting(self):
        """Test that a 500-operand '>' chain is accepted with the default limit."""
        _accepts("x = " + " > ".join(["a"] * 500) + ";")

    def test_long_else_chain_is_not_nesting(self):
        """Test that a 500-arm else chain is accepted with the default limit."""
        source = "Agar (a) x = 1;" + " else Agar (a) x = 1;" * 499 + " else x = 0;"
        _accepts(source)

    def test_else_chain_depth_is_flat(self):
        """Test that each else arm sits at the depth of the first one."""
        config = RecognizerConfig(max_nesting_depth=2)
        _accepts("Agar (a) x = 1; else Agar (b) x = 2; else Agar (c) x = 3; else x = 4;", config)

    def test_recursion_limit_is_a_syntax_error(self):
        """Test that a limit above the interpreter stack still fails cleanly."""
        config = RecognizerConfig(max_nesting_depth=100000)
        diagnostic = _rejects("a = " + "(" * 5000 + "1" + ")" * 5000 + ";", config)
        assert diagnostic.category == ErrorCategory.SYNTAX
        assert diagnostic.message == "nesting too deep (recursion limit reached)"

    def test_nested_statements_count(self):
        """Test that nested blocks count towards the limit."""
        config = RecognizerConfig(max_nesting_depth=3)
        _accepts("{ { { } } }", config)
        diagnostic = _rejects("{ { { { } } } }", config)
        assert diagnostic.column == 7


# ==================== Recognizer State ====================
class TestRecognizerState:
    def test_fresh_state_per_call(self):
        """Test that recognize() can be called repeatedly on the same stream."""
        tokens = tokenize("int a; a = 1;")
        recognize(tokens)
        recognize(tokens)

    def test_hand_built_stream(self):
        """Test the recognizer on tokens that did not come from the lexer."""
        tokens = TokenStream(
            [
                Token(TokenType.RETURN, "return", 1, 1),
                Token(TokenType.NUMBER, "0", 1, 8),
                Token(TokenType.SEMICOLON, ";", 1, 9),
                Token(TokenType.EOF, "", 1, 10),
            ]
        )
        recognize(tokens)
