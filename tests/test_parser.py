# =============================================================================
# test_parser.py - Statement Parser Tests
# =============================================================================
# Tests for splitting token sequences into statement nodes.
#
# Test coverage includes:
#   - Statement count and order
#   - Terminator handling and empty statements
#   - Missing terminator errors
#   - Immutability of the input and the tree
#   - Tree printing and serialization
# =============================================================================

import pytest
from bufc.compiler.lexer import tokenize, TokenType
from bufc.compiler.parser import Parser, parse
from bufc.compiler.ast import StatementNode, SyntaxTree, TreePrinter
from bufc.compiler.errors import BufSyntaxError


def parse_source(source: str, filename: str = "<input>") -> SyntaxTree:
    """Helper to lex and parse in one step."""
    return parse(tokenize(source, filename), filename)


def statement_texts(tree: SyntaxTree) -> list:
    return [[t.text for t in node.tokens] for node in tree]


# =============================================================================
# Statement Splitting Tests
# =============================================================================

class TestStatements:
    """Test grouping of tokens into statements."""

    def test_empty_program(self):
        tree = parse_source("")
        assert len(tree) == 0
        assert tree.statements == ()

    def test_single_write(self):
        tree = parse_source("write;")
        assert statement_texts(tree) == [["write"]]

    def test_do_statement(self):
        tree = parse_source("do +++;")
        assert statement_texts(tree) == [["do", "+++"]]

    def test_for_statement(self):
        tree = parse_source("for 3 +.;")
        assert statement_texts(tree) == [["for", "3", "+."]]

    def test_adjacent_statements(self):
        tree = parse_source("do >;write;")
        assert statement_texts(tree) == [["do", ">"], ["write"]]

    def test_order_is_preserved(self):
        source = "write;\ndo +;\nfor 2 >;\nwrite;\n"
        tree = parse_source(source)
        heads = [node.head.text for node in tree]
        assert heads == ["write", "do", "for", "write"]

    @pytest.mark.parametrize("count", [1, 2, 5, 50])
    def test_statement_count(self, count):
        tree = parse_source("write;" * count)
        assert len(tree) == count

    def test_terminators_are_dropped(self):
        tree = parse_source("do +;write;")
        for node in tree:
            assert all(t.kind != TokenType.PUNCTUATION for t in node.tokens)

    def test_all_tokens_consumed(self):
        tokens = tokenize("for 10 >+;do <;write;")
        tree = parse(tokens)
        consumed = sum(len(node.tokens) for node in tree)
        terminators = sum(1 for t in tokens if t.kind == TokenType.PUNCTUATION)
        assert consumed + terminators == len(tokens)

    def test_empty_statement(self):
        # Shape is checked later by the code generator
        tree = parse_source(";")
        assert len(tree) == 1
        assert tree.statements[0].tokens == ()
        assert tree.statements[0].head is None

    def test_statement_line(self):
        tree = parse_source("write;\n\ndo\n+;")
        assert [node.line for node in tree] == [1, 3]

    def test_empty_statement_line_is_terminator_line(self):
        tree = parse_source("\n\n;")
        assert tree.statements[0].line == 3

    def test_arguments(self):
        node = parse_source("for 3 +.;").statements[0]
        assert node.head.text == "for"
        assert [t.text for t in node.arguments] == ["3", "+."]


# =============================================================================
# Error Tests
# =============================================================================

class TestMissingTerminator:
    """Tokens after the last ';' are a syntax error."""

    def test_single_unterminated_statement(self):
        with pytest.raises(BufSyntaxError) as exc_info:
            parse_source("write")
        assert "missing statement terminator" in str(exc_info.value)

    def test_unterminated_after_valid_statements(self):
        with pytest.raises(BufSyntaxError):
            parse_source("do +;write;do -")

    def test_error_line(self):
        with pytest.raises(BufSyntaxError) as exc_info:
            parse_source("write;\nwrite;\ndo +", "prog.none")
        assert exc_info.value.line == 3
        assert str(exc_info.value).startswith("prog.none:3: error:")

    def test_trailing_whitespace_is_fine(self):
        tree = parse_source("write;   \n\n")
        assert len(tree) == 1


# =============================================================================
# Immutability Tests
# =============================================================================

class TestImmutability:
    def test_input_tokens_unchanged(self):
        tokens = list(tokenize("do +;write;"))
        snapshot = list(tokens)
        Parser(tokens).parse()
        assert tokens == snapshot

    def test_tree_is_frozen(self):
        tree = parse_source("write;")
        with pytest.raises(AttributeError):
            tree.statements = ()

    def test_node_is_frozen(self):
        node = parse_source("write;").statements[0]
        with pytest.raises(AttributeError):
            node.tokens = ()


# =============================================================================
# Printing and Serialization Tests
# =============================================================================

class TestTreeOutput:
    def test_printer(self):
        tree = parse_source("do +++;\nwrite;")
        output = TreePrinter().print(tree)
        assert output.splitlines() == [
            "Program",
            "  Statement@1: do '+++'",
            "  Statement@2: write",
        ]

    def test_to_dict(self):
        tree = parse_source("do +;")
        assert tree.to_dict() == {
            "type": "Program",
            "body": [
                {
                    "type": "Expression",
                    "body": [
                        {"type": "keyword", "value": "do", "line": 1},
                        {"type": "operation", "value": "+", "line": 1},
                    ],
                },
            ],
        }

    def test_node_construction(self):
        node = StatementNode(tokens=(), line=4, filename="x.none")
        assert str(node.location) == "x.none:4"
