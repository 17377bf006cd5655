# =============================================================================
# test_codegen.py - C Code Generator Unit Tests
# =============================================================================
# Tests for translating syntax trees to C.
#
# Test coverage includes:
#   - Runtime preamble contents
#   - do / for / write translation
#   - The pointer advance after every for loop
#   - Statement order in the generated main()
#   - Rejection of unknown and malformed statements
# =============================================================================

import re

import pytest
from bufc.compiler.lexer import tokenize, Token, TokenType
from bufc.compiler.parser import parse
from bufc.compiler.ast import StatementNode, SyntaxTree
from bufc.compiler.codegen import CodeGenerator, generate
from bufc.compiler.errors import CodegenError
from bufc.compiler.runtime import RUNTIME_PREAMBLE, MAX_BUFFER_SIZE, CHAR_OFFSET


# =============================================================================
# Helper Functions
# =============================================================================

MAIN_HEADER = "int main(void) {"


def compile_c(source: str) -> str:
    """Helper to run the full pipeline."""
    return generate(parse(tokenize(source)))


def main_body(source: str) -> list:
    """
    Helper returning the non-empty lines of main() between the buffer
    declaration and the return statement, stripped of indentation.
    """
    code = compile_c(source)
    body = code.split(MAIN_HEADER, 1)[1]
    lines = [line.strip() for line in body.splitlines() if line.strip()]
    assert lines[0] == "buffer_t buffer = make_buffer();"
    assert lines[-2:] == ["return 0;", "}"]
    return lines[1:-2]


# =============================================================================
# Runtime Preamble Tests
# =============================================================================

class TestPreamble:
    """The runtime is emitted ahead of main()."""

    def test_preamble_first(self):
        code = compile_c("")
        assert code.startswith(RUNTIME_PREAMBLE)

    def test_runtime_routines(self):
        for signature in (
            "typedef struct buffer",
            "buffer_t make_buffer()",
            "void clear_buffer(buffer_t *buffer)",
            "void write(buffer_t *buffer)",
            "void execute(buffer_t *buffer, string_t instructions)",
        ):
            assert signature in RUNTIME_PREAMBLE

    def test_constants(self):
        assert MAX_BUFFER_SIZE == 512
        assert CHAR_OFFSET == 64
        assert f"#define MAX_BUFFER_SIZE {MAX_BUFFER_SIZE}" in RUNTIME_PREAMBLE
        assert f"#define CHAR_OFFSET {CHAR_OFFSET}" in RUNTIME_PREAMBLE

    def test_all_operations_handled(self):
        for char in "><+-.,":
            assert f"case '{char}':" in RUNTIME_PREAMBLE

    def test_reset_falls_through_to_default(self):
        reset = RUNTIME_PREAMBLE.split("case ',':", 1)[1]
        assert reset.lstrip().startswith("clear_buffer(buffer);")
        # No break between the reset and the default label
        assert "break" not in reset.split("default:", 1)[0]

    def test_write_prints_newline(self):
        assert 'printf("\\n");' in RUNTIME_PREAMBLE

    def test_empty_program(self):
        assert main_body("") == []


# =============================================================================
# Statement Translation Tests
# =============================================================================

class TestStatements:
    """Each statement becomes a fixed C fragment."""

    def test_write(self):
        body = main_body("write;")
        assert body == ["write(&buffer);"]

    def test_write_has_no_loop(self):
        code = compile_c("write;")
        main = code.split(MAIN_HEADER, 1)[1]
        assert main.count("write(&buffer);") == 1
        assert "for (" not in main

    def test_do(self):
        assert main_body("do +++;") == ['execute(&buffer, "+++");']

    def test_do_passes_raw_string(self):
        assert main_body("do ><+-.,;") == ['execute(&buffer, "><+-.,");']

    def test_for(self):
        assert main_body("for 3 +.;") == [
            "for (unsigned long long i = 0; i < 3ULL; i++) {",
            'execute(&buffer, "+.");',
            "}",
            "buffer.pointer++;",
        ]

    def test_for_advances_pointer_exactly_once(self):
        main = compile_c("for 5 >;").split(MAIN_HEADER, 1)[1]
        assert main.count("buffer.pointer++;") == 1

    def test_for_count_is_decimal(self):
        # A leading zero would make the literal octal in C
        body = main_body("for 010 +;")
        assert body[0] == "for (unsigned long long i = 0; i < 10ULL; i++) {"

    def test_for_zero(self):
        body = main_body("for 0 +;")
        assert body[0] == "for (unsigned long long i = 0; i < 0ULL; i++) {"
        assert body[-1] == "buffer.pointer++;"

    def test_for_very_long_count(self):
        count = "9" * 5000
        body = main_body(f"for 00{count} +;")
        assert body[0] == f"for (unsigned long long i = 0; i < {count}ULL; i++) {{"

    def test_for_all_zero_count(self):
        assert main_body("for 000 +;")[0] == "for (unsigned long long i = 0; i < 0ULL; i++) {"

    def test_for_counter_is_unsigned_long_long(self):
        body = main_body("for 3000000000 +;")
        assert body[0] == "for (unsigned long long i = 0; i < 3000000000ULL; i++) {"

    def test_substring_keyword_dispatch(self):
        assert main_body("double +;") == ['execute(&buffer, "+");']
        assert main_body("rewrite;") == ["write(&buffer);"]
        assert main_body("forever 2 >;")[0] == "for (unsigned long long i = 0; i < 2ULL; i++) {"


# =============================================================================
# Ordering Tests
# =============================================================================

class TestOrdering:
    """Generated calls follow source order with no reordering or merging."""

    def test_order_preserved(self):
        body = main_body("write;do +;write;do -;")
        assert body == [
            "write(&buffer);",
            'execute(&buffer, "+");',
            "write(&buffer);",
            'execute(&buffer, "-");',
        ]

    def test_duplicates_not_merged(self):
        body = main_body("do +;do +;do +;")
        assert body == ['execute(&buffer, "+");'] * 3

    def test_mixed_program(self):
        code = compile_c("for 8 +;\ndo ++++;\nwrite;\n")
        main = code.split(MAIN_HEADER, 1)[1]
        positions = [
            main.index("for (unsigned long long i = 0; i < 8ULL; i++)"),
            main.index("buffer.pointer++;"),
            main.index('execute(&buffer, "++++");'),
            main.index("write(&buffer);"),
        ]
        assert positions == sorted(positions)

    def test_statement_count_matches_calls(self):
        source = "do >;" * 7
        main = compile_c(source).split(MAIN_HEADER, 1)[1]
        assert len(re.findall(r"execute\(&buffer", main)) == 7


# =============================================================================
# Error Tests
# =============================================================================

class TestErrors:
    """Unknown and malformed statements are rejected."""

    @pytest.mark.parametrize("source", [
        "do;",
        "do + +;",
        "do 3;",
        "do write;",
        "for +;",
        "for 3;",
        "for 3 + 4;",
        "for + 3;",
        "write +;",
        "write 3;",
        "write write;",
    ])
    def test_wrong_shape(self, source):
        with pytest.raises(CodegenError):
            compile_c(source)

    @pytest.mark.parametrize("source", ["+;", "3 +;", ";"])
    def test_no_leading_keyword(self, source):
        with pytest.raises(CodegenError):
            compile_c(source)

    def test_error_mentions_keyword_and_line(self):
        with pytest.raises(CodegenError) as exc_info:
            compile_c("write;\n\ndo;")
        assert "'do'" in str(exc_info.value)
        assert exc_info.value.line == 3

    def test_error_hint(self):
        with pytest.raises(CodegenError) as exc_info:
            compile_c("for 2;")
        assert exc_info.value.hint == "usage: for <count> <operations>;"

    def test_no_partial_output(self):
        generator = CodeGenerator()
        with pytest.raises(CodegenError):
            generator.generate(parse(tokenize("write;do;")))

    def test_hand_built_tree(self):
        tree = SyntaxTree((
            StatementNode((Token(TokenType.NUMBER, "1", 1),), line=1),
        ))
        with pytest.raises(CodegenError):
            generate(tree)


# =============================================================================
# Generator Reuse Tests
# =============================================================================

class TestGeneratorReuse:
    def test_generator_resets_between_runs(self):
        generator = CodeGenerator()
        first = generator.generate(parse(tokenize("write;")))
        second = generator.generate(parse(tokenize("write;")))
        assert first == second
