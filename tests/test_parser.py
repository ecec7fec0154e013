import io

import pytest

from enginekit.parser import Parser, ParserSyntaxError

SOURCE = "a\n#if PC\nb\n#else\nc\n#endif\nd"


def test_pc_keeps_pc_block():
    assert Parser().process(SOURCE) == "a\nb\nd\n"


def test_xbox_keeps_else_block():
    assert Parser(False).process(SOURCE) == "a\nc\nd\n"


def test_if_xbox_block():
    text = "#if XBOX\nx\n#else\np\n#endif"
    assert Parser(True).process(text) == "p\n"
    assert Parser(False).process(text) == "x\n"


def test_output_is_written_to_stream():
    out = io.StringIO()
    result = Parser().process(io.StringIO(SOURCE), out)
    assert out.getvalue() == result
    assert "c" not in result.split("\n")


def test_directives_may_be_indented_with_spaces():
    text = "  #if XBOX  \nhidden\n  #endif\nshown"
    assert Parser().process(text) == "shown\n"


def test_whitespace_only_lines_are_kept_in_dropped_blocks():
    text = "#if XBOX\n   \n#endif"
    assert Parser().process(text) == "   \n"


def test_unmatched_endif_raises():
    with pytest.raises(ParserSyntaxError) as info:
        Parser().process("a\n#endif")
    assert info.value.line_number == 2
    assert info.value.context == "#endif"


def test_unterminated_if_raises_at_eof():
    with pytest.raises(ParserSyntaxError) as info:
        Parser().process("#if PC\na")
    assert info.value.context == "EOF"
    assert info.value.line_number == 2


def test_unknown_directive_raises():
    with pytest.raises(ParserSyntaxError) as info:
        Parser().process("#define X")
    assert info.value.message == "statement is invalid"


def test_deepest_nesting_cannot_be_closed():
    text = "#if PC\n#if PC\n#if PC\nx\n#endif\n#endif\n#endif"
    with pytest.raises(ParserSyntaxError) as info:
        Parser().process(text)
    assert info.value.message == "stack overflow"


def test_too_deep_nesting_raises():
    text = "#if PC\n#if PC\n#if PC\n#if PC\n"
    with pytest.raises(ParserSyntaxError) as info:
        Parser().process(text)
    assert info.value.message == "stack overflow"


def test_parser_is_reusable_after_error():
    parser = Parser()
    with pytest.raises(ParserSyntaxError):
        parser.process("#if PC\n")
    assert parser.process(SOURCE) == "a\nb\nd\n"