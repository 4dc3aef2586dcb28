import pytest

from wrapify import wrapify, wrap

SAMPLE = "the quick brown fox jumps over the lazy dog and keeps on running"

@pytest.mark.parametrize("text", [None, ""])
def test_empty_input_returns_empty_string(text):
    assert wrapify(text) == ""

def test_no_arguments():
    assert wrapify() == ""

def test_wrap_alias():
    assert wrap is wrapify

def test_indents_short_text():
    assert wrapify("hello world", 80, 3) == "   hello world\n"

def test_first_line_content_area_is_reduced():
    lines = [l for l in wrapify(SAMPLE, 40, 5).split("\n") if l]
    
    assert lines[0].startswith("     ")
    assert not lines[0].startswith("      ")
    assert len(lines) > 1
    assert all(len(line) <= 40 for line in lines)

def test_continuation_lines_use_full_width():
    text = "one two three four five six seven eight nine ten eleven twelve"
    lines = [l for l in wrapify(text, 20, 3).split("\n") if l]
    
    for line in lines[1:]:
        assert not line.startswith(" ")
        assert len(line) <= 20

def test_paragraphs_wrapped_independently():
    result = wrapify("first paragraph\n\nsecond paragraph", 80, 3)
    assert result == "   first paragraph\n\n   second paragraph\n"

def test_blank_line_runs_collapse():
    result = wrapify("first\n\n\n\n\nsecond", 80, 3)
    assert len(result.split("\n\n")) == 2

def test_crlf_and_tabs_are_removed():
    result = wrapify("hello\r\n\tworld", 80, 3)
    assert result == "   hello world\n"

def test_trims_sub_lines():
    assert wrapify("  hello  \n  world  ", 80, 3) == "   hello world\n"

def test_collapses_multiple_spaces():
    result = wrapify("hello    world", 80, 3)
    assert "  " not in result.lstrip()

def test_default_parameters():
    lines = [l for l in wrapify(" ".join(["word"] * 30)).split("\n") if l]
    
    assert lines[0].startswith("   ")
    assert len(lines[0]) <= 80
    assert lines[0] == "   " + " ".join(["word"] * 15)

def test_custom_width_without_indent():
    lines = [l for l in wrapify("one two three four five six seven eight", 15, 0).split("\n") if l]
    assert lines == ["one two three", "four five six", "seven eight"]

def test_custom_indent():
    assert wrapify("hello", 80, 10).startswith(" " * 10 + "hello")

def test_zero_indent():
    assert wrapify("hello world", 80, 0) == "hello world\n"

def test_long_word_overflows_on_its_own_line():
    long_word = "x" * 30
    assert wrapify(f"a {long_word} b", 10, 2) == f"  a\n{long_word}\nb\n"

def test_zero_width_puts_each_word_on_own_line():
    assert wrapify("one two three", 0, 0) == "one\ntwo\nthree\n"

def test_indent_wider_than_width():
    assert wrapify("one two three", 5, 10) == " " * 10 + "one\ntwo\nthree\n"

def test_whitespace_only_text_keeps_indent():
    assert wrapify("   \t ") == "   \n"

@pytest.mark.parametrize("width", [10, 20, 33, 60, 80])
def test_line_length_bound(width, messy_mud_text):
    for line in wrapify(messy_mud_text, width, 3).split("\n"):
        if len(line.split()) > 1:
            assert len(line) <= width

def test_messy_text(messy_mud_text, expected_paragraph_count):
    result = wrapify(messy_mud_text, 60, 3)
    paragraphs = result.split("\n\n")
    
    assert len(paragraphs) == expected_paragraph_count
    assert "\r" not in result
    assert "\t" not in result
    assert "\n\n\n" not in result
    
    for line in result.split("\n"):
        assert "  " not in line.lstrip()
        assert len(line) <= 60
    
    for paragraph in paragraphs:
        assert paragraph.startswith("   ")
        assert not paragraph.startswith("    ")

def test_messy_text_keeps_words_in_order(messy_mud_text):
    assert wrapify(messy_mud_text, 25, 3).split() == messy_mud_text.split()
