from wrapify.processing.normalizer import Normalizer

def test_split_paragraphs_on_blank_line():
    assert Normalizer().split_paragraphs("first paragraph\n\nsecond paragraph") == [
        "first paragraph", "second paragraph"
    ]

def test_split_paragraphs_collapses_blank_runs():
    assert Normalizer().split_paragraphs("a\n\nb\n\n\n\n\nc") == ["a", "b", "c"]

def test_split_paragraphs_normalizes_crlf_before_collapsing():
    assert Normalizer().split_paragraphs("a\r\n\r\n\r\nb") == ["a", "b"]

def test_split_paragraphs_keeps_soft_breaks():
    assert Normalizer().split_paragraphs("a\n  b") == ["a\n  b"]

def test_split_paragraphs_of_empty_text():
    assert Normalizer().split_paragraphs("") == [""]

def test_extract_words_trims_sub_lines():
    assert Normalizer().extract_words("  hello  \n  world  ") == ["hello", "world"]

def test_extract_words_collapses_tabs_and_spaces():
    words = Normalizer().extract_words("one\r\ntwo   three\t\tfour")
    assert words == ["one", "two", "three", "four"]

def test_extract_words_of_whitespace_only_paragraph():
    assert Normalizer().extract_words("   \t \n  ") == []

def test_extract_words_keeps_punctuation_attached():
    assert Normalizer().extract_words("well-known, (really)") == ["well-known,", "(really)"]
