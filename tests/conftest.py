import pytest

# Text pasted from a MUD client: extra spaces, tabs, CRLF line endings,
# runs of blank lines and whitespace around lines.
MESSY_MUD_TEXT = "\n".join([
    "You enter the grand hall.   The torches flicker\talong the walls.",
    "",
    "",
    "",
    "",
    "A massive dragon sits upon\r\na pile of gold,",
    "  its eyes glowing   red.",
    "",
    "",
    "",
    "",
    "",
    "The air smells of sulfur and ash.",
])

EXPECTED_PARAGRAPH_COUNT = 3

@pytest.fixture
def messy_mud_text():
    return MESSY_MUD_TEXT

@pytest.fixture
def expected_paragraph_count():
    return EXPECTED_PARAGRAPH_COUNT

@pytest.fixture
def long_paragraph():
    # 70 characters
    return "alpha beta gamma delta epsilon zeta eta theta iota kappa lambda mu nu."
