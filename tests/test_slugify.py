import pytest

from slugable.config import SlugConfig
from slugable.utils.slugify import create_slug, ensure_unique_slug, transform, truncate_slug

EN = SlugConfig(language="en")
FA = SlugConfig(language="fa")
AR = SlugConfig(language="ar")

SAMPLES = [
    "Hello World",
    "  --leading and trailing--  ",
    "my_file   name",
    "سلام دنیا",
    "\u0645\u06cc\u200c\u062e\u0648\u0627\u0647\u0645 \u0628\u0631\u0648\u0645",
    "\u06a9\u062a\u0627\u0628\u200c\u0647\u0627\u06cc \u06f1\u06f2\u06f3 \u062a\u0633\u062a",
    "مـــرحبا بالعالم",
    "Special! Ch@rs# ٤٥٦",
    "!!!",
    "",
]


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "Hello-World"),
    ("my_file   name", "my-file-name"),
    ("  --leading and trailing--  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "Special-Chrs"),
    ("سلام world", "world"),
    ("!!!", ""),
    ("", ""),
])
def test_transform_english(text, expected):
    assert transform(text, EN) == expected


@pytest.mark.parametrize("config", [EN, FA, AR])
def test_numerals_fold_to_ascii(config):
    assert "123" in transform("۱۲۳", config)
    assert "456" in transform("٤٥٦", config)
    assert "42" in transform("४२", config)


def test_persian_keeps_script_and_joins_words():
    assert transform("سلام دنیا", FA) == "سلام-دنیا"


def test_persian_strips_zero_width_non_joiner_and_tatweel():
    assert transform("\u0645\u06cc\u200c\u062e\u0648\u0627\u0647\u0645", FA) == "\u0645\u06cc\u062e\u0648\u0627\u0647\u0645"
    assert transform("سـلام", FA) == "سلام"


def test_arabic_strips_tatweel_and_invisible_joiners():
    assert transform("مـــرحبا", AR) == "مرحبا"
    assert transform("\u0645\u0631\u200c\u062d\u0628\u0627\u200d", AR) == "\u0645\u0631\u062d\u0628\u0627"


def test_zero_width_joiner_removed_in_english():
    assert transform("a\u200db", EN) == "ab"


def test_transliteration_mode():
    config = SlugConfig(language="fa", transliterate=True)
    assert transform("سلام دنیا", config) == "slam-dnya"
    assert transform("کتاب ۲", config) == "ktab-2"


def test_custom_separator():
    config = SlugConfig(language="en", separator="_")
    assert transform("Hello World", config) == "Hello_World"
    assert transform("a - b", config) == "a_b"


def test_unsupported_language_uses_persian_pattern():
    assert transform("سلام دنیا", SlugConfig(language="xx")) == "سلام-دنیا"


@pytest.mark.parametrize("config", [
    EN,
    FA,
    AR,
    SlugConfig(language="fa", transliterate=True),
    SlugConfig(language="en", separator="_"),
    SlugConfig(language="fa", separator="."),
])
@pytest.mark.parametrize("text", SAMPLES)
def test_transform_is_idempotent_and_well_formed(text, config):
    sep = config.separator
    once = transform(text, config)

    assert transform(once, config) == once
    assert transform(text, config) == once
    assert sep * 2 not in once
    assert not once.startswith(sep)
    assert not once.endswith(sep)


@pytest.mark.parametrize("text", SAMPLES)
def test_english_output_is_ascii(text):
    slug = transform(text, EN)
    assert all(c.isascii() and (c.isalnum() or c == "-") for c in slug)


def test_create_slug_lowercases_and_truncates():
    assert create_slug("Hello World", EN) == "hello-world"
    assert create_slug("Hello World", SlugConfig(language="en", lowercase=False)) == "Hello-World"
    assert create_slug("Hello World", SlugConfig(language="en", max_length=5)) == "hello"


def test_truncate_does_not_leave_trailing_separator():
    assert truncate_slug("hello-world", 6) == "hello"
    assert truncate_slug("hello-world", 5) == "hello"
    assert truncate_slug("hello", 10) == "hello"


def test_unique_slug_sequence():
    taken = {"post", "post-2", "post-3"}
    assert ensure_unique_slug("post", lambda value: value in taken) == "post-4"


def test_unique_slug_returns_candidate_when_free():
    assert ensure_unique_slug("post", lambda value: False) == "post"


def test_unique_slug_probes_in_order():
    probed = []

    def exists(value):
        probed.append(value)
        return len(probed) < 4

    assert ensure_unique_slug("post", exists) == "post-4"
    assert probed == ["post", "post-2", "post-3", "post-4"]


def test_unique_slug_uses_separator():
    taken = {"post", "post_2"}
    assert ensure_unique_slug("post", lambda value: value in taken, separator="_") == "post_3"


def test_unique_slug_respects_max_length():
    taken = {"hello-world"}
    slug = ensure_unique_slug("hello-world", lambda value: value in taken, max_length=11)
    assert slug == "hello-wor-2"

    taken = {"abcdef-gh"}
    slug = ensure_unique_slug("abcdef-gh", lambda value: value in taken, max_length=9)
    assert slug == "abcdef-2"


def test_unique_slug_never_exceeds_max_length():
    taken = {"a"} | {str(n) for n in range(2, 10)}

    assert ensure_unique_slug("a", lambda value: value in taken, max_length=2) == "10"
    with pytest.raises(ValueError):
        ensure_unique_slug("a", lambda value: value in taken, max_length=1)
