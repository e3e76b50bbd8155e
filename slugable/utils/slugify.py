import re
import logging
from typing import Callable, Optional
from slugable.config import SlugConfig

logger = logging.getLogger(__name__)

ZERO_WIDTH_NON_JOINER = "\u200c"
ZERO_WIDTH_JOINER = "\u200d"
TATWEEL = "\u0640"

# Persian, Arabic-Indic and Devanagari digits
NUMERAL_MAP = {}
for _zero in (0x06F0, 0x0660, 0x0966):
    for _offset in range(10):
        NUMERAL_MAP[_zero + _offset] = str(_offset)

LANGUAGE_CLEANUP = {
    "fa": ZERO_WIDTH_NON_JOINER + TATWEEL,
    "ar": TATWEEL,
    "en": "",
}

# Arabic block, Presentation Forms-A and Presentation Forms-B (without the BOM at U+FEFF)
ARABIC_SCRIPT_RANGES = "\u0600-\u06ff\ufb50-\ufdff\ufe70-\ufefc"

CHARACTER_CLASS_PATTERNS = {
    "fa": ARABIC_SCRIPT_RANGES,
    "ar": ARABIC_SCRIPT_RANGES,
    "en": "",
}

TRANSLITERATION_MAP = {
    "ا": "a", "أ": "a", "آ": "a", "إ": "e", "ب": "b", "پ": "p", "ت": "t", "ث": "th", "ج": "j", "چ": "ch",
    "ح": "h", "خ": "kh", "د": "d", "ذ": "dh", "ر": "r", "ز": "z", "ژ": "zh", "س": "s", "ش": "sh",
    "ص": "s", "ض": "z", "ط": "t", "ظ": "z", "ع": "a", "غ": "gh", "ف": "f", "ق": "gh", "ک": "k", "ك": "k",
    "گ": "g", "ل": "l", "م": "m", "ن": "n", "و": "v", "ه": "h", "ی": "y", "ي": "y", "ئ": "y", "ة": "h",
}
_TRANSLITERATION_TABLE = str.maketrans(TRANSLITERATION_MAP)

_WHITESPACE_RE = re.compile(r"[\s_]+")


def fold_numerals(text: str) -> str:
    return text.translate(NUMERAL_MAP)


def transliterate(text: str) -> str:
    return text.translate(_TRANSLITERATION_TABLE)


def _strip_chars(text: str, chars: str) -> str:
    if not chars:
        return text
    return re.sub(f"[{re.escape(chars)}]", "", text)


def trim_separators(slug: str, separator: str) -> str:
    slug = re.sub(f"{re.escape(separator)}{{2,}}", separator, slug)
    return slug.strip(separator)


def transform(value: str, config: Optional[SlugConfig] = None) -> str:
    """
    Turn arbitrary text into a slug body.

    Digits from other scripts become ASCII, script rendering artifacts and
    invisible joiners are dropped, whitespace and underscore runs become the
    separator, and anything outside the language's allow-list is removed.
    Case and length are left to the caller.
    """
    config = config or SlugConfig()
    separator = config.separator

    text = fold_numerals(value or "")
    text = _strip_chars(text, LANGUAGE_CLEANUP.get(config.language, LANGUAGE_CLEANUP["fa"]))
    if config.transliterate:
        text = transliterate(text)
    text = _strip_chars(text, ZERO_WIDTH_NON_JOINER + ZERO_WIDTH_JOINER)
    text = _WHITESPACE_RE.sub(separator, text)

    allowed = CHARACTER_CLASS_PATTERNS.get(config.language, CHARACTER_CLASS_PATTERNS["fa"])
    text = re.sub(f"[^A-Za-z0-9{re.escape(separator)}{allowed}]", "", text)

    return trim_separators(text, separator)


def truncate_slug(slug: str, max_length: int, separator: str = "-") -> str:
    if len(slug) <= max_length:
        return slug
    return slug[:max_length].strip(separator)


def create_slug(text: str, config: Optional[SlugConfig] = None) -> str:
    config = config or SlugConfig()
    slug = transform(text, config)
    if config.lowercase:
        slug = slug.lower()
    return truncate_slug(slug, config.max_length, config.separator)


def ensure_unique_slug(
    base_slug: str,
    exists: Callable[[str], bool],
    field: str = "slug",
    separator: str = "-",
    max_length: Optional[int] = None,
) -> str:
    """
    Return ``base_slug`` or the first free ``base_slug<separator>N`` for N = 2, 3, ...

    When ``max_length`` is given the base is shortened so the suffixed slug
    still fits. Raises ValueError once even the bare counter no longer fits,
    since every shorter candidate is taken by then.
    """
    if not exists(base_slug):
        return base_slug

    counter = 2
    while True:
        suffix = f"{separator}{counter}"
        base = base_slug
        if max_length is not None and len(base) + len(suffix) > max_length:
            base = base[:max(max_length - len(suffix), 0)].strip(separator)
        slug = f"{base}{suffix}" if base else str(counter)
        if max_length is not None and len(slug) > max_length:
            raise ValueError(f"No free slug for {base_slug!r} within {max_length} characters")

        if not exists(slug):
            return slug

        logger.debug(f"Slug {slug!r} already taken for field {field!r}")
        counter += 1
