"""Character classification for single 8-bit code units.

Every predicate takes an ``int`` and looks only at its low eight bits, so a
sign-extended byte such as ``-1`` classifies the same as ``0xFF``. Results
follow fixed ASCII rules and never depend on the locale.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto


class Category(Enum):
    ALNUM = auto()
    ALPHA = auto()
    BLANK = auto()
    CNTRL = auto()
    DIGIT = auto()
    GRAPH = auto()
    LOWER = auto()
    PRINT = auto()
    PUNCT = auto()
    SPACE = auto()  # \t \n \v \f \r and space
    ASPACE = auto()  # space only
    HTAB = auto()
    VTAB = auto()
    TAB = auto()  # HTAB or VTAB
    NEWLINE = auto()
    RETURN = auto()
    UPPER = auto()
    XDIGIT = auto()
    ASCII = auto()
    BEL = auto()
    BACKSPACE = auto()
    FORMFEED = auto()
    XLOWER = auto()
    XUPPER = auto()


def is_alnum(c: int) -> bool:
    """Return True for ASCII letters and digits."""
    c &= 0xFF
    return 0x61 <= c <= 0x7A or 0x41 <= c <= 0x5A or 0x30 <= c <= 0x39


def is_alpha(c: int) -> bool:
    """Return True for ASCII letters."""
    c &= 0xFF
    return 0x61 <= c <= 0x7A or 0x41 <= c <= 0x5A


def is_cntrl(c: int) -> bool:
    """Return True for C0 controls and DEL."""
    c &= 0xFF
    return c < 0x20 or c == 0x7F


def is_digit(c: int) -> bool:
    return 0x30 <= (c & 0xFF) <= 0x39


def is_graph(c: int) -> bool:
    """Return True for visible characters (printable, excluding space)."""
    return 0x21 <= (c & 0xFF) <= 0x7E


def is_lower(c: int) -> bool:
    return 0x61 <= (c & 0xFF) <= 0x7A


def is_print(c: int) -> bool:
    """Return True for space through underscore.

    Narrower than POSIX ``isprint``: lowercase letters and ``` `{|}~ ``` are
    not included.
    """
    return 0x20 <= (c & 0xFF) <= 0x5F


def is_punct(c: int) -> bool:
    return is_graph(c) and not is_alnum(c)


def is_space(c: int) -> bool:
    """Return True for standard whitespace: tab, LF, VT, FF, CR and space."""
    c &= 0xFF
    return 0x09 <= c <= 0x0D or c == 0x20


def is_aspace(c: int) -> bool:
    """Return True only for the space character itself."""
    return (c & 0xFF) == 0x20


def is_upper(c: int) -> bool:
    return 0x41 <= (c & 0xFF) <= 0x5A


def is_xdigit(c: int) -> bool:
    """Return True for hexadecimal digits in either case."""
    c &= 0xFF
    return is_digit(c) or 0x61 <= c <= 0x66 or 0x41 <= c <= 0x46


def is_ascii(c: int) -> bool:
    return (c & 0xFF & ~0x7F) == 0


def is_blank(c: int) -> bool:
    c &= 0xFF
    return c == 0x20 or c == 0x09


def is_vtab(c: int) -> bool:
    return (c & 0xFF) == 0x0B


def is_htab(c: int) -> bool:
    return (c & 0xFF) == 0x09


def is_tab(c: int) -> bool:
    return is_vtab(c) or is_htab(c)


def is_newline(c: int) -> bool:
    return (c & 0xFF) == 0x0A


def is_return(c: int) -> bool:
    return (c & 0xFF) == 0x0D


def is_bel(c: int) -> bool:
    return (c & 0xFF) == 0x07


def is_backspace(c: int) -> bool:
    return (c & 0xFF) == 0x08


def is_formfeed(c: int) -> bool:
    return (c & 0xFF) == 0x0C


def is_xlower(c: int) -> bool:
    return is_lower(c) or 0x61 <= (c & 0xFF) <= 0x66


def is_xupper(c: int) -> bool:
    return is_upper(c) or 0x41 <= (c & 0xFF) <= 0x46


def to_lower(c: int) -> int:
    """Return the lowercase form of an ASCII uppercase letter, else *c* unchanged."""
    c &= 0xFF
    return c + 0x20 if is_upper(c) else c


def to_upper(c: int) -> int:
    """Return the uppercase form of an ASCII lowercase letter, else *c* unchanged."""
    c &= 0xFF
    return c - 0x20 if is_lower(c) else c


_PREDICATES: dict[Category, Callable[[int], bool]] = {
    Category.ALNUM: is_alnum,
    Category.ALPHA: is_alpha,
    Category.BLANK: is_blank,
    Category.CNTRL: is_cntrl,
    Category.DIGIT: is_digit,
    Category.GRAPH: is_graph,
    Category.LOWER: is_lower,
    Category.PRINT: is_print,
    Category.PUNCT: is_punct,
    Category.SPACE: is_space,
    Category.ASPACE: is_aspace,
    Category.HTAB: is_htab,
    Category.VTAB: is_vtab,
    Category.TAB: is_tab,
    Category.NEWLINE: is_newline,
    Category.RETURN: is_return,
    Category.UPPER: is_upper,
    Category.XDIGIT: is_xdigit,
    Category.ASCII: is_ascii,
    Category.BEL: is_bel,
    Category.BACKSPACE: is_backspace,
    Category.FORMFEED: is_formfeed,
    Category.XLOWER: is_xlower,
    Category.XUPPER: is_xupper,
}


def predicate(category: Category) -> Callable[[int], bool]:
    """Return the membership test for *category*."""
    return _PREDICATES[category]


def classify(category: Category, c: int) -> bool:
    """Return True if code unit *c* belongs to *category*."""
    return _PREDICATES[category](c)
