"""Tables of spelling tricks tried on Latin words that are not found as written."""

from dataclasses import dataclass
from enum import Enum


class Operation(Enum):
    """How a trick rewrites a word."""

    FLIP_FLOP = "flip_flop"
    FLIP = "flip"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Trick:
    """One rewrite: apply ``operation`` replacing ``str_1`` with ``str_2``."""

    operation: Operation
    str_1: str
    str_2: str


def _flip_flop(a, b):
    return Trick(Operation.FLIP_FLOP, a, b)


def _flip(a, b):
    return Trick(Operation.FLIP, a, b)


def _internal(a, b):
    return Trick(Operation.INTERNAL, a, b)


_LEAD_TRICKS = {
    "a": (
        _flip_flop("adgn", "agn"),
        _flip_flop("adsc", "asc"),
        _flip_flop("adsp", "asp"),
        _flip_flop("arqui", "arci"),
        _flip_flop("arqu", "arcu"),
        _flip("ae", "e"),
        _flip("al", "hal"),
        _flip("am", "ham"),
        _flip("ar", "har"),
        _flip("aur", "or"),
    ),
    "d": (
        _flip("dampn", "damn"),
        _flip_flop("dis", "disj"),
        _flip_flop("dir", "disr"),
        _flip_flop("dir", "der"),
        _flip_flop("del", "dil"),
    ),
    "e": (
        _flip_flop("ecf", "eff"),
        _flip_flop("ecs", "exs"),
        _flip_flop("es", "ess"),
        _flip_flop("ex", "exs"),
        _flip("eid", "id"),
        _flip("el", "hel"),
        _flip("e", "ae"),
    ),
    "f": (
        _flip_flop("faen", "fen"),
        _flip_flop("faen", "foen"),
        _flip_flop("fed", "foed"),
        _flip_flop("fe", "foet"),
        _flip("f", "ph"),
    ),
    "g": (_flip("gna", "na"),),
    "h": (
        _flip("har", "ar"),
        _flip("hal", "al"),
        _flip("ham", "am"),
        _flip("hel", "el"),
        _flip("hol", "ol"),
        _flip("hum", "um"),
    ),
    "i": (_flip("i", "j"),),
    "j": (_flip("j", "i"),),
    "k": (_flip("k", "c"), _flip("c", "k")),
    "l": (_flip_flop("lub", "lib"),),
    "m": (_flip_flop("mani", "manu"),),
    "n": (_flip("na", "gna"), _flip_flop("nihil", "nil")),
    "o": (
        _flip_flop("obt", "opt"),
        _flip_flop("obs", "ops"),
        _flip("ol", "hol"),
        _flip("opp", "op"),
        _flip("or", "aur"),
    ),
    "p": (_flip("ph", "f"), _flip_flop("pre", "prae")),
    "s": (
        _flip_flop("subsc", "susc"),
        _flip_flop("subsp", "susp"),
        _flip_flop("subc", "susc"),
        _flip_flop("succ", "susc"),
        _flip_flop("subt", "supt"),
        _flip_flop("subt", "sust"),
    ),
    "t": (_flip_flop("transv", "trav"),),
    "u": (_flip("ul", "hul"), _flip("uol", "vul")),
    "y": (_flip("y", "i"),),
    "z": (_flip("z", "di"),),
}

_SLUR_TRICKS = {
    "a": (
        _flip_flop("abs", "aps"),
        _flip_flop("acq", "adq"),
        _flip_flop("ante", "anti"),
        _flip_flop("auri", "aure"),
        _flip_flop("auri", "auru"),
    ),
    "c": (
        _flip("circum", "circun"),
        _flip_flop("con", "com"),
        _flip("co", "com"),
        _flip("co", "con"),
        _flip_flop("conl", "coll"),
    ),
    "i": (_flip_flop("inb", "imb"), _flip_flop("inp", "imp")),
    "n": (_flip("non", "nun"),),
    "q": (_flip_flop("quadri", "quadru"),),
    "s": (_flip("se", "ce"),),
}

_ANY_TRICKS = (
    _internal("ae", "e"),
    _internal("bul", "bol"),
    _internal("bol", "bul"),
    _internal("cl", "cul"),
    _internal("cu", "quu"),
    _internal("f", "ph"),
    _internal("ph", "f"),
    _internal("h", ""),
    _internal("oe", "e"),
    _internal("vul", "vol"),
    _internal("uol", "vul"),
)

_MEDIEVAL_TRICKS = (
    _internal("col", "caul"),
    _internal("e", "ae"),
    _internal("o", "u"),
    _internal("i", "y"),
    _internal("ism", "sm"),
    _internal("isp", "sp"),
    _internal("ist", "st"),
    _internal("iz", "z"),
    _internal("esm", "sm"),
    _internal("esp", "sp"),
    _internal("est", "st"),
    _internal("ez", "z"),
    _internal("di", "z"),
    _internal("f", "ph"),
    _internal("is", "ix"),
    _internal("b", "p"),
    _internal("d", "t"),
    _internal("v", "b"),
    _internal("v", "f"),
    _internal("s", "x"),
    _internal("ci", "ti"),
    _internal("nt", "nct"),
    _internal("s", "ns"),
    _internal("ch", "c"),
    _internal("c", "ch"),
    _internal("th", "t"),
    _internal("t", "th"),
)

LEAD_TRICK_CHARS = frozenset(_LEAD_TRICKS)
SLUR_TRICK_CHARS = frozenset("acinoqs")


def match_tricks_list(first_char_of_word):
    """Return the tricks for words starting with the given letter."""
    try:
        return list(_LEAD_TRICKS[first_char_of_word])
    except KeyError:
        raise ValueError(f"Invalid first char of word: {first_char_of_word}") from None


def match_slur_trick_list(first_char_of_word):
    """Return the slur tricks for words starting with the given letter."""
    try:
        return list(_SLUR_TRICKS[first_char_of_word])
    except KeyError:
        raise ValueError(f"Invalid first char of word: {first_char_of_word}") from None


def get_any_tricks():
    """Return the tricks that may apply anywhere in a word."""
    return list(_ANY_TRICKS)


def get_medieval_tricks():
    """Return the tricks for medieval spellings."""
    return list(_MEDIEVAL_TRICKS)