"""Word clean-up, ordinal suffixes and Roman numeral helpers."""

COMMON_PREFIXES = frozenset(
    {"dis", "ex", "in", "per", "prae", "pro", "re", "si", "sub", "super", "trans"}
)

_ROMAN_DIGITS = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_NUMBER_TO_ROMAN = {value: digit for digit, value in _ROMAN_DIGITS.items()}

# (unit, five, ten) for each place, from thousands down to ones
_PLACES = (("M", "", ""), ("C", "D", "M"), ("X", "L", "C"), ("I", "V", "X"))


class InvalidRomanNumeralError(ValueError):
    """Raised for a character that is not a Roman numeral digit."""

    def __init__(self, value):
        super().__init__(f"Invalid roman numeral: {value}")
        self.value = value


class InvalidNumberError(ValueError):
    """Raised for a number that has no single Roman numeral digit."""

    def __init__(self, value):
        super().__init__(f"Invalid number: {value}")
        self.value = value


def _truncated_mod(number, divisor):
    """Remainder whose sign follows the dividend."""
    remainder = abs(number) % divisor
    return -remainder if number < 0 else remainder


def number_with_ending(number):
    """Return the number with its English ordinal suffix, e.g. 1 -> '1st'."""
    last_digit = _truncated_mod(number, 10)
    last_two_digits = _truncated_mod(number, 100)
    if 11 <= last_two_digits <= 13:
        return f"{number}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(last_digit, "th")
    return f"{number}{suffix}"


def sanitize_word(word):
    """Trim, lower-case and strip a word down to its alphanumeric characters.

    Digits are kept only when the word consists solely of digits, so that
    numbers can still be turned into Roman numerals.
    """
    word = word.strip().lower()
    if contains_number(word) and not is_all_numbers(word):
        word = remove_all_numbers(word)
    if contains_non_alphanumeric(word):
        word = remove_non_alphanumeric(word)
    return word


def is_all_numbers(word):
    return all(c.isnumeric() for c in word)


def contains_number(word):
    return any(c.isnumeric() for c in word)


def remove_all_numbers(word):
    return "".join(c for c in word if not c.isnumeric())


def contains_non_alphanumeric(word):
    return any(not c.isalnum() for c in word)


def remove_non_alphanumeric(word):
    return "".join(c for c in word if c.isalnum())


def is_vowel(c):
    return c in ("a", "e", "i", "o", "u")


def is_roman_digit(c):
    return c.upper() in _ROMAN_DIGITS if c.isascii() else False


def is_roman_number(possible_roman_number):
    return all(is_roman_digit(c) for c in possible_roman_number)


def is_common_prefix(prefix):
    return prefix in COMMON_PREFIXES


def translate_roman_digit_to_number(c):
    """Return the value of a single Roman numeral digit."""
    if c.isascii() and c.upper() in _ROMAN_DIGITS:
        return _ROMAN_DIGITS[c.upper()]
    raise InvalidRomanNumeralError(c)


def translate_number_to_roman_numeral(number):
    """Return the single Roman digit for 1, 5, 10, 50, 100, 500 or 1000."""
    try:
        return _NUMBER_TO_ROMAN[number]
    except KeyError:
        raise InvalidNumberError(str(number)) from None


def evaluate_roman_numeral(roman_numeral):
    """Return the integer value of a Roman numeral string."""
    result = 0
    last_digit = 0
    for c in reversed(roman_numeral):
        digit = translate_roman_digit_to_number(c)
        if digit < last_digit:
            result -= digit
        else:
            result += digit
        last_digit = digit
    return result


def convert_number_to_roman_numeral(number):
    """Convert a string of decimal digits to a Roman numeral."""
    full_numeral = _full_numeral_from_number(number)
    return _simplify_full_numeral(full_numeral)


def _split_number_by_places(number):
    if not all(c in "0123456789" for c in number):
        raise ValueError(f"Not a decimal number: {number!r}")
    width = len(number)
    return [int(digit) * 10 ** (width - index - 1) for index, digit in enumerate(number)]


def _full_numeral_from_number(number):
    pieces = []
    for value in _split_number_by_places(number):
        text = str(value)
        repetitions = int(text[0])
        if repetitions == 0:
            continue
        basic_number = 10 ** len(text) // 10
        pieces.append(translate_number_to_roman_numeral(basic_number) * repetitions)
    return "".join(pieces)


def _simplify_full_numeral(numeral):
    pieces = []
    for unit, five, ten in _PLACES:
        count = numeral.count(unit)
        if 1 <= count <= 3:
            pieces.append(unit * count)
        elif count == 4:
            pieces.append(unit + five)
        elif count == 5:
            pieces.append(five)
        elif 6 <= count <= 8:
            pieces.append(five + unit * (count - 5))
        elif count == 9:
            pieces.append(unit + ten)
    return "".join(pieces)