"""
Gurmukhi text helpers.

Converts phonetic ASCII keystrokes (the Gurbani Akhar keyboard layout)
into Unicode Gurmukhi, and reduces lines to the forms used for matching:
without vishraams, without accents, and as first letters.
"""

import re
import unicodedata

# Sequences that must be replaced before the single character table
ASCII_SEQUENCES: dict[str, str] = {
    "<>": "\u0a74",  # ੴ
}

ASCII_TO_UNICODE: dict[str, str] = {
    # Vowel carriers
    "a": "ੳ",
    "A": "ਅ",
    "e": "ੲ",
    "E": "ਓ",
    # Consonants
    "s": "ਸ",
    "h": "ਹ",
    "k": "ਕ",
    "K": "ਖ",
    "g": "ਗ",
    "G": "ਘ",
    "|": "ਙ",
    "c": "ਚ",
    "C": "ਛ",
    "j": "ਜ",
    "J": "ਝ",
    "\\": "ਞ",
    "t": "ਟ",
    "T": "ਠ",
    "f": "ਡ",
    "F": "ਢ",
    "x": "ਣ",
    "q": "ਤ",
    "Q": "ਥ",
    "d": "ਦ",
    "D": "ਧ",
    "n": "ਨ",
    "p": "ਪ",
    "P": "ਫ",
    "b": "ਬ",
    "B": "ਭ",
    "m": "ਮ",
    "X": "ਯ",
    "r": "ਰ",
    "l": "ਲ",
    "v": "ਵ",
    "V": "ੜ",
    # Consonants with a nukta
    "S": "\u0a36",  # ਸ਼
    "^": "\u0a59",  # ਖ਼
    "Z": "\u0a5a",  # ਗ਼
    "z": "\u0a5b",  # ਜ਼
    "&": "\u0a5e",  # ਫ਼
    "L": "\u0a33",  # ਲ਼
    # Vowel signs
    "w": "ਾ",
    "W": "ਾਂ",
    "i": "ਿ",
    "I": "ੀ",
    "u": "ੁ",
    "ü": "ੁ",
    "U": "ੂ",
    "¨": "ੂ",
    "y": "ੇ",
    "Y": "ੈ",
    "o": "ੋ",
    "O": "ੌ",
    # Nasalisation and gemination
    "M": "ੰ",
    "µ": "ੰ",
    "N": "ਂ",
    "ˆ": "ਂ",
    "`": "ੱ",
    "~": "ੱ",
    # Subjoined letters
    "H": "੍ਹ",
    "@": "੍ਹ",
    "R": "੍ਰ",
    "®": "੍ਰ",
    "Í": "੍ਵ",
    "ç": "੍ਚ",
    "†": "੍ਟ",
    "œ": "੍ਤ",
    "˜": "੍ਨ",
    "´": "ੵ",
    "Ú": "ਃ",
    # Dandas
    "[": "।",
    "]": "॥",
    # Digits
    "0": "੦",
    "1": "੧",
    "2": "੨",
    "3": "੩",
    "4": "੪",
    "5": "੫",
    "6": "੬",
    "7": "੭",
    "8": "੮",
    "9": "੯",
}

# Vowel carrier + vowel sign pairs that are written as one independent vowel
VOWEL_COMPOSITIONS: dict[str, str] = {
    "ੳੁ": "ਉ",
    "ੳੂ": "ਊ",
    "ੳੋ": "ਓ",
    "ਅਾ": "ਆ",
    "ਅੈ": "ਐ",
    "ਅੌ": "ਔ",
    "ੲਿ": "ਇ",
    "ੲੀ": "ਈ",
    "ੲੇ": "ਏ",
}

# Independent vowels reduced to the carrier they are written on
VOWEL_CARRIERS: dict[str, str] = {
    "ਆ": "ਅ",
    "ਐ": "ਅ",
    "ਔ": "ਅ",
    "ਇ": "ੲ",
    "ਈ": "ੲ",
    "ਏ": "ੲ",
    "ਉ": "ੳ",
    "ਊ": "ੳ",
    "ਓ": "ੳ",
}

VISHRAAMS: dict[str, str] = {
    "heavy": ";",
    "medium": ",",
    "light": ".",
}

_ASCII_CONSONANTS = "eshkKgG|cCjJ\\tTfFxqQdDnpPbBmXrlvVS^ZzL"
_ASCII_SUBJOINED = "H@R\u00ae\u00cd\u00e7\u2020\u0153\u02dc"
_SUBJOINED = "\u0a4d[\u0a15-\u0a39]"

# Sihari is typed before the consonant (and its subjoined letters) it follows
_SIHARI_PATTERN = re.compile(
    f"i([{re.escape(_ASCII_CONSONANTS)}][{re.escape(_ASCII_SUBJOINED)}]*)"
)
_VISHRAAM_PATTERN = re.compile(
    "[" + re.escape("".join(VISHRAAMS.values())) + "]"
)
# Nukta, vowel signs, bindi, tippi, addak, yakash and subjoined letters
_ACCENT_PATTERN = re.compile(
    f"{_SUBJOINED}|[\u0a01\u0a02\u0a3c\u0a3e-\u0a4c\u0a51\u0a70\u0a71\u0a75]"
)


def to_unicode(text: str) -> str:
    """
    Convert phonetic ASCII into Unicode Gurmukhi.

    Characters without a mapping (spaces, vishraams, text that is already
    Unicode Gurmukhi) are left as they are.

    Args:
        text: ASCII keystrokes

    Returns:
        NFC normalised Unicode Gurmukhi
    """
    for sequence, replacement in ASCII_SEQUENCES.items():
        text = text.replace(sequence, replacement)

    text = _SIHARI_PATTERN.sub(r"\1i", text)
    text = "".join(ASCII_TO_UNICODE.get(char, char) for char in text)

    for sequence, replacement in VOWEL_COMPOSITIONS.items():
        text = text.replace(sequence, replacement)

    return unicodedata.normalize("NFC", text)


def strip_vishraams(text: str) -> str:
    """Remove the heavy, medium and light pause marks from a line."""
    return _VISHRAAM_PATTERN.sub("", text)


def strip_accents(text: str) -> str:
    """
    Reduce Gurmukhi to its base letters.

    Independent vowels become their carrier letter and every vowel sign,
    nasalisation mark, nukta and subjoined letter is removed.
    """
    text = unicodedata.normalize("NFC", text)
    text = "".join(VOWEL_CARRIERS.get(char, char) for char in text)
    return _ACCENT_PATTERN.sub("", text)


def first_letters(text: str) -> str:
    """The base letter each word of the line starts with, one per word."""
    return "".join(strip_accents(word)[:1] or word[:1] for word in text.split())
