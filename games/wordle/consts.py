import enum


class Verdict(enum.IntEnum):
    UNKNOWN = 0
    NO_MATCH = 1
    LETTER_MATCH = 2
    EXACT_MATCH = 3


UNKNOWN = Verdict.UNKNOWN
NO_MATCH = Verdict.NO_MATCH
LETTER_MATCH = Verdict.LETTER_MATCH
EXACT_MATCH = Verdict.EXACT_MATCH

WORD_LENGTH = 5
MAX_GUESSES = 5
ALPHABET = "abcdefghijklmnopqrstuvwxyz"
KEYBOARD_LAYOUT = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

# Seconds between the end of a round and the end screen.
END_SCREEN_DELAY = 2.0
