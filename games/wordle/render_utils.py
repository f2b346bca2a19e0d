from games.wordle.consts import EXACT_MATCH, KEYBOARD_LAYOUT, LETTER_MATCH, NO_MATCH, Verdict
from games.wordle.state import RoundOutcome

RESET = "\033[0m"
VERDICT_COLORS = {
    EXACT_MATCH: "\033[42m",
    LETTER_MATCH: "\033[43m",
    NO_MATCH: "\033[41m",
}


def colorize(text: str, verdict: Verdict) -> str:
    color = VERDICT_COLORS.get(verdict)
    if color is None:
        return text
    return f"{color}{text}{RESET}"


def render_row(guess: str, hint: list[Verdict]) -> str:
    return " ".join(colorize(f" {letter.upper()} ", verdict) for letter, verdict in zip(guess, hint))


def render_input(letters: list[str] | str, word_length: int) -> str:
    cells = [letter.upper() for letter in letters] + ["_"] * (word_length - len(letters))
    return " ".join(f" {cell} " for cell in cells)


def keyboard_layout(alphabet: str, row_length: int = 10) -> tuple[str, ...]:
    """QWERTY rows for alphabets it covers, otherwise the alphabet in rows of `row_length` keys."""
    if all(letter in "".join(KEYBOARD_LAYOUT) for letter in alphabet):
        rows = ("".join(letter for letter in row if letter in alphabet) for row in KEYBOARD_LAYOUT)
        return tuple(row for row in rows if row)
    return tuple(alphabet[i:i + row_length] for i in range(0, len(alphabet), row_length))


def render_keyboard(key_verdicts: dict[str, Verdict], layout: tuple[str, ...] = KEYBOARD_LAYOUT) -> str:
    lines = []
    for indent, row in enumerate(layout):
        keys = [colorize(letter.upper(), key_verdicts.get(letter, Verdict.UNKNOWN)) for letter in row]
        lines.append(" " * indent + " ".join(keys))
    return "\n".join(lines)


def render_end_screen(outcome: RoundOutcome) -> str:
    title = "You won!" if outcome.won else "You lost!"
    return f"{title}\nThe word was:\n{outcome.secret.upper()}"
