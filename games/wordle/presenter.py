import threading
from typing import Callable

from games.wordle.consts import END_SCREEN_DELAY, Verdict
from games.wordle.engine import RoundEngine, RoundListener
from games.wordle.render_utils import keyboard_layout, render_end_screen, render_keyboard, render_row
from games.wordle.state import RoundOutcome


class EndScreenTimer:
    """Shows the end screen a fixed time after the round ended. Once started it cannot be
    cancelled, and the engine never waits for it."""

    def __init__(self, delay: float, callback: Callable[[RoundOutcome], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.timer: threading.Timer | None = None

    def schedule(self, outcome: RoundOutcome) -> None:
        assert self.timer is None, "End screen already scheduled"
        self.timer = threading.Timer(self.delay, self.callback, args=(outcome,))
        self.timer.daemon = True
        self.timer.start()

    def join(self) -> None:
        if self.timer is not None:
            self.timer.join()


class TerminalPresenter(RoundListener):
    def __init__(self, engine: RoundEngine, end_delay: float = END_SCREEN_DELAY) -> None:
        self.engine = engine
        self.end_screen = EndScreenTimer(end_delay, self.show_end_screen)
        engine.add_listener(self)

    def close(self) -> None:
        self.engine.remove_listener(self)

    def on_invalid_submission(self, guess: str) -> None:
        print(f"Not in word list: {guess.upper() or '(empty)'}")

    def on_guess_evaluated(self, attempt: int, guess: str, hint: list[Verdict]) -> None:
        print(f"{attempt + 1}/{self.engine.config.max_attempts} {render_row(guess, hint)}")
        print(render_keyboard(self.engine.key_verdicts, keyboard_layout(self.engine.config.alphabet)))

    def on_round_end(self, outcome: RoundOutcome) -> None:
        if outcome.won:
            print("Win")
        else:
            print(f"Lose. Word was: {outcome.secret.upper()}")
        self.end_screen.schedule(outcome)

    def show_end_screen(self, outcome: RoundOutcome) -> None:
        print(render_end_screen(outcome))

    def wait(self) -> None:
        self.end_screen.join()
