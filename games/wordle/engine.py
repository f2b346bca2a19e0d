import copy

from games.wordle.config import ConfigurationError, RoundConfig
from games.wordle.consts import EXACT_MATCH, LETTER_MATCH, NO_MATCH, UNKNOWN, Verdict
from games.wordle.state import Action, ActionType, Outcome, RoundOutcome, State
from games.wordle.vocab import Vocab


def compute_hint(secret: str, guess: str) -> list[Verdict]:
    """Scores a guess letter by letter.

    A letter that is not in the right spot is a letter match whenever the secret contains it
    anywhere, so repeated letters in the guess are not capped by how often they occur in the
    secret ("eerie" against "apple" marks both leading e's).
    """
    assert len(secret) == len(guess)
    secret, guess = secret.lower(), guess.lower()
    hint = []
    for secret_letter, guessed_letter in zip(secret, guess):
        if secret_letter == guessed_letter:
            hint.append(EXACT_MATCH)
        elif guessed_letter in secret:
            hint.append(LETTER_MATCH)
        else:
            hint.append(NO_MATCH)
    return hint


def merge_key_verdicts(key_verdicts: dict[str, Verdict], guess: str, hint: list[Verdict]) -> None:
    # Keys only ever move up in priority.
    for letter, verdict in zip(guess, hint):
        key_verdicts[letter] = max(key_verdicts.get(letter, UNKNOWN), verdict)


class RoundListener:
    def on_invalid_submission(self, guess: str) -> None:
        pass

    def on_guess_evaluated(self, attempt: int, guess: str, hint: list[Verdict]) -> None:
        pass

    def on_round_end(self, outcome: RoundOutcome) -> None:
        pass


class RoundEngine:
    """A single round: typing letters into the active row, submitting guesses and deciding the
    outcome.

    Player mistakes (incomplete or unknown words, typing into a full row, anything after the
    round is over) never raise; the only feedback is `RoundListener.on_invalid_submission`.
    Setup mistakes raise `ConfigurationError` from the constructor.
    """

    config: RoundConfig
    vocab: Vocab
    secret: str

    def __init__(
        self,
        vocab: Vocab,
        config: RoundConfig | None = None,
        secret: str | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config or vocab.config
        self.vocab = vocab
        if vocab.config.word_length != self.config.word_length:
            raise ConfigurationError(
                f"Vocabulary words have length {vocab.config.word_length}, "
                f"round expects {self.config.word_length}"
            )

        secret = vocab.pick_secret(seed) if secret is None else secret.strip().lower()
        if len(secret) != self.config.word_length:
            raise ConfigurationError(f"Secret {secret!r} must have {self.config.word_length} letters")
        if any(letter not in self.config.alphabet for letter in secret):
            raise ConfigurationError(f"Secret {secret!r} has letters outside of the alphabet")
        if secret not in vocab:
            raise ConfigurationError(f"Secret {secret!r} is not in the vocabulary, the round could never be won")

        self.secret = secret
        self.listeners: list[RoundListener] = []
        self._state = State(key_verdicts={letter: UNKNOWN for letter in self.config.alphabet})

    def add_listener(self, listener: RoundListener) -> None:
        if listener not in self.listeners:
            self.listeners.append(listener)

    def remove_listener(self, listener: RoundListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)

    @property
    def state(self) -> State:
        return copy.deepcopy(self._state)

    @property
    def current_input(self) -> str:
        return "".join(self._state.input)

    @property
    def attempt(self) -> int:
        return self._state.attempt

    @property
    def key_verdicts(self) -> dict[str, Verdict]:
        return dict(self._state.key_verdicts)

    @property
    def terminal(self) -> bool:
        return self._state.terminal

    @property
    def outcome(self) -> RoundOutcome | None:
        return self._state.outcome

    def append_letter(self, letter: str) -> None:
        letter = letter.lower()
        if self.terminal or len(self._state.input) >= self.config.word_length:
            return
        if len(letter) != 1 or letter not in self.config.alphabet:
            return
        self._state.input.append(letter)

    def remove_last_letter(self) -> None:
        if self.terminal or not self._state.input:
            return
        self._state.input.pop()

    def submit_guess(self) -> None:
        if self.terminal:
            return

        guess = self.current_input
        if len(guess) < self.config.word_length or guess not in self.vocab:
            for listener in list(self.listeners):
                listener.on_invalid_submission(guess)
            return

        hint = compute_hint(self.secret, guess)
        attempt = self._state.attempt
        merge_key_verdicts(self._state.key_verdicts, guess, hint)
        self._state.guesses.append(guess)
        self._state.hints.append(hint)
        self._state.input.clear()

        # The round is settled before any listener runs.
        if guess == self.secret:
            self._state.outcome = RoundOutcome(outcome=Outcome.WON, secret=self.secret)
        else:
            self._state.attempt += 1
            if self._state.attempt == self.config.max_attempts:
                self._state.outcome = RoundOutcome(outcome=Outcome.LOST, secret=self.secret)

        for listener in list(self.listeners):
            listener.on_guess_evaluated(attempt, guess, hint)
        if self._state.outcome is not None:
            for listener in list(self.listeners):
                listener.on_round_end(self._state.outcome)

    def step(self, action: Action) -> State:
        if action.type == ActionType.APPEND:
            self.append_letter(action.letter)
        elif action.type == ActionType.REMOVE:
            self.remove_last_letter()
        else:
            assert action.type == ActionType.SUBMIT, action
            self.submit_guess()
        return self.state
