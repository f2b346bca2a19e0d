import abc
import random

from games.wordle.engine import RoundEngine
from games.wordle.state import Action, ActionType, State
from games.wordle.vocab import Vocab


class Policy(abc.ABC):
    @abc.abstractmethod
    def choose_guess(self, state: State) -> str:
        ...


class RandomGuessPolicy(Policy):
    """Guesses uniformly random vocabulary words. Used to drive simulated rounds."""

    def __init__(self, vocab: Vocab, seed: int | None = None) -> None:
        self.vocab = vocab
        self.rng = random.Random(seed)

    def choose_guess(self, state: State) -> str:
        return self.rng.choice(self.vocab.words)


class KeyboardInputPolicy(Policy):
    def choose_guess(self, state: State) -> str:
        return input("Guess: ").strip()


def enter_guess(engine: RoundEngine, guess: str) -> State:
    """Types a whole guess into the active row and submits it.

    A guess longer than the row is skipped without typing anything. A rejected guess is erased so the
    next one starts on an empty row.
    """
    state = engine.state
    if len(guess) > engine.config.word_length:
        return state

    for letter in guess:
        state = engine.step(Action(type=ActionType.APPEND, letter=letter))
    state = engine.step(Action(type=ActionType.SUBMIT))
    while state.input:
        state = engine.step(Action(type=ActionType.REMOVE))
    return state


def play_round(engine: RoundEngine, policy: Policy) -> State:
    """Types guesses from the policy into the engine until the round is over."""
    state = engine.state
    while not state.terminal:
        state = enter_guess(engine, policy.choose_guess(state))
    return state
