import random

from games.wordle.config import ConfigurationError, RoundConfig


def load_words(path: str) -> list[str]:
    words = []
    with open(path, "r") as f:
        for line in f:
            word = line.strip().lower()
            if word:
                words.append(word)
    return words


class Vocab:
    """The set of words a player may guess, all of the configured length."""

    def __init__(self, words: list[str], config: RoundConfig | None = None) -> None:
        self.config = config or RoundConfig()
        if not words:
            raise ConfigurationError("Vocabulary is empty, cannot pick a secret word")

        self.words = [word.strip().lower() for word in words]
        for word in self.words:
            if len(word) != self.config.word_length:
                raise ConfigurationError(
                    f"Word {word!r} has length {len(word)}, expected {self.config.word_length}"
                )
            if any(letter not in self.config.alphabet for letter in word):
                raise ConfigurationError(f"Word {word!r} has letters outside of the alphabet")

        self.word_set = frozenset(self.words)

    @classmethod
    def from_path(cls, path: str, config: RoundConfig | None = None) -> "Vocab":
        return cls(load_words(path), config=config)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self.word_set

    def __len__(self) -> int:
        return len(self.words)

    def pick_secret(self, seed: int | None = None) -> str:
        return random.Random(seed).choice(self.words)
