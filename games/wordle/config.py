from pydantic import BaseModel, Field, ValidationError, field_validator

from games.wordle.consts import ALPHABET, MAX_GUESSES, WORD_LENGTH


class ConfigurationError(ValueError):
    """Raised when a round cannot be set up: bad vocabulary, secret or options."""


class RoundConfig(BaseModel, frozen=True):
    word_length: int = Field(default=WORD_LENGTH, gt=0)
    max_attempts: int = Field(default=MAX_GUESSES, gt=0)
    alphabet: str = ALPHABET

    @field_validator("alphabet")
    @classmethod
    def check_alphabet(cls, alphabet: str) -> str:
        alphabet = alphabet.lower()
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError(f"alphabet has duplicate letters: {alphabet}")
        return alphabet


def make_config(**kwargs: object) -> RoundConfig:
    try:
        return RoundConfig(**kwargs)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


def load_config(path: str) -> RoundConfig:
    with open(path, "r") as f:
        try:
            return RoundConfig.model_validate_json(f.read())
        except ValidationError as e:
            raise ConfigurationError(f"Invalid round config {path}: {e}") from e
