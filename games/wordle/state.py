import enum
from dataclasses import dataclass, field

from games.wordle.consts import Verdict


class Outcome(enum.StrEnum):
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class RoundOutcome:
    outcome: Outcome
    secret: str

    @property
    def won(self) -> bool:
        return self.outcome == Outcome.WON


@dataclass
class State:
    input: list[str] = field(default_factory=list)
    attempt: int = 0
    guesses: list[str] = field(default_factory=list)
    hints: list[list[Verdict]] = field(default_factory=list)
    key_verdicts: dict[str, Verdict] = field(default_factory=dict)
    outcome: RoundOutcome | None = None

    @property
    def win(self) -> bool:
        return self.outcome is not None and self.outcome.won

    @property
    def terminal(self) -> bool:
        return self.outcome is not None


class ActionType(enum.StrEnum):
    APPEND = "append"
    REMOVE = "remove"
    SUBMIT = "submit"


@dataclass(frozen=True)
class Action:
    type: ActionType
    letter: str = ""
