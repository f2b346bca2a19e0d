import collections
import contextlib
from dataclasses import dataclass, field
from typing import Generator

import numpy as np

from games.wordle.consts import EXACT_MATCH, LETTER_MATCH, NO_MATCH, Verdict
from games.wordle.engine import RoundListener
from games.wordle.state import State


@dataclass
class Tracker:
    scopes: list[str] = field(default_factory=list)
    metrics: dict[str, list[float]] = field(default_factory=lambda: collections.defaultdict(list))

    @contextlib.contextmanager
    def scope(self, name: str) -> Generator[None, None, None]:
        self.scopes.append(name)
        try:
            yield
        finally:
            self.scopes.pop()

    def log_value(self, metric_name: str, value: float | np.float64) -> None:
        metric_key = "/".join(self.scopes + [metric_name])
        self.metrics[metric_key].append(float(value))

    def report(self) -> dict[str, float]:
        metrics = {}
        for metric_name, values in sorted(self.metrics.items()):
            metrics[f"{metric_name}_mean"] = np.mean(values).item()
            metrics[f"{metric_name}_sum"] = np.sum(values).item()
        return metrics


class TrackingListener(RoundListener):
    def __init__(self, tracker: Tracker) -> None:
        self.tracker = tracker

    def on_invalid_submission(self, guess: str) -> None:
        self.tracker.log_value("invalid_submissions", 1)

    def on_guess_evaluated(self, attempt: int, guess: str, hint: list[Verdict]) -> None:
        counts = collections.Counter(hint)
        with self.tracker.scope(f"turn_{attempt + 1}"):
            self.tracker.log_value("exact_matches", counts[EXACT_MATCH])
            self.tracker.log_value("letter_matches", counts[LETTER_MATCH])
            self.tracker.log_value("no_matches", counts[NO_MATCH])


def compute_metrics(end_states: list[State], tracker: Tracker) -> None:
    for state in end_states:
        assert state.terminal, "Metrics are computed over finished rounds"
        tracker.log_value("wins", state.win)
        tracker.log_value("guesses", len(state.guesses))
        if state.win:
            tracker.log_value("guesses_to_win", len(state.guesses))
