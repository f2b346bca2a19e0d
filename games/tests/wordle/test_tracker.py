import numpy as np

from games.tests.wordle.scripted_policy import ScriptedPolicy
from games.wordle.engine import RoundEngine
from games.wordle.policy import RandomGuessPolicy, enter_guess, play_round
from games.wordle.tracker import Tracker, TrackingListener, compute_metrics
from games.wordle.vocab import Vocab


def test_tracker_scopes():
    tracker = Tracker()
    tracker.log_value("a", 1)
    with tracker.scope("outer"):
        tracker.log_value("a", 2)
        tracker.log_value("a", 4)
    tracker.log_value("a", 3)

    assert tracker.report() == {
        "a_mean": 2.0,
        "a_sum": 4.0,
        "outer/a_mean": 3.0,
        "outer/a_sum": 6.0,
    }


def test_play_round_with_scripted_policy():
    vocab = Vocab(["crane", "apple", "eerie"])
    engine = RoundEngine(vocab, secret="apple")
    tracker = Tracker()
    engine.add_listener(TrackingListener(tracker))

    state = play_round(engine, ScriptedPolicy(["cra", "zzzzz", "crane", "eerie", "apple"]))
    assert state.win
    assert state.guesses == ["crane", "eerie", "apple"]
    assert state.attempt == 2

    compute_metrics([state], tracker)
    metrics = tracker.report()
    assert metrics["invalid_submissions_sum"] == 2
    assert metrics["turn_1/exact_matches_sum"] == 1
    assert metrics["turn_1/letter_matches_sum"] == 1
    assert metrics["turn_2/letter_matches_sum"] == 2
    assert metrics["turn_3/exact_matches_sum"] == 5
    assert metrics["wins_mean"] == 1
    assert metrics["guesses_to_win_mean"] == 3


def test_simulated_rounds_terminate():
    vocab = Vocab(["crane", "apple", "eerie", "steep", "sleek", "raise", "drool", "bonus"])
    tracker = Tracker()
    end_states = []
    policy = RandomGuessPolicy(vocab, seed=1000)
    for seed in range(20):
        engine = RoundEngine(vocab, seed=seed)
        end_states.append(play_round(engine, policy))

    assert all(state.terminal for state in end_states)
    assert all(len(state.guesses) <= 5 for state in end_states)
    assert any(len(state.guesses) > 1 for state in end_states)

    compute_metrics(end_states, tracker)
    metrics = tracker.report()
    np.testing.assert_allclose(metrics["wins_mean"], np.mean([state.win for state in end_states]))
    assert metrics["guesses_sum"] == sum(len(state.guesses) for state in end_states)


def test_guess_longer_than_row_is_skipped():
    vocab = Vocab(["crane", "apple", "eerie"])
    engine = RoundEngine(vocab, secret="apple")
    tracker = Tracker()
    engine.add_listener(TrackingListener(tracker))

    state = enter_guess(engine, "applesauce")
    assert state.guesses == []
    assert state.input == []
    assert not state.terminal

    state = play_round(engine, ScriptedPolicy(["applesauce", "crane", "apple"]))
    assert state.guesses == ["crane", "apple"]
    assert state.win
    assert "invalid_submissions_sum" not in tracker.report()
