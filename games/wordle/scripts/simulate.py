import time
from argparse import ArgumentParser

import tqdm

from games.wordle.config import load_config, make_config
from games.wordle.engine import RoundEngine
from games.wordle.policy import RandomGuessPolicy, play_round
from games.wordle.reporting import finish_reporting, init_reporting, report_metrics
from games.wordle.tracker import Tracker, TrackingListener, compute_metrics
from games.wordle.vocab import Vocab


def main() -> None:
    parser = ArgumentParser()
    parser.add_argument("--vocab_path", type=str, required=True, help="File containing the list of eligible words")
    parser.add_argument("--config_path", type=str, default=None, help="JSON round config, overrides the flags below")
    parser.add_argument("--word_length", type=int, default=5, help="Number of letters per word")
    parser.add_argument("--max_attempts", type=int, default=5, help="Number of guesses per round")
    parser.add_argument("--num_rounds", type=int, default=100, help="Number of rounds to simulate")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--wandb", action="store_true", default=False, help="Log metrics to Weights & Biases")
    parser.add_argument("--name", type=str, default=None, help="Experiment run name")
    args = parser.parse_args()

    if args.config_path is not None:
        config = load_config(args.config_path)
    else:
        config = make_config(word_length=args.word_length, max_attempts=args.max_attempts)

    init_reporting(project="wordle", name=args.name, config=vars(args), enabled=args.wandb)

    vocab = Vocab.from_path(args.vocab_path, config=config)
    tracker = Tracker()
    listener = TrackingListener(tracker)
    end_states = []
    # Guesses must not share a seed with any secret.
    policy = RandomGuessPolicy(vocab, seed=args.seed + args.num_rounds)
    start_time = time.time()
    for seed in tqdm.tqdm(range(args.seed, args.seed + args.num_rounds), desc="Simulating rounds"):
        engine = RoundEngine(vocab, config=config, seed=seed)
        engine.add_listener(listener)
        end_states.append(play_round(engine, policy))

    print(f"Simulating {args.num_rounds} rounds took {time.time() - start_time:.2f} seconds")
    compute_metrics(end_states, tracker)
    report_metrics(tracker.report())
    finish_reporting()


if __name__ == "__main__":
    main()
