from argparse import ArgumentParser

from games.wordle.config import ConfigurationError, load_config, make_config
from games.wordle.consts import END_SCREEN_DELAY
from games.wordle.engine import RoundEngine
from games.wordle.policy import KeyboardInputPolicy, enter_guess
from games.wordle.presenter import TerminalPresenter
from games.wordle.render_utils import render_input
from games.wordle.vocab import Vocab


def main() -> None:
    parser = ArgumentParser()
    parser.add_argument("--vocab_path", type=str, required=True, help="File containing the list of eligible words")
    parser.add_argument("--config_path", type=str, default=None, help="JSON round config, overrides the flags below")
    parser.add_argument("--word_length", type=int, default=5, help="Number of letters per word")
    parser.add_argument("--max_attempts", type=int, default=5, help="Number of guesses per round")
    parser.add_argument("--seed", type=int, default=None, help="Random seed used to pick the secret")
    parser.add_argument("--secret", type=str, default=None, help="Play against this word instead of a random one")
    parser.add_argument("--end_delay", type=float, default=END_SCREEN_DELAY, help="Seconds before the end screen")
    args = parser.parse_args()

    try:
        if args.config_path is not None:
            config = load_config(args.config_path)
        else:
            config = make_config(word_length=args.word_length, max_attempts=args.max_attempts)
        vocab = Vocab.from_path(args.vocab_path, config=config)
        engine = RoundEngine(vocab, config=config, secret=args.secret, seed=args.seed)
    except ConfigurationError as e:
        parser.error(str(e))

    presenter = TerminalPresenter(engine, end_delay=args.end_delay)
    policy = KeyboardInputPolicy()
    print(f"Guess the {config.word_length} letter word in {config.max_attempts} attempts.")
    while not engine.terminal:
        guess = policy.choose_guess(engine.state)
        if len(guess) > config.word_length:
            print(f"Too long: {guess.upper()} has more than {config.word_length} letters")
            continue
        print(render_input(guess.lower(), config.word_length))
        enter_guess(engine, guess)

    presenter.wait()
    presenter.close()


if __name__ == "__main__":
    main()
