import argparse
import curses
import logging
import sys

from termtris_clock import FrameClock
from termtris_config import CONFIG
import termtris_curses
from termtris_game import Game


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Falling-block puzzle game for the terminal.")
    parser.add_argument("--frontend", choices=("curses", "pygame"), default=CONFIG["FRONTEND"],
                        help="draw in the terminal (default) or in a pygame window")
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"],
                        help="seed for the piece bag, for repeatable games")
    parser.add_argument("--strict-spawn", action="store_true", default=CONFIG["STRICT_SPAWN_CHECK"],
                        help="end the game as soon as a new piece cannot fit at spawn")
    parser.add_argument("--clear-delay", type=int, default=CONFIG["LINE_CLEAR_DELAY_MS"], metavar="MS",
                        help="how long cleared rows stay on screen")
    parser.add_argument("--log-file", help="write a debug log here (the terminal is owned by curses)")
    parser.add_argument("--log-level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser.parse_args(argv)


def apply_args(args):
    CONFIG["FRONTEND"] = args.frontend
    CONFIG["SEED"] = args.seed
    CONFIG["STRICT_SPAWN_CHECK"] = args.strict_spawn
    CONFIG["LINE_CLEAR_DELAY_MS"] = args.clear_delay


def run(game: Game) -> int:
    if CONFIG["FRONTEND"] == "pygame":
        import termtris_pygame
        return termtris_pygame.play(game)

    return curses.wrapper(termtris_curses.play, game, FrameClock())


def main(argv=None):
    args = parse_args(argv)
    apply_args(args)
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=args.log_level,
                            format="%(asctime)s %(name)s %(levelname)s %(message)s")

    game = Game()
    try:
        run(game)
    except KeyboardInterrupt:
        pass
    except termtris_curses.TerminalTooSmall as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Final score: {game.score}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
