"""Command-line entry point for snekhaus."""

from __future__ import annotations

import argparse
import logging
import sys

from snekhaus.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snekhaus",
        description="Snekhaus headless simulation, server, and config tools.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Log file path; overrides the configured log_file.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play a headless game with random turns.",
    )
    sim_p.add_argument("--ticks", type=int, default=500)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--height", type=int, default=None)
    sim_p.add_argument("--turn-probability", type=float, default=0.2)
    sim_p.add_argument(
        "--save-high-score", action="store_true",
        help="Load and persist the best score via the configured file.",
    )

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Run the HTTP/WebSocket server.")
    serve_p.add_argument("--host", type=str, default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write the active config to a JSON file.",
    )
    init_p.add_argument("path", help="Destination for the config file.")

    return parser


def _run_simulate(args: argparse.Namespace, config: GameConfig) -> int:
    import numpy as np

    from snekhaus.game import new_game
    from snekhaus.loop import RandomIntentSource, SimulatedClock, run_loop
    from snekhaus.scores import HighScoreStore

    width = args.width if args.width is not None else config.arena_width
    height = args.height if args.height is not None else config.arena_height
    if width <= config.initial_length or height < 1:
        print(  # noqa: T201
            f"Arena {width}x{height} is too small for a snek of length "
            f"{config.initial_length}.",
            file=sys.stderr,
        )
        return 2
    store = HighScoreStore(config.high_score_path) if args.save_high_score else None

    rng = np.random.default_rng(args.seed)
    game = new_game(store=store, config=config, rng=rng, arena_size=(width, height))
    clock = SimulatedClock()
    source = RandomIntentSource(
        game, clock, rng=rng, turn_probability=args.turn_probability,
    )

    # The last view that still held an arena; termination drops it.
    last: dict = {}

    def _remember(view) -> None:
        if view.has_arena:
            last["view"] = view

    ticks = run_loop(
        game, source, clock=clock, on_frame=_remember, max_ticks=args.ticks,
    )
    view = game.current_phase()
    if view.has_arena:
        last["view"] = view
    shown = last.get("view", view)
    score = shown.score or 0
    print(  # noqa: T201
        f"ticks={ticks} phase={view.phase.value} score={score} "
        f"length={len(shown.body) + 1 if shown.has_arena else 0} best={game.best_score}"
    )
    return 0


def _run_serve(args: argparse.Namespace, config: GameConfig) -> int:
    import uvicorn

    from snekhaus.scores import HighScoreStore
    from snekhaus.server.app import create_app

    app = create_app(config, store=HighScoreStore(config.high_score_path))
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


def _run_init_config(args: argparse.Namespace, config: GameConfig) -> int:
    config.save(args.path)
    print(f"Wrote config to {args.path}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snekhaus`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = GameConfig.load(args.config) if args.config else GameConfig()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        filename=args.log_file or config.log_file,
        force=True,
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "serve": _run_serve,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
