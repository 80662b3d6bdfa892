"""Entry point: ``python -m frontier``.

Supports two modes:
  - ``python -m frontier``                  → Launch the FastAPI session server
  - ``python -m frontier cli --script F``   → Replay a command script headlessly
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Frontier — turn-based text-command world")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI session server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--max-players", type=int, default=8)
    srv.add_argument("--manual-rounds", action="store_true",
                     help="Only resolve rounds through POST /round/resolve")
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a command script headlessly")
    cli.add_argument("--script", type=str, required=True,
                     help="File with one '<player_id> <text>' command per line")
    cli.add_argument("--players", type=str, required=True,
                     help="Comma-separated id:Name pairs, e.g. p1:Alice,p2:Bob")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--replay", type=str, default="replay.json")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def parse_players(raw: str) -> list[tuple[str, str]]:
    players: list[tuple[str, str]] = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        pid, sep, name = chunk.partition(":")
        if not sep or not pid.strip() or not name.strip():
            raise ValueError(f"Expected id:Name, got {chunk!r}")
        players.append((pid.strip(), name.strip()))
    return players


def parse_script_line(line: str) -> tuple[str, str] | None:
    """``'<player_id> <text>'`` → (id, text); blank lines and ``#`` comments → None."""
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    pid, _, text = line.partition(" ")
    return pid, text.strip()


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from frontier.api.app import create_app
    from frontier.config import GameConfig

    config = GameConfig(
        world_seed=args.seed,
        max_players=args.max_players,
        auto_resolve=not args.manual_rounds,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from pathlib import Path

    from frontier.api.session_manager import SessionManager
    from frontier.config import GameConfig
    from frontier.engine.game import UnknownPlayerError
    from frontier.utils.logging import setup_logging
    from frontier.utils.replay import ReplayRecorder

    config = GameConfig(
        world_seed=args.seed,
        replay_file=args.replay,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    recorder = ReplayRecorder(config.replay_file, config.world_seed)
    manager = SessionManager(config, recorder=recorder)
    for pid, name in parse_players(args.players):
        manager.add_player(pid, name)

    lines = Path(args.script).read_text(encoding="utf-8").splitlines()
    for lineno, raw in enumerate(lines, start=1):
        parsed = parse_script_line(raw)
        if parsed is None:
            continue
        pid, text = parsed
        try:
            result = manager.submit(pid, text)
        except UnknownPlayerError:
            logger.warning("Line %d: unknown player %r, skipped", lineno, pid)
            continue

        for message in result.messages:
            print(f"[{', '.join(message.recipients)}] {message.content}")
        if result.round is not None:
            print(f"--- turn {result.round.turn} ---")
            for line in result.round.log:
                print(f"  {line}")
            for message in result.round.messages:
                print(f"[{', '.join(message.recipients)}] {message.content}")
            if result.round.game_over:
                logger.info("Game over at line %d", lineno)
                break

    recorder.flush()
    logger.info("Done. Replay written to %s", config.replay_file)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        try:
            _run_cli(args)
        except (OSError, ValueError) as exc:
            parser.exit(1, f"error: {exc}\n")


if __name__ == "__main__":
    main()
