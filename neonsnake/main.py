# neonsnake/main.py
import argparse

from neonsnake.config import AppConfig

def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="neonsnake")
    p.add_argument("mode", choices=["play", "headless", "scores"])
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--name", default="Player", help="name stored with a high score")
    p.add_argument("--cell-px", type=int, default=None)
    p.add_argument("--fps", type=int, default=None)
    p.add_argument("--sound-dir", default=None)
    p.add_argument("--record-dir", default=None)
    p.add_argument("--scores", default=None, help="high-score JSON path")
    p.add_argument("--log", default=None, help="per-game CSV log path")
    p.add_argument("--games", type=int, default=1)
    p.add_argument("--max-frames", type=int, default=20_000)
    p.add_argument("--board", action="store_true", help="print the final board (headless)")
    p.add_argument("--nominal-decay", action="store_true",
                   help="decay power-ups by a fixed 1000/60 ms per tick")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    cfg = AppConfig(seed=args.seed)
    overrides = {
        "render_cell": args.cell_px,
        "fps": args.fps,
        "sound_dir": args.sound_dir,
        "render_record_dir": args.record_dir,
        "highscore_path": args.scores,
        "game_log_path": args.log,
    }
    cfg = cfg.with_(**{k: v for k, v in overrides.items() if v is not None})
    if args.nominal_decay:
        cfg = cfg.with_(powerup_decay="nominal")
    return cfg

def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    if args.mode == "play":
        from neonsnake.runners.run_game import main as play
        play(cfg, name=args.name)
    elif args.mode == "headless":
        from neonsnake.runners.run_headless import main as headless
        headless(cfg, games=args.games, max_frames=args.max_frames, show_board=args.board)
    elif args.mode == "scores":
        from neonsnake.runners.show_scores import main as scores
        scores(cfg)

if __name__ == "__main__":
    main()
