# neonsnake/runners/show_scores.py
from neonsnake.config import AppConfig
from neonsnake.core.highscores import HighScoreTable

def main(cfg: AppConfig):
    table = HighScoreTable(cfg.highscore_path, cfg.highscore_limit).load()
    rows = table.entries()
    if not rows:
        print("No high scores yet.")
        return
    for i, e in enumerate(rows, start=1):
        ach = ", ".join(e.get("achievements", [])) or "-"
        print(f"{i:2d}. {e.get('name', '?'):<12} {e['score']:>6}  L{e.get('level', 1):<3} {e.get('date', '')[:10]}  {ach}")
