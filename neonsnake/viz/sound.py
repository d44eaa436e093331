# neonsnake/viz/sound.py
from __future__ import annotations
import os
from typing import Dict, Optional
import pygame as pg

CUES = ("collision", "eat", "powerup", "death", "levelup", "achievement")
MUSIC = "background"
EXTS = (".ogg", ".wav", ".mp3")

def _find(sound_dir: str, name: str) -> Optional[str]:
    for ext in EXTS:
        path = os.path.join(sound_dir, name + ext)
        if os.path.isfile(path):
            return path
    return None

class SoundBoard:
    """Cue playback through pygame.mixer.

    Audio is optional: with no sound dir, no mixer device, or unreadable files
    the board stays silent and every call is a no-op.
    """

    def __init__(self, sound_dir: Optional[str], volume: float = 0.5, music_volume: float = 0.5):
        self.sound_dir = sound_dir
        self.volume = volume
        self.music_volume = music_volume
        self.sounds: Dict[str, pg.mixer.Sound] = {}
        self.enabled = False
        self._music_loaded = False

    def open(self) -> None:
        if not self.sound_dir:
            return
        try:
            pg.mixer.init()
        except pg.error as e:
            print(f"[sound] mixer unavailable: {e}")
            return
        self.enabled = True
        for cue in CUES:
            path = _find(self.sound_dir, cue)
            if path is None:
                continue
            try:
                snd = pg.mixer.Sound(path)
            except pg.error as e:
                print(f"[sound] could not load {path}: {e}")
                continue
            snd.set_volume(self.volume)
            self.sounds[cue] = snd
        music = _find(self.sound_dir, MUSIC)
        if music is not None:
            try:
                pg.mixer.music.load(music)
                pg.mixer.music.set_volume(self.music_volume)
                self._music_loaded = True
            except pg.error as e:
                print(f"[sound] could not load {music}: {e}")

    def play(self, cue: str) -> None:
        snd = self.sounds.get(cue)
        if snd is None:
            return
        snd.stop()
        snd.play()

    def start_music(self) -> None:
        if self._music_loaded:
            pg.mixer.music.play(loops=-1)

    def pause_music(self) -> None:
        if self._music_loaded:
            pg.mixer.music.pause()

    def resume_music(self) -> None:
        if self._music_loaded:
            pg.mixer.music.unpause()

    def stop_music(self) -> None:
        if self._music_loaded:
            pg.mixer.music.stop()

    def close(self) -> None:
        if self.enabled:
            pg.mixer.quit()
            self.enabled = False
            self.sounds.clear()
            self._music_loaded = False
