"""Adapter pattern: make a game player usable where a music player is expected."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Player(ABC):
    @abstractmethod
    def play_music(self) -> str: ...


@dataclass
class MusicPlayer(Player):
    src: str

    def play_music(self) -> str:
        text = "play music: " + self.src
        print(text)
        return text


@dataclass
class GamePlayer:
    src: str

    def play_sound(self) -> str:
        text = "play sound: " + self.src
        print(text)
        return text


@dataclass
class GamePlayerAdapter(Player):
    game: GamePlayer

    def play_music(self) -> str:
        return self.game.play_sound()


def play(player: Player) -> str:
    """Play through any player and return what it played."""
    return player.play_music()