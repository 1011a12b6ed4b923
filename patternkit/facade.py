"""Facade pattern: one entry point over several sub-services."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Music:
    name: str


@dataclass
class Video:
    id: int


@dataclass
class Count:
    comment: int
    praise: int
    collect: int


@dataclass
class Facade:
    """Combines the music, count and video services."""

    music: Music
    count: Count
    video: Video

    def server_info(self) -> dict[str, object]:
        """Collect the key value from each sub-service."""
        return {
            "music": self.music.name,
            "video": self.video.id,
            "comment": self.count.comment,
        }