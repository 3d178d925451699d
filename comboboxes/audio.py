"""Background music and per-player movement sounds, as playback actions."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Callable, Hashable, Optional

MENU_MUSIC = "audio/main_menu_background.ogg"
MOVEMENT_SOUND = "audio/movement.ogg"
BOX_JOIN_SOUND = "audio/box_join.ogg"

MUSIC_VOLUME = 0.2
MOVEMENT_VOLUME = 2.0
MOVEMENT_PLAYBACK_RATE = 1.8


class SoundKind(enum.Enum):
    PLAY = "play"
    STOP_ALL = "stop_all"
    PAUSE = "pause"
    RESUME = "resume"


@dataclass(frozen=True)
class SoundAction:
    """One instruction for the audio output.

    ``fade`` is the tween length in seconds and ``fade_power`` the easing
    exponent (1 is linear).
    """

    kind: SoundKind
    path: Optional[str] = None
    target: Optional[Hashable] = None
    volume: float = 1.0
    playback_rate: float = 1.0
    looped: bool = False
    fade: float = 0.0
    fade_power: float = 1.0


@dataclass
class BackgroundMusic:
    """The track that should be playing in the background, if any."""

    track: Optional[str] = MENU_MUSIC

    def set(self, name: Optional[str]) -> list[SoundAction]:
        """Switch tracks; every sound fades out and the new track starts."""
        self.track = name
        actions = [SoundAction(SoundKind.STOP_ALL, fade=1.0, fade_power=1.0)]
        if name is not None:
            actions.append(
                SoundAction(SoundKind.PLAY, path=name, volume=MUSIC_VOLUME, looped=True)
            )
        return actions


@dataclass
class MovementSoundTracker:
    """Starts, pauses and resumes each player's walking sound."""

    clock: Callable[[], float] = time.monotonic
    _started: dict = field(default_factory=dict, init=False, repr=False)

    def update(self, entity: Hashable, is_moving: bool) -> Optional[SoundAction]:
        """The action needed for this player this frame, or None."""
        if entity not in self._started:
            if not is_moving:
                return None
            self._started[entity] = self.clock()
            return SoundAction(
                SoundKind.PLAY,
                path=MOVEMENT_SOUND,
                target=entity,
                volume=MOVEMENT_VOLUME,
                playback_rate=MOVEMENT_PLAYBACK_RATE,
                looped=True,
            )

        started = self._started[entity]
        if is_moving and started is None:
            self._started[entity] = self.clock()
            return SoundAction(SoundKind.RESUME, target=entity)
        if not is_moving and started is not None:
            self._started[entity] = None
            return SoundAction(SoundKind.PAUSE, target=entity, fade=1.0, fade_power=2.0)
        return None