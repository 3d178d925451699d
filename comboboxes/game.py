"""Start-up state of the game, chosen from the environment."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from comboboxes.color import Color
from comboboxes.lights import AmbientLight


class GuiState(enum.Enum):
    MAIN_SCREEN = "main_screen"
    LEVEL = "level"


class AudioState(enum.Enum):
    MENU = "menu"
    LEVEL = "level"


class LevelState(enum.Enum):
    NONE = "none"
    LEVEL = "level"


class CameraState(enum.Enum):
    NONE = "none"
    FOLLOW_PLAYERS = "follow_players"


@dataclass
class GameSettings:
    """Initial states, multisampling and lighting."""

    msaa_samples: int
    gui_state: GuiState
    audio_state: AudioState
    level_state: LevelState
    camera_state: CameraState
    ambient_light: AmbientLight = field(
        default_factory=lambda: AmbientLight(Color.WHITE * 30.0)
    )
    render_msaa_samples: int = 1


def initial_settings(environ: Optional[Mapping[str, str]] = None) -> GameSettings:
    """Start in a level when ``LOCAL_BUILD`` is ``2``, otherwise at the main screen."""
    env = os.environ if environ is None else environ
    if env.get("LOCAL_BUILD") == "2":
        return GameSettings(
            msaa_samples=4,
            gui_state=GuiState.LEVEL,
            audio_state=AudioState.LEVEL,
            level_state=LevelState.LEVEL,
            camera_state=CameraState.FOLLOW_PLAYERS,
        )
    return GameSettings(
        msaa_samples=1,
        gui_state=GuiState.MAIN_SCREEN,
        audio_state=AudioState.MENU,
        level_state=LevelState.NONE,
        camera_state=CameraState.NONE,
    )