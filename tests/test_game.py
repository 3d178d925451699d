from comboboxes.color import Color
from comboboxes.game import (
    AudioState,
    CameraState,
    GuiState,
    LevelState,
    initial_settings,
)


def test_default_starts_at_main_screen():
    settings = initial_settings({})
    assert settings.msaa_samples == 1
    assert settings.gui_state is GuiState.MAIN_SCREEN
    assert settings.audio_state is AudioState.MENU
    assert settings.level_state is LevelState.NONE
    assert settings.camera_state is CameraState.NONE


def test_local_build_two_starts_in_level():
    settings = initial_settings({"LOCAL_BUILD": "2"})
    assert settings.msaa_samples == 4
    assert settings.gui_state is GuiState.LEVEL
    assert settings.audio_state is AudioState.LEVEL
    assert settings.level_state is LevelState.LEVEL
    assert settings.camera_state is CameraState.FOLLOW_PLAYERS


def test_other_local_build_value_is_default():
    assert initial_settings({"LOCAL_BUILD": "1"}).gui_state is GuiState.MAIN_SCREEN


def test_ambient_and_render_samples():
    for env in ({}, {"LOCAL_BUILD": "2"}):
        settings = initial_settings(env)
        assert settings.ambient_light.color == Color.WHITE * 30.0
        assert settings.render_msaa_samples == 1