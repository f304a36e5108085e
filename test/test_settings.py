""" Unit tests for highlighting settings stored in the user's CFG file. """

import pytest

from afterburner_magic.classify.options import MagicOptions
from afterburner_magic.settings import AFTERBURNER_LAYOUT_ID, MagicSettings


def _settings(tmp_path, contents:str=None) -> MagicSettings:
    path = tmp_path / "config.cfg"
    if contents is not None:
        path.write_text(contents, encoding='utf-8')
    return MagicSettings.from_file(str(path))


def test_defaults(tmp_path) -> None:
    """ A missing file leaves every setting at its default. The space heuristic is on by default here. """
    settings = _settings(tmp_path)
    assert settings.read() == []
    assert settings.get(MagicSettings.LAYOUT) == AFTERBURNER_LAYOUT_ID
    assert settings.highlighting_active()
    assert settings.to_magic_options() == MagicOptions.all_on()


def test_read(tmp_path) -> None:
    settings = _settings(tmp_path, "[afterburner]\n"
                                   "magic_key_word_overrides_enabled = False\n"
                                   "suppress_skip_magic_after_space = False\n"
                                   "[other]\n"
                                   "magic_key_highlighting = False\n")
    assert settings.read() == []
    assert settings.highlighting_active()
    assert settings.to_magic_options() == MagicOptions(word_overrides_enabled=False)


def test_rejected(tmp_path) -> None:
    """ Unknown options and values of the wrong type are dropped in favor of the defaults. """
    settings = _settings(tmp_path, "[afterburner]\n"
                                   "magic_key_highlighting = yes\n"
                                   "layout = 5\n"
                                   "unknown_option = True\n"
                                   "suppress_magic_after_skip_magic = False\n")
    assert sorted(settings.read()) == ["layout", "magic_key_highlighting", "unknown_option"]
    assert settings.get(MagicSettings.HIGHLIGHTING) is True
    assert settings.get(MagicSettings.LAYOUT) == AFTERBURNER_LAYOUT_ID
    assert settings.get("suppress_magic_after_skip_magic") is False


@pytest.mark.parametrize("layout, highlighting, expected", [
    (AFTERBURNER_LAYOUT_ID, True, True),
    (AFTERBURNER_LAYOUT_ID, False, False),
    ("en-us", True, False),
    ("en-us", False, False),
])
def test_highlighting_active(tmp_path, layout, highlighting, expected) -> None:
    settings = _settings(tmp_path)
    settings.set(MagicSettings.LAYOUT, layout)
    settings.set(MagicSettings.HIGHLIGHTING, highlighting)
    assert settings.highlighting_active() is expected


def test_set(tmp_path) -> None:
    settings = _settings(tmp_path)
    with pytest.raises(KeyError):
        settings.set("no_such_setting", True)
    with pytest.raises(TypeError):
        settings.set(MagicSettings.WORD_OVERRIDES, "False")
    settings.set(MagicSettings.WORD_OVERRIDES, False)
    assert not settings.to_magic_options().word_overrides_enabled


def test_write(tmp_path) -> None:
    settings = _settings(tmp_path)
    settings.set("suppress_skip_magic_after_skip_magic", False)
    settings.set(MagicSettings.LAYOUT, "en-colemak")
    assert settings.write()
    saved = (tmp_path / "config.cfg").read_text(encoding='utf-8')
    assert "[afterburner]" in saved
    reloaded = _settings(tmp_path)
    assert reloaded.read() == []
    assert reloaded.get(MagicSettings.LAYOUT) == "en-colemak"
    assert reloaded.get("suppress_skip_magic_after_skip_magic") is False
    assert reloaded.get("suppress_skip_magic_after_magic") is True


def test_bool_settings() -> None:
    info = MagicSettings.bool_settings()
    keys = [item.key for item in info]
    assert keys == [MagicSettings.HIGHLIGHTING, MagicSettings.WORD_OVERRIDES,
                    "suppress_skip_magic_after_magic", "suppress_skip_magic_after_skip_magic",
                    "suppress_magic_after_skip_magic", "suppress_skip_magic_after_space"]
    for item in info:
        assert MagicSettings.DEFAULTS[item.key] is True
        assert item.label and item.desc
