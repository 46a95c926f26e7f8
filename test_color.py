import logging

import pytest

from matcolor.__main__ import main
from matcolor.config.constants import DEFAULT_SEED_HEX, SEED_ENV_VAR, THEME_ENV_VAR
from matcolor.config.settings import ThemeConfig
from matcolor.core.color import RGBA
from matcolor.core.perceptual import Perceptual, to_perceptual
from matcolor.exceptions.errors import ColorParseError, MatColorError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("#0000FF", RGBA(0, 0, 255, 255)),
        ("0000ff", RGBA(0, 0, 255, 255)),
        ("#6750A480", RGBA(103, 80, 164, 128)),
        ("  #FFFFFF  ", RGBA(255, 255, 255, 255)),
    ],
)
def test_from_hex(text: str, expected: RGBA) -> None:
    assert RGBA.from_hex(text) == expected


@pytest.mark.parametrize("text", ["", "#FFF", "#GG0000", "blue", "#0000FF0"])
def test_from_hex_rejects_malformed_strings(text: str) -> None:
    with pytest.raises(ColorParseError) as exc_info:
        RGBA.from_hex(text)
    assert exc_info.value.value == text
    assert isinstance(exc_info.value, ValueError)
    assert isinstance(exc_info.value, MatColorError)


def test_from_hex_rejects_non_strings() -> None:
    with pytest.raises(ColorParseError):
        RGBA.from_hex(0x0000FF)  # type: ignore[arg-type]


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300), (1.5, 0, 0)])
def test_channels_must_be_bytes(channels) -> None:
    with pytest.raises(ColorParseError):
        RGBA(*channels)


def test_hex_and_argb_formatting() -> None:
    color = RGBA(103, 80, 164, 128)
    assert color.to_hex() == "#6750A4"
    assert color.to_hex(alpha=True) == "#6750A480"
    assert str(color) == "#6750A480"
    assert str(RGBA(1, 2, 3)) == "#010203"
    assert color.to_argb() == 0x806750A4
    assert RGBA.from_argb(0xFF0000FF) == RGBA(0, 0, 255, 255)


def test_perceptual_white_and_black() -> None:
    assert to_perceptual(RGBA(255, 255, 255)).tone == pytest.approx(100, abs=0.5)
    assert to_perceptual(RGBA(0, 0, 0)).tone == pytest.approx(0, abs=0.5)


def test_perceptual_ignores_alpha() -> None:
    assert to_perceptual(RGBA(0, 0, 255, 10)) == to_perceptual(RGBA(0, 0, 255, 255))


def test_with_hue_wraps_into_range() -> None:
    point = Perceptual(hue=10.0, chroma=30.0, tone=50.0).with_hue(-50.0)
    assert 0 <= point.hue < 360
    assert point.hue == pytest.approx(310, abs=1.0)


def test_with_tone_moves_lightness_only() -> None:
    point = to_perceptual(RGBA(0, 0, 255)).with_tone(60)
    assert point.tone == pytest.approx(60, abs=0.5)
    assert point.hue == pytest.approx(to_perceptual(RGBA(0, 0, 255)).hue, abs=1.0)


def test_theme_config_defaults() -> None:
    config = ThemeConfig.from_env({})
    assert config.seed == RGBA.from_hex(DEFAULT_SEED_HEX)
    assert config.dark is False
    assert ThemeConfig() == config


def test_theme_config_reads_environment() -> None:
    config = ThemeConfig.from_env({SEED_ENV_VAR: "#0000FF", THEME_ENV_VAR: "Dark"})
    assert config.seed == RGBA(0, 0, 255)
    assert config.dark is True


def test_theme_config_ignores_bad_seed(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="matcolor.config.settings"):
        config = ThemeConfig.from_env({SEED_ENV_VAR: "not-a-color"})
    assert config.seed == RGBA.from_hex(DEFAULT_SEED_HEX)
    assert SEED_ENV_VAR in caplog.text


def test_main_prints_every_role(capsys: pytest.CaptureFixture) -> None:
    assert main(["#0000FF", "--dark"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 37
    assert lines[0].startswith("primary ")
    assert any(line.startswith("inverse_primary") for line in lines)


def test_main_rejects_bad_seed(capsys: pytest.CaptureFixture) -> None:
    assert main(["nope"]) == 2
    assert "nope" in capsys.readouterr().err
