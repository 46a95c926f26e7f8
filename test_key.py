from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from matcolor.core.color import RGBA
from matcolor.core.key import ERROR_KEY, Key, derive_key, key_from_primary
from matcolor.core.perceptual import Perceptual, to_perceptual
from matcolor.core.scheme import Schemes


SEEDS = [
    RGBA(0, 0, 255),
    RGBA(255, 0, 0),
    RGBA(103, 80, 164),
    RGBA(20, 160, 90),
    RGBA(128, 128, 128),
    RGBA(250, 220, 40, 128),
]


def _hue_distance(a: float, b: float) -> float:
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


@pytest.mark.parametrize("seed", SEEDS)
def test_key_from_primary_is_deterministic(seed: RGBA) -> None:
    assert key_from_primary(seed) == key_from_primary(seed)


def test_derive_key_is_key_from_primary() -> None:
    seed = RGBA(0, 0, 255)
    assert derive_key(seed) == key_from_primary(seed)


@pytest.mark.parametrize("seed", SEEDS)
def test_error_key_is_constant(seed: RGBA) -> None:
    key = key_from_primary(seed)
    assert key.error == ERROR_KEY
    assert key.error == RGBA(179, 38, 30, 255)


def test_primary_chroma_is_raised_to_floor_for_muted_seed() -> None:
    seed = RGBA(0x6B, 0x6F, 0x7A)  # blue-gray
    assert to_perceptual(seed).with_tone(40).chroma < 48

    key = key_from_primary(seed)

    assert to_perceptual(key.primary).chroma == pytest.approx(48, abs=1.5)


def test_primary_chroma_keeps_vivid_seed_chroma() -> None:
    seed = RGBA(255, 0, 0)
    expected = to_perceptual(seed).with_tone(40).chroma
    assert expected > 48

    key = key_from_primary(seed)

    assert to_perceptual(key.primary).chroma == pytest.approx(expected, abs=2.0)


# Hues whose gamut at tone 40 reaches well past the floor
@pytest.mark.parametrize("seed", [RGBA(0, 0, 255), RGBA(255, 0, 0), RGBA(103, 80, 164), RGBA(90, 90, 100)])
def test_primary_chroma_never_below_floor(seed: RGBA) -> None:
    key = key_from_primary(seed)
    assert to_perceptual(key.primary).chroma >= 48 - 1.5


@pytest.mark.parametrize(
    "seed", [RGBA(0, 0, 255), RGBA(255, 0, 0), RGBA(20, 160, 90), RGBA(0x33, 0x33, 0x33)]
)
def test_tertiary_hue_is_rotated_minus_sixty(seed: RGBA) -> None:
    key = key_from_primary(seed)
    primary_hue = to_perceptual(key.primary).hue
    tertiary_hue = to_perceptual(key.tertiary).hue

    assert _hue_distance(tertiary_hue, (primary_hue - 60) % 360) <= 2.0
    # +60 would land far away
    assert _hue_distance(tertiary_hue, (primary_hue + 60) % 360) > 100


def test_fixed_axis_chromas() -> None:
    key = key_from_primary(RGBA(0, 0, 255))

    assert to_perceptual(key.secondary).chroma == pytest.approx(16, abs=1.5)
    assert to_perceptual(key.tertiary).chroma == pytest.approx(24, abs=1.5)
    assert to_perceptual(key.neutral).chroma == pytest.approx(4, abs=1.5)
    assert to_perceptual(key.neutral_variant).chroma == pytest.approx(8, abs=1.5)


def test_key_colors_sit_at_reference_tone() -> None:
    key = key_from_primary(RGBA(20, 160, 90))
    for color in (key.primary, key.secondary, key.tertiary, key.neutral, key.neutral_variant):
        assert to_perceptual(color).tone == pytest.approx(40, abs=1.0)


def test_seed_tone_does_not_affect_schemes() -> None:
    dark_shade = Perceptual(hue=282.0, chroma=60.0, tone=20.0)
    light_shade = Perceptual(hue=282.0, chroma=60.0, tone=70.0)

    with patch("matcolor.core.key.to_perceptual", return_value=dark_shade):
        from_dark = Schemes.from_seed(RGBA(0, 0, 90))
    with patch("matcolor.core.key.to_perceptual", return_value=light_shade):
        from_light = Schemes.from_seed(RGBA(150, 150, 255))

    assert from_dark == from_light


def test_shades_of_one_blue_give_the_same_key() -> None:
    dark_seed = Perceptual(hue=282.0, chroma=55.0, tone=35.0).to_rgba()
    light_seed = Perceptual(hue=282.0, chroma=55.0, tone=50.0).to_rgba()
    assert dark_seed != light_seed

    dark_key = key_from_primary(dark_seed)
    light_key = key_from_primary(light_seed)

    for axis in ("primary", "secondary", "tertiary"):
        a = to_perceptual(getattr(dark_key, axis))
        b = to_perceptual(getattr(light_key, axis))
        assert _hue_distance(a.hue, b.hue) <= 1.5
        assert a.chroma == pytest.approx(b.chroma, abs=1.5)
        assert a.tone == pytest.approx(b.tone, abs=0.5)


def test_custom_accents_are_carried_through() -> None:
    brand = RGBA(255, 128, 0)
    custom = {"brand": brand}

    key = key_from_primary(RGBA(0, 0, 255), custom=custom)
    custom["other"] = RGBA(0, 0, 0)

    assert dict(key.custom) == {"brand": brand}
    with pytest.raises(TypeError):
        key.custom["late"] = brand  # type: ignore[index]


def test_custom_defaults_to_empty() -> None:
    assert dict(key_from_primary(RGBA(0, 0, 255)).custom) == {}
    assert dict(key_from_primary(RGBA(0, 0, 255), custom=None).custom) == {}


def test_key_accepts_none_for_custom() -> None:
    colors = [RGBA(i * 40, 0, 0) for i in range(6)]
    key = Key(*colors, custom=None)
    assert dict(key.custom) == {}
    assert key.with_custom("brand", RGBA(1, 2, 3)).custom["brand"] == RGBA(1, 2, 3)


def test_with_custom_returns_new_key() -> None:
    key = key_from_primary(RGBA(0, 0, 255))
    extended = key.with_custom("success", RGBA(0, 160, 0))

    assert "success" not in key.custom
    assert extended.custom["success"] == RGBA(0, 160, 0)
    assert extended.primary == key.primary


def test_key_is_immutable() -> None:
    key = key_from_primary(RGBA(0, 0, 255))
    with pytest.raises(FrozenInstanceError):
        key.primary = RGBA(0, 0, 0)  # type: ignore[misc]


def test_key_can_be_built_from_six_independent_colors() -> None:
    colors = [RGBA(i * 40, 0, 0) for i in range(6)]
    key = Key(*colors)
    assert (
        key.primary, key.secondary, key.tertiary,
        key.error, key.neutral, key.neutral_variant,
    ) == tuple(colors)
