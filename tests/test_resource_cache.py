from __future__ import annotations

import pytest

from deck_overlays.mutations import BLACK, RgbColor
from deck_overlays.resource_cache import ResourceCache, hex_to_rgb


def test_hex_to_rgb_converts_channels() -> None:
    assert hex_to_rgb("#1E88E5") == RgbColor(30 / 255, 136 / 255, 229 / 255)


def test_hex_to_rgb_accepts_missing_hash_and_lowercase() -> None:
    assert hex_to_rgb("1e88e5") == hex_to_rgb("#1E88E5")


@pytest.mark.parametrize("value", ["not-a-color", "#12345", "#GGGGGG", ""])
def test_hex_to_rgb_falls_back_to_black(value: str) -> None:
    assert hex_to_rgb(value) == BLACK


def test_initialize_is_idempotent() -> None:
    cache = ResourceCache()
    first = cache.initialize({"accent": "#FF0000"})
    second = cache.initialize({"accent": "#00FF00"})

    assert first is second
    assert cache.color("accent") == RgbColor(1.0, 0.0, 0.0)


def test_clear_forces_reinitialization() -> None:
    cache = ResourceCache().initialize({"accent": "#FF0000"})
    cache.clear()

    assert not cache.is_initialized
    cache.initialize({"accent": "#00FF00"})
    assert cache.color("accent") == RgbColor(0.0, 1.0, 0.0)


def test_palette_is_merged_over_defaults() -> None:
    cache = ResourceCache().initialize({"accent": "#000000"})
    assert cache.color("white") == RgbColor(1.0, 1.0, 1.0)


def test_color_before_initialize_raises() -> None:
    with pytest.raises(RuntimeError):
        ResourceCache().color("accent")


def test_identifiers_never_repeat_within_a_run(cache: ResourceCache) -> None:
    tokens = [cache.next_identifier() for _ in range(2500)]
    assert len(set(tokens)) == len(tokens)


def test_start_run_changes_salt(cache: ResourceCache) -> None:
    first = cache.next_identifier()
    cache.start_run()
    second = cache.next_identifier()
    assert first != second


def test_transform_presets() -> None:
    cache = ResourceCache().initialize()
    rotated = cache.transform("rotation90", 720.0, 22.5)

    assert (rotated.scale_x, rotated.scale_y, rotated.shear_x, rotated.shear_y) == (0.0, 0.0, -1.0, 1.0)
    assert (rotated.translate_x, rotated.translate_y) == (720.0, 22.5)
    assert cache.transform("identity").apply(3.0, 4.0) == (3.0, 4.0)
