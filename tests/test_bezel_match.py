import pytest

from framectl.core.bezel_match import (
    aspect_ratio_match,
    default_frame,
    exact_match,
    match_bezel,
    screenshot_orientation,
)
from framectl.core.model import Catalog, CatalogMetadata, Device, Frame, MatchKind, Orientation, Resolution

P = Orientation.PORTRAIT
L = Orientation.LANDSCAPE


def _device(name: str, width: int, height: int, frames: list[tuple[str, Orientation, str]]) -> Device:
    return Device(
        name=name,
        type="iphone",
        generation="15",
        variant="pro",
        display_size="6.1",
        bezel_type="dynamic-island",
        resolution=Resolution(width=width, height=height),
        frames=tuple(Frame(color=color, orientation=o, path=path) for color, o, path in frames),
    )


def _catalog(*devices: Device) -> Catalog:
    return Catalog(
        devices=devices,
        metadata=CatalogMetadata(version="1", last_updated="2024-01-01", description="", source="test"),
    )


def _scenario_a() -> Catalog:
    return _catalog(
        _device("iPhone 15 Pro", 1179, 2556, [("black", P, "a/p.png"), ("black", L, "a/l.png")])
    )


def test_orientation_landscape_only_when_wider() -> None:
    assert screenshot_orientation(2556, 1179) == L
    assert screenshot_orientation(1179, 2556) == P
    assert screenshot_orientation(1000, 1000) == P


def test_exact_portrait_match() -> None:
    match = match_bezel(_scenario_a(), 1179, 2556)
    assert match is not None
    assert match.device.name == "iPhone 15 Pro"
    assert match.frame.path == "a/p.png"
    assert match.kind == MatchKind.EXACT


def test_exact_landscape_match_uses_rotated_resolution() -> None:
    match = match_bezel(_scenario_a(), 2556, 1179)
    assert match is not None
    assert match.frame.path == "a/l.png"
    assert match.frame.orientation == L
    assert match.kind == MatchKind.EXACT


def test_aspect_ratio_fallback_within_tolerance() -> None:
    catalog = _scenario_a()
    assert exact_match(catalog, 1170, 2532) is None

    match = match_bezel(catalog, 1170, 2532)
    assert match is not None
    assert match.frame.path == "a/p.png"
    assert match.kind == MatchKind.ASPECT_RATIO


def test_aspect_ratio_fallback_landscape_is_normalized() -> None:
    match = match_bezel(_scenario_a(), 2532, 1170)
    assert match is not None
    assert match.frame.path == "a/l.png"
    assert match.kind == MatchKind.ASPECT_RATIO


def test_far_aspect_ratio_is_no_match() -> None:
    assert match_bezel(_scenario_a(), 800, 600) is None


def test_first_device_in_catalog_order_wins() -> None:
    catalog = _catalog(
        _device("first", 1179, 2556, [("black", P, "first/p.png")]),
        _device("second", 1179, 2556, [("black", P, "second/p.png")]),
    )
    match = match_bezel(catalog, 1179, 2556)
    assert match is not None
    assert match.device.name == "first"


def test_exact_pass_covers_whole_catalog_before_aspect_pass() -> None:
    catalog = _catalog(
        _device("aspect-only", 1170, 2532, [("black", P, "aspect/p.png")]),
        _device("exact", 1179, 2556, [("black", P, "exact/p.png")]),
    )
    match = match_bezel(catalog, 1179, 2556)
    assert match is not None
    assert match.device.name == "exact"
    assert match.kind == MatchKind.EXACT


def test_default_color_comes_from_first_listed_frame() -> None:
    device = _device(
        "gold-first",
        1179,
        2556,
        [("gold", L, "g/l.png"), ("black", P, "b/p.png"), ("gold", P, "g/p.png")],
    )
    assert device.default_color == "gold"
    frame = default_frame(device, P)
    assert frame is not None
    assert frame.path == "g/p.png"


def test_matching_device_without_default_frame_falls_through() -> None:
    catalog = _catalog(
        _device("portrait-only", 1179, 2556, [("black", P, "a/p.png")]),
        _device("rotatable", 1179, 2556, [("silver", P, "b/p.png"), ("silver", L, "b/l.png")]),
    )
    match = match_bezel(catalog, 2556, 1179)
    assert match is not None
    assert match.device.name == "rotatable"
    assert match.frame.path == "b/l.png"


def test_swapped_size_without_landscape_frame_is_no_match() -> None:
    catalog = _catalog(_device("portrait-only", 1179, 2556, [("black", P, "a/p.png")]))
    assert exact_match(catalog, 2556, 1179) is None
    assert aspect_ratio_match(catalog, 2556, 1179) is None
    assert match_bezel(catalog, 2556, 1179) is None


def test_other_colors_in_requested_orientation_are_ignored() -> None:
    catalog = _catalog(
        _device("mixed", 1179, 2556, [("black", P, "a/p.png"), ("white", L, "a/white-l.png")])
    )
    assert match_bezel(catalog, 2556, 1179) is None


def test_device_without_frames_never_matches() -> None:
    catalog = _catalog(_device("bare", 1179, 2556, []))
    assert match_bezel(catalog, 1179, 2556) is None


@pytest.mark.parametrize("size", [(0, 100), (100, 0), (-1, 5)])
def test_non_positive_size_rejected(size: tuple[int, int]) -> None:
    with pytest.raises(ValueError):
        match_bezel(_scenario_a(), *size)


def test_aspect_ratio_pass_prefers_first_device_in_catalog_order() -> None:
    catalog = _catalog(
        _device("first", 1170, 2532, [("black", P, "first/p.png")]),
        _device("second", 1179, 2556, [("black", P, "second/p.png")]),
    )
    assert exact_match(catalog, 1284, 2778) is None

    match = match_bezel(catalog, 1284, 2778)
    assert match is not None
    assert match.device.name == "first"
    assert match.kind == MatchKind.ASPECT_RATIO


def test_aspect_ratio_difference_at_tolerance_is_rejected() -> None:
    catalog = _catalog(_device("half", 1000, 2000, [("black", P, "half/p.png")]))
    assert match_bezel(catalog, 1002, 2000) is None
