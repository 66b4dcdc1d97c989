"""Screenshot-size-to-bezel matching logic."""

from __future__ import annotations

from framectl.core.model import BezelMatch, Catalog, Device, Frame, MatchKind, Orientation

ASPECT_RATIO_TOLERANCE = 0.001


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Screenshot size must be positive, got {width}x{height}")


def screenshot_orientation(width: int, height: int) -> Orientation:
    # Square screenshots count as portrait.
    if width > height:
        return Orientation.LANDSCAPE
    return Orientation.PORTRAIT


def default_frame(device: Device, orientation: Orientation) -> Frame | None:
    color = device.default_color
    for frame in device.frames:
        if frame.orientation == orientation and frame.color == color:
            return frame
    return None


def _exact_size_match(device: Device, width: int, height: int, orientation: Orientation) -> bool:
    resolution = device.resolution
    if orientation == Orientation.LANDSCAPE:
        resolution = resolution.rotated()
    return resolution.width == width and resolution.height == height


def _portrait_aspect_ratio(width: int, height: int, orientation: Orientation) -> float:
    if orientation == Orientation.LANDSCAPE:
        return height / width
    return width / height


def exact_match(catalog: Catalog, width: int, height: int) -> BezelMatch | None:
    _check_size(width, height)
    orientation = screenshot_orientation(width, height)
    for device in catalog.devices:
        if not _exact_size_match(device, width, height, orientation):
            continue
        frame = default_frame(device, orientation)
        if frame is None:
            continue
        return BezelMatch(device=device, frame=frame, kind=MatchKind.EXACT)
    return None


def aspect_ratio_match(catalog: Catalog, width: int, height: int) -> BezelMatch | None:
    _check_size(width, height)
    orientation = screenshot_orientation(width, height)
    screenshot_aspect = _portrait_aspect_ratio(width, height, orientation)
    for device in catalog.devices:
        if abs(device.resolution.aspect_ratio - screenshot_aspect) >= ASPECT_RATIO_TOLERANCE:
            continue
        frame = default_frame(device, orientation)
        if frame is None:
            continue
        return BezelMatch(device=device, frame=frame, kind=MatchKind.ASPECT_RATIO)
    return None


def match_bezel(catalog: Catalog, width: int, height: int) -> BezelMatch | None:
    """Pick the bezel for a screenshot of `width` x `height` pixels.

    The exact pass runs over the whole catalog before the aspect-ratio pass
    is tried. Within a pass the first device in catalog order wins. Returns
    None when neither pass finds a device with a usable frame.
    """
    return exact_match(catalog, width, height) or aspect_ratio_match(catalog, width, height)
