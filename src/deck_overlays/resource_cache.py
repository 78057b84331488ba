"""Reusable resources shared by the overlay generators.

The cache holds the palette converted to RGB, the affine transform presets and
the identifier source. It is an explicit object: callers construct it (or let
the pipeline construct one) and call ``clear()`` when the palette or target
document changes.
"""

import logging
import re
import uuid
from typing import Mapping, Optional

from .mutations import AffineTransform, RgbColor, BLACK

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r'^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$', re.IGNORECASE)

DEFAULT_PALETTE: dict[str, str] = {
    'accent': '#3D6869',
    'muted': '#888888',
    'section_text': '#AAAAAA',
    'track': '#E0E0E0',
    'white': '#FFFFFF',
}

TRANSFORM_PRESETS: dict[str, AffineTransform] = {
    'identity': AffineTransform(),
    # 90 degrees clockwise
    'rotation90': AffineTransform(scale_x=0.0, scale_y=0.0, shear_x=-1.0, shear_y=1.0),
}


def hex_to_rgb(value: str) -> RgbColor:
    """Convert ``#RRGGBB`` (or ``RRGGBB``) to an RgbColor with channels in [0, 1].

    Unparseable values fall back to black.

    Example:
        >>> hex_to_rgb("#1E88E5")
        RgbColor(red=0.11764705882352941, green=0.5333333333333333, blue=0.8980392156862745)
    """
    match = _HEX_COLOR.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        logger.warning(f"Unparseable color '{value}', falling back to black")
        return BLACK
    red, green, blue = (int(group, 16) / 255 for group in match.groups())
    return RgbColor(red, green, blue)


class ResourceCache:
    """Palette, transform presets and identifier source for overlay generation."""

    def __init__(self):
        self._colors: Optional[dict[str, RgbColor]] = None
        self._salt = ''
        self._counter = 0

    @property
    def is_initialized(self) -> bool:
        return self._colors is not None

    def initialize(self, palette: Optional[Mapping[str, str]] = None) -> "ResourceCache":
        """Convert the palette once; later calls return the cache unchanged.

        Args:
            palette: Mapping of semantic color name to hex string. Merged over
                DEFAULT_PALETTE so every generator color is always present.

        Returns:
            This cache.
        """
        if self.is_initialized:
            return self

        merged = {**DEFAULT_PALETTE, **(palette or {})}
        self._colors = {name: hex_to_rgb(value) for name, value in merged.items()}
        self.start_run()
        logger.debug(f"Resource cache initialized with colors: {sorted(self._colors)}")
        return self

    def clear(self) -> None:
        """Discard cached resources; the next initialize() rebuilds them."""
        self._colors = None
        self._salt = ''
        self._counter = 0

    def start_run(self) -> None:
        """Draw a fresh identifier salt and restart the counter."""
        self._salt = uuid.uuid4().hex[:8]
        self._counter = 0

    def color(self, name: str) -> RgbColor:
        if self._colors is None:
            raise RuntimeError("ResourceCache used before initialize()")
        return self._colors[name]

    def transform(self, name: str, x: float = 0.0, y: float = 0.0) -> AffineTransform:
        """Return transform preset ``name`` translated to (x, y)."""
        return TRANSFORM_PRESETS[name].moved_to(x, y)

    def next_identifier(self) -> str:
        """Return a token unique within the current run."""
        if not self._salt:
            self.start_run()
        token = f"{self._salt}{self._counter:x}"
        self._counter += 1
        return token
