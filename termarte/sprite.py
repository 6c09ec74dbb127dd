"""Sprite sheets drawn on the terminal with 24-bit ANSI colours."""

from __future__ import annotations

import itertools
import sys
import time
from dataclasses import dataclass
from os import PathLike
from typing import Optional, Sequence, TextIO, Union

from PIL import Image, UnidentifiedImageError

RESET = "\033[0m"
HOME = "\033[H"
OPAQUE_BLOCK = "██"
TRANSPARENT_BLOCK = "  "
ALPHA_THRESHOLD = 128

Background = Union[str, Sequence[int]]


class SpriteSheetError(Exception):
    """Raised when a sprite sheet cannot be loaded or does not fit its frame size."""


def _background_text(background: Background) -> str:
    if isinstance(background, str):
        return background
    return ";".join(str(channel) for channel in background)


@dataclass(frozen=True, eq=False)
class SpriteSheet:
    """Frames laid out side by side in one RGBA image, each one character row per pixel row."""

    image: Image.Image
    frame_width: int
    frame_height: int

    def __post_init__(self) -> None:
        if self.frame_width <= 0 or self.frame_height <= 0:
            raise SpriteSheetError("frame size must be positive")
        width, height = self.image.size
        if width % self.frame_width != 0 or height != self.frame_height:
            raise SpriteSheetError("Sprite sheet dimensions not multiple of frame size.")
        if self.image.mode != "RGBA":
            object.__setattr__(self, "image", self.image.convert("RGBA"))

    @classmethod
    def load(
        cls,
        filename: Union[str, "PathLike[str]"],
        frame_width: int,
        frame_height: int,
    ) -> "SpriteSheet":
        """Read an image file and split it into frames of the given size."""
        try:
            with Image.open(filename) as opened:
                image = opened.convert("RGBA")
        except (OSError, UnidentifiedImageError) as exc:
            raise SpriteSheetError(f"failed to load {filename}") from exc
        return cls(image, frame_width, frame_height)

    @classmethod
    def from_image(
        cls, image: Image.Image, frame_width: int, frame_height: int
    ) -> "SpriteSheet":
        """Build a sheet from an image already in memory."""
        return cls(image.convert("RGBA"), frame_width, frame_height)

    @property
    def frames(self) -> int:
        """Number of frames in the sheet."""
        return self.image.width // self.frame_width

    def render_frame(
        self,
        index: int,
        background: Background = "0;0;0",
        offset_x: int = 0,
        offset_y: int = 0,
    ) -> str:
        """Return the escape sequences that draw frame ``index`` at the given offset.

        Pixels with alpha below 128 are filled with the ``background`` colour
        ("R;G;B" or a sequence of three channels).
        """
        if not 0 <= index < self.frames:
            raise IndexError(f"frame {index} out of range (0..{self.frames - 1})")
        bg = _background_text(background)
        pixels = self.image.load()
        start_x = index * self.frame_width
        parts = []
        for y in range(self.frame_height):
            parts.append(f"\033[{offset_y + y + 1};{offset_x + 1}H")
            for x in range(start_x, start_x + self.frame_width):
                r, g, b, a = pixels[x, y]
                if a < ALPHA_THRESHOLD:
                    parts.append(f"\033[48;2;{bg}m{TRANSPARENT_BLOCK}")
                else:
                    parts.append(f"\033[38;2;{r};{g};{b}m{OPAQUE_BLOCK}")
            parts.append(RESET)
        return "".join(parts)

    def draw_frame(
        self,
        index: int,
        background: Background = "0;0;0",
        offset_x: int = 0,
        offset_y: int = 0,
        stream: Optional[TextIO] = None,
    ) -> None:
        """Write frame ``index`` to ``stream`` (standard output by default)."""
        stream = sys.stdout if stream is None else stream
        stream.write(self.render_frame(index, background, offset_x, offset_y))
        stream.flush()

    def animate(
        self,
        iterations: int = 0,
        delay: float = 0.0,
        background: Background = "0;0;0",
        offset_x: int = 0,
        offset_y: int = 0,
        stream: Optional[TextIO] = None,
    ) -> None:
        """Play every frame ``iterations`` times, forever when it is 0 or less.

        ``delay`` is the pause in seconds after each frame. The animation ends
        on the first frame with attributes reset and the cursor at home.
        """
        stream = sys.stdout if stream is None else stream
        delay = max(delay, 0.0)
        rounds = itertools.count() if iterations <= 0 else range(iterations)
        for _ in rounds:
            for index in range(self.frames):
                self.draw_frame(index, background, offset_x, offset_y, stream)
                time.sleep(delay)
        self.draw_frame(0, background, offset_x, offset_y, stream)
        stream.write(RESET + HOME)
        stream.flush()