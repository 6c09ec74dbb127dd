"""Small interactive programs: sprite demo, screen-area sizer and key-code viewer."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from termarte.keyboard import clear_screen, hide_cursor, key_pressed
from termarte.sprite import SpriteSheet, SpriteSheetError
from termarte.terminal import initialize, pause, resize, set_font

_POLL_INTERVAL = 0.01

# key -> (attribute, step)
_AREA_KEYS = {
    "d": ("horizontal", 1),
    "a": ("horizontal", -1),
    "s": ("vertical", 1),
    "w": ("vertical", -1),
    "g": ("font", 1),
    "f": ("font", -1),
}


@dataclass
class ScreenArea:
    """A frame whose size and font height are adjusted with WASD, F and G."""

    horizontal: int = 20
    vertical: int = 20
    font: int = 16

    def apply_key(self, key: Union[int, str, None]) -> bool:
        """Apply a key press; return True when the key is one the area reacts to.

        Sizes and font never go below zero.
        """
        if key is None:
            return False
        char = key if isinstance(key, str) else (chr(key) if 0 <= key < 0x110000 else "")
        action = _AREA_KEYS.get(char.lower()) if len(char) == 1 else None
        if action is None:
            return False
        name, step = action
        value = getattr(self, name)
        if step > 0 or value != 0:
            setattr(self, name, value + step)
        return True

    def render(self) -> str:
        """Return the text that draws the corners of the area and its settings."""
        edge = "█" + " " * self.horizontal + "█"
        return (
            edge
            + "\n"
            + "\n" * self.vertical
            + edge
            + f"\033[H\033[2CHorizontal: {self.horizontal + 2}\n"
            + f"\033[2CVertical: {self.vertical + 2}\n"
            + f"\033[2CFonte: {self.font}\n"
            + "\033[2CWASD = Alterar Tamanho da Área\n"
            + "\033[2CF e G = Alterar Fonte"
        )


def describe_key(code: Optional[int]) -> str:
    """Describe a key code as the key-code viewer shows it."""
    if code is None or code < 0:
        return "Nenhuma tecla pressionada"
    return f"Tecla pressionada: {chr(code)} | Ascii: {code}"


def screen_info_main(argv: Optional[Sequence[str]] = None) -> int:
    """Let the user size a screen area with the keyboard until interrupted."""
    parser = argparse.ArgumentParser(
        prog="termarte-screen-info",
        description="Find the area and font size that fit a drawing.",
    )
    parser.add_argument("--horizontal", type=int, default=20)
    parser.add_argument("--vertical", type=int, default=20)
    parser.add_argument("--font", type=int, default=16)
    args = parser.parse_args(argv)

    initialize()
    area = ScreenArea(args.horizontal, args.vertical, args.font)
    dirty = True
    try:
        while True:
            if area.apply_key(key_pressed()):
                dirty = True
            if dirty:
                clear_screen()
                set_font(area.font)
                sys.stdout.write(area.render())
                sys.stdout.flush()
                dirty = False
            else:
                time.sleep(_POLL_INTERVAL)
    except KeyboardInterrupt:
        pass
    return 0


def key_codes_main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the character and code of every key pressed until interrupted."""
    parser = argparse.ArgumentParser(
        prog="termarte-key-codes",
        description="Show the code of each key pressed.",
    )
    parser.parse_args(argv)

    try:
        while True:
            code = key_pressed()
            if code is None:
                time.sleep(_POLL_INTERVAL)
                continue
            clear_screen()
            sys.stdout.write(describe_key(code))
            sys.stdout.flush()
    except KeyboardInterrupt:
        pass
    return 0


def sprite_main(argv: Optional[Sequence[str]] = None) -> int:
    """Animate a sprite sheet, then draw a single-frame image."""
    parser = argparse.ArgumentParser(
        prog="termarte-sprite",
        description="Animate a sprite sheet and draw one image on the terminal.",
    )
    parser.add_argument("--sheet", default="imagens/circle_sheet.png")
    parser.add_argument("--sheet-size", type=int, default=15)
    parser.add_argument("--image", default="imagens/gatojoinha.png")
    parser.add_argument("--image-size", type=int, default=32)
    parser.add_argument("--iterations", type=int, default=4)
    parser.add_argument("--delay", type=float, default=0.07)
    args = parser.parse_args(argv)

    initialize()
    if not set_font(13):
        print(
            "O ambiente não permite troca de fonte, altere o tamanho manualmente "
            "[Pode funcionar com control + scroll do mouse]"
        )
    hide_cursor()
    resize(200, 60)
    pause("Pressione Qualquer tecla..\n")

    try:
        animation = SpriteSheet.load(args.sheet, args.sheet_size, args.sheet_size)
    except SpriteSheetError as exc:
        print(exc, file=sys.stderr)
        return 1
    animation.animate(args.iterations, args.delay, "0;0;0", 2, 2)

    try:
        picture = SpriteSheet.load(args.image, args.image_size, args.image_size)
    except SpriteSheetError as exc:
        print(exc, file=sys.stderr)
        return 1
    picture.draw_frame(0, "0;0;0", 60, 10)

    sys.stdout.write("\n\033[0m")
    sys.stdout.flush()
    pause("Pressione qualquer tecla para fechar")
    return 0