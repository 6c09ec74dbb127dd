# termarte

Small tools for drawing in a text terminal:

- **Sprite sheets** (`termarte.sprite`) drawn with 24-bit ANSI colour, two
  characters per pixel, from any image Pillow can read that is laid out as a
  horizontal strip of frames.
- **Terminal setup** (`termarte.terminal`): check whether output is an
  ANSI-capable terminal, ask it for another font size or window size, and
  pause until ENTER is pressed.
- **Keyboard polling** (`termarte.keyboard`): read a key without waiting,
  wait for one given key, show or hide the cursor and clear the screen.
- **Background tasks** (`termarte.async_tasks`): start a function in its own
  thread, then join it or let it run on its own.

## Installing

```
pip install .
```

The only dependency is Pillow, used to read sprite images.

## Sprite sheets

A sprite sheet is one image whose height equals the frame height and whose
width is a whole number of frames. Any other size, or a file that cannot be
read, raises `SpriteSheetError`.

```python
from termarte.sprite import SpriteSheet, SpriteSheetError

try:
    sheet = SpriteSheet.load("images/circle_sheet.png", 15, 15)
except SpriteSheetError as error:
    print(error)
else:
    # frame 0, black background ("R;G;B"), 60 columns in, 10 rows down
    sheet.draw_frame(0, "0;0;0", 60, 10)
```

Pixels with an alpha below 128 are painted with the background colour, given
as `"R;G;B"` or as a sequence of three numbers; every other pixel is drawn as
`██` in its own colour. `render_frame` returns the same escape sequences as a
string instead of writing them, and raises `IndexError` for a frame that does
not exist. `SpriteSheet.from_image` builds a sheet from a Pillow image already
in memory, and `frames` gives the number of frames.

`animate(iterations, delay, background, offset_x, offset_y)` plays every
frame in turn, sleeping `delay` seconds after each; `iterations` of zero or
less plays forever. It ends by drawing the first frame again, resetting the
colours and moving the cursor home.

## Terminal setup and keys

```python
from termarte import terminal, keyboard

terminal.initialize()        # True when stdout is a terminal that takes ANSI
terminal.set_font(13)
terminal.resize(200, 60)
keyboard.hide_cursor()
terminal.pause("Press ENTER...")
keyboard.show_cursor()
```

`set_font` and `resize` write the request to the terminal and return whether
it was written; `set_font` returns False inside Windows Terminal, which does
not allow the font to be changed. `terminal.font_sequence` and
`terminal.resize_sequence` return the raw escape sequences. When input is
not a terminal, `pause` only sleeps for one second and returns False.
`terminal.leave(status)` exits the program.

`keyboard.key_pressed` returns the code of the key waiting in the input, or
None, without blocking. `keyboard.is_key_pressed(key)` tells whether the
waiting key is `key`, keeping any other key for the next read.
`keyboard.wait_for_key(key)` blocks until that key arrives and returns its
code, or None if input ends first. `keyboard.ascii_to_vk` maps a character
to its Windows virtual-key code (0 when there is none).

## Background tasks

```python
from termarte.async_tasks import run

task = run(print, "Hello from a thread!")
task.join()      # wait for it; returns its result or raises its exception

slow = run(some_long_function)
slow.detach()    # let it run on its own
```

Each handle may be joined or detached once; a second call raises
`RuntimeError`. Task threads do not keep the program alive after it ends.

## Commands

```
termarte-async-demo     start a few threads, join some, detach one
                        (--name, --number, --pause)
termarte-screen-info    WASD resizes a framed area, F and G change the font size
                        (--horizontal, --vertical, --font); Ctrl+C quits
termarte-key-codes      shows the character and code of each key pressed;
                        Ctrl+C quits
termarte-sprite-demo    animates a sprite sheet and draws a single frame
                        (--sheet, --sheet-size, --image, --image-size,
                        --iterations, --delay)
```

The sprite demo reads `imagens/circle_sheet.png` and `imagens/gatojoinha.png`
by default; these images are not included, so pass your own with `--sheet`
and `--image`.

## What it does not do

The package only draws and reads keys; it does not play sound, and its
background tasks are plain threads with no scheduling or cancellation.