# awesomeascii

A command-line tool that turns PNG and JPEG images into ASCII art.

The image is scaled to the width you ask for (keeping its aspect ratio),
converted to grayscale, and each pixel is replaced by a character whose
density matches its brightness. The result is printed to the terminal or
written to a file. Only JPEG and PNG files are accepted; any other format
is reported as unsupported.

## Installation

```
pip install .
```

## Usage

### Basic conversion

```
awesome-ascii -i photo.jpg
```

Options:

| Option | Meaning |
| --- | --- |
| `-i`, `--input` | Image to convert (required) |
| `-w`, `--width` | Width of the output in characters, 0 to 65535; defaults to the terminal width (50 when it cannot be found) |
| `-a`, `--ascii-type` | Character set: `basic`, `binary`, `contrast`, `extended` or `high_detail` (default `basic`) |
| `-o`, `--output` | Write the art to this file instead of the terminal |
| `-C`, `--color` | Color every character with the pixel's true color (24-bit ANSI escape codes) |
| `-c`, `--concurrency` | Accepted on every command; it has no effect |
| `-v`, `--version` | Print the version and exit |

Examples:

```
awesome-ascii -i photo.jpg -w 120 -a high_detail
awesome-ascii -i photo.png -C -o art.txt
```

When something goes wrong (a missing file, an unsupported format, a bad
width) the message is printed to standard error as `Error: ...` and the
command exits with status 1.

### Colored mode

Draws every pixel with one character, colored with the pixel's color, and
prints the result:

```
awesome-ascii colored -i photo.jpg -H @ -w 100
```

`-H`/`--char` takes exactly one character (default `#`). This command
takes `-i`, `-H` and `-w` only and always prints to the terminal.

### Edge detection

Runs the Sobel operator over the image and draws its edges with
`_`, `|`, `/` and `\` according to their direction:

```
awesome-ascii sobel -i photo.jpg -w 120 -t 100
```

`-t`/`--threshold` (0–255, default 130) controls how strong an edge must
be to be drawn: lower values draw fewer edges. `-i`, `-w` and `-o` work as
for the basic conversion; `-a` and `-C` are accepted but do not change the
edge drawing.

### Interactive mode

Asks, in this order, for the width, the image path, the character set
(by name or by number; an empty answer picks `basic`) and whether to use
color (`y`/`N`), then prints the result:

```
awesome-ascii interactive
```

## Using it from Python

```python
from awesomeascii.charsets import AsciiCharType
from awesomeascii.files import open_image
from awesomeascii.images import convert_image_to_ascii

img = open_image("photo.jpg")
print(convert_image_to_ascii(img, 80, AsciiCharType.EXTENDED, False))
```

- `awesomeascii.files.open_image` opens a JPEG or PNG file and raises
  `ImageLoadError` when it cannot; `write_text` saves text to a file.
- `awesomeascii.images` has the individual steps: `scale_image`,
  `convert_to_grayscale`, `map_pixels_to_ascii` and `rgb_to_ansi`.
- `awesomeascii.charsets.parse_ascii_type` turns a set name into an
  `AsciiCharType`; `AsciiCharType.chars()` gives its characters, darkest first.
- `awesomeascii.sobel.apply_sobel` returns a `SobelImage` whose
  `to_ascii(threshold)` method renders the edges and whose
  `edge_angle_at(x, y)` gives an edge's direction scaled to [0, 1].
- `awesomeascii.terminal.get_terminal_size` returns a `TermSize`.

## What it does not do

Everything runs in a single process: the `--concurrency` option is read
but the work is not split across workers. Interactive mode uses plain
text prompts and always prints its result rather than writing a file.