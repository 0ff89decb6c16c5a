# cubkit

A small toolkit with no dependencies. It provides building blocks for simple
graphics programs and for text handling.

## Modules

- `cubkit.colors`
  - `lookup_color(name)` turns an X11 colour name into a `0xRRGGBB` value. Case is ignored.
  - The name `none` gives `-1`. An unknown name raises `KeyError`.
  - `COLOR_NAMES` is the read-only table that lies behind the lookup.
- `cubkit.image`
  - `Image(width, height)` is a grid of 32-bit pixels. Every pixel starts at zero.
  - It has `put_pixel(x, y, color)`, `get_pixel(x, y)` and `rows()`. `rows()` yields a copy of each row, from the top down.
  - Coordinates outside the image raise `IndexError`.
  - `draw_rectangle(image, horizontal, vertical)` fills a rectangle set in from the edges by those margins. The fill is a blue gradient that gets one step stronger on each row.
- `cubkit.xpm`
  - `xpm_file_to_image(path)` reads an XPM file. Comments are stripped and the quoted strings are taken out.
  - `xpm_to_image(xpm_data)` and `parse_xpm(lines)` build an image from XPM strings that are already split into lines.
  - Pixels coloured `None` become `0xFF000000`.
  - Malformed data raises `XpmError`, which is a subclass of `ValueError`.
  - The helpers `text_to_rgb`, `strip_comments` and `quoted_strings` are public as well.
- `cubkit.wordtab`
  - `split_words(text)` splits on spaces and tabs.
  - `find(text, needle, limit)` searches for a substring.
  - `find_unquoted(text, needle, limit)` searches the same way but skips matches inside double quotes.
- `cubkit.linereader`
  - `LineReader(stream, buffer_size=1024)` reads a text or binary stream in chunks of a fixed size.
  - It returns lines without their newline, through `read_line()` or by iteration.
  - The text after the last newline comes back as a final line. That line is empty if the stream ends with a newline.
  - `read_lines(stream, buffer_size)` returns all of these lines as a list.
- `cubkit.chars`
  - Tests for ASCII character classes: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print`.
  - Case conversion: `to_upper` and `to_lower`.
  - Each takes a character code or a one-character string.
- `cubkit.numbers`
  - `atoi(text)` parses a leading integer and wraps the result to a signed 32-bit value.
  - `printf_atoi(text)` returns `(value, length)`. It raises `OverflowError` if the value does not fit in 32 bits.
  - `itoa(n)` formats an integer.
- `cubkit.output`
  - `put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream. The default stream is standard output.
- `cubkit.memory`
  - Operations on byte buffers: `memset`, `bzero`, `calloc`, `memcpy`, `memccpy`, `memmove`, `memchr` and `memcmp`.
  - They return indices rather than pointers.
- `cubkit.strings`
  - String helpers: `split`, `strchr`, `strrchr`, `strnstr`, `strncmp`, `strlcpy`, `strlcat`, `strjoin`, `strtrim`, `substr` and `strmapi`.
- `cubkit.lists`
  - `LinkedList(items=())` is a singly linked list.
  - It has `push_front`, `push_back`, `last`, `len()`, iteration, `for_each`, `map(func, delete=None)` and `clear(delete=None)`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from cubkit.colors import lookup_color
from cubkit.xpm import xpm_to_image

assert lookup_color("Dodger Blue") == 0x1E90FF

image = xpm_to_image([
    "2 1 2 1",
    "a c #FF0000",
    "b c blue",
    "ab",
])
assert image.get_pixel(0, 0) == 0xFF0000
assert image.get_pixel(1, 0) == 0x0000FF
```

```python
import io
from cubkit.linereader import read_lines

assert read_lines(io.BytesIO(b"one\ntwo\nthree"), 4) == [b"one", b"two", b"three"]
```

## What it does not do

- cubkit has no window, no display and no event loop. Images live only in memory.
- It has no command-line program.
- It does not parse map or scene files.
- It does not render a 3D view, run a game or save screenshots.