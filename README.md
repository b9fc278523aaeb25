# pixelworks

A collection of small raster programs built around one in-memory pixel
surface (`pixelworks.surface.Surface`, 32-bit pixels in `0x00RRGGBB` layout):

- an OCR pipeline: greyscale conversion and Otsu-style thresholding
  (`pixelworks.binarize`), marking of line and character gaps
  (`pixelworks.segmentation`), cutting glyphs out to bitmap files
  (`pixelworks.letters`), turning glyphs into 40x40 input vectors
  (`pixelworks.glyphs`), a feed-forward network (`pixelworks.network`) with a
  plain-text save format (`pixelworks.storage`), and training and
  recognition (`pixelworks.ocr`);
- an XOR trainer for the same network (`pixelworks.xor`);
- visual demos: a Game-of-Life style automaton, a recursive square carpet,
  recursive circles, a bouncing line, a parabolic trajectory, a sorting
  visualiser and a pixel sorter for images;
- a tiny password challenge.

Images are loaded and saved with Pillow (`pixelworks.display.load_image`,
`save_image`); windows are drawn with pygame (`display_image`, which returns
a `Screen`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `pixelworks-life` | Runs ten generations of a small pattern on a 10x10 board in a window, printing `update` after each. A live cell survives only with exactly two live neighbours; a dead one comes alive with exactly three. |
| `pixelworks-fractals` | Draws a five-level square carpet on a 1000x1000 window and waits for a key. |
| `pixelworks-circles SIZE` | Draws nested circles of the given radius and waits for a key. |
| `pixelworks-bounce Y ALPHA` | Traces a line that sweeps back and forth, bouncing between the top and bottom edges, until the window is closed. |
| `pixelworks-parabola ALPHA BETA GAMMA` | Traces the curve `-0.005*ALPHA*x^2 + BETA*x + GAMMA` until it drops below the bottom edge. |
| `pixelworks-visualsort SIZE` | Shuffles SIZE values and animates a quicksort of them as bars. |
| `pixelworks-sortimage IMAGE` | Bubble-sorts the pixels of an image by raw value, showing each pass, then waits for a key. |
| `pixelworks-xor load` | Loads `./Save.txt`, trains it on XOR for 100 000 steps, then asks whether to save. |
| `pixelworks-xor new [s]` | Trains a new 2-2-3-2 network on XOR (`s` selects softmax output, otherwise sigmoid), then asks whether to save. |
| `pixelworks-ocr new` | Trains a new character network on the fonts under `./Data`, reads the segmented text under `./Text`, prints it, then asks whether to save to `Save.txt`. |
| `pixelworks-ocr load` | Loads `Save.txt` instead of training, then reads and prints `./Text` and asks whether to save. |
| `pixelworks-challenge PASSWORD` | Prints `OK` or `KO` depending on whether the password is right. |

For example:

```
pixelworks-circles 200
pixelworks-visualsort 400
pixelworks-challenge password
```

### Data layout for OCR

`./Data/Len.txt` holds the number of fonts; each `./Data/Police<n>/` holds a
`Len.txt` containing `67` and the bitmaps `0.bmp` .. `66.bmp`, one per
character of
`ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789,.-!?`.

`./Text` is laid out as `LetterWriter` writes it: `Len.txt` with the number of
lines, `Line<n>/Len.txt` with the number of words, and
`Line<n>/Word<m>/Len.txt` with the number of glyphs `0.bmp`, `1.bmp`, ...

## Using the library

The pixel surface:

```python
from pixelworks.surface import Surface

surface = Surface(40, 20)
white = surface.map_rgb(255, 255, 255)
surface.put_pixel(3, 4, white)
assert surface.get_rgb(surface.get_pixel(3, 4)) == (255, 255, 255)
```

Preparing a scanned page for recognition:

```python
from pixelworks.display import load_image
from pixelworks.segmentation import mark_regions
from pixelworks.letters import LetterWriter

page = load_image("page.png")
mark_regions(page)                        # binarise, then paint gaps red
LetterWriter("Text").save_letter(page)    # one bitmap per glyph
```

Reading it back with a saved network:

```python
from pixelworks.storage import load
from pixelworks.ocr import recognise_text

network = load("Save.txt")
print(recognise_text(network, "Text"), end="")
```

A network is written by `pixelworks.storage.save` (or `dump` to a stream) as
plain text, one value per line, and read back with `load`.

## What is not included

There is no command that segments a page: cutting a page into `./Text` is
done from Python with `mark_regions` and `LetterWriter`, as shown above. No
trained network or training fonts come with the package; `pixelworks-ocr`
needs `./Data` or a `Save.txt` of your own.