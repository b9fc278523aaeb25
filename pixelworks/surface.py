"""An in-memory 32-bit RGB pixel surface."""

from __future__ import annotations

from PIL import Image

_CHANNEL_MAX = 0xFF
_PIXEL_MASK = 0xFFFFFFFF


class Surface:
    """A width x height grid of 32-bit pixels in 0x00RRGGBB layout.

    A new surface is all black. Coordinates are (x, y) with x the column
    and y the row; anything outside the surface raises IndexError.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid surface size {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def __repr__(self) -> str:
        return f"Surface(width={self.width}, height={self.height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Surface):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._pixels == other._pixels
        )

    @staticmethod
    def _check_channel(name: str, value: int) -> int:
        if not 0 <= value <= _CHANNEL_MAX:
            raise ValueError(f"{name} channel out of range: {value}")
        return value

    def map_rgb(self, r: int, g: int, b: int) -> int:
        """Pack three 8-bit channels into a pixel value."""
        r = self._check_channel("red", r)
        g = self._check_channel("green", g)
        b = self._check_channel("blue", b)
        return (r << 16) | (g << 8) | b

    def get_rgb(self, pixel: int) -> tuple[int, int, int]:
        """Unpack a pixel value into its (r, g, b) channels."""
        return (pixel >> 16) & _CHANNEL_MAX, (pixel >> 8) & _CHANNEL_MAX, pixel & _CHANNEL_MAX

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} surface"
            )
        return y * self.width + x

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column x, row y."""
        return self._pixels[self._offset(x, y)]

    def put_pixel(self, x: int, y: int, pixel: int) -> None:
        """Store a pixel value at column x, row y."""
        self._pixels[self._offset(x, y)] = pixel & _PIXEL_MASK

    def copy_region(self, x: int, y: int, width: int, height: int) -> Surface:
        """Return a new width x height surface holding the region at (x, y).

        Parts of the region that fall outside this surface stay black.
        """
        region = Surface(width, height)
        for row in range(height):
            src_y = y + row
            if not 0 <= src_y < self.height:
                continue
            for col in range(width):
                src_x = x + col
                if 0 <= src_x < self.width:
                    region._pixels[row * width + col] = self._pixels[
                        src_y * self.width + src_x
                    ]
        return region

    def to_image(self) -> Image.Image:
        """Return the surface as an RGB Pillow image."""
        image = Image.new("RGB", (self.width, self.height))
        image.putdata([self.get_rgb(pixel) for pixel in self._pixels])
        return image

    @classmethod
    def from_image(cls, image: Image.Image) -> Surface:
        """Build a surface from a Pillow image, converting it to RGB."""
        rgb = image.convert("RGB")
        width, height = rgb.size
        surface = cls(width, height)
        surface._pixels = [(r << 16) | (g << 8) | b for r, g, b in rgb.getdata()]
        return surface