"""An in-memory 8-bit image with interleaved channels."""

from __future__ import annotations

from collections.abc import Sequence


class Image:
    """Pixels stored row by row, each pixel holding ``channels`` bytes."""

    __slots__ = ("_width", "_height", "_channels", "_data")

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        channels: int = 0,
        data: bytes | bytearray | memoryview | None = None,
    ) -> None:
        if width < 0 or height < 0 or channels < 0:
            raise ValueError("image dimensions must not be negative")
        size = width * height * channels
        if data is None:
            buffer = bytearray(size)
        else:
            buffer = bytearray(data)
            if len(buffer) != size:
                raise ValueError(
                    f"image data holds {len(buffer)} bytes, expected {size}"
                )
        self._width = width
        self._height = height
        self._channels = channels
        self._data = buffer

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def data(self) -> bytearray:
        """The raw pixel bytes; changes to it change the image."""
        return self._data

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError("Pixel coordinates out of bounds")
        return (y * self._width + x) * self._channels

    def get_pixel(self, x: int, y: int) -> list[int]:
        """Return the channel values of the pixel at column ``x``, row ``y``."""
        start = self._offset(x, y)
        return list(self._data[start : start + self._channels])

    def set_pixel(self, x: int, y: int, values: Sequence[int]) -> None:
        """Set a pixel; on a 4-channel image, 3 values leave alpha untouched."""
        start = self._offset(x, y)
        count = len(values)
        if not (count == self._channels or (count == 3 and self._channels == 4)):
            raise ValueError(
                "Number of values does not match the number of channels"
            )
        self._data[start : start + count] = bytes(values)

    def copy(self) -> Image:
        """Return an image with its own copy of the pixel data."""
        return Image(self._width, self._height, self._channels, self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._channels == other._channels
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height}, channels={self._channels})"