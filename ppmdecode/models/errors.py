"""Ошибки декодирования PPM.

Все ошибки наследуют `ValueError`: для вызывающего кода файл, который не
удалось разобрать, — это «не изображение», как и в `ImageService`.
"""
from __future__ import annotations

from typing import Optional


class PpmDecodeError(ValueError):
    """Базовая ошибка декодера PPM."""


class UnsupportedColorDepthError(PpmDecodeError):
    def __init__(self, max_color_value: Optional[str]) -> None:
        super().__init__(
            f"Only 8-bit color depth (max value 255) is supported, got {max_color_value!r}"
        )
        self.max_color_value = max_color_value


class UnsupportedFormatError(PpmDecodeError):
    def __init__(self, tag: Optional[str]) -> None:
        super().__init__(f"Unsupported PPM format: {tag!r}")
        self.format = tag


class PixelDataSizeMismatchError(PpmDecodeError):
    """Размер пиксельных данных не совпадает с `width * height * 3`.

    `expected` равен None, если ширину или высоту не удалось разобрать как число.
    """

    def __init__(self, expected: Optional[int], actual: int) -> None:
        super().__init__(
            f"Pixel data does not match expected size: expected {expected}, got {actual}"
        )
        self.expected = expected
        self.actual = actual
