"""Модели данных для изображений PPM.

Принципы:
- SRP: только структура данных и простые производные величины, без разбора файлов.
- Чистый код: неизменяемость (`frozen=True`, read-only массив) для предсказуемости.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, NamedTuple, Optional

import numpy as np
from PIL import Image

PpmFormat = Literal["P3", "P6"]


class Pixel(NamedTuple):
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class PpmImage:
    """Неизменяемое декодированное изображение PPM.

    Fields:
        width: Ширина, px.
        height: Высота, px.
        pixel_data: Плоский массив uint8 (R, G, B, R, G, B, ...) построчно,
            длина ровно `width * height * 3`. Массив только для чтения.
        max_color_value: Максимальное значение канала (всегда 255).
        format: Вариант PPM, из которого получены данные: "P3" или "P6".
    """
    width: int
    height: int
    pixel_data: np.ndarray = field(compare=False)
    max_color_value: int
    format: PpmFormat

    def __eq__(self, other: object) -> bool:
        """Равенство по заголовку и содержимому пикселей; хеш — только по заголовку."""
        if not isinstance(other, PpmImage):
            return NotImplemented
        return (
            (self.width, self.height, self.max_color_value, self.format)
            == (other.width, other.height, other.max_color_value, other.format)
            and np.array_equal(self.pixel_data, other.pixel_data)
        )

    def aspect_ratio(self) -> float:
        """Отношение сторон `width / height`."""
        if self.height == 0:
            # IEEE semantics instead of ZeroDivisionError
            return math.nan if self.width == 0 else math.copysign(math.inf, self.width)
        return self.width / self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Возвращает цвет пикселя (x, y), смещение в данных `(y * width + x) * 3`.

        Raises:
            IndexError: если координаты вне изображения.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) is outside {self.width}x{self.height} image")
        index = (y * self.width + x) * 3
        r, g, b = self.pixel_data[index:index + 3]
        return Pixel(int(r), int(g), int(b))

    def to_array(self) -> np.ndarray:
        """Представление данных формы (height, width, 3) без копирования."""
        return self.pixel_data.reshape((self.height, self.width, 3))

    def to_pil(self) -> Image.Image:
        """Конвертирует в `PIL.Image.Image` (режим RGB) для дальнейшей обработки."""
        # uint8 (H, W, 3) is picked up as RGB
        return Image.fromarray(self.to_array().copy())


@dataclass(frozen=True)
class LoadedImage:
    """Изображение, загруженное с диска, и метаданные файла.

    Fields:
        path: Путь к исходному файлу.
        image: Декодированное изображение.
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    image: PpmImage
    size_bytes: Optional[int]
