"""Декодирование PPM (P3/P6) из буфера байтов.

Принципы:
- SRP: только разбор байтов в `PpmImage`; чтение файлов — в `ImageService`.
- Без состояния: один экземпляр `PpmDecoder` можно использовать из разных потоков.
"""
from __future__ import annotations

import logging
import math
import re
from typing import List, Optional, Tuple, Union

import numpy as np

from ppmdecode.models.errors import (
    PixelDataSizeMismatchError,
    UnsupportedColorDepthError,
    UnsupportedFormatError,
)
from ppmdecode.models.image_model import PpmImage

# ---------------- CONFIG ----------------
HEADER_PREFIX_SIZE = 20  # bytes decoded as text to read the P6 header
SUPPORTED_MAX_COLOR_VALUE = "255"
CHANNELS = 3
TEXT_ENCODING = "utf-8-sig"  # a leading BOM is dropped
# ----------------------------------------

BytesLike = Union[bytes, bytearray, memoryview]

_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

logger = logging.getLogger(__name__)


def _decode_text(data: BytesLike) -> str:
    return bytes(data).decode(TEXT_ENCODING, errors="replace")


def _split_tokens(text: str) -> List[str]:
    # leading whitespace yields an empty first token
    return _WHITESPACE_RE.split(text)


def _parse_int(token: Optional[str]) -> Optional[int]:
    """Целое из десятичного префикса токена ("12px" -> 12); None, если цифр нет."""
    if token is None:
        return None
    match = _LEADING_INT_RE.match(token)
    if match is None:
        return None
    return int(match.group(1))


def _coerce_sample(token: str) -> int:
    """Приводит текстовое значение канала к uint8 как беззнаковое 8-битное преобразование.

    Дробная часть отбрасывается, значение берётся по модулю 256.
    Нечисловые и бесконечные значения дают 0.
    """
    if not _DECIMAL_RE.fullmatch(token):
        return 0
    value = float(token)
    if not math.isfinite(value):
        return 0
    return math.trunc(value) % 256


class PpmDecoder:
    def decode(self, data: BytesLike) -> PpmImage:
        """Декодирует PPM-файл в формате P3 (ASCII) или P6 (бинарный).

        Определяет формат только по первому токену первых 20 байт и делегирует
        полный разбор заголовка соответствующему методу.

        Args:
            data: Полное содержимое файла.

        Returns:
            `PpmImage` с данными пикселей.

        Raises:
            UnsupportedFormatError: если формат не P3 и не P6.
            UnsupportedColorDepthError: если максимальное значение не 255.
            PixelDataSizeMismatchError: если размер данных не совпадает с заголовком.
        """
        prefix = _decode_text(data[:HEADER_PREFIX_SIZE])
        tag = _split_tokens(prefix)[0]
        logger.debug("Dispatching PPM format %r", tag)

        if tag == "P6":
            return self.decode_p6(data)
        if tag == "P3":
            return self.decode_p3(data)
        raise UnsupportedFormatError(tag)

    def decode_p6(self, data: BytesLike) -> PpmImage:
        """Декодирует бинарный P6.

        Начало пиксельных данных — позиция первой подстроки "255" в заголовке
        плюс 4 (три символа и один разделитель). Если "255" встречается раньше,
        например в ширине, смещение будет неверным и разбор завершится ошибкой
        размера. То же при нескольких байтах-разделителях после "255" (например, CRLF).
        """
        header = _decode_text(data[:HEADER_PREFIX_SIZE])
        tag, width, height, max_color_value = self.parse_header(_split_tokens(header))

        if tag != "P6":
            raise UnsupportedFormatError(tag)

        header_length = header.find(SUPPORTED_MAX_COLOR_VALUE) + len(SUPPORTED_MAX_COLOR_VALUE) + 1
        logger.debug("P6 %sx%s, payload offset %d", width, height, header_length)

        payload_view = memoryview(data)[header_length:]
        self._check_size(width, height, payload_view.nbytes)
        payload = np.frombuffer(payload_view, dtype=np.uint8)
        payload.flags.writeable = False

        return PpmImage(width, height, payload, max_color_value, "P6")

    def decode_p3(self, data: BytesLike) -> PpmImage:
        """Декодирует текстовый P3: все токены после заголовка — значения каналов."""
        tokens = _split_tokens(_decode_text(data))
        tag, width, height, max_color_value = self.parse_header(tokens)

        if tag != "P3":
            raise UnsupportedFormatError(tag)

        # empty tokens from surrounding whitespace are not samples, so "P3 0 0 255" is a 0x0 image
        values = [_coerce_sample(t) for t in tokens[4:] if t]
        logger.debug("P3 %sx%s, %d sample tokens", width, height, len(values))
        self._check_size(width, height, len(values))

        pixel_data = np.array(values, dtype=np.uint8)
        pixel_data.flags.writeable = False

        return PpmImage(width, height, pixel_data, max_color_value, "P3")

    def parse_header(self, tokens: List[str]) -> Tuple[Optional[str], Optional[int], Optional[int], int]:
        """Разбирает первые четыре токена: формат, ширина, высота, максимальное значение.

        Ширина и высота, которые не удалось разобрать, возвращаются как None;
        ошибка проявится позже как несовпадение размера данных.

        Raises:
            UnsupportedColorDepthError: если максимальное значение не "255".
        """
        tag, width, height, max_color_value = (list(tokens[:4]) + [None] * 4)[:4]

        if max_color_value != SUPPORTED_MAX_COLOR_VALUE:
            raise UnsupportedColorDepthError(max_color_value)

        return tag, _parse_int(width), _parse_int(height), int(max_color_value)

    @staticmethod
    def _check_size(width: Optional[int], height: Optional[int], actual: int) -> None:
        expected = None if width is None or height is None else width * height * CHANNELS
        if actual != expected:
            raise PixelDataSizeMismatchError(expected, actual)


_default_decoder = PpmDecoder()


def decode_ppm(data: BytesLike) -> PpmImage:
    """Декодирует PPM (P3 или P6) общим экземпляром `PpmDecoder`."""
    return _default_decoder.decode(data)
