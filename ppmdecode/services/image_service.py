"""Загрузка PPM-файлов с диска и упаковка метаданных.

Принципы:
- SRP: класс отвечает только за чтение файла; разбор байтов делегирует `PpmDecoder`.
- OCP: новые источники (стрим, URL) можно добавить отдельными методами.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ppmdecode.models.image_model import LoadedImage
from ppmdecode.services.decoder_service import PpmDecoder

logger = logging.getLogger(__name__)


class ImageService:
    def __init__(self, decoder: Optional[PpmDecoder] = None) -> None:
        self._decoder = decoder or PpmDecoder()

    def load_image(self, file_path: str | Path) -> LoadedImage:
        """Загружает PPM-файл с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `LoadedImage` c декодированным `PpmImage` и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            PpmDecodeError: если файл не удалось декодировать (подкласс `ValueError`).
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        data = path.read_bytes()
        image = self._decoder.decode(data)
        logger.debug("Loaded %s: %s %dx%d", path, image.format, image.width, image.height)

        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return LoadedImage(path=path, image=image, size_bytes=size_bytes)
