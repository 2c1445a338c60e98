"""Точка входа: декодирует PPM-файл и печатает сведения о нём."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ppmdecode.models.errors import PpmDecodeError
from ppmdecode.services.image_service import ImageService


def main(argv: Optional[List[str]] = None) -> int:
    """Загружает файл через `ImageService` и выводит формат, размеры и первый пиксель."""
    ap = argparse.ArgumentParser(description="Decode a P3/P6 PPM file (8-bit) and print its properties.")
    ap.add_argument("input", help="Input .ppm path")
    ap.add_argument("--save", default=None, help="If set, save the decoded image to this path (format from extension)")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        loaded = ImageService().load_image(args.input)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except PpmDecodeError as e:
        print(f"Decoding failed: {e}", file=sys.stderr)
        return 2

    image = loaded.image
    print(f"File:         {loaded.path} ({loaded.size_bytes} bytes)")
    print(f"Format:       {image.format}")
    print(f"Size:         {image.width}x{image.height}, max value {image.max_color_value}")
    print(f"Pixels:       {image.pixel_count}")
    print(f"Aspect ratio: {image.aspect_ratio():.4f}")
    if image.width > 0 and image.height > 0:
        print(f"Pixel (0,0):  {tuple(image.get_pixel(0, 0))}")

    if args.save:
        try:
            image.to_pil().save(args.save)
        except (ValueError, OSError) as e:
            print(f"Saving failed: {e}", file=sys.stderr)
            return 2
        print(f"Saved {args.save}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
