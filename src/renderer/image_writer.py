# renderer/image_writer.py
import os
import tempfile
from PIL import Image
from core.errors import ImageWriteError
from core.log import child_logger
from renderer.tone_mapping import ImageBuffer

logger = child_logger("image_writer")

def _write_atomically(path, mode: str, encode) -> None:
    """
    Run encode(file) against a temporary file next to path and move it into
    place only once encoding finished. A failed write leaves nothing behind.
    """
    directory = os.path.dirname(os.path.abspath(path))
    try:
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".", suffix=".part")
    except OSError as e:
        raise ImageWriteError(path, e.strerror or str(e)) from e
    try:
        with os.fdopen(fd, mode) as out:
            encode(out)
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except (OSError, ValueError) as e:
        raise ImageWriteError(path, getattr(e, "strerror", None) or str(e)) from e
    finally:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)

def write_ppm(path, buffer: ImageBuffer) -> None:
    """
    Write the buffer as a plain-text (P3) pixel map, one pixel per line,
    top row first.
    """
    def encode(out):
        out.write(f"P3\n{buffer.width} {buffer.height}\n255\n")
        for row in buffer.pixels:
            out.writelines(f"{r} {g} {b}\n" for r, g, b in row)

    _write_atomically(path, "w", encode)
    logger.info("Wrote %dx%d image to %s", buffer.width, buffer.height, path)

def save_image(path, buffer: ImageBuffer) -> None:
    """
    Save the buffer, picking the encoder from the file extension. Plain .ppm
    files are written as text; everything else goes through Pillow.
    """
    ext = os.path.splitext(str(path))[1].lower()
    if ext in ("", ".ppm"):
        write_ppm(path, buffer)
        return
    image_format = Image.registered_extensions().get(ext)
    if image_format is None:
        raise ImageWriteError(path, f"unknown file extension {ext!r}")

    def encode(out):
        Image.fromarray(buffer.pixels).save(out, format=image_format)

    _write_atomically(path, "wb", encode)
    logger.info("Wrote %dx%d image to %s", buffer.width, buffer.height, path)
