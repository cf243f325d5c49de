"""
QR Code Helpers

Encodes QR codes with the ReportLab QR encoder and rasterises them to PNG
with Pillow, so they can be placed in a document with image().
"""

from io import BytesIO
from typing import Optional, Sequence
import logging

from PIL import Image, ImageDraw
from reportlab.graphics.barcode import qrencoder


logger = logging.getLogger(__name__)


def encode_qrcode(data: str) -> qrencoder.QRCode:
    """
    Encode data as a QR code symbol.

    The smallest version that fits the data is used, with error
    correction level L.
    """
    qr = qrencoder.QRCode(None, qrencoder.QRErrorCorrectLevel.L)
    qr.addData(data)
    qr.make()
    return qr


def qrcode_png(
    data: str,
    size: int = 3,
    fgcolor: Sequence[int] = (0, 0, 0),
    bgcolor: Optional[Sequence[int]] = None
) -> Optional[bytes]:
    """
    Generate a QR code image.

    Args:
        data: Text or URL to encode
        size: Width and height of a single QR module in pixels
        fgcolor: RGB (0-255) color of the dark modules
        bgcolor: RGB (0-255) background color. If None, the background is transparent.

    Returns:
        PNG image bytes, or None if the data could not be encoded
    """
    try:
        qr = encode_qrcode(data)
    except Exception as e:
        logger.warning(f"Failed to encode QR code: {e}")
        return None

    count = qr.getModuleCount()
    image = Image.new('RGBA', (count * size, count * size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    fill = tuple(fgcolor[:3]) + (255,)

    for row in range(count):
        for col in range(count):
            if qr.isDark(row, col):
                draw.rectangle(
                    [col * size, row * size, (col + 1) * size - 1, (row + 1) * size - 1],
                    fill=fill
                )

    # need to replace the transparent background?
    if bgcolor is not None:
        background = Image.new('RGB', image.size, tuple(bgcolor[:3]))
        background.paste(image, (0, 0), image)
        image = background

    buffer = BytesIO()
    image.save(buffer, format='PNG')
    return buffer.getvalue()
