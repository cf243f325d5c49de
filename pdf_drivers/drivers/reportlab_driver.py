"""
ReportLab Driver

Lightweight PDF writer on top of the ReportLab canvas. The canvas draws
into memory; output() returns the document or writes it to a file.
"""

from io import BytesIO
from pathlib import Path
from typing import Optional
import logging

from reportlab.pdfgen.canvas import Canvas

from .base import MethodAliasMixin, apply_file_permissions, is_path


logger = logging.getLogger(__name__)


class Reportlab(MethodAliasMixin, Canvas):
    """
    PDF driver using the ReportLab canvas.

    ReportLab methods are camelCase; snake_case calls such as
    draw_string() or show_page() are resolved to them.

    Configuration:
        defaults: positional Canvas arguments after the file, e.g. [A4]
    """

    def __init__(self, config: Optional[dict] = None):
        self.config = dict(config or {})
        self._output_buffer = BytesIO()
        self._pdf_bytes = None
        super().__init__(self._output_buffer, *(self.config.get('defaults') or ()))

    def output(self, name=""):
        """
        Finish the document and serialize it.

        Args:
            name: File path or file-like object. If empty, the PDF is returned.

        Returns:
            PDF bytes if no name was given, otherwise None
        """
        if self._pdf_bytes is None:
            self.save()
            self._pdf_bytes = self._output_buffer.getvalue()

        if not name:
            return self._pdf_bytes

        if is_path(name):
            Path(name).write_bytes(self._pdf_bytes)
            apply_file_permissions(name)
            logger.info(f"Written PDF to {name}")
        else:
            name.write(self._pdf_bytes)
        return None
