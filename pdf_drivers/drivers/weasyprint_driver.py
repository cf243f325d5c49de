"""
WeasyPrint Driver

HTML to PDF conversion using the WeasyPrint engine.
"""

from pathlib import Path
from typing import Optional
import logging

try:
    from weasyprint import HTML, CSS
    WEASYPRINT_AVAILABLE = True
except (ImportError, OSError):
    # OSError: WeasyPrint is installed but its system libraries (Pango) are not
    WEASYPRINT_AVAILABLE = False

from ..exceptions import PdfError
from .base import MethodAliasMixin, apply_file_permissions, is_path


logger = logging.getLogger(__name__)


class Weasyprint(MethodAliasMixin):
    """
    PDF driver converting HTML documents with WeasyPrint.

    Usage:
        pdf = forge('weasyprint')
        pdf.load_html('<h1>Invoice</h1>', base_url='http://example.com')
        pdf.set_paper('A4', 'landscape')
        pdf.output('/tmp/invoice.pdf')

    Configuration:
        defaults: positional set_paper() arguments, e.g. ['A4', 'portrait']
        stylesheets: CSS files applied to every document
    """

    def __init__(self, config: Optional[dict] = None):
        """
        Initialize the driver.

        Args:
            config: Merged driver configuration
        """
        if not WEASYPRINT_AVAILABLE:
            raise ImportError(
                "WeasyPrint is not installed. "
                "Install it with: pip install weasyprint"
            )

        self.config = dict(config or {})
        self.stylesheets = list(self.config.get('stylesheets') or [])
        self.html = None
        self.base_url = None
        self.paper = 'A4'
        self.orientation = 'portrait'
        self._pdf_bytes = None

        defaults = self.config.get('defaults')
        if defaults:
            self.set_paper(*defaults)

    def load_html(self, html: str, base_url: Optional[str] = None) -> None:
        """
        Load the HTML document to convert.

        Args:
            html: HTML string
            base_url: Base URL for resolving relative URLs (images, CSS)
        """
        self.html = html
        self.base_url = base_url
        self._pdf_bytes = None

    def load_html_file(self, path) -> None:
        """Load the HTML document from a file; relative URLs resolve against its directory."""
        path = Path(path)
        self.load_html(path.read_text(encoding='utf-8'), base_url=str(path.parent))

    def set_paper(self, size: str = 'A4', orientation: str = 'portrait') -> None:
        """
        Set the page size and orientation.

        Args:
            size: CSS page size (e.g., 'A4', 'letter')
            orientation: 'portrait' or 'landscape'
        """
        self.paper = size
        self.orientation = orientation
        self._pdf_bytes = None

    def render(self) -> bytes:
        """
        Render the loaded HTML to PDF.

        Returns:
            PDF content as bytes

        Raises:
            PdfError: If no HTML was loaded or WeasyPrint failed to render it
        """
        if self.html is None:
            raise PdfError("No HTML loaded, call load_html() first.")

        if self._pdf_bytes is not None:
            return self._pdf_bytes

        try:
            html_doc = HTML(string=self.html, base_url=self.base_url)

            css_list = [CSS(string=f"@page {{ size: {self.paper} {self.orientation}; }}")]
            css_list += [CSS(filename=css) for css in self.stylesheets]

            self._pdf_bytes = html_doc.write_pdf(stylesheets=css_list)

            logger.info(f"Successfully rendered PDF: {len(self._pdf_bytes)} bytes")
            return self._pdf_bytes

        except Exception as e:
            logger.error(f"Failed to render PDF: {e}", exc_info=True)
            raise PdfError(f"Failed to render PDF: {e}") from e

    def output(self, name=""):
        """
        Render and serialize the document.

        Args:
            name: File path or file-like object. If empty, the PDF is returned.

        Returns:
            PDF bytes if no name was given, otherwise None
        """
        pdf_bytes = self.render()

        if not name:
            return pdf_bytes

        if is_path(name):
            Path(name).write_bytes(pdf_bytes)
            apply_file_permissions(name)
            logger.info(f"Written PDF to {name}")
        else:
            name.write(pdf_bytes)
        return None
