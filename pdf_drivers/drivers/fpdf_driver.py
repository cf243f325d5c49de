"""
fpdf2 Driver

Adapter around the fpdf2 FPDF engine. The driver is the engine itself,
extended with the conveniences used by our documents: background images,
label/value rows, QR codes, and exceptions instead of engine errors.
"""

from dataclasses import dataclass
from typing import Optional, Sequence
import functools
import inspect
import logging
import os
import types

from fpdf import FPDF, XPos, YPos
from fpdf.errors import FPDFException

from ..barcodes import qrcode_png
from ..exceptions import PdfError
from .base import MethodAliasMixin, apply_file_permissions, is_path


logger = logging.getLogger(__name__)


# Area covered by a background image (A4 portrait, in mm)
BACKGROUND_WIDTH = 210
BACKGROUND_HEIGHT = 297

# Line height as a multiple of the font size
LINE_HEIGHT_FACTOR = 1.2


@dataclass(frozen=True)
class PageMark:
    """Position where the page content starts, set after a background is drawn"""

    page: int
    x: float
    y: float


def resolve_row_end(left_end: tuple, right_end: tuple) -> tuple:
    """
    Determine where a two-column row ends.

    Both columns start on the same row but may wrap onto different pages.
    The row ends on the later page; if both columns end on the same page,
    it ends below the longer one.

    Args:
        left_end: (page, y) after the left column was written
        right_end: (page, y) after the right column was written

    Returns:
        (page, y) where the next content should start
    """
    left_page, left_y = left_end
    right_page, right_y = right_end

    if left_page == right_page:
        return left_page, max(left_y, right_y)
    if left_page > right_page:
        return left_page, left_y
    return right_page, right_y


def engine_errors(method):
    """Route FPDFException raised by an engine method through Fpdf.error()."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except FPDFException as e:
            # the engine is being (re)initialized, there is nothing to reset
            if not self.__dict__.get('_engine_ready'):
                raise
            self.error(str(e))

    return wrapper


def bridge_engine_errors(cls):
    """Class decorator applying engine_errors to every public FPDF method not overridden by cls."""
    for name in dir(FPDF):
        if name.startswith('_') or name in vars(cls):
            continue
        attr = inspect.getattr_static(FPDF, name)
        if isinstance(attr, types.FunctionType):
            setattr(cls, name, engine_errors(attr))
    return cls


@bridge_engine_errors
class Fpdf(MethodAliasMixin, FPDF):
    """
    PDF driver using the fpdf2 engine.

    Configuration:
        defaults: positional FPDF constructor arguments, e.g. ['P', 'mm', 'A4']
    """

    def __init__(self, config: Optional[dict] = None):
        """
        Initialize the driver.

        Args:
            config: Merged driver configuration
        """
        self.config = dict(config or {})
        self.page_mark = None

        # do we have any defaults to pass on to the engine's constructor?
        self._engine_args = tuple(self.config.get('defaults') or ())
        self._engine_ready = False
        try:
            super().__init__(*self._engine_args)
        except FPDFException as e:
            raise PdfError(str(e)) from e
        self._engine_ready = True

    @engine_errors
    def add_page(self, *args, **kwargs):
        """
        Start a new page.

        If the current page is not the last one (the document was rewound
        to an earlier page), continue on the page that follows instead of
        inserting a new one.
        """
        if 0 < self.page < len(self.pages):
            self.page += 1
            self.set_xy(self.l_margin, self.t_margin)
            return
        super().add_page(*args, **kwargs)

    @engine_errors
    def output(self, name="", *args, **kwargs):
        """
        Serialize the document.

        When written to a file, the configured file permissions are applied.

        Args:
            name: File path or file-like object. If empty, the PDF is returned.

        Returns:
            PDF bytes if no name was given, otherwise None
        """
        result = super().output(name, *args, **kwargs)

        if is_path(name):
            apply_file_permissions(name)
            logger.info(f"Written PDF to {os.fspath(name)}")

        return result

    def error(self, msg: str):
        """
        Abort document generation.

        The engine is reset, discarding the document, before the error is raised.

        Raises:
            PdfError: Always
        """
        self._destroy()
        raise PdfError(msg)

    def _destroy(self) -> None:
        """Discard the current document by re-initializing the engine."""
        logger.debug("Resetting fpdf2 engine state")
        self._engine_ready = False
        FPDF.__init__(self, *self._engine_args)
        self._engine_ready = True
        self.page_mark = None

    def set_page_mark(self) -> None:
        """
        Mark the current position as the start of the page content.

        The mark is kept in page_mark for the caller, e.g. to place header
        or body content relative to a background; the driver does not read it.
        """
        self.page_mark = PageMark(self.page, self.get_x(), self.get_y())

    def set_background_image(self, file=None) -> None:
        """
        Set the image to be used as the page background.

        Args:
            file: Image file to cover the page with. None/False disables the background.
        """
        if not file or not os.path.isfile(file):
            return

        # get the current page break margin and mode
        margin = self.b_margin
        auto_page_break = self.auto_page_break

        # the image must not trigger a page break
        self.set_auto_page_break(False, 0)

        self.image(file, 0, 0, BACKGROUND_WIDTH, BACKGROUND_HEIGHT)

        self.set_auto_page_break(auto_page_break, margin)

        # set the starting point for the page content
        self.set_page_mark()

    def _line_height(self) -> float:
        return self.font_size * LINE_HEIGHT_FACTOR

    def write_line(self, text, extra_lines: int = 0) -> None:
        """
        Write a full line to the PDF.

        Args:
            text: Text to be written
            extra_lines: Number of blank lines to add after this one
        """
        line_height = self._line_height()
        self.write(line_height, str(text))
        self.ln(line_height)

        if extra_lines > 0:
            self.ln(line_height * extra_lines)

    def write_cells(
        self,
        left,
        right,
        left_width: float = 40,
        colon: bool = True,
        border=0,
        markdown: bool = False
    ) -> None:
        """
        Write a row with a fixed width left column and a right column.

        Both columns start on the current row and may wrap independently,
        also onto following pages. Afterwards the cursor is placed below
        whichever column ended last.

        Args:
            left: Left column text
            right: Right column text
            left_width: Width of the left column
            colon: Prefix the right column with ': '
            border: Cell border, as accepted by multi_cell()
            markdown: Interpret **bold**, __italics__ and --underline-- markup
        """
        line_height = self._line_height()
        page_start = self.page
        x_start = self.get_x()
        y_start = self.get_y()

        self.multi_cell(
            left_width, line_height, str(left),
            border=border, align='L', markdown=markdown,
            new_x=XPos.LEFT, new_y=YPos.NEXT
        )
        left_end = (self.page, self.get_y())

        self.page = page_start
        self.set_xy(x_start + left_width, y_start)

        if colon:
            right = f": {right}"
        self.multi_cell(
            0, line_height, str(right),
            border=border, align='L', markdown=markdown,
            new_x=XPos.LEFT, new_y=YPos.NEXT
        )
        right_end = (self.page, self.get_y())

        page, y = resolve_row_end(left_end, right_end)
        self.page = page
        self.set_xy(x_start, y)

    def qrcode(
        self,
        url: str,
        size: int = 3,
        fgcolor: Sequence[int] = (0, 0, 0),
        bgcolor: Optional[Sequence[int]] = None
    ) -> Optional[bytes]:
        """
        Generate a QR code.

        Args:
            url: URL or text to encode
            size: Module size in pixels
            fgcolor: RGB (0-255) foreground color
            bgcolor: RGB (0-255) background color. If None, the background is transparent.

        Returns:
            PNG bytes, or None if the QR code could not be generated
        """
        return qrcode_png(url, size, fgcolor, bgcolor)
