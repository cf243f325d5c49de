"""
Driver based PDF generation

Request a configured PDF engine by name:

    from pdf_drivers import forge

    pdf = forge()          # settings.PDF['driver']
    pdf.add_page()
    pdf.set_font('helvetica', size=10)
    pdf.write_cells('Customer', 'ACME Corp.')
    pdf.output('/tmp/document.pdf')
"""

from .exceptions import PdfError, ConfigurationError, UnknownOperationError
from .factory import forge

__all__ = [
    'forge',
    'PdfError',
    'ConfigurationError',
    'UnknownOperationError',
]
