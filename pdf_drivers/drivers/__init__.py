"""
PDF Drivers

One adapter class per supported engine. The factory finds the class for
a driver name by capitalizing it ('fpdf' -> Fpdf).
"""

from .fpdf_driver import Fpdf
from .reportlab_driver import Reportlab
from .weasyprint_driver import Weasyprint, WEASYPRINT_AVAILABLE

__all__ = [
    'Fpdf',
    'Reportlab',
    'Weasyprint',
    'WEASYPRINT_AVAILABLE',
]
