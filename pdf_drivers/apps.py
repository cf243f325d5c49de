from django.apps import AppConfig


class PdfDriversConfig(AppConfig):
    name = 'pdf_drivers'
    verbose_name = 'PDF Drivers'
