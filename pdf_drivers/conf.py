"""
Configuration for the PDF drivers.

Drivers are configured through the PDF dict in Django settings. The
project settings are merged over the package defaults below, so a project
only needs to declare what it changes:

    PDF = {
        'driver': 'fpdf',
        'drivers': {
            'fpdf': {'defaults': ['L', 'mm', 'A4']},
        },
    }
"""

import copy
from typing import Optional

from django.conf import settings


# Mode applied to written PDF files when neither PDF['file_permissions']
# nor the project's FILE_UPLOAD_PERMISSIONS is set
DEFAULT_FILE_PERMISSIONS = 0o664

DEFAULTS = {
    # Default driver to load if none is specified
    'driver': 'fpdf',

    # Available PDF engines, keyed by driver name. 'defaults' holds the
    # positional arguments passed to the engine constructor.
    'drivers': {
        'fpdf': {
            'defaults': ['P', 'mm', 'A4'],
        },
        'reportlab': {},
        'weasyprint': {},
    },
}


def merge(base: dict, override: Optional[dict]) -> dict:
    """
    Merge two configuration dicts without modifying either of them.

    Keys from override win. Nested dicts are merged recursively, any other
    value (lists included) is replaced as a whole.

    Args:
        base: Configuration to start from
        override: Configuration whose keys take precedence

    Returns:
        New merged dict
    """
    result = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def get_pdf_settings() -> dict:
    """
    Get the effective PDF configuration.

    Returns:
        Package defaults with settings.PDF merged over them
    """
    return merge(DEFAULTS, getattr(settings, 'PDF', None))


def get_default_driver() -> Optional[str]:
    """
    Get the name of the driver to use when none is requested.

    Returns:
        Driver name or None if no default is configured
    """
    return get_pdf_settings().get('driver') or None


def get_driver_config(driver: str) -> Optional[dict]:
    """
    Get the configuration of a named driver.

    Args:
        driver: Driver name (e.g., 'fpdf')

    Returns:
        Copy of the driver configuration, or None if the driver is not configured
    """
    drivers = get_pdf_settings().get('drivers') or {}
    config = drivers.get(driver)
    if config is None:
        return None
    return dict(config)


def get_file_permissions() -> int:
    """
    Get the mode applied to PDF files written to disk.

    Returns:
        PDF['file_permissions'], then FILE_UPLOAD_PERMISSIONS when the project
        sets it (Django's own default of 0o644 does not count), then 0o664
    """
    mode = get_pdf_settings().get('file_permissions')
    if mode is None and settings.is_overridden('FILE_UPLOAD_PERMISSIONS'):
        mode = settings.FILE_UPLOAD_PERMISSIONS
    if mode is None:
        mode = DEFAULT_FILE_PERMISSIONS
    return mode
