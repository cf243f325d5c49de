"""
PDF Driver Factory

Resolves a driver name and its configuration and creates the driver.

Usage:
    pdf = forge()                                   # default driver
    pdf = forge('fpdf', {'defaults': ['L', 'mm', 'A4']})
"""

from typing import Optional
import logging

from django.utils.module_loading import import_string

from . import conf
from . import drivers
from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)


def get_driver_class(driver: str, config: dict) -> type:
    """
    Get the adapter class for a driver.

    A 'class' entry in the driver configuration (dotted path) wins,
    otherwise the class in pdf_drivers.drivers named after the driver
    with its first letter upper-cased is used ('fpdf' -> Fpdf).

    Args:
        driver: Driver name
        config: Merged driver configuration

    Returns:
        Adapter class

    Raises:
        ConfigurationError: If the class cannot be found
    """
    class_path = config.get('class')
    if class_path:
        try:
            return import_string(class_path)
        except ImportError as e:
            raise ConfigurationError(
                f'PDF driver "{driver}" class "{class_path}" could not be imported: {e}'
            ) from e

    # only the first letter changes: "reportLab" -> "ReportLab"
    class_name = driver[:1].upper() + driver[1:]
    driver_class = getattr(drivers, class_name, None)
    if not isinstance(driver_class, type):
        raise ConfigurationError(
            f'PDF driver "{driver}" has no driver class "{class_name}".'
        )
    return driver_class


def forge(driver: Optional[str] = None, config: Optional[dict] = None):
    """
    Create a new instance of the selected driver.

    Args:
        driver: Driver name. If None, the configured default driver is used.
        config: Optional overrides merged over the configured driver options

    Returns:
        Driver instance, ready to build a document

    Raises:
        ConfigurationError: If no driver is defined, the driver is not
            configured or its class cannot be found
    """
    # get the default driver if none is requested
    if driver is None:
        driver = conf.get_default_driver()

    if not driver:
        raise ConfigurationError('PDF driver to be used is not defined.')

    driver_config = conf.get_driver_config(driver)
    if driver_config is None:
        raise ConfigurationError(f'PDF driver "{driver}" does not exist.')

    driver_config = conf.merge(driver_config, config)
    driver_class = get_driver_class(driver, driver_config)

    logger.debug(f"Creating PDF driver '{driver}' using {driver_class.__name__}")
    return driver_class(driver_config)
