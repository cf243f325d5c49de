"""
Tests for the PDF driver factory and configuration
"""

from django.conf import settings
from django.test import SimpleTestCase, override_settings

from pdf_drivers import forge, ConfigurationError
from pdf_drivers import conf
from pdf_drivers.drivers import Fpdf, Reportlab


class ForgeTestCase(SimpleTestCase):
    """Test cases for forge()"""

    def test_forge_uses_default_driver(self):
        """Test that the configured default driver is used when none is given"""
        pdf = forge()

        self.assertIsInstance(pdf, Fpdf)
        self.assertEqual(pdf.config['defaults'], ['P', 'mm', 'A4'])

    @override_settings(PDF={'driver': 'reportlab'})
    def test_forge_uses_changed_default_driver(self):
        """Test that a project can change the default driver"""
        pdf = forge()
        self.assertIsInstance(pdf, Reportlab)

    def test_forge_named_driver(self):
        """Test creating a driver by name"""
        self.assertIsInstance(forge('reportlab'), Reportlab)

    @override_settings(PDF={'driver': None})
    def test_forge_without_driver_raises_error(self):
        """Test that a missing driver name raises ConfigurationError"""
        with self.assertRaises(ConfigurationError) as cm:
            forge()

        self.assertIn("not defined", str(cm.exception))

    def test_forge_unknown_driver_raises_error(self):
        """Test that a driver without configuration raises ConfigurationError"""
        with self.assertRaises(ConfigurationError) as cm:
            forge('dompdf')

        self.assertIn('"dompdf" does not exist', str(cm.exception))

    def test_forge_empty_driver_name_raises_error(self):
        """Test that an empty driver name is treated as undefined"""
        with self.assertRaises(ConfigurationError):
            forge('')

    @override_settings(PDF={'drivers': {'mpdf': {}}})
    def test_forge_driver_without_class_raises_error(self):
        """Test that a configured driver without adapter class raises ConfigurationError"""
        with self.assertRaises(ConfigurationError) as cm:
            forge('mpdf')

        self.assertIn('no driver class "Mpdf"', str(cm.exception))

    @override_settings(PDF={'drivers': {'reportLab': {}}})
    def test_forge_class_name_keeps_inner_case(self):
        """Test that only the first letter of the driver name is upper-cased"""
        with self.assertRaises(ConfigurationError) as cm:
            forge('reportLab')

        self.assertIn('no driver class "ReportLab"', str(cm.exception))

    @override_settings(PDF={'drivers': {'custom': {'class': 'pdf_drivers.drivers.Reportlab'}}})
    def test_forge_with_class_path(self):
        """Test that a 'class' entry selects the adapter class"""
        pdf = forge('custom')
        self.assertIsInstance(pdf, Reportlab)

    @override_settings(PDF={'drivers': {'custom': {'class': 'pdf_drivers.drivers.Missing'}}})
    def test_forge_with_invalid_class_path_raises_error(self):
        """Test that an unimportable 'class' entry raises ConfigurationError"""
        with self.assertRaises(ConfigurationError) as cm:
            forge('custom')

        self.assertIn("could not be imported", str(cm.exception))

    def test_forge_override_wins(self):
        """Test that caller supplied options override configured ones"""
        pdf = forge('fpdf', {'defaults': ['L', 'mm', 'A4']})

        self.assertEqual(pdf.config['defaults'], ['L', 'mm', 'A4'])
        self.assertGreater(pdf.w, pdf.h)

    @override_settings(PDF={'drivers': {'fpdf': {'defaults': ['P', 'mm', 'A4'], 'title': 'Invoice'}}})
    def test_forge_override_retains_other_keys(self):
        """Test that keys missing from the override are kept"""
        pdf = forge('fpdf', {'defaults': ['L', 'mm', 'A5']})

        self.assertEqual(pdf.config['defaults'], ['L', 'mm', 'A5'])
        self.assertEqual(pdf.config['title'], 'Invoice')

    def test_forge_does_not_modify_override(self):
        """Test that the caller's dict is left untouched"""
        override = {'title': 'Report'}
        pdf = forge('fpdf', override)

        pdf.config['title'] = 'Changed'
        self.assertEqual(override, {'title': 'Report'})
        self.assertEqual(conf.get_driver_config('fpdf'), {'defaults': ['P', 'mm', 'A4']})


class ConfTestCase(SimpleTestCase):
    """Test cases for the configuration helpers"""

    def test_merge(self):
        """Test recursive merging"""
        base = {'driver': 'fpdf', 'drivers': {'fpdf': {'defaults': ['P']}, 'reportlab': {}}}
        override = {'drivers': {'fpdf': {'defaults': ['L']}}}

        result = conf.merge(base, override)

        self.assertEqual(result['driver'], 'fpdf')
        self.assertEqual(result['drivers']['fpdf'], {'defaults': ['L']})
        self.assertIn('reportlab', result['drivers'])

    def test_merge_is_not_destructive(self):
        """Test that merge() copies instead of modifying its inputs"""
        base = {'drivers': {'fpdf': {'defaults': ['P']}}}
        override = {'drivers': {'fpdf': {'title': 'Test'}}}

        result = conf.merge(base, override)
        result['drivers']['fpdf']['defaults'].append('mm')

        self.assertEqual(base, {'drivers': {'fpdf': {'defaults': ['P']}}})
        self.assertEqual(override, {'drivers': {'fpdf': {'title': 'Test'}}})

    def test_merge_none_override(self):
        """Test merging without override"""
        self.assertEqual(conf.merge({'a': 1}, None), {'a': 1})

    def test_package_defaults_are_merged(self):
        """Test that drivers not in settings.PDF are still available"""
        drivers = conf.get_pdf_settings()['drivers']

        self.assertIn('fpdf', drivers)
        self.assertIn('reportlab', drivers)
        self.assertIn('weasyprint', drivers)

    @override_settings()
    def test_defaults_without_pdf_setting(self):
        """Test that the package defaults apply when PDF is not set"""
        from django.conf import settings
        del settings.PDF

        self.assertEqual(conf.get_default_driver(), 'fpdf')

    def test_get_driver_config_unknown(self):
        """Test that unknown drivers have no configuration"""
        self.assertIsNone(conf.get_driver_config('dompdf'))

    @override_settings(PDF={'file_permissions': 0o600})
    def test_file_permissions_from_pdf_settings(self):
        self.assertEqual(conf.get_file_permissions(), 0o600)

    @override_settings(FILE_UPLOAD_PERMISSIONS=0o640)
    def test_file_permissions_from_upload_permissions(self):
        self.assertEqual(conf.get_file_permissions(), 0o640)

    @override_settings(FILE_UPLOAD_PERMISSIONS=None)
    def test_file_permissions_default(self):
        self.assertEqual(conf.get_file_permissions(), 0o664)

    def test_file_permissions_ignore_django_default(self):
        """Test that Django's implicit FILE_UPLOAD_PERMISSIONS does not replace 0o664"""
        self.assertFalse(settings.is_overridden('FILE_UPLOAD_PERMISSIONS'))
        self.assertEqual(conf.get_file_permissions(), 0o664)
