"""Tests for configuration and logging setup."""
import json
import logging
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
from pbar.config import configure_logging, default_config, read_config
from pbar.constants import DEFAULT_BAR_WIDTH, DEFAULT_INTERVAL
from pbar.progress import ProgressBar


class TestReadConfig(unittest.TestCase):
    """Test cases for reading pbar.config.json."""

    def setUp(self):
        """Set up test environment."""
        self.test_dir = tempfile.mkdtemp()
        self.old_cwd = os.getcwd()
        os.chdir(self.test_dir)

    def tearDown(self):
        """Clean up test environment."""
        os.chdir(self.old_cwd)
        shutil.rmtree(self.test_dir)

    def write_config(self, content):
        with open('pbar.config.json', 'w') as f:
            f.write(content if isinstance(content, str) else json.dumps(content))

    def test_missing_file(self):
        self.assertEqual(read_config(), default_config())

    def test_overrides(self):
        self.write_config({'barWidth': 50, 'indicatorChar': '#', 'quiet': True})
        config = read_config()
        self.assertEqual(config['barWidth'], 50)
        self.assertEqual(config['indicatorChar'], '#')
        self.assertTrue(config['quiet'])
        self.assertEqual(config['interval'], DEFAULT_INTERVAL)

    def test_invalid_json(self):
        self.write_config('{"barWidth": ')
        with self.assertLogs(level='WARNING') as logs:
            config = read_config()
        self.assertEqual(config, default_config())
        self.assertIn("Invalid JSON", logs.output[0])

    def test_not_an_object(self):
        self.write_config([1, 2, 3])
        with self.assertLogs(level='WARNING'):
            self.assertEqual(read_config(), default_config())

    def test_invalid_field_falls_back(self):
        """A bad value only resets that one field."""
        self.write_config({'barWidth': -3, 'indicatorChar': '##', 'messageWidth': 20})
        with self.assertLogs(level='WARNING') as logs:
            config = read_config()
        self.assertEqual(config['barWidth'], DEFAULT_BAR_WIDTH)
        self.assertEqual(config['indicatorChar'], '|')
        self.assertEqual(config['messageWidth'], 20)
        self.assertEqual(len(logs.output), 2)

    def test_boolean_is_not_a_width(self):
        self.write_config({'barWidth': True})
        with self.assertLogs(level='WARNING'):
            self.assertEqual(read_config()['barWidth'], DEFAULT_BAR_WIDTH)

    def test_unknown_key(self):
        self.write_config({'colour': 'red'})
        with self.assertLogs(level='WARNING') as logs:
            config = read_config()
        self.assertNotIn('colour', config)
        self.assertIn("Unknown 'colour'", logs.output[0])

    def test_custom_path(self):
        path = os.path.join(self.test_dir, 'custom.json')
        with open(path, 'w') as f:
            json.dump({'marqueeWidth': 4}, f)
        self.assertEqual(read_config(path)['marqueeWidth'], 4)

    def test_config_accepted_by_progress_bar(self):
        self.write_config({'barWidth': 20, 'indicatorChar': '='})
        bar = ProgressBar("Test", 10, config=read_config())
        self.assertEqual(bar.bar_width, 20)
        self.assertEqual(bar.indicator_char, '=')


class TestConfigureLogging(unittest.TestCase):
    """Test cases for logging setup."""

    @patch('logging.basicConfig')
    def test_debug(self, mock_basic_config):
        configure_logging(True)
        mock_basic_config.assert_called_once_with(level=logging.DEBUG, format='%(levelname)s - %(message)s')

    @patch('logging.basicConfig')
    def test_info(self, mock_basic_config):
        configure_logging(False)
        mock_basic_config.assert_called_once_with(level=logging.INFO, format='%(message)s')

if __name__ == '__main__':
    unittest.main()
