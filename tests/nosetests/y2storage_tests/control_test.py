#
# Copyright (C) 2019 Red Hat, Inc.
#
# This copyrighted material is made available to anyone wishing to use,
# modify, copy, or redistribute it subject to the terms and conditions of
# the GNU General Public License v.2, or (at your option) any later version.
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY expressed or implied, including the implied warranties of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General
# Public License for more details.  You should have received a copy of the
# GNU General Public License along with this program; if not, write to the
# Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA
# 02110-1301, USA.  Any Red Hat trademarks that are incorporated in the
# source code or documentation are not subject to the GNU General Public
# License and may only be used or replicated with the express permission of
# Red Hat, Inc.
#
import os
import tempfile
import unittest
from unittest.mock import patch, mock_open

from y2storage.core.configuration.base import ConfigurationDataError, ConfigurationFileError, \
    find_value, get_option
from y2storage.core.configuration.control import parse_control_xml, read_control_file
from tests.nosetests.y2storage_tests import NG_CONTROL_XML

CONTROL_XML = """<?xml version="1.0"?>
<productDefines xmlns="http://www.suse.com/1.0/yast2ns"
    xmlns:config="http://www.suse.com/1.0/configns">
  <general>
    <name>  openSUSE  </name>
    <empty/>
  </general>
  <partitioning>
    <try_separate_home config:type="boolean">True</try_separate_home>
    <root_space_percent config:type="integer"> 30 </root_space_percent>
    <windows_delete_mode config:type="symbol">ondemand</windows_delete_mode>
    <names config:type="list">
      <name>a</name>
      <name>b</name>
    </names>
  </partitioning>
</productDefines>
"""


class ControlFileTestCase(unittest.TestCase):
    """Test the reader of the control file."""

    def test_parse(self):
        """Test the parsing of the control file."""
        features = parse_control_xml(CONTROL_XML)
        self.assertEqual(features, {
            "general": {
                "name": "openSUSE",
                "empty": "",
            },
            "partitioning": {
                "try_separate_home": True,
                "root_space_percent": 30,
                "windows_delete_mode": "ondemand",
                "names": ["a", "b"],
            }
        })

    def test_parse_volumes(self):
        """Test the parsing of the list of volumes."""
        features = parse_control_xml(NG_CONTROL_XML)
        volumes = features["partitioning"]["volumes"]

        self.assertEqual(len(volumes), 3)
        self.assertEqual(volumes[0]["mount_point"], "/")
        self.assertEqual(volumes[0]["snapshots"], True)
        self.assertEqual(volumes[0]["desired_size"], "10 GiB")
        self.assertEqual(volumes[0]["subvolumes"][0], {"path": "var", "copy_on_write": False})
        self.assertEqual(volumes[1]["weight"], 40)
        self.assertEqual(features["partitioning"]["proposal"]["lvm"], True)

    def test_parse_invalid_document(self):
        """Test the parsing of an invalid document."""
        with self.assertRaises(ConfigurationDataError):
            parse_control_xml("<productDefines>")

    def test_parse_invalid_values(self):
        """Test the parsing of invalid typed values."""
        xml = '<a xmlns:config="http://www.suse.com/1.0/configns">' \
              '<b config:type="boolean">maybe</b></a>'

        with self.assertRaises(ConfigurationDataError):
            parse_control_xml(xml)

        xml = '<a xmlns:config="http://www.suse.com/1.0/configns">' \
              '<b config:type="integer">ten</b></a>'

        with self.assertRaises(ConfigurationDataError):
            parse_control_xml(xml)

    def test_read_file(self):
        """Test the reading of the control file."""
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "control.xml")

            with open(path, "w") as f:
                f.write(CONTROL_XML)

            features = read_control_file(path)

        self.assertEqual(features["partitioning"]["root_space_percent"], 30)

    def test_read_invalid_file(self):
        """Test the reading of an invalid control file."""
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "control.xml")

            with self.assertRaises(ConfigurationFileError) as cm:
                read_control_file(path)

            self.assertIn(path, str(cm.exception))

            with open(path, "w") as f:
                f.write("<productDefines>")

            with self.assertRaises(ConfigurationFileError):
                read_control_file(path)

    @patch("y2storage.core.configuration.control.open", new_callable=mock_open,
           read_data=NG_CONTROL_XML, create=True)
    def test_read_mocked_file(self, mocked_open):
        """Test the reading of a mocked control file."""
        features = read_control_file("/etc/YaST2/control.xml")
        mocked_open.assert_called_once_with("/etc/YaST2/control.xml", "r")
        self.assertIn("volumes", features["partitioning"])


class OptionsTestCase(unittest.TestCase):
    """Test the access to the options."""

    def test_find_value(self):
        """Test the lookup of the values."""
        tree = {"a": {"b": {"c": 1}}, "d": "x"}
        self.assertEqual(find_value(tree, ["a", "b", "c"]), 1)
        self.assertEqual(find_value(tree, ["a", "b"]), {"c": 1})
        self.assertEqual(find_value(tree, []), tree)
        self.assertIsNone(find_value(tree, ["a", "x"]))
        self.assertIsNone(find_value(tree, ["d", "x"]))
        self.assertIsNone(find_value(None, ["a"]))

    def test_get_option(self):
        """Test the conversion of the options."""
        tree = {"a": {"b": "10", "c": "ten"}}
        self.assertEqual(get_option(tree, "test", ["a", "b"]), "10")
        self.assertEqual(get_option(tree, "test", ["a", "b"], int), 10)
        self.assertIsNone(get_option(tree, "test", ["a", "x"], int))

        with self.assertRaises(ConfigurationDataError) as cm:
            get_option(tree, "test", ["a", "c"], int)

        self.assertIn("'a/c'", str(cm.exception))
        self.assertIn("'test'", str(cm.exception))
