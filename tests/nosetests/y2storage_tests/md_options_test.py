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
import unittest

from y2storage.core.size import DiskSize
from y2storage.storage.md_options import MdLevel, default_chunk_size, chunk_sizes, \
    parity_supported, minimal_number_of_devices


class MdOptionsTestCase(unittest.TestCase):
    """Test the options of MD RAIDs."""

    def test_default_chunk_size(self):
        """Test the default chunk sizes."""
        self.assertEqual(default_chunk_size(MdLevel.RAID0), DiskSize.KiB(64))
        self.assertEqual(default_chunk_size("raid1"), DiskSize.KiB(4))
        self.assertEqual(default_chunk_size("raid5"), DiskSize.KiB(128))
        self.assertEqual(default_chunk_size("raid6"), DiskSize.KiB(128))
        self.assertEqual(default_chunk_size("raid10"), DiskSize.KiB(64))

    def test_chunk_sizes(self):
        """Test the supported chunk sizes."""
        sizes = chunk_sizes(MdLevel.RAID0)
        self.assertEqual(sizes[0], DiskSize.KiB(64))
        self.assertEqual(sizes[-1], DiskSize.MiB(64))
        self.assertEqual(len(sizes), 11)

        sizes = chunk_sizes(MdLevel.RAID1)
        self.assertEqual(sizes[:3], [DiskSize.KiB(4), DiskSize.KiB(8), DiskSize.KiB(16)])
        self.assertEqual(sizes[-1], DiskSize.MiB(64))

        self.assertEqual(chunk_sizes(MdLevel.RAID5), chunk_sizes(MdLevel.RAID0))

    def test_parity(self):
        """Test the support of the parity algorithms."""
        self.assertFalse(parity_supported(MdLevel.RAID0))
        self.assertFalse(parity_supported(MdLevel.RAID1))
        self.assertTrue(parity_supported(MdLevel.RAID5))
        self.assertTrue(parity_supported("raid6"))
        self.assertTrue(parity_supported("raid10"))

    def test_minimal_number_of_devices(self):
        """Test the minimal number of devices."""
        self.assertEqual(minimal_number_of_devices(MdLevel.RAID0), 2)
        self.assertEqual(minimal_number_of_devices(MdLevel.RAID1), 2)
        self.assertEqual(minimal_number_of_devices(MdLevel.RAID5), 3)
        self.assertEqual(minimal_number_of_devices(MdLevel.RAID6), 4)
        self.assertEqual(minimal_number_of_devices(MdLevel.RAID10), 2)

    def test_invalid_level(self):
        """Test an invalid level."""
        with self.assertRaises(ValueError):
            default_chunk_size("raid4")

        with self.assertRaises(ValueError):
            minimal_number_of_devices("linear")
