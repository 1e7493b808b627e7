#
# Filesystem types.
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
from y2storage.core.constants import SettingsEnum

__all__ = ["FilesystemType"]


class FilesystemType(SettingsEnum):
    """Type of a filesystem."""
    BTRFS = "btrfs"
    EXT2 = "ext2"
    EXT3 = "ext3"
    EXT4 = "ext4"
    XFS = "xfs"
    VFAT = "vfat"
    SWAP = "swap"
    NTFS = "ntfs"

    @classmethod
    def from_value(cls, value):
        """Convert the given value into a filesystem type.

        The names are case insensitive, so "Btrfs" and "btrfs"
        are the same type.
        """
        if isinstance(value, str):
            value = value.lower()

        return super().from_value(value)

    @property
    def is_btrfs(self):
        return self is FilesystemType.BTRFS
