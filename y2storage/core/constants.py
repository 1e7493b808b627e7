#
# constants.py: y2storage constants
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
from enum import Enum

# Loggers.
LOGGER_ROOT = "y2storage"

# The section of the control file with the storage features.
PARTITIONING_SECTION = "partitioning"

# Namespace of the type annotations in the control file.
CONTROL_CONFIG_NAMESPACE = "http://www.suse.com/1.0/configns"


class SettingsEnum(Enum):
    """Base of the enumerations used by the proposal settings.

    Members are rendered by their values, so the diagnostic
    output reads the same as the control file.
    """

    @classmethod
    def from_value(cls, value):
        """Convert the given value into a member of the enumeration.

        :param value: a member or its string value
        :return: a member of the enumeration
        :raise ValueError: if the value is not valid
        """
        if isinstance(value, cls):
            return value

        try:
            return cls(str(value))
        except ValueError:
            pass

        raise ValueError("'{}' is not a valid {}".format(value, cls.__name__))

    def __str__(self):
        return self.value


class SettingsFormat(SettingsEnum):
    """Format of the partitioning section."""
    LEGACY = "legacy"
    NG = "ng"


class DeleteMode(SettingsEnum):
    """What to do with the existing partitions of some kind.

    NONE      Never delete a partition.
    ONDEMAND  Delete partitions as needed by the proposal.
    ALL       Delete all partitions, even if not needed.
    """
    NONE = "none"
    ONDEMAND = "ondemand"
    ALL = "all"


class LvmVgStrategy(SettingsEnum):
    """Strategy to decide the size of the LVM volume group.

    USE_AVAILABLE  Use all the available space.
    USE_NEEDED     Match exactly the sum of the logical volumes.
    USE_VG_SIZE    Use the predefined size of the volume group.
    """
    USE_AVAILABLE = "use_available"
    USE_NEEDED = "use_needed"
    USE_VG_SIZE = "use_vg_size"


class VolumeAllocationMode(SettingsEnum):
    """Mode to use when allocating the volumes in the devices."""
    AUTO = "auto"
    DEVICE = "device"


class VolumeSetType(SettingsEnum):
    """Type of a set of volume specifications."""
    PARTITION = "partition"
    LVM = "lvm"
    SEPARATE_LVM = "separate_lvm"


class PartitionType(SettingsEnum):
    """Kind of the existing partitions with a delete mode."""
    WINDOWS = "windows"
    LINUX = "linux"
    OTHER = "other"


# Legacy defaults.
LEGACY_ROOT_SPACE_PERCENT = 40
LEGACY_BTRFS_INCREASE_PERCENTAGE = 300.0
LEGACY_BTRFS_DEFAULT_SUBVOLUME = "@"
