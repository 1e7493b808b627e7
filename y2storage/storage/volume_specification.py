#
# Specification of the volumes planned by the proposal.
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
from collections.abc import Mapping

from y2storage.core.size import DiskSize
from y2storage.storage.filesystems import FilesystemType
from y2storage.storage.subvol_specification import SubvolSpecification

__all__ = ["VolumeSpecification"]


def _to_bool(value):
    if isinstance(value, str):
        return value.strip().lower() == "true"

    return bool(value)


def _to_size(value):
    return DiskSize.parse(value, legacy_units=True)


def _to_fs_types(value):
    if isinstance(value, str):
        value = [v for v in value.split(",") if v.strip()]

    return [FilesystemType.from_value(v.strip()) for v in value]


class VolumeSpecification(object):
    """Specification of a volume that should be planned by the proposal.

    The specification is usually read from the volumes section of
    the control file. See the from_features method.
    """

    # Converters of the keys supported in the control file.
    FEATURES = {
        "mount_point": str,
        "proposed": _to_bool,
        "proposed_configurable": _to_bool,
        "fs_type": FilesystemType.from_value,
        "fs_types": _to_fs_types,
        "desired_size": _to_size,
        "min_size": _to_size,
        "max_size": _to_size,
        "max_size_lvm": _to_size,
        "weight": int,
        "adjust_by_ram": _to_bool,
        "adjust_by_ram_configurable": _to_bool,
        "fallback_for_desired_size": str,
        "fallback_for_min_size": str,
        "fallback_for_max_size": str,
        "fallback_for_max_size_lvm": str,
        "fallback_for_weight": str,
        "snapshots": _to_bool,
        "snapshots_configurable": _to_bool,
        "snapshots_size": _to_size,
        "snapshots_percentage": int,
        "btrfs_default_subvolume": str,
        "subvolumes": SubvolSpecification.list_from_control_xml,
        "disable_order": int,
        "separate_vg_name": str,
    }

    def __init__(self):
        self.mount_point = None
        self.proposed = True
        self.proposed_configurable = False
        self.fs_type = None
        self.fs_types = []
        self.desired_size = None
        self.min_size = None
        self.max_size = None
        self.max_size_lvm = None
        self.weight = None
        self.adjust_by_ram = False
        self.adjust_by_ram_configurable = False
        self.fallback_for_desired_size = None
        self.fallback_for_min_size = None
        self.fallback_for_max_size = None
        self.fallback_for_max_size_lvm = None
        self.fallback_for_weight = None
        self.snapshots = False
        self.snapshots_configurable = False
        self.snapshots_size = None
        self.snapshots_percentage = None
        self.btrfs_default_subvolume = None
        self.subvolumes = []
        self.disable_order = None
        self.separate_vg_name = None

        # Name of the device where the volume must be allocated.
        self.device = None

    @classmethod
    def from_features(cls, mapping):
        """Create a specification from the control file data.

        Unknown keys are ignored.

        :param mapping: a dictionary with the volume features
        :return: an instance of VolumeSpecification
        :raise ValueError: if a value cannot be converted
        """
        if not isinstance(mapping, Mapping):
            raise ValueError("Invalid volume specification: {}".format(mapping))

        spec = cls()

        for name, converter in cls.FEATURES.items():
            value = mapping.get(name)

            if value is None:
                continue

            setattr(spec, name, converter(value))

        if spec.fs_type and spec.fs_type not in spec.fs_types:
            spec.fs_types.insert(0, spec.fs_type)

        if not spec.separate_vg_name:
            spec.separate_vg_name = None

        return spec

    @property
    def root(self):
        """Is this the specification of the root filesystem?"""
        return self.mount_point == "/"

    @property
    def swap(self):
        """Is this the specification of a swap?"""
        return self.mount_point == "swap"

    def __str__(self):
        attrs = [
            "mount_point={}".format(self.mount_point),
            "proposed={}".format(self.proposed),
            "fs_type={}".format(self.fs_type),
        ]

        if self.separate_vg_name:
            attrs.append("separate_vg_name={}".format(self.separate_vg_name))

        if self.device:
            attrs.append("device={}".format(self.device))

        return "<VolumeSpecification {}>".format(" ".join(attrs))

    __repr__ = __str__
