#
# Settings of the storage proposal.
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
import copy
from abc import ABC, abstractmethod

from y2storage.core.configuration.features import PartitioningFeatures
from y2storage.core.constants import SettingsFormat, DeleteMode, LvmVgStrategy, \
    VolumeAllocationMode, VolumeSetType, PartitionType, LEGACY_ROOT_SPACE_PERCENT, \
    LEGACY_BTRFS_INCREASE_PERCENTAGE, LEGACY_BTRFS_DEFAULT_SUBVOLUME
from y2storage.core.size import DiskSize
from y2storage.errors import InvalidArgsError
from y2storage.storage.filesystems import FilesystemType
from y2storage.storage.subvol_specification import SubvolSpecification
from y2storage.storage.volume_specifications_set import VolumeSpecificationsSet
from y2storage.storage_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["ProposalSettings", "LegacyProposalSettings", "NgProposalSettings"]


def _validated_value(value, enum_class):
    """Convert the value into a member of the given enumeration.

    :param value: a member of the enumeration or its string value
    :param enum_class: a class of the enumeration
    :return: a member of the enumeration
    :raise InvalidArgsError: if the value is not valid
    """
    if value is None:
        raise InvalidArgsError("Invalid feature value: {}".format(value))

    try:
        return enum_class.from_value(value)
    except ValueError as e:
        raise InvalidArgsError("Invalid feature value: {}".format(value)) from e


def _is_unset(value):
    return value is None or value == []


def _get_features(product_features):
    if isinstance(product_features, PartitioningFeatures):
        return product_features

    return PartitioningFeatures(product_features)


class ProposalSettings(ABC):
    """Settings used by the storage proposal.

    The settings are typically read from the control file. There
    are two formats of the partitioning section, so there are two
    kinds of settings: LegacyProposalSettings and NgProposalSettings.

    A new object has all the settings unset. Call the method
    for_current_product to initialize the settings with the defaults
    and the values of the product features, or use the factory
    new_for_current_product to also choose the right format.
    """

    # The format of the partitioning section.
    format = None

    # Default values of the settings.
    DEFAULTS = []

    # Settings listed in the string representation.
    DESCRIBED_SETTINGS = []

    def __init__(self):
        self.lvm = None
        self.resize_windows = None
        self._windows_delete_mode = None
        self._linux_delete_mode = None
        self._other_delete_mode = None
        self._lvm_vg_strategy = None
        self._allocate_volume_mode = None
        self._encryption_password = None
        self._explicit_root_device = None
        self._explicit_candidate_devices = None

    @staticmethod
    def features_format(product_features):
        """Detect the format of the partitioning section.

        The format is NG only if the subsections proposal and volumes
        are present in the partitioning section. If there is no such
        section, the legacy format is used.

        :param product_features: a dictionary or PartitioningFeatures
        :return: an instance of SettingsFormat
        """
        features = _get_features(product_features)

        if features.has_section("proposal", "volumes"):
            return SettingsFormat.NG

        return SettingsFormat.LEGACY

    @classmethod
    def new_for_current_product(cls, product_features):
        """Create new settings for the given product features.

        :param product_features: a dictionary or PartitioningFeatures
        :return: an instance of LegacyProposalSettings or NgProposalSettings
        """
        features = _get_features(product_features)
        settings_format = cls.features_format(features)
        log.debug("Using the %s format of the partitioning section.", settings_format)

        if settings_format is SettingsFormat.NG:
            settings = NgProposalSettings()
        else:
            settings = LegacyProposalSettings()

        settings.for_current_product(features)
        return settings

    def for_current_product(self, product_features):
        """Set the settings according to the product features.

        Apply the default values to the unset settings and then
        override them with the values of the product features.

        :param product_features: a dictionary or PartitioningFeatures
        """
        features = _get_features(product_features)
        detected_format = self.features_format(features)

        if detected_format is not self.format:
            log.warning("The product features use the %s format, loading them as %s.",
                        detected_format, self.format)

        self.apply_defaults()
        self._load_features(features)

    def apply_defaults(self):
        """Apply the default values to the unset settings.

        The settings that already have a value are not changed.
        """
        for name, default in self.DEFAULTS:
            if not _is_unset(getattr(self, name)):
                continue

            setattr(self, name, default() if callable(default) else default)

    @abstractmethod
    def _load_features(self, features):
        """Override the settings with the values of the product features.

        :param features: an instance of PartitioningFeatures
        """
        pass

    def _load_feature(self, name, value):
        """Set the setting if the feature is specified.

        :param name: a name of the setting
        :param value: a value of the feature or None
        """
        if value is None:
            return

        setattr(self, name, value)
        log.debug("Feature %s is set to %s.", name, value)

    @property
    def use_lvm(self):
        """Should we use LVM?"""
        return self.lvm

    @use_lvm.setter
    def use_lvm(self, value):
        self.lvm = value

    @property
    def windows_delete_mode(self):
        """What to do with the existing Windows partitions.

        :return: an instance of DeleteMode
        """
        return self._windows_delete_mode

    @windows_delete_mode.setter
    def windows_delete_mode(self, mode):
        self._windows_delete_mode = _validated_value(mode, DeleteMode)

    @property
    def linux_delete_mode(self):
        """What to do with the existing Linux partitions.

        :return: an instance of DeleteMode
        """
        return self._linux_delete_mode

    @linux_delete_mode.setter
    def linux_delete_mode(self, mode):
        self._linux_delete_mode = _validated_value(mode, DeleteMode)

    @property
    def other_delete_mode(self):
        """What to do with the other existing partitions.

        :return: an instance of DeleteMode
        """
        return self._other_delete_mode

    @other_delete_mode.setter
    def other_delete_mode(self, mode):
        self._other_delete_mode = _validated_value(mode, DeleteMode)

    @property
    def lvm_vg_strategy(self):
        """Strategy to decide the size of the LVM volume group.

        :return: an instance of LvmVgStrategy
        """
        return self._lvm_vg_strategy

    @lvm_vg_strategy.setter
    def lvm_vg_strategy(self, strategy):
        self._lvm_vg_strategy = _validated_value(strategy, LvmVgStrategy)

    @property
    def allocate_volume_mode(self):
        """Mode to use when allocating the volumes in the devices.

        :return: an instance of VolumeAllocationMode
        """
        return self._allocate_volume_mode

    @allocate_volume_mode.setter
    def allocate_volume_mode(self, mode):
        self._allocate_volume_mode = _validated_value(mode, VolumeAllocationMode)

    def allocate_mode(self, mode):
        """Is the given allocation mode used?"""
        return self._allocate_volume_mode is _validated_value(mode, VolumeAllocationMode)

    @property
    def encryption_password(self):
        """Password to use when creating new encryption devices."""
        return self._encryption_password

    @encryption_password.setter
    def encryption_password(self, password):
        self._encryption_password = password

        if password is None:
            log.debug("Encryption password is unset.")
        else:
            log.debug("Encryption password is set.")

    @property
    def use_encryption(self):
        """Should we use encryption?"""
        return self._encryption_password is not None

    def _get_delete_mode(self, partition_type):
        """Get the delete mode for the given type of partitions.

        :param partition_type: an instance of PartitionType or its value
        :return: an instance of DeleteMode
        """
        modes = {
            PartitionType.WINDOWS: self._windows_delete_mode,
            PartitionType.LINUX: self._linux_delete_mode,
            PartitionType.OTHER: self._other_delete_mode,
        }
        return modes[_validated_value(partition_type, PartitionType)]

    def delete_forbidden(self, partition_type):
        """Is the deletion of the given type of partitions forbidden?"""
        return self._get_delete_mode(partition_type) is DeleteMode.NONE

    def delete_forced(self, partition_type):
        """Is the deletion of the given type of partitions enforced?"""
        return self._get_delete_mode(partition_type) is DeleteMode.ALL

    def _allocated_volumes(self):
        """Volume specifications with the assigned devices."""
        return []

    def _allocated_volumes_sets(self):
        """Sets of the volume specifications with the assigned devices."""
        return []

    def _root_volume(self):
        """Volume specification for the root filesystem."""
        return None

    @property
    def root_device(self):
        """Name of the device where the root filesystem must be placed.

        If the allocate mode is AUTO, this is the value set by the
        setter. If it is None, the proposal will try to find a good
        candidate.

        If the allocate mode is DEVICE, the value is the device of
        the root volume.

        :return: a string or None
        """
        if self.allocate_mode(VolumeAllocationMode.DEVICE):
            volume = self._root_volume()
            return volume.device if volume else None

        return self._explicit_root_device

    @root_device.setter
    def root_device(self, name):
        self._explicit_root_device = name

        if not self.allocate_mode(VolumeAllocationMode.DEVICE) or name is None:
            return

        # Move the root volume and the volumes allocated with it.
        for volumes_set in self._allocated_volumes_sets():
            if volumes_set.root:
                volumes_set.device = name
                break

    @property
    def explicit_root_device(self):
        """The most recent value set by the root_device setter."""
        return self._explicit_root_device

    @property
    def candidate_devices(self):
        """Names of the devices that can be used for the installation.

        If the allocate mode is AUTO, this is the value set by the
        setter. If it is None, the proposal will try to find suitable
        devices.

        If the allocate mode is DEVICE, the value is the list of the
        devices assigned to the proposed volumes. It is None if any
        of the proposed volumes has no device.

        :return: a list of strings or None
        """
        if not self.allocate_mode(VolumeAllocationMode.DEVICE):
            return self._explicit_candidate_devices

        proposed = [v for v in self._allocated_volumes() if v.proposed]

        if any(v.device is None for v in proposed):
            return None

        return list(dict.fromkeys(v.device for v in proposed))

    @candidate_devices.setter
    def candidate_devices(self, devices):
        self._explicit_candidate_devices = None if devices is None else list(devices)

        if not self.allocate_mode(VolumeAllocationMode.DEVICE):
            return

        if devices is None:
            for volume in self._allocated_volumes():
                volume.device = None
            return

        devices = list(devices)
        proposed_sets = [s for s in self._allocated_volumes_sets() if s.proposed]

        # The extra sets use the last device.
        for idx, volumes_set in enumerate(proposed_sets):
            if idx < len(devices):
                volumes_set.device = devices[idx]
            else:
                volumes_set.device = devices[-1] if devices else None

    @property
    def explicit_candidate_devices(self):
        """The most recent value set by the candidate_devices setter."""
        return self._explicit_candidate_devices

    @property
    def separate_vgs_relevant(self):
        """Is the value of separate_vgs relevant?"""
        return False

    @property
    @abstractmethod
    def snapshots_active(self):
        """Is the root filesystem Btrfs with snapshots?"""
        return False

    @property
    @abstractmethod
    def legacy_btrfs_default_subvolume(self):
        """The default Btrfs subvolume path."""
        return None

    def deep_copy(self):
        """Produce a deep copy of the settings.

        :return: an instance of the same class
        """
        return copy.deepcopy(self)

    def _describe_settings(self, indent):
        return "".join(
            "{}{}: {}\n".format(indent, name, getattr(self, name))
            for name in self.DESCRIBED_SETTINGS
        )

    def __repr__(self):
        # Never show the encryption password.
        return "<{} format={} encryption={}>".format(
            self.__class__.__name__, self.format, self.use_encryption
        )


class NgProposalSettings(ProposalSettings):
    """Settings of the NG format of the partitioning section."""

    format = SettingsFormat.NG

    DEFAULTS = [
        ("lvm", False),
        ("separate_vgs", False),
        ("resize_windows", True),
        ("windows_delete_mode", DeleteMode.ONDEMAND),
        ("linux_delete_mode", DeleteMode.ONDEMAND),
        ("other_delete_mode", DeleteMode.ONDEMAND),
        ("delete_resize_configurable", True),
        ("lvm_vg_strategy", LvmVgStrategy.USE_AVAILABLE),
        ("allocate_volume_mode", VolumeAllocationMode.AUTO),
        ("multidisk_first", False),
        ("volumes", list),
    ]

    # Features of the proposal subsection loaded without conversion.
    PROPOSAL_FEATURES = [
        "lvm",
        "separate_vgs",
        "resize_windows",
        "windows_delete_mode",
        "linux_delete_mode",
        "other_delete_mode",
        "delete_resize_configurable",
        "lvm_vg_strategy",
        "allocate_volume_mode",
        "multidisk_first",
    ]

    DESCRIBED_SETTINGS = [
        "multidisk_first",
        "root_device",
        "explicit_root_device",
        "candidate_devices",
        "explicit_candidate_devices",
        "windows_delete_mode",
        "linux_delete_mode",
        "other_delete_mode",
        "resize_windows",
        "delete_resize_configurable",
        "lvm",
        "separate_vgs",
        "allocate_volume_mode",
        "lvm_vg_strategy",
        "lvm_vg_size",
    ]

    def __init__(self):
        super().__init__()
        # Create the separate volume groups requested by the volumes?
        self.separate_vgs = None
        # Try the initial proposal with all the candidate devices?
        self.multidisk_first = None
        # Can the user configure the delete modes and resize_windows?
        self.delete_resize_configurable = None
        # Size of the volume group for the USE_VG_SIZE strategy.
        self.lvm_vg_size = None
        # Specifications of the volumes used during the proposal.
        self.volumes = None

    def _load_features(self, features):
        for name in self.PROPOSAL_FEATURES:
            self._load_feature(name, features.feature("proposal", name))

        self._load_feature("lvm_vg_size", features.size_feature("proposal", "lvm_vg_size"))
        self._load_feature("volumes", features.volumes_feature("volumes"))

    @property
    def volumes_sets(self):
        """Volumes grouped by their location in the disks.

        All the volumes that must be allocated in the same disk are
        grouped in a single set. The order of the volumes is honored
        as long as possible.

        :return: a list of VolumeSpecificationsSet instances
        """
        if self.separate_vgs:
            return self._volumes_sets_with_separate()

        return self._volumes_sets_plain()

    def _volumes_sets_plain(self):
        volumes = self.volumes or []

        if self.lvm:
            return [VolumeSpecificationsSet(volumes, VolumeSetType.LVM)]

        return [VolumeSpecificationsSet([v], VolumeSetType.PARTITION) for v in volumes]

    def _volumes_sets_with_separate(self):
        sets = []

        for volume in self.volumes or []:
            if volume.separate_vg_name:
                # Volumes sharing the VG name are grouped together.
                group = next((s for s in sets if s.vg_name == volume.separate_vg_name), None)
                set_type = VolumeSetType.SEPARATE_LVM
            elif self.lvm:
                group = next((s for s in sets if s.type is VolumeSetType.LVM), None)
                set_type = VolumeSetType.LVM
            else:
                group = None
                set_type = VolumeSetType.PARTITION

            if group:
                group.push(volume)
            else:
                sets.append(VolumeSpecificationsSet([volume], set_type))

        return sets

    def _allocated_volumes(self):
        return self.volumes or []

    def _allocated_volumes_sets(self):
        return self.volumes_sets

    def _root_volume(self):
        return next((v for v in self.volumes or [] if v.root), None)

    @property
    def separate_vgs_relevant(self):
        return any(v.separate_vg_name for v in self.volumes or [])

    @property
    def snapshots_active(self):
        root_volume = self._root_volume()
        return bool(root_volume and root_volume.snapshots)

    @property
    def legacy_btrfs_default_subvolume(self):
        if not self.volumes:
            return None

        root_volume = self._root_volume()

        if root_volume:
            return root_volume.btrfs_default_subvolume

        return self.volumes[0].btrfs_default_subvolume

    def __str__(self):
        return "Storage ProposalSettings ({})\n" \
               "  proposal:\n" \
               "{}" \
               "  volumes:\n" \
               "    {}".format(self.format, self._describe_settings("    "), self.volumes)


class LegacyProposalSettings(ProposalSettings):
    """Settings of the legacy format of the partitioning section."""

    format = SettingsFormat.LEGACY

    DEFAULTS = [
        ("root_base_size", lambda: DiskSize.GiB(3)),
        ("root_max_size", lambda: DiskSize.GiB(10)),
        ("min_size_to_use_separate_home", lambda: DiskSize.GiB(5)),
        ("home_min_size", lambda: DiskSize.GiB(10)),
        ("home_max_size", DiskSize.unlimited),
        ("lvm", False),
        ("lvm_vg_strategy", LvmVgStrategy.USE_AVAILABLE),
        ("root_filesystem_type", FilesystemType.BTRFS),
        ("use_snapshots", True),
        ("use_separate_home", True),
        ("home_filesystem_type", FilesystemType.XFS),
        ("enlarge_swap_for_suspend", False),
        ("resize_windows", True),
        ("windows_delete_mode", DeleteMode.ONDEMAND),
        ("linux_delete_mode", DeleteMode.ONDEMAND),
        ("other_delete_mode", DeleteMode.ONDEMAND),
        ("root_space_percent", LEGACY_ROOT_SPACE_PERCENT),
        ("allocate_volume_mode", VolumeAllocationMode.AUTO),
        ("btrfs_increase_percentage", LEGACY_BTRFS_INCREASE_PERCENTAGE),
        ("btrfs_default_subvolume", LEGACY_BTRFS_DEFAULT_SUBVOLUME),
        ("subvolumes", SubvolSpecification.fallback_list),
    ]

    # Pairs of a setting and a feature loaded without conversion.
    FEATURES = [
        ("use_lvm", "proposal_lvm"),
        ("use_separate_home", "try_separate_home"),
        ("use_snapshots", "proposal_snapshots"),
        ("enlarge_swap_for_suspend", "swap_for_suspend"),
        ("btrfs_default_subvolume", "btrfs_default_subvolume"),
    ]

    # Pairs of a setting and a size feature.
    SIZE_FEATURES = [
        ("root_base_size", "root_base_size"),
        ("root_max_size", "root_max_size"),
        ("home_max_size", "vm_home_max_size"),
        ("min_size_to_use_separate_home", "limit_try_home"),
    ]

    INTEGER_FEATURES = [
        "root_space_percent",
        "btrfs_increase_percentage",
    ]

    DESCRIBED_SETTINGS = [
        "use_lvm",
        "root_filesystem_type",
        "use_snapshots",
        "use_separate_home",
        "home_filesystem_type",
        "enlarge_swap_for_suspend",
        "root_device",
        "candidate_devices",
        "root_base_size",
        "root_max_size",
        "root_space_percent",
        "btrfs_increase_percentage",
        "min_size_to_use_separate_home",
        "btrfs_default_subvolume",
        "home_min_size",
        "home_max_size",
    ]

    def __init__(self):
        super().__init__()
        self.root_filesystem_type = None
        self.use_snapshots = None
        self.use_separate_home = None
        self.home_filesystem_type = None
        self.enlarge_swap_for_suspend = None
        # Root size used to calculate the min size of the proposal.
        self.root_base_size = None
        # Max size of root, also the base of the desired size.
        self.root_max_size = None
        # Used to adjust the size when distributing extra space.
        self.root_space_percent = None
        # Used to adjust the size when using snapshots.
        self.btrfs_increase_percentage = None
        # Min disk size to allow a separate home.
        self.min_size_to_use_separate_home = None
        self.btrfs_default_subvolume = None
        self.home_min_size = None
        self.home_max_size = None
        # Specifications of the Btrfs subvolumes of the root filesystem.
        self.subvolumes = None

    def _load_features(self, features):
        for name, key in self.FEATURES:
            self._load_feature(name, features.feature(key))

        for name, key in self.SIZE_FEATURES:
            self._load_feature(name, features.size_feature(key, legacy_units=True))

        for name in self.INTEGER_FEATURES:
            self._load_feature(name, features.integer_feature(name))

        self._load_feature("subvolumes", features.subvolumes_feature("subvolumes"))

    @property
    def snapshots_active(self):
        try:
            root_type = FilesystemType.from_value(self.root_filesystem_type)
        except ValueError:
            # Unknown filesystems are not Btrfs.
            return False

        return root_type.is_btrfs and bool(self.use_snapshots)

    @property
    def legacy_btrfs_default_subvolume(self):
        return self.btrfs_default_subvolume

    def __str__(self):
        return "Storage ProposalSettings ({})\n" \
               "{}" \
               "  subvolumes: \n" \
               "{}\n".format(self.format, self._describe_settings("    "), self.subvolumes)
