#
# Specification of Btrfs subvolumes.
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

from y2storage.storage_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["SubvolSpecification"]

# Subvolumes used if the control file doesn't specify any.
FALLBACK_SUBVOLUMES = [
    {"path": "home"},
    {"path": "opt"},
    {"path": "root"},
    {"path": "srv"},
    {"path": "tmp"},
    {"path": "usr/local"},
    {"path": "var/cache"},
    {"path": "var/crash"},
    {"path": "var/lib/libvirt/images", "copy_on_write": False},
    {"path": "var/lib/machines"},
    {"path": "var/lib/mailman"},
    {"path": "var/lib/mariadb", "copy_on_write": False},
    {"path": "var/lib/mysql", "copy_on_write": False},
    {"path": "var/lib/named"},
    {"path": "var/lib/pgsql", "copy_on_write": False},
    {"path": "var/log"},
    {"path": "var/opt"},
    {"path": "var/spool"},
    {"path": "var/tmp"},
    {"path": "boot/grub2/i386-pc", "archs": "i386,x86_64"},
    {"path": "boot/grub2/x86_64-efi", "archs": "x86_64"},
    {"path": "boot/grub2/powerpc-ieee1275", "archs": "ppc,!board_powernv"},
    {"path": "boot/grub2/s390x-emu", "archs": "s390"},
    {"path": "boot/grub2/arm64-efi", "archs": "aarch64"},
]


class SubvolSpecification(object):
    """Specification of a Btrfs subvolume."""

    def __init__(self, path, copy_on_write=True, archs=None):
        """Create a new specification.

        :param path: a path of the subvolume, for example "var/log"
        :param copy_on_write: should we use copy-on-write?
        :param archs: a list of architectures or None for all of them
        """
        self.path = path
        self.copy_on_write = copy_on_write
        self.archs = archs

    @classmethod
    def from_features(cls, mapping):
        """Create a specification from the control file data.

        :param mapping: a dictionary with the keys path, copy_on_write and archs
        :return: an instance of SubvolSpecification or None if there is no path
        """
        if not isinstance(mapping, Mapping) or not mapping.get("path"):
            log.warning("Ignoring invalid subvolume specification: %s", mapping)
            return None

        copy_on_write = mapping.get("copy_on_write")
        archs = mapping.get("archs")

        if isinstance(archs, str):
            archs = [a.strip() for a in archs.split(",") if a.strip()]

        return cls(
            path=mapping["path"],
            copy_on_write=True if copy_on_write is None else copy_on_write,
            archs=archs or None
        )

    @classmethod
    def list_from_control_xml(cls, value):
        """Create a list of specifications from the control file data.

        Invalid entries are skipped.

        :param value: a list of dictionaries
        :return: a list of SubvolSpecification instances
        """
        specs = (cls.from_features(v) for v in value or [])
        return [s for s in specs if s is not None]

    @classmethod
    def fallback_list(cls):
        """Return the list of subvolumes used by default."""
        return cls.list_from_control_xml(FALLBACK_SUBVOLUMES)

    @property
    def arch_specific(self):
        return bool(self.archs)

    def matches_arch(self, *arch_names):
        """Should the subvolume be used for the given architecture?

        Architectures prefixed by "!" exclude the subvolume.

        :param arch_names: names of the architecture and its properties
        :return: True or False
        """
        if not self.arch_specific:
            return True

        matched = False

        for arch in self.archs:
            if arch.startswith("!"):
                if arch[1:] in arch_names:
                    return False
            elif arch in arch_names:
                matched = True

        return matched

    def __eq__(self, other):
        if not isinstance(other, SubvolSpecification):
            return NotImplemented

        return (self.path, self.copy_on_write, self.archs) == \
            (other.path, other.copy_on_write, other.archs)

    def __str__(self):
        text = self.path

        if not self.copy_on_write:
            text += " (no-cow)"

        if self.archs:
            text += " [{}]".format(",".join(self.archs))

        return text

    def __repr__(self):
        return "SubvolSpecification({!r})".format(str(self))
