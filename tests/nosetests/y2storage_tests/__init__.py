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
from y2storage.storage.volume_specification import VolumeSpecification

NG_CONTROL_XML = """<?xml version="1.0"?>
<productDefines xmlns="http://www.suse.com/1.0/yast2ns"
    xmlns:config="http://www.suse.com/1.0/configns">
  <partitioning>
    <proposal>
      <lvm config:type="boolean">true</lvm>
      <windows_delete_mode config:type="symbol">all</windows_delete_mode>
      <lvm_vg_strategy config:type="symbol">use_vg_size</lvm_vg_strategy>
      <lvm_vg_size>20 GiB</lvm_vg_size>
      <multidisk_first config:type="boolean">true</multidisk_first>
    </proposal>
    <volumes config:type="list">
      <volume>
        <mount_point>/</mount_point>
        <fs_type>btrfs</fs_type>
        <desired_size config:type="disksize">10 GiB</desired_size>
        <max_size config:type="disksize">unlimited</max_size>
        <snapshots config:type="boolean">true</snapshots>
        <btrfs_default_subvolume>@</btrfs_default_subvolume>
        <subvolumes config:type="list">
          <subvolume>
            <path>var</path>
            <copy_on_write config:type="boolean">false</copy_on_write>
          </subvolume>
          <subvolume>
            <path>boot/grub2/x86_64-efi</path>
            <archs>x86_64</archs>
          </subvolume>
        </subvolumes>
      </volume>
      <volume>
        <mount_point>/home</mount_point>
        <fs_type>xfs</fs_type>
        <fs_types>xfs,ext4</fs_types>
        <proposed config:type="boolean">false</proposed>
        <weight config:type="integer">40</weight>
      </volume>
      <volume>
        <mount_point>swap</mount_point>
        <fs_type>swap</fs_type>
        <separate_vg_name>vg-swap</separate_vg_name>
      </volume>
    </volumes>
  </partitioning>
</productDefines>
"""

LEGACY_CONTROL_XML = """<?xml version="1.0"?>
<productDefines xmlns="http://www.suse.com/1.0/yast2ns"
    xmlns:config="http://www.suse.com/1.0/configns">
  <partitioning>
    <proposal_lvm config:type="boolean">true</proposal_lvm>
    <try_separate_home config:type="boolean">false</try_separate_home>
    <root_base_size>5 GB</root_base_size>
    <vm_home_max_size>25 GB</vm_home_max_size>
    <limit_try_home>7GB</limit_try_home>
    <root_space_percent config:type="integer">30</root_space_percent>
    <btrfs_increase_percentage config:type="integer">100</btrfs_increase_percentage>
    <subvolumes config:type="list">
      <subvolume>
        <path>opt</path>
      </subvolume>
    </subvolumes>
  </partitioning>
</productDefines>
"""


def create_volume(mount_point, proposed=True, separate_vg_name=None, device=None,
                  snapshots=False):
    """Create a volume specification for the tests."""
    volume = VolumeSpecification()
    volume.mount_point = mount_point
    volume.proposed = proposed
    volume.separate_vg_name = separate_vg_name
    volume.device = device
    volume.snapshots = snapshots
    return volume
