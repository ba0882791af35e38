# Copyright 2020, Schuberg Philis B.V
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from unittest import TestCase
from unittest.mock import Mock

from softlayerops.objects import SoftLayerVirtualGuest


class TestSoftLayerVirtualGuest(TestCase):
    def setUp(self):
        self.virtual_guest = SoftLayerVirtualGuest(Mock(), {
            'id': 1,
            'fullyQualifiedDomainName': 'vm1.example.com',
            'location': {'pathString': 'dc1.room2.rack3.slot4'},
            'maxCpu': 2,
            'maxMemory': 4096,
            'networkComponents': [{'speed': 1000}, {'speed': 100}],
            'blockDevices': [
                {'diskImage': {'description': 'vm1-root', 'capacity': 25, 'units': 'GB'}},
                {'diskImage': {'description': 'vm1-SWAP', 'capacity': 2, 'units': 'GB'}},
                {'id': 'no_disk_image'},
                {'diskImage': {'description': 'vm1-data', 'capacity': 100, 'units': 'GB'}}
            ],
            'operatingSystemReferenceCode': 'UBUNTU_20_64',
            'backendRouters': [{'hostname': 'bcr01a.dc1'}],
            'pendingMigrationFlag': True
        })

    def test_get_location_path(self):
        self.assertTupleEqual(('dc1', 'room2', 'rack3', 'slot4'), self.virtual_guest.get_location_path())

    def test_get_location_path_incomplete(self):
        self.virtual_guest['location'] = {'pathString': 'dc1.room2'}
        self.assertTupleEqual(('dc1', 'room2', None, None), self.virtual_guest.get_location_path())

        self.virtual_guest['location'] = {}
        self.assertTupleEqual((None, None, None, None), self.virtual_guest.get_location_path())

    def test_get_disks(self):
        self.assertListEqual(['Disk 1 25 GB', 'Disk 2 100 GB'], self.virtual_guest.get_disks())

    def test_get_disks_swap_only_at_end(self):
        self.virtual_guest['blockDevices'] = [
            {'diskImage': {'description': 'SWAP-disk', 'capacity': 10, 'units': 'GB'}},
            {'diskImage': {'description': None, 'capacity': 20, 'units': 'GB'}}
        ]
        self.assertListEqual(['Disk 1 10 GB', 'Disk 2 20 GB'], self.virtual_guest.get_disks())

    def test_get_link_speed(self):
        self.assertEqual(1000, self.virtual_guest.get_link_speed(0))
        self.assertEqual(100, self.virtual_guest.get_link_speed(1))
        self.assertIsNone(self.virtual_guest.get_link_speed(2))

    def test_get_pod_name(self):
        self.assertEqual('dc1.pod01', self.virtual_guest.get_pod_name({'bcr01a.dc1': 'dc1.pod01'}))
        self.assertIsNone(self.virtual_guest.get_pod_name({}))

        self.virtual_guest['backendRouters'] = []
        self.assertIsNone(self.virtual_guest.get_pod_name({'bcr01a.dc1': 'dc1.pod01'}))

    def test_get_migration_flag(self):
        self.assertEqual('migrate', self.virtual_guest.get_migration_flag())

        self.virtual_guest['pendingMigrationFlag'] = False
        self.assertEqual('', self.virtual_guest.get_migration_flag())

    def test_get_disks_incomplete_disk_image(self):
        self.virtual_guest['blockDevices'] = [
            {'diskImage': {'description': 'vm1-root', 'units': 'GB'}},
            {'diskImage': {'description': 'vm1-data', 'capacity': 100}}
        ]
        self.assertListEqual(['Disk 1  GB', 'Disk 2 100'], self.virtual_guest.get_disks())
