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

from softlayerops.objects import SoftLayerDatacenter, SoftLayerPackage


class TestSoftLayerPackage(TestCase):
    def setUp(self):
        self.ops = Mock()
        self.datacenter = SoftLayerDatacenter(Mock(), {
            'id': 1,
            'name': 'tor01',
            'groups': [{'id': 10}, {'id': 11}]
        })
        self.package = SoftLayerPackage(self.ops, {'id': 2, 'keyName': 'PORTABLE_STORAGE'})

    def test_get_location_group_ids(self):
        self.assertListEqual([10, 11], self.datacenter.get_location_group_ids())
        self.assertListEqual([], SoftLayerDatacenter(Mock(), {'id': 1}).get_location_group_ids())

    def test_get_item_prices(self):
        self.package.get_item_prices(capacity=250)
        self.ops.client.call.assert_called_with('Product_Package', 'getItemPrices', id=2, mask='mask[item]',
                                                filter={'itemPrices': {'item': {'capacity': {'operation': 250}}}})

        self.package.get_item_prices()
        self.ops.client.call.assert_called_with('Product_Package', 'getItemPrices', id=2, mask='mask[item]')

    def test_get_prices(self):
        self.ops.client.call.return_value = [
            {'id': 100, 'locationGroupId': 10},
            {'id': 101, 'locationGroupId': 20},
            {'id': 102, 'locationGroupId': None},
            {'id': 103, 'locationGroupId': 11}
        ]

        self.assertListEqual([{'id': 100}, {'id': 103}], self.package.get_prices(250, self.datacenter))

    def test_get_prices_no_match(self):
        self.ops.client.call.return_value = [{'id': 101, 'locationGroupId': 20}]

        self.assertListEqual([], self.package.get_prices(250, self.datacenter))

    def test_get_available_capacities(self):
        self.ops.client.call.return_value = [
            {'id': 100, 'locationGroupId': 10, 'item': {'capacity': '500'}},
            {'id': 101, 'locationGroupId': 20, 'item': {'capacity': '50'}},
            {'id': 102, 'locationGroupId': 11, 'item': {'capacity': '100'}},
            {'id': 103, 'locationGroupId': 10, 'item': {'capacity': '250'}}
        ]

        self.assertListEqual([100, 250, 500], self.package.get_available_capacities(self.datacenter))

    def test_get_available_capacities_tolerates_odd_values(self):
        self.ops.client.call.return_value = [
            {'id': 100, 'locationGroupId': 10, 'item': {'capacity': '0.5'}},
            {'id': 101, 'locationGroupId': 10, 'item': {'capacity': 'unlimited'}},
            {'id': 102, 'locationGroupId': 10, 'item': {}},
            {'id': 103, 'locationGroupId': 11},
            {'id': 104, 'locationGroupId': 11, 'item': {'capacity': 20.0}}
        ]

        self.assertListEqual([0, 20], self.package.get_available_capacities(self.datacenter))
