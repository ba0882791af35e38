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

from softlayerops.log import logging
from .object import SoftLayerObject


class SoftLayerPackage(SoftLayerObject):
    def get_item_prices(self, capacity=None):
        kwargs = {'id': self['id'], 'mask': 'mask[item]'}
        if capacity is not None:
            kwargs['filter'] = {'itemPrices': {'item': {'capacity': {'operation': capacity}}}}

        return self._ops.client.call('Product_Package', 'getItemPrices', **kwargs)

    def get_prices(self, capacity, datacenter):
        """Returns the price references for CAPACITY that are valid in DATACENTER."""
        prices = [{'id': price['id']} for price in self.get_item_prices(capacity=capacity)
                  if datacenter.in_location_groups(price)]
        logging.debug(f"Found {len(prices)} price(s) for {capacity} GB in '{datacenter['name']}'")

        return prices

    def get_available_capacities(self, datacenter):
        capacities = []
        for price in self.get_item_prices():
            if not datacenter.in_location_groups(price):
                continue

            capacity = (price.get('item') or {}).get('capacity')
            try:
                capacities.append(int(float(capacity)))
            except (TypeError, ValueError):
                logging.debug(f"Skipping price '{price.get('id')}' with capacity '{capacity}'")

        return sorted(capacities)
