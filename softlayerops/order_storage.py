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

import re
from collections import namedtuple

STORAGE_TYPES = ['PORTABLE_STORAGE', 'NETWORK_ATTACHED_STORAGE']
LOCATIONS = ['tor01', 'mon01', 'lon02']
CONFIG_FILE = 'storage.cfg'

CAPACITY_PATTERN = re.compile(r'^(0|[1-9][0-9]*)$')

OrderRequest = namedtuple('OrderRequest', ['storage_type', 'capacity', 'location', 'description'])


class OrderValidationError(ValueError):
    pass


def validate_order_arguments(storage_type, capacity, location, description, extra_args=()):
    """Builds an OrderRequest from raw command line values, raising OrderValidationError on invalid input."""
    if storage_type not in STORAGE_TYPES:
        raise OrderValidationError(f"Valid values for TYPE are: {', '.join(STORAGE_TYPES)}")

    if capacity is None or not CAPACITY_PATTERN.match(capacity):
        raise OrderValidationError('The capacity argument must be a valid integer')

    if location not in LOCATIONS:
        raise OrderValidationError(f"Valid values for DATA_CENTER are: {', '.join(LOCATIONS)}")

    if not description:
        raise OrderValidationError('The description is required')

    if extra_args:
        raise OrderValidationError(f"Invalid parameter '{extra_args[0]}'")

    return OrderRequest(storage_type, int(capacity), location, description)


def build_order_template(order_request, datacenter, package, prices):
    template = {
        'location': datacenter['id'],
        'packageId': package['id'],
        'prices': prices
    }

    if order_request.storage_type == 'PORTABLE_STORAGE':
        template['diskDescription'] = order_request.description
        template['complexType'] = 'SoftLayer_Container_Product_Order_Virtual_Disk_Image'
    elif order_request.storage_type == 'NETWORK_ATTACHED_STORAGE':
        template['message'] = order_request.description
        template['complexType'] = 'SoftLayer_Container_Product_Order_Network_Storage_Nas'
    else:
        raise OrderValidationError(f"Unknown storage type '{order_request.storage_type}'")

    return template


def get_order_prices(order_request, datacenter, package):
    """Returns (prices, available_capacities); capacities are only looked up when no price matches."""
    prices = package.get_prices(order_request.capacity, datacenter)
    if prices:
        return prices, []

    return prices, package.get_available_capacities(datacenter)
