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
import SoftLayer

from softlayerops.objects import SoftLayerDatacenter, SoftLayerPackage, SoftLayerPod, SoftLayerVirtualGuest
from .config import load_softlayer_config
from .log import logging

VIRTUAL_GUEST_MASK = ('mask[pendingMigrationFlag, location.pathString, networkComponents, blockDevices.diskImage, '
                      'operatingSystemReferenceCode, backendRouters.backendRouters]')

# Errors reported at the top of each script instead of aborting with a traceback
OPERATION_ERRORS = (SoftLayer.SoftLayerError, KeyError, IndexError, TypeError, ValueError)


class SoftLayerOps(object):
    def __init__(self, username=None, api_key=None, endpoint_url=None, config_files=None, timeout=None):
        if config_files:
            (credentials, config_file) = load_softlayer_config(config_files)
            logging.info(f"Found config at {config_file}")
            (username, api_key, endpoint_url, _) = credentials

        self.username = username
        self.api_key = api_key
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self.client = SoftLayer.create_client_from_env(username=self.username, api_key=self.api_key,
                                                       endpoint_url=self.endpoint_url, timeout=self.timeout)

    def _sl_get_single_result(self, service, method, kwargs, softlayer_object, pretty_name):
        response = self.client.call(service, method, **kwargs)

        if not response:
            logging.error(f"{pretty_name.capitalize()} with attributes {kwargs.get('filter')} not found")
            return None
        elif len(response) != 1:
            logging.error(f"Lookup for {pretty_name} with attributes {kwargs.get('filter')} returned multiple results")
            return None

        return softlayer_object(self, response[0])

    def _sl_get_all_results(self, service, method, kwargs, softlayer_object):
        response = self.client.call(service, method, **kwargs)

        return [softlayer_object(self, item) for item in response or []]

    def get_datacenter(self, name):
        kwargs = {
            'mask': 'mask[groups]',
            'filter': {'name': {'operation': name}}
        }

        return self._sl_get_single_result('Location_Datacenter', 'getDatacenters', kwargs, SoftLayerDatacenter,
                                          'datacenter')

    def get_package(self, key_name):
        kwargs = {
            'filter': {
                'keyName': {'operation': key_name},
                'isActive': {'operation': 1}
            }
        }

        return self._sl_get_single_result('Product_Package', 'getAllObjects', kwargs, SoftLayerPackage, 'package')

    def get_all_pods(self, datacenters):
        kwargs = {
            'filter': {
                'datacenterName': {
                    'operation': 'in',
                    'options': [{'name': 'data', 'value': list(datacenters)}]
                }
            }
        }

        return self._sl_get_all_results('Network_Pod', 'getAllObjects', kwargs, SoftLayerPod)

    def get_pod_lookup(self, datacenters):
        """Maps backend router hostnames to pod names."""
        return {pod['backendRouterName']: pod['name'] for pod in self.get_all_pods(datacenters)}

    def get_all_virtual_guests(self, hostname_query=None):
        kwargs = {'mask': VIRTUAL_GUEST_MASK}
        if hostname_query:
            kwargs['filter'] = {'virtualGuests': {'hostname': {'operation': f"*= {hostname_query}"}}}

        return self._sl_get_all_results('Account', 'getVirtualGuests', kwargs, SoftLayerVirtualGuest)

    def verify_order(self, order_template):
        logging.debug(f"Verifying order of package '{order_template['packageId']}'")
        return self.client.call('Product_Order', 'verifyOrder', order_template)

    def place_order(self, order_template):
        logging.debug(f"Placing order of package '{order_template['packageId']}'")
        return self.client.call('Product_Order', 'placeOrder', order_template)
