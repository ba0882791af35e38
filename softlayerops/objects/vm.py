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

from .object import SoftLayerObject

SWAP_DISK_PATTERN = re.compile(r'SWAP$')


class SoftLayerVirtualGuest(SoftLayerObject):
    def get_location_path(self):
        """Splits 'datacenter.server-room.rack.slot' into its four parts.

        Missing trailing parts are returned as None.
        """
        path_string = (self.get('location') or {}).get('pathString') or ''
        parts = path_string.split('.') if path_string else []
        parts += [None] * (4 - len(parts))

        return tuple(parts[:4])

    def get_disks(self):
        disks = []
        for block_device in self.get('blockDevices') or []:
            disk_image = block_device.get('diskImage')
            if not disk_image:
                continue

            if SWAP_DISK_PATTERN.search(disk_image.get('description') or ''):
                continue

            disk = f"Disk {len(disks) + 1} {disk_image.get('capacity', '')} {disk_image.get('units', '')}"
            disks.append(disk.rstrip())

        return disks

    def get_link_speed(self, index):
        network_components = self.get('networkComponents') or []
        if len(network_components) <= index:
            return None

        return network_components[index].get('speed')

    def get_backend_router_hostname(self):
        backend_routers = self.get('backendRouters') or []
        if not backend_routers:
            return None

        return backend_routers[0].get('hostname')

    def get_pod_name(self, pod_lookup):
        return pod_lookup.get(self.get_backend_router_hostname())

    def get_migration_flag(self):
        return 'migrate' if self.get('pendingMigrationFlag') else ''
