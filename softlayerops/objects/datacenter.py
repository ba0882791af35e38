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

from .object import SoftLayerObject


class SoftLayerDatacenter(SoftLayerObject):
    def get_location_group_ids(self):
        return [group['id'] for group in self.get('groups') or []]

    def in_location_groups(self, price):
        return price.get('locationGroupId') in self.get_location_group_ids()
