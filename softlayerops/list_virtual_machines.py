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

import csv
from collections import namedtuple

import humanfriendly
from tabulate import tabulate

POD_DATACENTERS = ['tor01', 'mon01', 'lon02']
CONFIG_FILE = 'vm.cfg'
CSV_FILE = 'output.csv'

ListOptions = namedtuple('ListOptions', ['query', 'csv', 'migration', 'location'])

VirtualMachineRow = namedtuple('VirtualMachineRow', ['name', 'datacenter', 'pod', 'location', 'cpu', 'memory',
                                                     'private_link', 'public_link', 'disks', 'os', 'migrate_flag'])


def get_virtual_machine_rows(virtual_guests, pod_lookup):
    rows = []
    for virtual_guest in virtual_guests:
        (datacenter, _, _, _) = virtual_guest.get_location_path()

        rows.append(VirtualMachineRow(
            name=virtual_guest.get('fullyQualifiedDomainName'),
            datacenter=datacenter,
            pod=virtual_guest.get_pod_name(pod_lookup),
            location=(virtual_guest.get('location') or {}).get('pathString'),
            cpu=virtual_guest.get('maxCpu'),
            memory=virtual_guest.get('maxMemory'),
            private_link=virtual_guest.get_link_speed(0),
            public_link=virtual_guest.get_link_speed(1),
            disks=', '.join(virtual_guest.get_disks()),
            os=virtual_guest.get('operatingSystemReferenceCode'),
            migrate_flag=virtual_guest.get_migration_flag()
        ))

    return rows


def _select_columns(row, options, memory):
    columns = [row.name]
    if options.location:
        columns += [row.datacenter, row.pod, row.location]
    columns += [row.cpu, memory, row.private_link, row.public_link, row.disks, row.os]
    if options.migration:
        columns.append(row.migrate_flag)

    return columns


def format_table(rows, options):
    table_headers = ['Name']
    if options.location:
        table_headers += ['Datacenter', 'Pod', 'Location']
    table_headers += ['CPU', 'Memory', 'Private link', 'Public link', 'Disks', 'OS']
    if options.migration:
        table_headers.append('Migration')

    table_data = []
    for row in rows:
        memory = humanfriendly.format_size(row.memory * 1024 ** 2, binary=True) if row.memory else row.memory
        table_data.append(_select_columns(row, options, memory))

    return tabulate(table_data, headers=table_headers, tablefmt='pretty')


def write_csv(rows, options, csv_file=CSV_FILE):
    """Writes ROWS to CSV_FILE; with the migration option only rows flagged for migration are written."""
    written = 0
    with open(csv_file, 'w', newline='') as f:
        writer = csv.writer(f)
        for row in rows:
            if options.migration and not row.migrate_flag:
                continue

            writer.writerow(_select_columns(row, options, row.memory))
            written += 1

    return written
