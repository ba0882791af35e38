#!/usr/bin/env python3
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
import sys

import click
import click_log
import click_spinner

from softlayerops import SoftLayerOps, logging
from softlayerops.config import get_softlayer_config_files
from softlayerops.ops import OPERATION_ERRORS
from softlayerops.list_virtual_machines import CONFIG_FILE, CSV_FILE, POD_DATACENTERS, ListOptions, \
    get_virtual_machine_rows, format_table, write_csv


@click.command(context_settings=dict(ignore_unknown_options=True, allow_extra_args=True))
@click.option('--query', '-q', metavar='<query>', help='Query specific hosts')
@click.option('--csv', '-c', 'export_csv', is_flag=True, help=f"Export csv to {CSV_FILE}")
@click.option('--migration', '-m', is_flag=True, help='Include migration information')
@click.option('--location', '-l', is_flag=True, help='Include location information')
@click_log.simple_verbosity_option(logging.getLogger(), default="INFO", show_default=True)
def main(query, export_csv, migration, location):
    """Lists the virtual machines of a SoftLayer account"""

    click_log.basic_config()

    options = ListOptions(query=query, csv=export_csv, migration=migration, location=location)

    try:
        so = SoftLayerOps(config_files=get_softlayer_config_files(CONFIG_FILE))
    except RuntimeError as err:
        logging.error(err)
        sys.exit(1)

    try:
        with click_spinner.spinner(stream=sys.stderr):
            pod_lookup = so.get_pod_lookup(POD_DATACENTERS)
            virtual_guests = so.get_all_virtual_guests(hostname_query=options.query)
            rows = get_virtual_machine_rows(virtual_guests, pod_lookup)

        click.echo(format_table(rows, options))

        if options.csv:
            written = write_csv(rows, options)
            logging.info(f"Exported {written} virtual machine(s) to '{CSV_FILE}'")
    except OPERATION_ERRORS as err:
        logging.error(f"An exception occurred: {err}")


if __name__ == '__main__':
    main()
