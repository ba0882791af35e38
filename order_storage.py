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
from pprint import pformat

import click
import click_log

from softlayerops import SoftLayerOps, logging
from softlayerops.config import get_softlayer_config_files
from softlayerops.ops import OPERATION_ERRORS
from softlayerops.order_storage import CONFIG_FILE, OrderValidationError, validate_order_arguments, \
    build_order_template, get_order_prices


@click.command(context_settings=dict(ignore_unknown_options=True))
@click.option('--yes', 'skip_confirm', is_flag=True, help='Skip confirmation and place the order')
@click_log.simple_verbosity_option(logging.getLogger(), default="INFO", show_default=True)
@click.argument('storage_type', metavar='TYPE', required=False)
@click.argument('capacity', metavar='CAPACITY_IN_GB', required=False)
@click.argument('location', metavar='DATA_CENTER', required=False)
@click.argument('description', required=False)
@click.argument('extra_args', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx, skip_confirm, storage_type, capacity, location, description, extra_args):
    """Orders a new storage device of TYPE with CAPACITY_IN_GB in DATA_CENTER"""

    click_log.basic_config()

    try:
        order_request = validate_order_arguments(storage_type, capacity, location, description, extra_args)
    except OrderValidationError as err:
        logging.error(err)
        click.echo(ctx.get_help())
        sys.exit(1)

    logging.task = 'Order storage'
    logging.storage_type = order_request.storage_type
    logging.datacenter = order_request.location

    try:
        so = SoftLayerOps(config_files=get_softlayer_config_files(CONFIG_FILE))
    except RuntimeError as err:
        logging.error(err)
        sys.exit(1)

    try:
        datacenter = so.get_datacenter(name=order_request.location)
        if not datacenter:
            sys.exit(1)

        package = so.get_package(key_name=order_request.storage_type)
        if not package:
            sys.exit(1)

        (prices, capacities) = get_order_prices(order_request, datacenter, package)
        if not prices:
            click.echo('Available options for capacity are:')
            for available_capacity in capacities:
                click.echo(available_capacity)

        order_template = build_order_template(order_request, datacenter, package, prices)

        verify_result = so.verify_order(order_template)
        if not verify_result:
            logging.error('There was an error verifying the order:')
            logging.error(pformat(verify_result))
            return

        if not skip_confirm and not click.confirm(
                f"You are about to order a {order_request.storage_type} with {order_request.capacity} GB in "
                f"{order_request.location} with description '{order_request.description}'. Confirm?"):
            return

        order_result = so.place_order(order_template)
        logging.order_id = (order_result or {}).get('orderId', 'Unknown')
        logging.info(f"Ordered {order_request.storage_type} with {order_request.capacity} GB in "
                     f"'{order_request.location}'", log_to_slack=True)
        click.echo('Success!')
    except OPERATION_ERRORS as err:
        logging.error(f"An exception occurred: {err}")


if __name__ == '__main__':
    main()
