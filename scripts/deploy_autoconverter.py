#!/usr/bin/python3
from pathlib import Path
from typing import Optional

from ape.api import AccountAPI
from ape.contracts import ContractInstance

from autoconverter.constants import (
    AUTO_CONVERTER_FACTORY,
    CONSTANTS_FILEPATH,
    OUTPUT_FILEPATH,
)
from autoconverter.deployer import deploy
from autoconverter.output import output_from_deployments, write_output
from autoconverter.params import ConstantsRecord
from autoconverter.utils import (
    check_plugins,
    get_account,
    print_deployment_info,
)

VERIFY = False


def deploy_auto_converter_factory(
    constants: ConstantsRecord,
    output_filepath: Path,
    sender: Optional[AccountAPI] = None,
    publish: bool = False,
) -> ContractInstance:
    """Deploys the AutoConverterFactory and records its address."""
    factory = deploy(
        AUTO_CONVERTER_FACTORY,
        *constants.constructor_args(),
        sender=sender,
        publish=publish,
    )
    print(f"{AUTO_CONVERTER_FACTORY} deployed to {factory.address}")

    output = output_from_deployments({AUTO_CONVERTER_FACTORY: factory})
    write_output(output, filepath=output_filepath)
    return factory


def main():
    """
    Deploys the AutoConverterFactory against the v2 Optimism constants.

    ape run deploy_autoconverter --network optimism:mainnet:<PROVIDER>

    Explorer publication needs the ape-etherscan plugin (`verify` extra)
    and is enabled by setting VERIFY.
    """
    if VERIFY:
        check_plugins()

    constants = ConstantsRecord.from_json(CONSTANTS_FILEPATH)
    account = get_account()
    print_deployment_info(account=account, verify=VERIFY)

    return deploy_auto_converter_factory(
        constants=constants,
        output_filepath=OUTPUT_FILEPATH,
        sender=account,
        publish=VERIFY,
    )
