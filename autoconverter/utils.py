import json
import os
from pathlib import Path
from typing import Optional

from ape import accounts, networks, project
from ape.api import AccountAPI
from ape.cli.choices import select_account
from ape.contracts import ContractContainer

from autoconverter.constants import (
    DEPLOYER_ACCOUNT_ENVVAR,
    LOCAL_BLOCKCHAIN_ENVIRONMENTS,
)


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def is_local_network() -> bool:
    """Returns True if the connected network is a local development chain."""
    return networks.provider.network.name in LOCAL_BLOCKCHAIN_ENVIRONMENTS


def get_account(account_id: Optional[str] = None) -> AccountAPI:
    """
    Returns the account used to sign deployments.

    Local networks use the first test account. Live networks load the
    account alias given (or set in the environment), otherwise the user
    is prompted to select one.
    """
    if is_local_network():
        return accounts.test_accounts[0]

    account_id = account_id or os.environ.get(DEPLOYER_ACCOUNT_ENVVAR)
    if account_id:
        return accounts.load(account_id)
    return select_account()


def check_etherscan_plugin() -> None:
    """
    Checks that the ape-etherscan plugin is installed and that
    the explorer API key environment variable is set.
    """
    if is_local_network():
        # unnecessary for local deployment
        return
    try:
        import ape_etherscan  # noqa: F401
    except ImportError:
        raise ImportError("Please install the ape-etherscan plugin to use this script.")
    from ape_etherscan.utils import ETHERSCAN_API_KEY_NAME

    api_key = os.environ.get(ETHERSCAN_API_KEY_NAME)
    if not api_key:
        raise ValueError(f"{ETHERSCAN_API_KEY_NAME} is not set.")


def check_plugins() -> None:
    print("Checking plugins...")
    check_etherscan_plugin()


def _get_dependency_contract_container(contract: str) -> ContractContainer:
    for dependency_name, dependency_versions in project.dependencies.items():
        if len(dependency_versions) > 1:
            raise ValueError(f"Ambiguous {dependency_name} dependency for {contract}")
        try:
            dependency_api = list(dependency_versions.values())[0]
            contract_container = getattr(dependency_api, contract)
            return contract_container
        except AttributeError:
            continue
    raise ValueError(f"No contract found with name '{contract}'.")


def get_contract_container(contract: str) -> ContractContainer:
    try:
        contract_container = getattr(project, contract)
    except AttributeError:
        # not in root project; check dependencies
        contract_container = _get_dependency_contract_container(contract)

    return contract_container


def print_deployment_info(account: AccountAPI, verify: bool) -> None:
    print(
        f"Account: {account.address}",
        f"Verify: {verify}",
        f"Ecosystem: {networks.provider.network.ecosystem.name}",
        f"Network: {networks.provider.network.name}",
        f"Chain ID: {networks.provider.network.chain_id}",
        sep="\n",
    )
