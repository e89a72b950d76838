from typing import Any, Dict, List, Optional

from ape import compilers
from ape.api import AccountAPI
from ape.contracts import ContractInstance

from autoconverter.constants import REQUIRED_CONFIRMATIONS
from autoconverter.types import Address, ContractName
from autoconverter.utils import get_account, get_contract_container


def link_libraries(libraries: Dict[ContractName, Address]) -> List[ContractInstance]:
    """
    Registers already deployed libraries with the solidity compiler so that
    their placeholders are substituted in the bytecode of dependent contracts.
    """
    instances = list()
    for library_name, address in libraries.items():
        library_container = get_contract_container(library_name)
        instances.append(library_container.at(address))
    if instances:
        print(f"Linking libraries: {', '.join(libraries)}")
        compilers.solidity.add_library(*instances)
    return instances


def deploy(
    contract_name: ContractName,
    *args: Any,
    libraries: Optional[Dict[ContractName, Address]] = None,
    sender: Optional[AccountAPI] = None,
    publish: bool = False,
) -> ContractInstance:
    """
    Deploys a contract by name and waits for the deployment to be mined.

    Constructor arguments are passed through in order, unchecked; a mismatch
    surfaces from the deployment itself. Nothing is cached, so every call
    submits a new deployment transaction.
    """
    if libraries:
        # must precede the lookup: linking recompiles dependent contract types
        link_libraries(libraries)
    container = get_contract_container(contract_name)

    sender = sender or get_account()
    return sender.deploy(
        container,
        *args,
        publish=publish,
        required_confirmations=REQUIRED_CONFIRMATIONS,
    )
