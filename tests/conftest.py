import itertools
import sys
from types import SimpleNamespace

import pytest

from autoconverter import deployer as deployer_module
from autoconverter import utils as utils_module
from autoconverter.params import ConstantsRecord

# Common constants
FORWARDER = "0x06824df38D1D77eADEB6baFCB03904E27429Ab74"
VOTER = "0x41C914ee0c7E1A5edCD0295623e6dC557B5aBf3C"
ROUTER = "0xa062aE8A9c5e11aaA026fc2670B0D65cCc8B2858"
FACTORY_REGISTRY = "0xF4c67CdEAaB8360370F41514d06e32CcD8aA1d7B"

CONSTANTS_CONFIG = {
    "v2": {
        "Forwarder": FORWARDER,
        "Voter": VOTER,
        "Router": ROUTER,
        "FactoryRegistry": FACTORY_REGISTRY,
    }
}


class FakeContainer:
    def __init__(self, name):
        self.contract_type = SimpleNamespace(name=name)

    def at(self, address):
        return SimpleNamespace(address=address, contract_type=self.contract_type)


class FakeAccount:
    """Stands in for an ape account; every deployment gets a fresh address."""

    def __init__(self, address="0x1234567890123456789012345678901234567890", calls=None):
        self.address = address
        self.deployments = []
        self._calls = calls if calls is not None else []
        self._addresses = (f"0x{n:040x}" for n in itertools.count(1))

    def deploy(self, container, *args, publish=False, **kwargs):
        self._calls.append(("deploy", container.contract_type.name))
        self.deployments.append(
            SimpleNamespace(container=container, args=args, publish=publish, kwargs=kwargs)
        )
        return SimpleNamespace(address=next(self._addresses), contract_type=container.contract_type)


class FakeSolidityCompiler:
    def __init__(self, calls):
        self.libraries = []
        self._calls = calls

    def add_library(self, *contracts):
        self._calls.append(("add_library", [c.contract_type.name for c in contracts]))
        self.libraries.extend(contracts)


# Fixtures
@pytest.fixture
def calls():
    """Ordered log of chain-facing calls made by the fakes."""
    return list()


@pytest.fixture
def known_contracts():
    return ["AutoConverterFactory", "ConverterLibrary", "MathLibrary"]


@pytest.fixture
def containers(monkeypatch, calls, known_contracts):
    def get_contract_container(contract):
        calls.append(("lookup", contract))
        if contract not in known_contracts:
            raise ValueError(f"No contract found with name '{contract}'.")
        return FakeContainer(contract)

    monkeypatch.setattr(deployer_module, "get_contract_container", get_contract_container)
    return get_contract_container


@pytest.fixture
def solidity(monkeypatch, calls):
    compiler = FakeSolidityCompiler(calls)
    monkeypatch.setattr(deployer_module, "compilers", SimpleNamespace(solidity=compiler))
    return compiler


@pytest.fixture
def creator(calls):
    return FakeAccount(calls=calls)


@pytest.fixture
def constants():
    return ConstantsRecord.from_config(CONSTANTS_CONFIG)


@pytest.fixture
def live_network(monkeypatch):
    network = SimpleNamespace(
        name="mainnet", chain_id=10, ecosystem=SimpleNamespace(name="optimism")
    )
    provider = SimpleNamespace(network=network)
    monkeypatch.setattr(utils_module, "networks", SimpleNamespace(provider=provider))
    return network


@pytest.fixture
def etherscan_plugin(monkeypatch):
    plugin_utils = SimpleNamespace(ETHERSCAN_API_KEY_NAME="ETHERSCAN_API_KEY")
    monkeypatch.setitem(sys.modules, "ape_etherscan", SimpleNamespace(utils=plugin_utils))
    monkeypatch.setitem(sys.modules, "ape_etherscan.utils", plugin_utils)
    monkeypatch.setenv("ETHERSCAN_API_KEY", "key")
    return plugin_utils


@pytest.fixture
def no_etherscan_plugin(monkeypatch):
    monkeypatch.setitem(sys.modules, "ape_etherscan", None)
