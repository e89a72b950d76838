from pathlib import Path
from typing import Any, Dict, List, NamedTuple

from autoconverter.constants import (
    CONSTANTS_VERSION,
    FACTORY_REGISTRY,
    FORWARDER,
    ROUTER,
    VOTER,
)
from autoconverter.types import Address
from autoconverter.utils import _load_json


class ConstantsRecord(NamedTuple):
    """Addresses of already deployed contracts the factory is constructed with."""

    forwarder: Address
    voter: Address
    router: Address
    factory_registry: Address

    @classmethod
    def from_config(
        cls, config: Dict[str, Any], version: str = CONSTANTS_VERSION
    ) -> "ConstantsRecord":
        """Reads the addresses of one version section, as given."""
        section = config[version]
        return cls(
            forwarder=section[FORWARDER],
            voter=section[VOTER],
            router=section[ROUTER],
            factory_registry=section[FACTORY_REGISTRY],
        )

    @classmethod
    def from_json(cls, filepath: Path, version: str = CONSTANTS_VERSION) -> "ConstantsRecord":
        config = _load_json(filepath)
        return cls.from_config(config, version=version)

    def constructor_args(self) -> List[Address]:
        """AutoConverterFactory constructor arguments, in order."""
        return [self.forwarder, self.voter, self.router, self.factory_registry]
