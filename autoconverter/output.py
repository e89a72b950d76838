import json
from pathlib import Path
from typing import Dict, Optional

import click
from ape.contracts import ContractInstance

from autoconverter.constants import OUTPUT_JSON_FORMAT
from autoconverter.types import ContractName


def output_from_deployments(deployments: Dict[ContractName, ContractInstance]) -> Dict[str, str]:
    """Maps each output key to the address of its deployed contract, as is."""
    return {name: instance.address for name, instance in deployments.items()}


def write_output(output: Dict[str, str], filepath: Path) -> Optional[Path]:
    """
    Writes deployed addresses to a JSON file.

    The output directory must exist. Filesystem errors are reported on
    stderr and not raised: the deployment already happened and its address
    has been printed. Returns None when nothing was written.
    """
    try:
        with open(filepath, "w") as file:
            json.dump(output, file, **OUTPUT_JSON_FORMAT)
    except OSError as e:
        click.secho(f"Error writing output file: {e}", fg="red", err=True)
        return None
    return filepath
