from pathlib import Path

#
# Filesystem
#

# Paths are relative to the working directory `ape run` is invoked from.
CONSTANTS_DIR = Path("script") / "constants"
CONSTANTS_FILEPATH = CONSTANTS_DIR / "Optimism.json"
OUTPUT_DIR = CONSTANTS_DIR / "output"
OUTPUT_FILEPATH = OUTPUT_DIR / "Tenderly.json"

OUTPUT_JSON_FORMAT = {"indent": 2}

#
# Constants file
#

CONSTANTS_VERSION = "v2"

FORWARDER = "Forwarder"
VOTER = "Voter"
ROUTER = "Router"
FACTORY_REGISTRY = "FactoryRegistry"

#
# Contracts
#

AUTO_CONVERTER_FACTORY = "AutoConverterFactory"

#
# Networks & accounts
#

LOCAL_BLOCKCHAIN_ENVIRONMENTS = ["local"]

DEPLOYER_ACCOUNT_ENVVAR = "DEPLOYER_ACCOUNT"

# Receipts are awaited until mined in one block.
REQUIRED_CONFIRMATIONS = 1
