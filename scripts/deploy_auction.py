import sys

from ape import project, accounts, convert
from ape.logging import logger
from scripts.deployments import (
    DeploymentConfig,
    DeploymentError,
    DeploymentResult,
    run_deployment,
)

ITEM_NAME = "Vintage Laptop"
MINIMUM_BID = "1 ether"
DURATION_MINUTES = 60


def auction_config(environ=None):
    return DeploymentConfig.from_env(
        "SimpleAuction",
        (ITEM_NAME, convert(MINIMUM_BID, int), DURATION_MINUTES),
        environ=environ,
    )


def deploy_auction(config=None):
    if config is None:
        config = auction_config()

    return run_deployment(config, project, accounts)


def main():
    try:
        config = auction_config()
    except DeploymentError as error:
        # Nothing was submitted, report it like any other failed run.
        print(f"Invalid deployment configuration: {error}", file=sys.stderr)
        logger.error(str(error))
        result = DeploymentResult(error=error)
    else:
        result = deploy_auction(config)

    sys.exit(result.exit_code)
