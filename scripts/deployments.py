import os
import sys
import traceback
from dataclasses import dataclass, field
from typing import Optional

from ape.exceptions import ApeException
from ape.logging import logger
from hexbytes import HexBytes


class DeploymentError(ApeException):
    """Raised when a deployment can't be configured or confirmed."""


def to_hex(value):
    if not value:
        return None

    return "0x" + HexBytes(value).hex().removeprefix("0x")


@dataclass(frozen=True)
class DeploymentConfig:
    contract_name: str
    constructor_args: tuple = ()
    # None means the first test account, only useful on local networks.
    account: Optional[str] = None
    passphrase: Optional[str] = field(default=None, repr=False)
    # None means the network's default confirmation rule.
    required_confirmations: Optional[int] = None

    @classmethod
    def from_env(cls, contract_name, constructor_args=(), environ=None):
        environ = os.environ if environ is None else environ

        confirmations = environ.get("REQUIRED_CONFIRMATIONS")
        if confirmations is not None:
            try:
                confirmations = int(confirmations)
            except ValueError:
                raise DeploymentError(
                    f"REQUIRED_CONFIRMATIONS must be an integer, got {confirmations!r}"
                )
            if confirmations < 0:
                raise DeploymentError("REQUIRED_CONFIRMATIONS can't be negative")

        return cls(
            contract_name=contract_name,
            constructor_args=tuple(constructor_args),
            account=environ.get("DEPLOYER_ACCOUNT") or None,
            passphrase=environ.get("DEPLOYER_PASSPHRASE") or None,
            required_confirmations=confirmations,
        )


@dataclass(frozen=True)
class DeploymentResult:
    address: Optional[str] = None
    txn_hash: Optional[str] = None
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and bool(self.address)

    @property
    def exit_code(self) -> int:
        return 0 if self.succeeded else 1


def resolve_deployer(config, accounts):
    if config.account is None:
        return accounts.test_accounts[0]

    deployer = accounts.load(config.account)

    if config.passphrase is not None:
        deployer.set_autosign(True, passphrase=config.passphrase)

    return deployer


def deploy_contract(container, args, deployer, required_confirmations=None):
    """
    Submit the creation transaction for `container` and block until the
    receipt is confirmed. Returns the deployed contract instance.
    """
    constructor = HexBytes(container.constructor.encode_input(*args))
    constructor = constructor.hex().removeprefix("0x")
    print(f"Encoded Constructor to use for verifaction {constructor}")

    txn_kwargs = {}
    if required_confirmations is not None:
        txn_kwargs["required_confirmations"] = required_confirmations

    contract = deployer.deploy(container, *args, **txn_kwargs)

    receipt = contract.receipt.await_confirmations()
    logger.info(
        f"Creation txn {to_hex(receipt.txn_hash)} confirmed in block "
        f"{receipt.block_number}"
    )

    return contract


def run_deployment(config, project, accounts):
    """
    Deploy `config.contract_name` once with `config.constructor_args`.

    Every failure is reported on stderr and returned in the result, the
    caller decides what to do with the exit code.
    """
    print(f"Deploying {config.contract_name} contract...")

    try:
        container = getattr(project, config.contract_name)

        deployer = resolve_deployer(config, accounts)
        print(f"Deployer {deployer.address}")
        print("Init balance:", deployer.balance / 1e18)

        contract = deploy_contract(
            container,
            config.constructor_args,
            deployer,
            required_confirmations=config.required_confirmations,
        )

        address = str(contract.address) if contract.address else ""
        if not address:
            raise DeploymentError("Deployment confirmed without a contract address")

    except Exception as error:
        traceback.print_exception(
            type(error), error, error.__traceback__, file=sys.stderr
        )
        logger.error(f"Deploying {config.contract_name} failed: {error}")
        return DeploymentResult(error=error)

    print("✅ Contract deployed to:", address)
    print("\n🔑 SAVE THIS ADDRESS!")
    print("Contract Address:", address)

    return DeploymentResult(address=address, txn_hash=to_hex(contract.txn_hash))
