import pytest
from utils.constants import AUCTION_ADDRESS, AUCTION_ARGS, DEPLOYER_ADDRESS
from utils.helpers import FakeAccount, FakeAccounts, FakeProject
from scripts.deployments import DeploymentConfig


@pytest.fixture(scope="function")
def daddy():
    yield FakeAccount(DEPLOYER_ADDRESS)


@pytest.fixture(scope="function")
def auction_project():
    yield FakeProject("SimpleAuction")


@pytest.fixture(scope="function")
def create_accounts(daddy):
    def create_accounts(test_account=daddy, **aliases):
        return FakeAccounts([test_account], **aliases)

    yield create_accounts


@pytest.fixture(scope="function")
def deployer_accounts(create_accounts):
    yield create_accounts()


@pytest.fixture(scope="function")
def create_config():
    def create_config(
        contract_name="SimpleAuction",
        constructor_args=AUCTION_ARGS,
        account=None,
        passphrase=None,
        required_confirmations=None,
    ):
        return DeploymentConfig(
            contract_name=contract_name,
            constructor_args=constructor_args,
            account=account,
            passphrase=passphrase,
            required_confirmations=required_confirmations,
        )

    yield create_config


@pytest.fixture(scope="function")
def config(create_config):
    yield create_config()


@pytest.fixture(scope="function")
def auction_deployer():
    yield FakeAccount(DEPLOYER_ADDRESS, addresses=[AUCTION_ADDRESS])
