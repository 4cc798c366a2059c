import pytest
from eth_account import Account
from hexbytes import HexBytes
from loguru import logger

from magiceden_mint.console import Console
from magiceden_mint.const import CHAINS
from magiceden_mint.mint import Web3Wrapper
from magiceden_mint.settings import Settings

PRIVATE_KEY = "0x" + "11" * 32
WALLET = Account.from_key(PRIVATE_KEY).address

CONTRACT = "0x" + "33" * 20
MINT_TARGET = "0x" + "22" * 20
TX_HASH = HexBytes("0x" + "ab" * 32)

ONE_ETH = 10**18
GWEI = 10**9


def mint_quote(value="1000000000000000", to=MINT_TARGET, data="0xa0712d68"):
    return {"steps": [{"id": "sale", "params": {"to": to, "data": data, "value": value}}]}


def make_receipt(status=1, gas_used=90_000, effective_gas_price=GWEI):
    return {
        "transactionHash": TX_HASH,
        "status": status,
        "blockNumber": 123,
        "gasUsed": gas_used,
        "effectiveGasPrice": effective_gas_price,
        "to": MINT_TARGET,
    }


async def _resolved(value):
    return value


class FakeEth:
    """Stand-in for AsyncWeb3.eth that records every call."""

    def __init__(
        self,
        balance=ONE_ETH,
        chain_id=10143,
        gas=120_000,
        gas_price=GWEI,
        receipt=None,
        estimate_error=None,
        wait_error=None,
        send_error=None,
    ):
        self.balance = balance
        self._chain_id = chain_id
        self.gas = gas
        self._gas_price = gas_price
        self.receipt = receipt or make_receipt()
        self.estimate_error = estimate_error
        self.wait_error = wait_error
        self.send_error = send_error

        self.calls = []
        self.estimated = []
        self.sent = []
        self.receipt_timeouts = []

    @property
    def chain_id(self):
        self.calls.append("chain_id")
        return _resolved(self._chain_id)

    @property
    def gas_price(self):
        self.calls.append("gas_price")
        return _resolved(self._gas_price)

    async def get_balance(self, address):
        self.calls.append("get_balance")
        return self.balance

    async def estimate_gas(self, tx_params):
        self.calls.append("estimate_gas")
        self.estimated.append(tx_params)
        if self.estimate_error:
            raise self.estimate_error
        return self.gas

    async def get_transaction_count(self, address, block_identifier):
        self.calls.append("get_transaction_count")
        return 7

    async def send_raw_transaction(self, raw_transaction):
        self.calls.append("send_raw_transaction")
        if self.send_error:
            raise self.send_error
        self.sent.append(raw_transaction)
        return TX_HASH

    async def wait_for_transaction_receipt(self, tx_hash, timeout, poll_latency):
        self.calls.append("wait_for_transaction_receipt")
        self.receipt_timeouts.append(timeout)
        if self.wait_error:
            raise self.wait_error
        return self.receipt


class FakeProvider:
    def __init__(self):
        self.disconnected = False

    async def disconnect(self):
        self.disconnected = True


class FakeWeb3:
    def __init__(self, eth):
        self.eth = eth
        self.provider = FakeProvider()


class FakeMarket:
    def __init__(self, quote=None):
        self.quote = mint_quote() if quote is None else quote
        self.calls = []

    async def quote_mint_data(self, *args):
        self.calls.append(args)
        return self.quote


class ScriptedConsole(Console):
    def __init__(self, *answers):
        self.answers = list(answers)
        self.questions = []
        super().__init__(self._answer)

    def _answer(self, question):
        self.questions.append(question)
        return self.answers.pop(0)


@pytest.fixture
def logs():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]))
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def settings():
    return Settings(
        private_key=PRIVATE_KEY,
        rpc_urls={chain.name: f"https://rpc.example/{chain.name}" for chain in CHAINS},
    )


@pytest.fixture
def eth():
    return FakeEth()


@pytest.fixture
def wallet_factory(eth):
    connected = []
    providers = []

    def factory(rpc_url, private_key):
        connected.append(rpc_url)
        web3 = FakeWeb3(eth)
        providers.append(web3.provider)
        return Web3Wrapper(web3, private_key)

    factory.connected = connected
    factory.providers = providers
    return factory
