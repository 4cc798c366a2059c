from eth_account import Account
from hexbytes import HexBytes
from loguru import logger
from web3 import AsyncWeb3
from web3.exceptions import TimeExhausted
from web3.types import TxParams, TxReceipt

from magiceden_mint.errors import ConfirmationTimeoutError
from magiceden_mint.models import TransactionPlan


def get_web3(rpc_url: str) -> AsyncWeb3:
    return AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(rpc_url))


class Web3Wrapper:
    def __init__(self, web3: AsyncWeb3, private_key: str) -> None:
        self.web3 = web3
        self.account = Account.from_key(private_key)

    @classmethod
    def connect(cls, rpc_url: str, private_key: str) -> "Web3Wrapper":
        return cls(get_web3(rpc_url), private_key)

    async def close(self) -> None:
        await self.web3.provider.disconnect()

    @property
    def address(self) -> str:
        return self.account.address

    async def get_balance(self) -> int:
        return await self.web3.eth.get_balance(self.account.address)

    async def get_chain_id(self) -> int:
        return await self.web3.eth.chain_id

    async def get_gas_price(self) -> int:
        return await self.web3.eth.gas_price

    async def estimate_gas(self, tx_params: TxParams, fallback: int) -> int:
        """Estimate gas for ``tx_params``, or return ``fallback`` if the node can't."""
        try:
            return await self.web3.eth.estimate_gas(
                {**tx_params, "from": self.account.address}
            )
        except Exception as e:
            logger.warning(
                f"Gas estimation failed, using default gas limit {fallback}: {e}"
            )
            return fallback

    async def send_transaction(self, plan: TransactionPlan) -> HexBytes:
        """Sign the plan with the local account and broadcast it"""

        tx_params: TxParams = {
            "chainId": await self.web3.eth.chain_id,
            "nonce": await self.web3.eth.get_transaction_count(self.account.address, "pending"),
            "from": self.account.address,
            **plan.to_tx_params(),
        }

        signed_tx = self.account.sign_transaction(tx_params)

        return await self.web3.eth.send_raw_transaction(signed_tx.raw_transaction)

    async def wait_for_receipt(
        self,
        tx_hash: HexBytes,
        timeout: float,
        poll_latency: float = 1,
    ) -> TxReceipt:
        try:
            return await self.web3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=timeout, poll_latency=poll_latency
            )
        except TimeExhausted as e:
            raise ConfirmationTimeoutError(
                f"Transaction confirmation timeout or failed: {e}"
            ) from e
