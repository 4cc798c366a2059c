from dataclasses import dataclass
from typing import Optional

from web3 import Web3
from web3.types import TxParams, TxReceipt


def _quantity_to_int(value) -> int:
    """Decimal or 0x-prefixed hex quantity as an exact int."""
    if isinstance(value, str) and value[:2].lower() == "0x":
        return Web3.to_int(hexstr=value)

    return int(value or 0)


@dataclass(frozen=True)
class Chain:
    name: str
    chain_id: int
    rpc_env: str
    currency: str
    title: str


@dataclass(frozen=True)
class MintRequest:
    contract: str
    wallet: str
    chain: Chain
    quantity: int = 1


@dataclass(frozen=True)
class MintStep:
    """One execution step of a Magic Eden mint quote."""

    to: str
    data: str
    value: int

    @classmethod
    def from_quote_step(cls, step: dict) -> "MintStep":
        params = step["params"]

        return cls(
            to=params["to"],
            data=params.get("data") or "0x",
            value=_quantity_to_int(params.get("value")),
        )

    @property
    def is_free(self) -> bool:
        return self.value == 0

    def to_tx_params(self) -> TxParams:
        return {
            "to": Web3.to_checksum_address(self.to),
            "value": self.value,
            "data": self.data,
        }


@dataclass
class TransactionPlan:
    to: str
    value: int
    data: str
    gas_limit: int
    gas_price: int

    @classmethod
    def from_step(cls, step: MintStep, gas_limit: int, gas_price: int) -> "TransactionPlan":
        return cls(
            to=Web3.to_checksum_address(step.to),
            value=step.value,
            data=step.data,
            gas_limit=gas_limit,
            gas_price=gas_price,
        )

    @property
    def estimated_gas_cost(self) -> int:
        return self.gas_limit * self.gas_price

    @property
    def total_cost(self) -> int:
        return self.value + self.estimated_gas_cost

    def to_tx_params(self) -> TxParams:
        return {
            "to": self.to,
            "value": self.value,
            "data": self.data,
            "gas": self.gas_limit,
            "gasPrice": self.gas_price,
        }


@dataclass(frozen=True)
class TransactionOutcome:
    tx_hash: str
    status: str
    block_number: int
    gas_used: int
    effective_gas_price: int
    contract: Optional[str] = None

    @classmethod
    def from_receipt(cls, receipt: TxReceipt, gas_price: int = 0) -> "TransactionOutcome":
        tx_hash = receipt["transactionHash"]

        return cls(
            tx_hash=tx_hash if isinstance(tx_hash, str) else "0x" + bytes(tx_hash).hex(),
            status="success" if receipt["status"] == 1 else "failure",
            block_number=receipt["blockNumber"],
            gas_used=receipt["gasUsed"],
            effective_gas_price=receipt.get("effectiveGasPrice") or gas_price,
            contract=receipt.get("to"),
        )

    @property
    def succeeded(self) -> bool:
        return self.status == "success"

    @property
    def effective_cost(self) -> int:
        return self.gas_used * self.effective_gas_price


@dataclass(frozen=True)
class MintOutcome:
    """Tagged result of a whole mint run: success, failed (reverted) or error."""

    kind: str
    transaction: Optional[TransactionOutcome] = None
    error: Optional[BaseException] = None

    @classmethod
    def from_transaction(cls, transaction: TransactionOutcome) -> "MintOutcome":
        return cls(
            kind="success" if transaction.succeeded else "failed",
            transaction=transaction,
        )

    @classmethod
    def from_error(cls, error: BaseException) -> "MintOutcome":
        return cls(kind="error", error=error)

    @property
    def ok(self) -> bool:
        return self.kind == "success"
