"""Interactive mint executor: quote, plan, sign, send and confirm one mint."""

import re
from typing import Callable, Optional, Tuple

from loguru import logger

from magiceden_mint.config import CONFIRMATION_TIMEOUT, FALLBACK_GAS_LIMIT
from magiceden_mint.console import Console
from magiceden_mint.const import (
    CHAIN_MENU,
    CHAINS,
    DEFAULT_CHAIN,
    DEFAULT_TOKEN_ID,
    NETWORK_NAMES,
)
from magiceden_mint.errors import (
    ConfigurationError,
    InsufficientFundsError,
    QuoteError,
    ValidationError,
)
from magiceden_mint.magiceden import MagicEden
from magiceden_mint.mint import Web3Wrapper
from magiceden_mint.models import (
    Chain,
    MintOutcome,
    MintRequest,
    MintStep,
    TransactionOutcome,
    TransactionPlan,
)
from magiceden_mint.settings import Settings
from magiceden_mint.utils import error_hints, error_reason, to_ether, to_gwei

SEPARATOR = "=" * 50
RULE = "-" * 50
WARNING_BANNER = "⚠️ " * 20

LEADING_INT = re.compile(r"\s*[+-]?\d+")


def parse_quantity(answer: str, default: int = 1) -> int:
    """Leading integer of ``answer`` ("3.7" -> 3, "5x" -> 5), else ``default``."""
    match = LEADING_INT.match(answer)
    quantity = int(match.group()) if match else 0

    return quantity if quantity > 0 else default


def check_balance(balance: int, value: int, currency: str) -> None:
    if balance < value:
        raise InsufficientFundsError(
            f"Insufficient balance! Need {to_ether(value)} {currency}, "
            f"but have {to_ether(balance)} {currency}",
            currency,
        )


class MintWorkflow:
    def __init__(
        self,
        settings: Settings,
        console: Console,
        market: MagicEden,
        wallet_factory: Callable[[str, str], Web3Wrapper] = Web3Wrapper.connect,
        fallback_gas_limit: int = FALLBACK_GAS_LIMIT,
        confirmation_timeout: float = CONFIRMATION_TIMEOUT,
    ) -> None:
        self.settings = settings
        self.console = console
        self.market = market
        self.wallet_factory = wallet_factory
        self.fallback_gas_limit = fallback_gas_limit
        self.confirmation_timeout = confirmation_timeout

        self.chain: Optional[Chain] = None
        self.wallet: Optional[Web3Wrapper] = None

    @property
    def currency(self) -> str:
        return self.chain.currency if self.chain else "tokens"

    def check_credentials(self) -> None:
        if not self.settings.private_key:
            raise ConfigurationError("PRIVATE_KEY not found in .env file")

    def select_chain(self) -> Chain:
        logger.info("🔗 Available chains:")
        for number, chain in CHAIN_MENU.items():
            logger.info(f"{number}. {chain.title}")

        choice = self.console.ask(f"Select chain (1 - {len(CHAINS)}): ")
        chain = CHAIN_MENU.get(choice)

        if chain is None:
            logger.warning(f"Invalid choice! Using {DEFAULT_CHAIN.name} as default.")
            chain = DEFAULT_CHAIN

        self.chain = chain
        return chain

    def rpc_url_for(self, chain: Chain) -> str:
        rpc_url = self.settings.rpc_url(chain)

        if not rpc_url:
            raise ConfigurationError(
                f"RPC URL not found for {chain.name}. Please set {chain.rpc_env} in .env"
            )

        return rpc_url

    async def connect(self, chain: Chain) -> Tuple[Web3Wrapper, int]:
        rpc_url = self.rpc_url_for(chain)

        logger.info("🔗 Connecting to RPC...")
        wallet = self.wallet_factory(rpc_url, self.settings.private_key)
        self.wallet = wallet
        logger.info(f"👛 Wallet Address: {wallet.address}")

        balance = await wallet.get_balance()
        logger.info(f"💰 Balance: {to_ether(balance)} {chain.currency}")

        chain_id = await wallet.get_chain_id()
        network_name = NETWORK_NAMES.get(chain_id, chain.name)
        logger.info(f"🌐 Network: {network_name} - Chain ID: {chain_id}")

        return wallet, balance

    def read_request(self, chain: Chain, wallet_address: str) -> MintRequest:
        contract = self.console.ask("📋 Enter contract address: ")

        if not contract.startswith("0x"):
            raise ValidationError("Invalid contract address! Must start with 0x")

        quantity = parse_quantity(self.console.ask("📦 How many to mint (default 1): "))
        self.console.close()

        request = MintRequest(
            contract=contract,
            wallet=wallet_address,
            chain=chain,
            quantity=quantity,
        )

        logger.info(SEPARATOR)
        logger.info("📋 EXECUTION CONFIG:")
        logger.info(f"Contract: {request.contract}")
        logger.info(f"Chain: {chain.name.upper()}")
        logger.info(f"Currency: {chain.currency}")
        logger.info(f"Wallet: {request.wallet}")
        logger.info(f"Amount: {request.quantity}")
        logger.info(SEPARATOR)

        return request

    async def fetch_quote(self, request: MintRequest) -> MintStep:
        logger.info("🔄 Getting mint quote...")

        quote = await self.market.quote_mint_data(
            request.contract,
            request.wallet,
            request.chain.name,
            request.quantity,
            DEFAULT_TOKEN_ID,
        )

        steps = (quote or {}).get("steps") or []
        if not steps:
            raise QuoteError(
                "No mint steps found. Mint might not be active or collection is sold out."
            )

        step = MintStep.from_quote_step(steps[0])

        logger.success("✅ MINT QUOTE RECEIVED")
        logger.info(RULE)
        if step.is_free:
            logger.info("💰 Cost: FREE")
        else:
            logger.info(f"💰 Cost (wei): {step.value}")
            logger.info(f"💰 Cost ({self.currency}): {to_ether(step.value)} {self.currency}")

        return step

    async def plan_transaction(self, wallet: Web3Wrapper, step: MintStep) -> TransactionPlan:
        logger.info("⛽ Estimating gas...")

        gas_limit = await wallet.estimate_gas(step.to_tx_params(), self.fallback_gas_limit)
        logger.info(f"⛽ Gas Limit: {gas_limit}")

        gas_price = await wallet.get_gas_price()
        logger.info(f"⛽ Gas Price: {to_gwei(gas_price)} gwei")

        plan = TransactionPlan.from_step(step, gas_limit=gas_limit, gas_price=gas_price)
        logger.info(f"⛽ Estimated Gas Cost: {to_ether(plan.estimated_gas_cost)} {self.currency}")
        logger.info(f"💰 Total Cost (Mint + Gas): {to_ether(plan.total_cost)} {self.currency}")

        return plan

    async def submit(self, wallet: Web3Wrapper, plan: TransactionPlan) -> TransactionOutcome:
        logger.warning(WARNING_BANNER)
        logger.warning("🚨 READY TO EXECUTE MINT TRANSACTION")
        logger.warning(f"Contract: {plan.to}")
        logger.warning(f"Value: {to_ether(plan.value)} {self.currency}")
        logger.warning(f"Gas Limit: {plan.gas_limit}")
        logger.warning(f"Total Cost: {to_ether(plan.total_cost)} {self.currency}")
        logger.warning(WARNING_BANNER)

        logger.info("🚀 Sending transaction...")
        tx_hash = await wallet.send_transaction(plan)

        logger.success("✅ Transaction sent!")
        logger.info(f"🔗 TX Hash: 0x{bytes(tx_hash).hex()}")
        logger.info("⏳ Waiting for confirmation...")

        receipt = await wallet.wait_for_receipt(tx_hash, self.confirmation_timeout)

        return TransactionOutcome.from_receipt(receipt, plan.gas_price)

    def report(self, outcome: TransactionOutcome) -> None:
        if outcome.succeeded:
            logger.success("🎉 MINT SUCCESSFUL!")
            logger.info(RULE)
            logger.info("✅ Status: Success")
            logger.info(f"🔗 TX Hash: {outcome.tx_hash}")
            logger.info(f"📦 Block Number: {outcome.block_number}")
            logger.info(f"⛽ Gas Used: {outcome.gas_used}")
            logger.info(f"💰 Actual Gas Cost: {to_ether(outcome.effective_cost)} {self.currency}")
            logger.info(f"🎯 Contract: {outcome.contract}")
        else:
            logger.error("❌ TRANSACTION FAILED")
            logger.error(f"🔗 TX Hash: {outcome.tx_hash}")
            logger.error("❌ Status: Failed")

    def report_error(self, error: BaseException) -> None:
        logger.error(f"❌ ERROR: {error}")

        hints = error_hints(error, self.currency)
        if hints:
            logger.info("💡 Hints:")
            for hint in hints:
                logger.info(f"- {hint}")

        reason = error_reason(error)
        if reason:
            logger.info(f"🔍 Reason: {reason}")

    async def execute(self) -> TransactionOutcome:
        self.check_credentials()

        chain = self.select_chain()
        wallet, balance = await self.connect(chain)

        request = self.read_request(chain, wallet.address)
        step = await self.fetch_quote(request)

        check_balance(balance, step.value, chain.currency)

        plan = await self.plan_transaction(wallet, step)
        outcome = await self.submit(wallet, plan)

        self.report(outcome)
        return outcome

    async def run(self) -> MintOutcome:
        logger.info("🚀 MAGIC EDEN MINT EXECUTOR")
        logger.info(SEPARATOR)

        try:
            return MintOutcome.from_transaction(await self.execute())
        except Exception as e:
            self.report_error(e)
            return MintOutcome.from_error(e)
        finally:
            self.console.close()

            if self.wallet is not None:
                await self.wallet.close()


async def run_mint(
    settings: Settings,
    console: Console,
    market: MagicEden,
    **kwargs,
) -> MintOutcome:
    return await MintWorkflow(settings, console, market, **kwargs).run()
