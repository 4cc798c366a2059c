from magiceden_mint.models import Chain

API_BASE_URL = "https://api-mainnet.magiceden.io"

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/133.0.0.0 Safari/537.36"
    ),
    "Content-Type": "application/json",
}

MONAD_TESTNET = Chain("monad-testnet", 10143, "RPC_URL_MONAD", "MON", "Monad-Testnet")
ARBITRUM = Chain("arbitrum", 42161, "RPC_URL_ARBITRUM", "ETH", "Arbitrum")
ETHEREUM = Chain("ethereum", 1, "RPC_URL_ETH_MAINNET", "ETH", "Ethereum Mainnet")
BASE = Chain("base", 8453, "RPC_URL_BASE", "ETH", "Base")

CHAINS = (MONAD_TESTNET, ARBITRUM, ETHEREUM, BASE)

# menu answer -> chain
CHAIN_MENU = {str(i): chain for i, chain in enumerate(CHAINS, start=1)}

DEFAULT_CHAIN = MONAD_TESTNET

NETWORK_NAMES = {chain.chain_id: chain.name for chain in CHAINS}

# ERC1155 collections are quoted with token id 0
DEFAULT_TOKEN_ID = 0
