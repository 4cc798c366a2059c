# gas limit used when the node fails to estimate the mint call
FALLBACK_GAS_LIMIT = 500_000

# how long to wait for the mint tx to be confirmed, in seconds
CONFIRMATION_TIMEOUT = 300

# secrets and RPC urls are read from .env, see .env.example
ENV_FILE = ".env"
