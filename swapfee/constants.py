"""Fee rule constants.

Centralizes the basis-point scale and the defaults shared by rule
selection and the token registry.
"""

# 1 bps = 0.01%, so 10000 bps = 100%
BPS_DENOMINATOR = 10_000

# Hard cap on any single fee rate
MAX_BPS = 10_000

# Priority applied to rules that do not set one
DEFAULT_PRIORITY = 100

# Pattern syntax
WILDCARD = "*"
NEGATION_PREFIX = "!"

# Token registry defaults
DEFAULT_TOKEN_REGISTRY_URL = "https://1click.chaindefuser.com/v0/tokens"
DEFAULT_TOKEN_CACHE_TTL_SECONDS = 3600.0
DEFAULT_TOKEN_REGISTRY_TIMEOUT_SECONDS = 10.0
