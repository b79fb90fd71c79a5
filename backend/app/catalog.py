"""Static reference data: partner tiers and the prospect outreach list.

Loaded once at import time and never mutated.
"""
import re
from types import MappingProxyType
from typing import NamedTuple

# Stacks mainnet/multisig address. The onboarding form renders this same
# pattern into its ``pattern`` attribute.
WALLET_ADDRESS_PATTERN = r"^S[PM][A-Z0-9]{38,40}$"
WALLET_ADDRESS_RE = re.compile(WALLET_ADDRESS_PATTERN)

DEFAULT_TIER = "builder"

USTX_PER_STX = 1_000_000

# Amounts and aggregates are stored in signed 64-bit BIGINT columns
MAX_USTX = 2**63 - 1


class Tier(NamedTuple):
    label: str
    color: str
    badge: str


class Prospect(NamedTuple):
    name: str
    twitter: str
    tier: str
    description: str


TIERS = MappingProxyType({
    "defi": Tier("DeFi Protocol", "#8b5cf6", "\U0001F3E6"),
    "ai": Tier("AI Agent", "#06b6d4", "\U0001F916"),
    "infra": Tier("Infrastructure", "#f59e0b", "\U0001F527"),
    "security": Tier("Security", "#ef4444", "\U0001F6E1\uFE0F"),
    "builder": Tier("Builder", "#10b981", "\U0001F477"),
    "exchange": Tier("Exchange", "#3b82f6", "\U0001F4CA"),
})

# Priority outreach targets: inference, verification, trust, content and tooling
PROSPECTS = (
    # AI agents and inference
    Prospect("HeyElsa AI", "HeyElsaAI", "ai", "Crypto AI agent - autonomous payments + thesis exploration"),
    Prospect("Daydreams", "daydreamsagents", "ai", "Autonomous agents - omnichain AI inference on x402 rails"),
    Prospect("Heurist AI", "heurist_ai", "ai", "ZK-secured AI infrastructure - pay-per-use inference"),
    Prospect("Gaianet AI", "Gaianet_AI", "ai", "Decentralized AI nodes - self-hosted x402 facilitators"),
    Prospect("CreatorBuddy", "CreatorBuddyX", "ai", "AI content generation - viral post creation endpoints"),
    Prospect("Dexter AI", "dexteraisol", "ai", "x402 agents + SDK - cross-chain bridging automation"),
    # Security and trust
    Prospect("Zauth", "zauthx402", "security", "Trust infrastructure - endpoint verification for agents"),
    Prospect("Cybercentry", "cybercentry", "security", "Security verification - low-cost scans via micropayments"),
    # Infrastructure and tooling
    Prospect("Bluepay x402", "bluepayx402", "infra", "Machine commerce builder - instant sBTC settlements"),
    Prospect("rawgroundbeef", "rawgroundbeef", "builder", "openfacilitator + x402jobs - non-custodial micropayments"),
    Prospect("Noble", "noble_xyz", "infra", "Stablecoin issuer - x402 micropayments + volume growth"),
    Prospect("Cashie CARV", "CashieCARV", "infra", "Giveaway + payment tool - ERC-8004 reward distribution"),
    Prospect("Cronos", "cronos_chain", "infra", "x402 hackathon host - driving cross-chain adoption"),
)


def normalize_tier(key: str | None) -> str:
    """Return ``key`` if it names a known tier, else the default tier."""
    return key if key in TIERS else DEFAULT_TIER


def get_tier(key: str | None) -> Tier:
    return TIERS[normalize_tier(key)]


def is_valid_wallet_address(address: str) -> bool:
    return bool(WALLET_ADDRESS_RE.match(address))


def format_stx(ustx: int | float | None) -> str:
    """Render a microSTX amount as STX with six decimals."""
    return f"{(ustx or 0) / USTX_PER_STX:.6f}"
