import re

from config.settings import settings
from src.scoring.exceptions import ValidationError

# Bitcoin-style base58 alphabet: no 0, O, I or l
BASE58_RE = re.compile(r"[1-9A-HJ-NP-Za-km-z]+")


def validate_mint(mint: str | None) -> str:
    """Check a mint address before any fetch. Returns the stripped address."""
    if not mint or not mint.strip():
        raise ValidationError("Missing mint address")

    mint = mint.strip()
    # Solana base58 addresses are 32-44 chars; allow some slack
    if not settings.mint_min_length <= len(mint) <= settings.mint_max_length:
        raise ValidationError("Invalid mint address format")
    if not BASE58_RE.fullmatch(mint):
        raise ValidationError("Invalid mint address format")
    return mint
