"""Score a single Pump.fun token from the terminal.

Usage:
    python scripts/score_token.py <MINT>
    python scripts/score_token.py <MINT> --json
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from loguru import logger  # noqa: E402

from src.parsers.pumpfun.client import PumpfunClient  # noqa: E402
from src.parsers.sol_price import SolPriceSource  # noqa: E402
from src.scoring.exceptions import ScoreError  # noqa: E402
from src.scoring.service import TokenAnalysis, analyze_token  # noqa: E402


def format_analysis(analysis: TokenAnalysis) -> str:
    """Human-readable report."""
    data = analysis.to_dict()
    metrics = data["metrics"]
    lines = [
        f"{data['name']} (${data['symbol']})  {data['mintAddress']}",
        f"Score: {data['score']}/100  Grade: {data['grade']}",
        "",
        f"  Market cap:  ${metrics['marketCap']:,}",
        f"  Liquidity:   ${metrics['liquidity']:,}",
        f"  Holders:     {metrics['holders']}",
        f"  Age:         {metrics['ageMinutes']:.1f} min",
    ]
    if data["positives"]:
        lines.append("")
        lines.extend(f"  + {p}" for p in data["positives"])
    if data["risks"]:
        lines.append("")
        lines.extend(f"  - {r}" for r in data["risks"])
    return "\n".join(lines)


async def run(mint: str, as_json: bool) -> int:
    pumpfun = PumpfunClient()
    price_source = SolPriceSource()
    try:
        analysis = await analyze_token(mint, pumpfun, price_source)
    except ScoreError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    finally:
        await pumpfun.close()
        await price_source.close()

    if as_json:
        print(json.dumps(analysis.to_dict(), indent=2))
    else:
        print(format_analysis(analysis))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Score a Pump.fun token")
    parser.add_argument("mint", help="Token mint address")
    parser.add_argument("--json", action="store_true", help="Print the raw JSON record")
    parser.add_argument("--verbose", action="store_true", help="Show debug logs")
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    sys.exit(asyncio.run(run(args.mint, args.json)))


if __name__ == "__main__":
    main()
