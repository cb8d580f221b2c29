"""Run swap risk assessments from the command line.

Runs the built-in demo scenarios (safe ETH→USDC, risky unknown token,
large swap with high slippage) or scenarios loaded from a JSON file, and
prints factors, recommendations and a colour-coded summary.

Without --rpc-url (or EVM_RPC_URL in .env) the owner probe and gas check
are skipped; every other check still runs.

Usage:
    poetry run python scripts/assess_swap.py
    poetry run python scripts/assess_swap.py --scenario risky-unknown-token
    poetry run python scripts/assess_swap.py --file swaps.json --json
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from loguru import logger  # noqa: E402

from config.settings import settings  # noqa: E402
from src.chain.evm_client import EvmRpcClient  # noqa: E402
from src.risk.assessor import RiskAssessor  # noqa: E402
from src.risk.models import InvalidSwapInput, RiskAssessment  # noqa: E402
from src.risk.policy import format_summary, should_block_transaction  # noqa: E402
from src.risk.scenarios import (  # noqa: E402
    DEMO_SCENARIOS,
    build_inputs,
    find_scenario,
    load_scenarios,
)
from src.utils.logger import setup_logger  # noqa: E402


def _print_report(title: str, assessment: RiskAssessment) -> None:
    print(f"\n{title}")
    print("=" * 50)
    print(f"Risk Level: {assessment.overall_risk.value}")
    print(f"Risk Score: {assessment.risk_score}/100")
    print(f"Risk Factors Found: {len(assessment.risk_factors)}")

    if assessment.risk_factors:
        print("\nRisk Factors:")
        for i, factor in enumerate(assessment.risk_factors, 1):
            print(f"  {i}. {factor.severity.value} {factor.type.value.replace('_', ' ')}")
            print(f"     Description: {factor.description}")
            print(f"     Impact: {factor.impact}")

    if assessment.recommendations:
        print("\nRecommendations:")
        for i, rec in enumerate(assessment.recommendations, 1):
            print(f"  {i}. {rec}")

    print(f"\n{format_summary(assessment)}")
    if should_block_transaction(assessment):
        print("Transaction would be BLOCKED")
    print("-" * 50)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Assess DeFi swap risk")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--scenario", help="Run one built-in scenario by name")
    source.add_argument("--file", type=Path, help="JSON file with one scenario or a list")
    parser.add_argument("--list", action="store_true", help="List built-in scenarios")
    parser.add_argument("--rpc-url", default=settings.evm_rpc_url, help="EVM JSON-RPC URL")
    parser.add_argument("--json", action="store_true", help="Print assessments as JSON")
    args = parser.parse_args()

    setup_logger(level="WARNING", log_dir=None)

    if args.list:
        for s in DEMO_SCENARIOS:
            print(f"{s['name']:<24} {s['title']}")
        return 0

    if args.file:
        try:
            scenarios = load_scenarios(args.file)
        except (OSError, ValueError) as e:
            logger.error(f"Cannot load scenarios: {e}")
            return 2
    elif args.scenario:
        scenario = find_scenario(args.scenario)
        if scenario is None:
            logger.error(f"Unknown scenario '{args.scenario}' (see --list)")
            return 2
        scenarios = [scenario]
    else:
        scenarios = DEMO_SCENARIOS

    chain = EvmRpcClient(args.rpc_url, timeout=settings.chain_read_timeout_sec) if args.rpc_url else None
    assessor = RiskAssessor(chain, read_timeout_sec=settings.chain_read_timeout_sec)
    results = []
    exit_code = 0

    try:
        for scenario in scenarios:
            title = scenario.get("title", scenario["name"])
            try:
                assessment = await assessor.assess_swap_risk(*build_inputs(scenario))
            except InvalidSwapInput as e:
                logger.error(f"{title}: {e}")
                exit_code = 2
                continue

            if args.json:
                results.append({"name": scenario["name"], **assessment.to_dict()})
            else:
                _print_report(title, assessment)
    finally:
        if chain is not None:
            await chain.close()

    if args.json:
        print(json.dumps(results, indent=2, ensure_ascii=False))

    return exit_code


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
