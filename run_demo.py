#!/usr/bin/env python3
"""
Local script to run the demo scenarios against the dataset agents.
Prints which data sources answered each scenario and a summary report.

Usage:
    python run_demo.py                         # run every scenario
    python run_demo.py market-wheat-decision   # run one scenario by id
    python run_demo.py --list                  # list scenario ids

Set SIMULATE_LATENCY=true to include the upstream API delays.
"""

import json
import sys

from farmer_advisory.demo import (
    DEMO_SCENARIOS,
    generate_demo_report,
    get_scenario,
    run_all_scenarios,
)
from farmer_advisory.utils.logger import get_logger

get_logger("farmer_advisory")


def main():
    args = sys.argv[1:]

    if args and args[0] == "--list":
        for scenario in DEMO_SCENARIOS:
            print(f"{scenario.id:28} [{scenario.category}] {scenario.title}")
        return

    if args:
        scenario = get_scenario(args[0])
        if scenario is None:
            print(f"❌ Unknown scenario: {args[0]}")
            print("Use --list to see available scenarios")
            sys.exit(1)
        scenarios = [scenario]
    else:
        scenarios = list(DEMO_SCENARIOS)

    print("🚀 Demo Scenarios - Farmer Dataset Agents")
    print("=" * 50)

    results = run_all_scenarios(scenarios)

    for result in results:
        status = "✅" if result["success"] and result["sources_matched"] else ("⚠️" if result["success"] else "❌")
        print(f"\n{status} {result['scenario'].title}")
        print(f"   Query: {result['scenario'].query}")
        print(f"   Used sources: {', '.join(result['used_sources']) or 'none'}")

    report = generate_demo_report(results)

    print("\n" + "=" * 50)
    print("📊 Demo Report:")
    print(json.dumps({k: v for k, v in report.items() if k != "details"}, indent=2))

    if report["successful_scenarios"] < report["total_scenarios"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
