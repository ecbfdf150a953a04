import os

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Thread pool size for the dataset agent fan-out (one worker per agent)
AGGREGATOR_MAX_WORKERS = int(os.environ.get("AGGREGATOR_MAX_WORKERS", "5"))

# Sleep for the upstream API delay in each agent, for demos
SIMULATE_LATENCY = os.environ.get("SIMULATE_LATENCY", "false").lower() == "true"

DEMO_SCENARIO_DELAY = float(os.environ.get("DEMO_SCENARIO_DELAY", "0"))
