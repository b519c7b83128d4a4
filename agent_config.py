import os

from dotenv import load_dotenv

# Defaults for every AgentConfig, overridable from the environment or a .env file
load_dotenv()


def _optional_int(value):
    if value is None or value.strip() == "":
        return None
    return int(value)


AGENT_LOG_LEVEL = os.getenv("AGENT_LOG_LEVEL", "INFO").upper()
AGENT_DAEMON_THREADS = os.getenv("AGENT_DAEMON_THREADS", "true").lower() in ("1", "true", "yes")
AGENT_JOIN_TIMEOUT = float(os.getenv("AGENT_JOIN_TIMEOUT", "5.0"))
AGENT_MAX_CONSECUTIVE_FAILURES = _optional_int(os.getenv("AGENT_MAX_CONSECUTIVE_FAILURES"))
AGENT_PRINT_ACTIONS = os.getenv("AGENT_PRINT_ACTIONS", "true").lower() in ("1", "true", "yes")
