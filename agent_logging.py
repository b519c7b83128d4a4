import logging

from rich.console import Console

from agent_config import AGENT_LOG_LEVEL

logging.basicConfig(level=AGENT_LOG_LEVEL)
logger = logging.getLogger("AgentThreads")


rich_console = Console(width=200)
