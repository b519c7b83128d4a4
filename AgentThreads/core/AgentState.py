from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ThreadStatus(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    STOPPED = "stopped"


class AgentThreadState(BaseModel):
    """
    Schema for the state of one agent execution context.

    """
    status: ThreadStatus = Field(ThreadStatus.NOT_STARTED, description="Lifecycle state of the context")
    wake_count: int = Field(0, description="Tokens consumed from the signal slot")
    action_count: int = Field(0, description="Decision passes that reported an action")
    idle_count: int = Field(0, description="Decision passes that reported nothing to do")
    failure_count: int = Field(0, description="Unexpected exceptions raised by the decision callback")
    consecutive_failures: int = Field(0, description="Failures since the last successful decision pass")
    last_error: Optional[str] = Field(None, description="repr of the last unexpected exception")
