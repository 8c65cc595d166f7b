from .core.common_types import CommandStatus, Entry
from .core.orchestrator import Orchestrator
from .core.status_table import StatusTable
from .core.supervisor import Supervisor

__all__ = [
    "CommandStatus",
    "Entry",
    "Orchestrator",
    "StatusTable",
    "Supervisor",
]
