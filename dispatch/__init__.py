#Expose the high-level pipeline pieces:
#Policy (tunable knobs)
#Dispatch engine orchestrator (the "one call" entry point)

from .policy import DispatchPolicy, default_dispatch_policy, policy_from_env
from .engine import DispatchEngine, DispatchResult #the main entry point to queue and dispatch rides

__all__ = [
    "DispatchPolicy",
    "default_dispatch_policy",
    "policy_from_env",
    "DispatchEngine",
    "DispatchResult",
]
