"""Generation planning.

Turns the sparse set of command-line switches into a fully resolved,
immutable ``GenerationPlan``: controller kind, soft-delete mode,
authorization style and the artifacts to emit.  Missing decisions are
asked through the injected ``PromptPort``; the resolver never touches the
filesystem.

Usage::

    from crudpack.planner import GenerationFlags, PlanResolver

    plan = PlanResolver(prompt).resolve(GenerationFlags(api=True, all=True))
"""

from crudpack.planner.models import (
    AuthStyle,
    ControllerKind,
    GenerationFlags,
    GenerationPlan,
    SoftDeleteMode,
)
from crudpack.planner.resolver import PlanResolver

__all__ = [
    "AuthStyle",
    "ControllerKind",
    "GenerationFlags",
    "GenerationPlan",
    "PlanResolver",
    "SoftDeleteMode",
]
