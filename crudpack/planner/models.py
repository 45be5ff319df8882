"""Plan data model: enumerations, raw flags and the resolved plan."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from crudpack.errors import ValidationError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ControllerKind(str, Enum):
    """Which controller flavour to generate."""
    WEB = "web"
    API = "api"


class SoftDeleteMode(str, Enum):
    """Whether generated code uses soft deletes (trash/restore/force-delete)."""
    ON = "on"
    OFF = "off"


class AuthStyle(str, Enum):
    """How generated controller actions are gated behind the policy.

    ``authorize`` and ``gate`` emit a call at the top of each action,
    ``resource`` wires everything once in the constructor, ``none`` emits
    nothing.
    """
    NONE = "none"
    AUTHORIZE = "authorize"
    GATE = "gate"
    RESOURCE = "resource"


ARTIFACT_SWITCHES: tuple[str, ...] = ("routes", "request", "model", "migration", "policy", "views")


# ---------------------------------------------------------------------------
# Raw flags
# ---------------------------------------------------------------------------

class GenerationFlags(BaseModel):
    """Switches exactly as given on the command line.

    ``None`` means "not provided", which is distinct from ``False``: the
    resolver only prompts for decisions nobody made.
    """

    web: Optional[bool] = Field(default=None, description="--web")
    api: Optional[bool] = Field(default=None, description="--api")
    soft_deletes: Optional[bool] = Field(default=None, description="--soft-deletes")
    no_soft_deletes: Optional[bool] = Field(default=None, description="--no-soft-deletes")
    all: Optional[bool] = Field(default=None, description="--all")
    routes: Optional[bool] = Field(default=None)
    request: Optional[bool] = Field(default=None)
    model: Optional[bool] = Field(default=None)
    migration: Optional[bool] = Field(default=None)
    policy: Optional[bool] = Field(default=None)
    views: Optional[bool] = Field(default=None)
    policy_style: Optional[str] = Field(default=None, description="--policy-style value")
    force: bool = Field(default=False, description="Overwrite without asking")

    def explicit_artifacts(self) -> list[str]:
        """Names of the per-artifact switches that were provided."""
        return [name for name in ARTIFACT_SWITCHES if getattr(self, name) is not None]


# ---------------------------------------------------------------------------
# Resolved plan
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationPlan:
    """Every decision for one run, made before any file I/O begins."""

    controller_kind: ControllerKind
    soft_delete_mode: SoftDeleteMode
    auth_style: AuthStyle = AuthStyle.NONE
    routes: bool = False
    request: bool = False
    model: bool = False
    migration: bool = False
    policy: bool = False
    views: bool = False
    force: bool = False

    def __post_init__(self) -> None:
        if self.views and self.controller_kind is not ControllerKind.WEB:
            raise ValidationError("Views can only be generated for WEB controllers.")
        if not self.policy and self.auth_style is not AuthStyle.NONE:
            raise ValidationError("An authorization style requires the policy artifact.")

    @property
    def is_web(self) -> bool:
        return self.controller_kind is ControllerKind.WEB

    @property
    def is_api(self) -> bool:
        return self.controller_kind is ControllerKind.API

    @property
    def soft_deletes(self) -> bool:
        return self.soft_delete_mode is SoftDeleteMode.ON

    def summary(self) -> dict[str, str]:
        """Label -> value mapping for the console summary table."""
        artifacts = [name for name in ARTIFACT_SWITCHES if getattr(self, name)]
        return {
            "Controller": self.controller_kind.value,
            "Soft deletes": self.soft_delete_mode.value,
            "Authorization": self.auth_style.value,
            "Artifacts": ", ".join(["controller", *artifacts]),
            "Force": "yes" if self.force else "no",
        }
