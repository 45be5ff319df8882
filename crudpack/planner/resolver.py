"""Resolve command-line flags into a ``GenerationPlan``.

Rules, applied in order:

1. Controller kind: ``--web`` and ``--api`` are exclusive; with neither the
   user is asked, default ``web``.
2. Soft deletes: ``--soft-deletes`` and ``--no-soft-deletes`` are exclusive;
   with neither the user is asked, default ``on``.
3. ``--all`` and the per-artifact switches (including ``--policy``) are
   exclusive.  With neither, a wizard asks about each artifact.  ``--all``
   turns every artifact on, except views for API controllers.
4. API controllers with ``--views`` are rejected.
5. Authorization style: ``none`` without a policy; an unknown
   ``--policy-style`` value is downgraded to ``none`` with a warning instead
   of aborting the run; with no value the user picks one, default ``none``.
"""

from __future__ import annotations

from crudpack.errors import ValidationError
from crudpack.planner.models import (
    AuthStyle,
    ControllerKind,
    GenerationFlags,
    GenerationPlan,
    SoftDeleteMode,
)
from crudpack.prompts import PromptPort
from crudpack.utils import print_info, print_warning

# Wizard questions and their defaults, asked in this order.
WIZARD_QUESTIONS: tuple[tuple[str, str, bool], ...] = (
    ("routes", "Append routes automatically?", True),
    ("model", "Generate Model?", True),
    ("migration", "Generate Migration?", True),
    ("request", "Generate Request validation (single FormRequest for store & update)?", False),
    ("policy", "Generate Policy?", False),
    ("views", "Generate Blade views (Bootstrap 5)?", True),
)

POLICY_STYLE_CHOICES: list[str] = [style.value for style in AuthStyle]


class PlanResolver:
    """Builds a ``GenerationPlan`` from flags, asking only for missing decisions."""

    def __init__(self, prompt: PromptPort) -> None:
        self.prompt = prompt
        self.warnings: list[str] = []

    def resolve(self, flags: GenerationFlags) -> GenerationPlan:
        """Resolve *flags* into a plan.

        Raises:
            ValidationError: On conflicting switches or views for an API controller.
        """
        kind = self._resolve_controller_kind(flags)
        soft = self._resolve_soft_delete_mode(flags)
        artifacts = self._resolve_artifacts(flags, kind)

        if kind is ControllerKind.API and artifacts["views"]:
            raise ValidationError("Views can only be generated for WEB controllers.")

        style = self._resolve_auth_style(flags, artifacts["policy"])

        return GenerationPlan(
            controller_kind=kind,
            soft_delete_mode=soft,
            auth_style=style,
            force=flags.force,
            **artifacts,
        )

    # -- Rules 1 & 2 -------------------------------------------------------

    def _resolve_controller_kind(self, flags: GenerationFlags) -> ControllerKind:
        if flags.web and flags.api:
            raise ValidationError("Choose either --web or --api, not both.")
        if flags.web:
            return ControllerKind.WEB
        if flags.api:
            return ControllerKind.API
        choice = self.prompt.choose_one(
            "Controller type?", [ControllerKind.WEB.value, ControllerKind.API.value], 0
        )
        return ControllerKind(choice)

    def _resolve_soft_delete_mode(self, flags: GenerationFlags) -> SoftDeleteMode:
        if flags.soft_deletes and flags.no_soft_deletes:
            raise ValidationError("Choose either --soft-deletes or --no-soft-deletes, not both.")
        if flags.soft_deletes:
            return SoftDeleteMode.ON
        if flags.no_soft_deletes:
            return SoftDeleteMode.OFF
        choice = self.prompt.choose_one("Soft deletes?", ["soft-deletes", "no-soft-deletes"], 0)
        return SoftDeleteMode.ON if choice == "soft-deletes" else SoftDeleteMode.OFF

    # -- Rule 3 ------------------------------------------------------------

    def _resolve_artifacts(self, flags: GenerationFlags, kind: ControllerKind) -> dict[str, bool]:
        explicit = flags.explicit_artifacts()
        is_web = kind is ControllerKind.WEB

        if flags.all and explicit:
            raise ValidationError(
                "Do not combine --all with explicit generator options "
                "(--routes/--request/--model/--migration/--policy/--views)."
            )

        if flags.all:
            return {
                "routes": True,
                "request": True,
                "model": True,
                "migration": True,
                "policy": True,
                "views": is_web,
            }

        if explicit:
            return {
                "routes": bool(flags.routes),
                "request": bool(flags.request),
                "model": bool(flags.model),
                "migration": bool(flags.migration),
                "policy": bool(flags.policy),
                "views": bool(flags.views),
            }

        print_info("No generation options provided. Answer the following prompts:")
        answers: dict[str, bool] = {}
        for switch, question, default in WIZARD_QUESTIONS:
            if switch == "views" and not is_web:
                answers[switch] = False
                continue
            answers[switch] = self.prompt.confirm(question, default)
        return answers

    # -- Rule 5 ------------------------------------------------------------

    def _resolve_auth_style(self, flags: GenerationFlags, policy: bool) -> AuthStyle:
        if not policy:
            return AuthStyle.NONE

        raw = (flags.policy_style or "").strip().lower()
        if raw:
            try:
                return AuthStyle(raw)
            except ValueError:
                message = (
                    f"Invalid --policy-style {flags.policy_style!r}. "
                    f"Allowed: {'|'.join(POLICY_STYLE_CHOICES)}. Falling back to \"none\"."
                )
                self.warnings.append(message)
                print_warning(message)
                return AuthStyle.NONE

        choice = self.prompt.choose_one("Policy authorization style?", POLICY_STYLE_CHOICES, 0)
        return AuthStyle(choice or AuthStyle.NONE.value)
