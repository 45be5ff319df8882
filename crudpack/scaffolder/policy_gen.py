"""Policy generation.

``deleteBulk`` is always part of the policy stub.  The soft-delete
abilities (``trash``, ``restore``, ``restoreBulk``, ``forceDelete``,
``forceDeleteBulk``) are injected active or commented out.
"""

from __future__ import annotations

from pathlib import Path

from crudpack.naming import ResourceNames
from crudpack.planner.models import GenerationPlan

from .auth import AUTH_WIRING
from .base import ArtifactGenerator
from .soft_deletes import soft_block

_SOFT_POLICY_METHODS = """\
    /**
     * List trashed records.
     */
    public function trash(User $user): bool
    {{
        return true;
    }}

    /**
     * Restore a single trashed record.
     */
    public function restore(User $user, {model_class} ${model_var}): bool
    {{
        return true;
    }}

    /**
     * Restore several trashed records at once.
     */
    public function restoreBulk(User $user): bool
    {{
        return true;
    }}

    /**
     * Permanently delete a single record.
     */
    public function forceDelete(User $user, {model_class} ${model_var}): bool
    {{
        return true;
    }}

    /**
     * Permanently delete several records at once.
     */
    public function forceDeleteBulk(User $user): bool
    {{
        return true;
    }}
"""


def soft_policy_methods(names: ResourceNames, soft: bool) -> str:
    """The soft-delete abilities, active or commented out."""
    code = _SOFT_POLICY_METHODS.format(model_class=names.class_name, model_var=names.variable)
    return soft_block(code, soft)


class PolicyGenerator(ArtifactGenerator):
    label = "policy"
    template_id = "policies/policy.stub"

    def target_path(self, plan: GenerationPlan, names: ResourceNames) -> Path:
        return self.config.policies_dir / f"{names.class_name}Policy.php"

    def build_context(self, plan: GenerationPlan, names: ResourceNames) -> dict[str, str]:
        return {
            "MODEL_CLASS": names.class_name,
            "MODEL_VAR": names.variable,
            "POLICY_STYLE_NOTE": AUTH_WIRING[plan.auth_style].policy_note,
            "SOFT_POLICY_METHODS": soft_policy_methods(names, plan.soft_deletes),
        }
