"""Authorization wiring per ``AuthStyle``.

A single table maps each style to the pieces it contributes to a generated
controller (imports, class traits, constructor, per-action calls) and to
whether Blade views wrap their buttons in ``@can`` blocks.
"""

from __future__ import annotations

from dataclasses import dataclass

from crudpack.naming import ResourceNames
from crudpack.planner.models import AuthStyle


@dataclass(frozen=True)
class AuthWiring:
    """What one authorization style emits.

    ``constructor`` and ``action_call`` are ``str.format`` templates; an
    empty string means the style emits nothing there.
    """

    imports: str
    class_traits: str
    constructor: str
    action_call: str
    gates_ui: bool
    policy_note: str


_RESOURCE_CONSTRUCTOR = (
    "\n"
    "    public function __construct()\n"
    "    {{\n"
    "        $this->authorizeResource({model_class}::class, '{route_parameter}');\n"
    "    }}\n"
)

AUTH_WIRING: dict[AuthStyle, AuthWiring] = {
    AuthStyle.NONE: AuthWiring(
        imports="",
        class_traits="use HandlesDeletes;",
        constructor="",
        action_call="",
        gates_ui=False,
        policy_note="Not enforced by the generated controller; register it or call it yourself.",
    ),
    AuthStyle.AUTHORIZE: AuthWiring(
        imports="use Illuminate\\Foundation\\Auth\\Access\\AuthorizesRequests;\n",
        class_traits="use AuthorizesRequests, HandlesDeletes;",
        constructor="",
        action_call="        $this->authorize('{ability}', {target});\n",
        gates_ui=True,
        policy_note="Enforced by $this->authorize() at the top of each controller action.",
    ),
    AuthStyle.GATE: AuthWiring(
        imports="use Illuminate\\Support\\Facades\\Gate;\n",
        class_traits="use HandlesDeletes;",
        constructor="",
        action_call="        Gate::authorize('{ability}', {target});\n",
        gates_ui=True,
        policy_note="Enforced by Gate::authorize() at the top of each controller action.",
    ),
    AuthStyle.RESOURCE: AuthWiring(
        imports="use Illuminate\\Foundation\\Auth\\Access\\AuthorizesRequests;\n",
        class_traits="use AuthorizesRequests, HandlesDeletes;",
        constructor=_RESOURCE_CONSTRUCTOR,
        action_call="",
        gates_ui=True,
        policy_note="Enforced by authorizeResource() in the controller constructor.",
    ),
}

# action -> (policy ability, checks the model instance rather than the class)
CRUD_ACTIONS: dict[str, tuple[str, bool]] = {
    "index": ("viewAny", False),
    "create": ("create", False),
    "store": ("create", False),
    "show": ("view", True),
    "edit": ("update", True),
    "update": ("update", True),
    "destroy": ("delete", True),
}

WEB_ACTIONS: tuple[str, ...] = ("index", "create", "store", "show", "edit", "update", "destroy")
API_ACTIONS: tuple[str, ...] = ("index", "store", "show", "update", "destroy")

# guard name -> (policy ability, checks the model instance rather than the class)
BLADE_GUARDS: dict[str, tuple[str, bool]] = {
    "CREATE": ("create", False),
    "TRASH": ("trash", False),
    "UPDATE": ("update", True),
    "DELETE": ("delete", True),
    "DELETE_BULK": ("deleteBulk", False),
    "RESTORE": ("restore", True),
    "RESTORE_BULK": ("restoreBulk", False),
    "FORCE_DELETE": ("forceDelete", True),
    "FORCE_DELETE_BULK": ("forceDeleteBulk", False),
}


def _target(names: ResourceNames, instance: bool) -> str:
    if instance:
        return f"${names.variable}"
    return f"{names.class_name}::class"


def controller_auth_context(
    style: AuthStyle,
    names: ResourceNames,
    actions: tuple[str, ...] = WEB_ACTIONS,
) -> dict[str, str]:
    """Placeholders ``AUTH_IMPORT``, ``CLASS_TRAITS``, ``CONSTRUCTOR`` and ``AUTH_<ACTION>``."""
    wiring = AUTH_WIRING[style]
    context = {
        "AUTH_IMPORT": wiring.imports,
        "CLASS_TRAITS": wiring.class_traits,
        "CONSTRUCTOR": wiring.constructor.format(
            model_class=names.class_name, route_parameter=names.route_parameter
        ),
    }
    for action in actions:
        ability, instance = CRUD_ACTIONS[action]
        call = ""
        if wiring.action_call:
            call = wiring.action_call.format(ability=ability, target=_target(names, instance))
        context[f"AUTH_{action.upper()}"] = call
    return context


def blade_guard_context(style: AuthStyle, names: ResourceNames) -> dict[str, str]:
    """``BLADE_CAN_<GUARD>_BEGIN/END`` placeholders; all empty when the UI is ungated."""
    gated = AUTH_WIRING[style].gates_ui
    context: dict[str, str] = {}
    for guard, (ability, instance) in BLADE_GUARDS.items():
        target = f"${names.variable}" if instance else f"\\App\\Models\\{names.class_name}::class"
        context[f"BLADE_CAN_{guard}_BEGIN"] = f"@can('{ability}', {target})\n" if gated else ""
        context[f"BLADE_CAN_{guard}_END"] = "\n@endcan" if gated else ""
    return context
