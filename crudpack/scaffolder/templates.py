"""Stub loading and placeholder substitution.

Stubs live under ``crudpack/scaffolder/templates/`` (optionally shadowed by
a project-level override directory) and are located through a Jinja2
``FileSystemLoader``.  Two rendering modes exist:

* :meth:`TemplateRenderer.render` -- the stub contract.  Placeholders are
  ``{{UPPER_CASE}}`` tokens replaced by literal, non-regex substitution.
  Any token left over after substitution is a ``TemplateError`` and nothing
  is written.  Stubs are PHP/Blade, whose own ``{{ $var }}`` echoes never
  match the placeholder pattern.
* :meth:`TemplateRenderer.render_template` -- regular Jinja2 rendering for
  the ``.j2`` templates that build text with loops (route blocks).
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from crudpack.errors import FileSystemError, TemplateError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

PLACEHOLDER_PATTERN = re.compile(r"\{\{[A-Z0-9_]+\}\}")

# Placeholder name -> literal replacement text, scoped to one render call.
TemplateContext = Mapping[str, str]


def placeholder(name: str) -> str:
    """Return the stub token for *name*: ``MODEL_CLASS`` -> ``{{MODEL_CLASS}}``."""
    return "{{" + name + "}}"


def find_placeholders(text: str) -> list[str]:
    """Return every distinct placeholder token in *text*, sorted."""
    return sorted(set(PLACEHOLDER_PATTERN.findall(text)))


def substitute(text: str, context: TemplateContext, template_id: str = "<string>") -> str:
    """Replace each ``{{NAME}}`` in *text* with ``context[NAME]``.

    Replacement is plain ``str.replace`` in context order.  After all
    replacements the result must contain no placeholder tokens.

    Raises:
        TemplateError: Listing every distinct leftover token.
    """
    for name, value in context.items():
        text = text.replace(placeholder(name), value)

    leftovers = find_placeholders(text)
    if leftovers:
        raise TemplateError(template_id, leftovers)
    return text


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Loads CrudPack stubs and renders them.

    Args:
        template_dir: Root of the bundled stubs.  Defaults to the package's
            ``templates/`` directory.
        override_dir: Optional directory searched first, so a project can
            customise individual stubs without copying all of them.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        override_dir: str | Path | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        search_path = [str(self.template_dir)]
        if override_dir is not None:
            search_path.insert(0, str(override_dir))
        self.env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Stub rendering ----------------------------------------------------

    def load(self, template_id: str) -> str:
        """Return the raw source of a stub.

        Raises:
            FileSystemError: If no stub with that id exists.
        """
        try:
            source, _filename, _uptodate = self.env.loader.get_source(self.env, template_id)
        except TemplateNotFound as exc:
            raise FileSystemError(f"Stub not found: {template_id}", template_id) from exc
        return source

    def render(self, template_id: str, context: TemplateContext) -> str:
        """Render a stub by literal placeholder substitution.

        Args:
            template_id: Path relative to the template root (e.g.
                ``"controllers/web.controller.stub"``).
            context: Placeholder name -> replacement text.

        Raises:
            FileSystemError: If the stub does not exist.
            TemplateError: If placeholders remain after substitution.
        """
        return substitute(self.load(template_id), context, template_id)

    def expected_placeholders(self, template_id: str) -> set[str]:
        """Names of the placeholders a stub declares (without braces)."""
        return {token[2:-2] for token in find_placeholders(self.load(template_id))}

    # -- Jinja2 rendering --------------------------------------------------

    def render_template(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a Jinja2 template (``*.j2``) with the provided context."""
        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as exc:
            raise FileSystemError(f"Template not found: {template_path}", template_path) from exc
        return template.render(**context)

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of bundled template ids under *prefix*."""
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*")
            if p.is_file() and p.suffix in (".stub", ".j2")
        )
