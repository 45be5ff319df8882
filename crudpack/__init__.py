"""CrudPack -- CRUD scaffolding for Laravel resources.

Generates controllers, models, migrations, form requests, policies, Blade
views and route blocks from stub templates, and keeps a Postman collection
in sync with the generated API routes.

Quick usage::

    from crudpack.config import CrudPackConfig
    from crudpack.naming import derive
    from crudpack.planner import GenerationFlags, PlanResolver
    from crudpack.prompts import DefaultPrompt
    from crudpack.scaffolder.generator import ResourceGenerator

    prompt = DefaultPrompt()
    plan = PlanResolver(prompt).resolve(GenerationFlags(web=True, all=True))
    generator = ResourceGenerator(CrudPackConfig(project_root="."), prompt)
    results = generator.generate(plan, derive("ProductCategory"))
"""

__version__ = "0.1.0"
