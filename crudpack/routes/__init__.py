"""Route file maintenance.

Every generated resource owns one marker-delimited block in
``routes/web.php`` or ``routes/api.php``::

    // CRUDPACK:Product:START
    Route::delete('products/bulk', ...)->name('products.destroyBulk');
    ...
    Route::resource('products', \\App\\Http\\Controllers\\ProductController::class);
    // CRUDPACK:Product:END

Regenerating a resource replaces its block wholesale; everything outside
the markers is left untouched.
"""

from crudpack.routes.builder import RouteBlockBuilder, route_declarations
from crudpack.routes.upserter import (
    ROUTE_FACADE_IMPORT,
    RouteBlockUpserter,
    build_block,
    end_marker,
    ensure_route_import,
    merge_block,
    start_marker,
)

__all__ = [
    "ROUTE_FACADE_IMPORT",
    "RouteBlockBuilder",
    "RouteBlockUpserter",
    "build_block",
    "end_marker",
    "ensure_route_import",
    "merge_block",
    "route_declarations",
    "start_marker",
]
