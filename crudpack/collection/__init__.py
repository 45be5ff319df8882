"""Postman request collection derived from the API route file.

The synchronizer reads the CRUDPACK blocks back out of ``routes/api.php``
and upserts one generator-owned folder per resource into a Postman v2.1
collection, leaving user-authored folders alone.
"""

from crudpack.collection.builder import OWNED_FOLDER_MARKER, build_resource_folder, empty_collection
from crudpack.collection.parser import ParsedResource, parse_resources
from crudpack.collection.synchronizer import CollectionSynchronizer, sync_collection_file

__all__ = [
    "CollectionSynchronizer",
    "OWNED_FOLDER_MARKER",
    "ParsedResource",
    "build_resource_folder",
    "empty_collection",
    "parse_resources",
    "sync_collection_file",
]
