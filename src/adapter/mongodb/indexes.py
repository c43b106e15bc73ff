"""MongoDB index management.

Collections created by the earlier Mongoose app carry auto-named indexes
(``email_1``). ``create_index_safe`` replaces those with our named ones
instead of failing at startup.
"""

from logging import getLogger

from pymongo.errors import PyMongoError

logger = getLogger(__name__)


def _find_conflict(collection, keys: list, name: str) -> str | None:
    """Name of an index that blocks creating ``name`` on ``keys``, if any."""
    wanted = dict(keys)
    for idx_name, info in collection.index_information().items():
        if idx_name == '_id_':
            continue
        same_keys = dict(info.get('key', [])) == wanted
        if same_keys != (idx_name == name):
            return idx_name
    return None


def create_index_safe(collection, keys: list, name: str, **kwargs) -> bool:
    """Create an index, dropping a conflicting one first if needed.

    Conflicts are the same name on other keys, or the same keys under
    another name. Any other error propagates.
    """
    try:
        collection.create_index(keys, name=name, **kwargs)
        return True
    except PyMongoError as e:
        if "already exists" not in str(e) and "Conflict" not in str(e):
            raise

    conflict = _find_conflict(collection, keys, name)
    if conflict is None:
        logger.error("Failed to resolve index conflict", extra={"index": name})
        return False

    logger.warning("Dropping conflicting index", extra={"index": conflict, "replacement": name})
    collection.drop_index(conflict)
    collection.create_index(keys, name=name, **kwargs)
    return True


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for every collection. Called at app startup."""
    from adapter.mongodb.user_repository import MongoUserRepository

    return MongoUserRepository(db).ensure_indexes()
