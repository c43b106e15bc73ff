"""MongoDB implementation of UserRepository.

Documents keep the camelCase field names of the earlier Mongoose ``User``
model (``firstName``, ``password``, ``createdAt``...) so existing
collections are readable as-is.
"""

from datetime import datetime, timezone
from logging import getLogger
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb.connection import USERS_COLLECTION_NAME
from domain.model.user import User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            create_index_safe(self.collection, [('createdAt', -1)], 'idx_users_created_at')
            return True
        except Exception as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=str(doc['_id']),
            first_name=doc.get('firstName', ''),
            last_name=doc.get('lastName', ''),
            email=doc['email'],
            created_at=doc['createdAt'],
            updated_at=doc.get('updatedAt', doc['createdAt']),
            password_hash=doc.get('password'),
            avatar=doc.get('avatar') or '',
        )

    def create(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str,
    ) -> User | None:
        """Create a new user and return the User object."""
        try:
            now = datetime.now(timezone.utc)
            user_doc = {
                '_id': ObjectId(),
                'firstName': first_name,
                'lastName': last_name,
                'email': email,
                'password': password_hash,
                'createdAt': now,
                'updatedAt': now,
            }
            self.collection.insert_one(user_doc)

            user = self._to_domain(user_doc)
            logger.info("User created", extra={"userId": user.id, "email": email})
            return user
        except DuplicateKeyError:
            logger.warning("User creation failed: email already exists", extra={"email": email})
            return None
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)})
            return None

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'email': email})
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)})
            return None

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found or malformed."""
        try:
            oid = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None
        try:
            doc = self.collection.find_one({'_id': oid})
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": str(e)})
            return None
