"""In-memory user store for the Users API."""

import logging
import threading
from datetime import UTC, datetime

from users_api.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Keyed in-memory collection of users plus the id counter.

    One instance lives for the lifetime of the application. Ids come from a
    counter starting at 1 and are never reused, even after deletion. All
    operations hold the same re-entrant lock, so ``create`` allocates and
    inserts as one atomic step.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: dict[int, User] = {}
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def allocate_id(self) -> int:
        """Return the current counter value and advance it."""
        with self._lock:
            user_id = self._next_id
            self._next_id += 1
            return user_id

    def get(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def put(self, user_id: int, user: User) -> None:
        """Insert or overwrite the record at ``user_id``.

        Raises:
            ValueError: If the record's own id does not match the key
        """
        if user.id != user_id:
            raise ValueError(f"User id {user.id} does not match key {user_id}")
        with self._lock:
            self._users[user_id] = user

    def remove(self, user_id: int) -> bool:
        """Delete the record if present.

        Returns:
            True if a record was removed, False otherwise
        """
        with self._lock:
            if user_id in self._users:
                del self._users[user_id]
                logger.info("Removed user %s", user_id)
                return True
            return False

    def list(self) -> list[User]:
        """Return all records in insertion order."""
        with self._lock:
            return list(self._users.values())

    def create(self, name: str, email: str) -> User:
        """Allocate an id and store a new user stamped with the current time.

        Args:
            name: Trimmed user name
            email: Trimmed email address

        Returns:
            The stored user
        """
        with self._lock:
            user = User(id=self.allocate_id(), name=name, email=email, created_at=datetime.now(UTC))
            self.put(user.id, user)
        logger.info("Created user %s", user.id)
        return user

    def update(self, user_id: int, name: str, email: str) -> User | None:
        """Replace name and email of an existing user.

        The id and creation timestamp are carried over unchanged.

        Returns:
            The updated user, or None if no user has this id
        """
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                return None
            updated = current.model_copy(update={"name": name, "email": email})
            self.put(user_id, updated)
        logger.info("Updated user %s", user_id)
        return updated
