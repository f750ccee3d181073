"""MongoDB-backed todo repository."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from todo_api.errors import InvalidTodoId, StorageError, TodoNotFound
from todo_api.models.todo import Todo
from todo_api.repositories.base import TodoStore

logger = logging.getLogger(__name__)

# Aggregation-pipeline update: the server negates the stored value in place.
_TOGGLE_COMPLETED = [{"$set": {"completed": {"$not": ["$completed"]}}}]


def _to_todo(doc: Dict[str, Any]) -> Todo:
    return Todo(
        id=str(doc["_id"]),
        body=doc.get("body", ""),
        completed=bool(doc.get("completed", False)),
    )


class MongoTodoRepository(TodoStore):
    """Todos stored as documents in one MongoDB collection."""

    name = "mongo"

    def __init__(self, collection: Collection, client: Optional[MongoClient] = None) -> None:
        self.collection = collection
        self._client = client

    @classmethod
    def connect(
        cls,
        uri: str,
        database: str,
        collection: str,
        *,
        timeout_ms: int = 5000,
    ) -> "MongoTodoRepository":
        """Open a client with bounded timeouts and bind it to a collection."""
        client: MongoClient = MongoClient(
            uri,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
            socketTimeoutMS=timeout_ms,
        )
        return cls(client[database][collection], client=client)

    def parse_id(self, raw_id: str) -> ObjectId:
        try:
            return ObjectId(raw_id)
        except (InvalidId, TypeError) as exc:
            raise InvalidTodoId() from exc

    def insert_todo(self, body: str) -> Todo:
        doc = {"body": body, "completed": False}
        try:
            result = self.collection.insert_one(doc)
        except PyMongoError as exc:
            logger.error("Failed to insert todo: %s", exc)
            raise StorageError() from exc
        return Todo(id=str(result.inserted_id), body=body, completed=False)

    def list_todos(self) -> List[Todo]:
        try:
            return [_to_todo(doc) for doc in self.collection.find({})]
        except PyMongoError as exc:
            logger.error("Failed to list todos: %s", exc)
            raise StorageError() from exc

    def find_todo(self, todo_id: ObjectId) -> Todo:
        try:
            doc = self.collection.find_one({"_id": todo_id})
        except PyMongoError as exc:
            logger.error("Failed to load todo %s: %s", todo_id, exc)
            raise StorageError() from exc
        if doc is None:
            raise TodoNotFound()
        return _to_todo(doc)

    def toggle_todo(self, todo_id: ObjectId) -> bool:
        try:
            doc = self.collection.find_one_and_update(
                {"_id": todo_id},
                _TOGGLE_COMPLETED,
                projection={"completed": True},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            logger.error("Failed to toggle todo %s: %s", todo_id, exc)
            raise StorageError() from exc
        if doc is None:
            raise TodoNotFound()
        return bool(doc["completed"])

    def delete_todo(self, todo_id: ObjectId) -> None:
        try:
            result = self.collection.delete_one({"_id": todo_id})
        except PyMongoError as exc:
            logger.error("Failed to delete todo %s: %s", todo_id, exc)
            raise StorageError() from exc
        if result.deleted_count == 0:
            logger.info("Delete of missing todo %s ignored", todo_id)

    def ping(self) -> None:
        if self._client is None:
            return
        try:
            self._client.admin.command("ping")
        except PyMongoError as exc:
            raise StorageError(f"MongoDB ping failed: {exc}") from exc

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def clear(self) -> None:
        try:
            self.collection.delete_many({})
        except PyMongoError as exc:
            raise StorageError() from exc
