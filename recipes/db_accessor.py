import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from recipes.exceptions import RemoteError

logger = logging.getLogger(__name__)

CollectionPath = Tuple[str, ...]


def to_record(snapshot) -> Dict[str, Any]:
    """Merge a document's id into its field mapping."""
    record = dict(snapshot.to_dict() or {})
    record["id"] = snapshot.id
    return record


@contextmanager
def remote_call(operation: str, path: Sequence[str]):
    """Convert Firestore client failures into RemoteError."""
    try:
        yield
    except google_exceptions.GoogleAPIError as e:
        logger.error("Firestore %s on %s failed: %s", operation, "/".join(path), e)
        raise RemoteError(cause=e) from e


class DB_Accessor:
    """Generic data accessor to wrap basic Firestore collection operations."""

    def __init__(self, db) -> None:
        self.db = db

    def collection(self, path: CollectionPath):
        return self.db.collection(*path)

    def query(
        self,
        path: CollectionPath,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
    ):
        """Build a query with equality filters and `-field` style ordering."""
        query = self.collection(path)
        for field, value in (filters or {}).items():
            query = query.where(filter=FieldFilter(field, "==", value))
        query = self._apply_ordering(query, order_by)
        if limit is not None:
            query = query.limit(max(0, int(limit)))
        return query

    def _apply_ordering(self, query, order_by: Sequence[str]):
        for field in order_by:
            if field.startswith("-"):
                query = query.order_by(field[1:], direction=firestore.Query.DESCENDING)
            else:
                query = query.order_by(field, direction=firestore.Query.ASCENDING)
        return query

    def list(self, path: CollectionPath, **query_options: Any) -> List[Dict[str, Any]]:
        """Return matching documents as normalized records."""
        with remote_call("list", path):
            return [to_record(doc) for doc in self.query(path, **query_options).stream()]

    def get(self, path: CollectionPath, doc_id: str) -> Optional[Dict[str, Any]]:
        """Fetch a single document as a record, or None when missing."""
        with remote_call("get", path):
            snapshot = self.collection(path).document(doc_id).get()
        if not snapshot.exists:
            return None
        return to_record(snapshot)

    def exists(self, path: CollectionPath, doc_id: str) -> bool:
        with remote_call("get", path):
            return bool(self.collection(path).document(doc_id).get().exists)

    def create(self, path: CollectionPath, data: Mapping[str, Any]) -> str:
        """Add a document with a store-assigned id; return the id."""
        with remote_call("create", path):
            _, ref = self.collection(path).add(dict(data))
        return ref.id

    def set(self, path: CollectionPath, doc_id: str, data: Mapping[str, Any]) -> None:
        with remote_call("set", path):
            self.collection(path).document(doc_id).set(dict(data))

    def delete(self, path: CollectionPath, doc_id: str) -> None:
        with remote_call("delete", path):
            self.collection(path).document(doc_id).delete()

    def batch(self):
        """Start an atomic multi-document write."""
        return self.db.batch()

    def document(self, path: CollectionPath, doc_id: str):
        return self.collection(path).document(doc_id)

    def commit(self, batch, path: CollectionPath) -> None:
        with remote_call("commit", path):
            batch.commit()
