"""In-memory stand-ins for Firestore and Firebase Auth used across the tests."""

import itertools

from google.api_core import exceptions as google_exceptions

from recipes.session import Identity, SessionContext


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = None if data is None else dict(data)

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return None if self._data is None else dict(self._data)


class FakeWatch:
    def __init__(self, db, query, callback):
        self.db = db
        self.query = query
        self.callback = callback
        self.active = True

    def push(self):
        if self.active:
            self.callback(self.query.snapshots(), [], None)

    def unsubscribe(self):
        self.active = False
        self.db.unsubscribed += 1


class FakeQuery:
    def __init__(self, db, path, filters=(), orders=(), limit=None):
        self.db = db
        self.path = path
        self.filters = tuple(filters)
        self.orders = tuple(orders)
        self._limit = limit

    def where(self, filter=None):
        clause = (filter.field_path, filter.op_string, filter.value)
        return FakeQuery(self.db, self.path, self.filters + (clause,), self.orders, self._limit)

    def order_by(self, field, direction="ASCENDING"):
        return FakeQuery(self.db, self.path, self.filters, self.orders + ((field, direction),), self._limit)

    def limit(self, count):
        return FakeQuery(self.db, self.path, self.filters, self.orders, count)

    def snapshots(self):
        docs = [FakeSnapshot(doc_id, data) for doc_id, data in self.db.collection_data(self.path).items()]
        for field, op, value in self.filters:
            assert op == "==", op
            docs = [doc for doc in docs if doc.to_dict().get(field) == value]
        for field, direction in reversed(self.orders):
            docs.sort(key=lambda doc: doc.to_dict().get(field) or 0, reverse=direction == "DESCENDING")
        if self._limit is not None:
            docs = docs[:self._limit]
        return docs

    def stream(self):
        self.db.check("stream")
        self.db.reads.append(("stream", self.path))
        return iter(self.snapshots())

    def on_snapshot(self, callback):
        self.db.check("listen")
        watch = FakeWatch(self.db, self, callback)
        self.db.watches.append(watch)
        if self.db.deliver_initial:
            watch.push()
        return watch


class FakeDocument:
    def __init__(self, db, path, doc_id):
        self.db = db
        self.path = path
        self.id = doc_id

    def get(self):
        self.db.check("get")
        self.db.reads.append(("get", f"{self.path}/{self.id}"))
        return FakeSnapshot(self.id, self.db.collection_data(self.path).get(self.id))

    def set(self, data):
        self.db.check("set")
        self.db.write("set", self.path, self.id, data)

    def delete(self):
        self.db.check("delete")
        self.db.write("delete", self.path, self.id)


class FakeCollection(FakeQuery):
    def document(self, doc_id):
        return FakeDocument(self.db, self.path, doc_id)

    def add(self, data):
        self.db.check("add")
        doc_id = f"doc{next(self.db.ids)}"
        self.db.write("set", self.path, doc_id, data)
        return None, FakeDocument(self.db, self.path, doc_id)


class FakeBatch:
    def __init__(self, db):
        self.db = db
        self.operations = []

    def set(self, ref, data):
        self.operations.append(("set", ref.path, ref.id, dict(data)))

    def delete(self, ref):
        self.operations.append(("delete", ref.path, ref.id, None))

    def commit(self):
        self.db.check("commit")
        for op, path, doc_id, data in self.operations:
            self.db.write(op, path, doc_id, data, push=False)
        self.db.push_all()


class FakeFirestore:
    """
    Minimal Firestore client: nested collections, equality filters, ordering,
    add/set/delete, batches and snapshot listeners that re-deliver the full
    result set after every write.
    """

    def __init__(self, deliver_initial=True):
        self.data = {}
        self.ids = itertools.count(1)
        self.watches = []
        self.unsubscribed = 0
        self.writes = []
        self.reads = []
        self.failures = {}
        self.deliver_initial = deliver_initial

    def collection(self, *path):
        return FakeCollection(self, "/".join(path))

    def batch(self):
        return FakeBatch(self)

    def collection_data(self, path):
        return self.data.setdefault(path, {})

    def seed(self, path, doc_id, **fields):
        self.collection_data(path)[doc_id] = fields
        return doc_id

    def fail(self, operation, error=None):
        """Make the next `operation` raise like a Firestore outage."""
        self.failures[operation] = error or google_exceptions.ServiceUnavailable("backend down")

    def check(self, operation):
        error = self.failures.pop(operation, None)
        if error is not None:
            raise error

    def write(self, op, path, doc_id, data=None, push=True):
        self.writes.append((op, f"{path}/{doc_id}"))
        if op == "set":
            self.collection_data(path)[doc_id] = dict(data)
        else:
            self.collection_data(path).pop(doc_id, None)
        if push:
            self.push_all()

    def push_all(self):
        for watch in list(self.watches):
            watch.push()

    @property
    def active_watches(self):
        return [watch for watch in self.watches if watch.active]


class FakeAuthBackend:
    """Replaces recipes.firebase_auth_services for SessionContext."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def _respond(self, action, email, password):
        self.calls.append((action, email, password))
        if self.error is not None:
            raise self.error
        return {
            "localId": f"uid-{email.split('@')[0]}",
            "email": email,
            "idToken": "id-token",
            "refreshToken": "refresh-token",
        }

    def sign_in_with_email_and_password(self, email, password):
        return self._respond("sign_in", email, password)

    def sign_up_with_email_and_password(self, email, password):
        return self._respond("sign_up", email, password)


def make_session(uid="alice", email="alice@example.org", auth_backend=None):
    """Session signed in as uid, or signed out when uid is None."""
    identity = Identity(uid=uid, email=email) if uid else None
    return SessionContext(identity, auth_backend=auth_backend or FakeAuthBackend())


def seed_recipe(db, doc_id, status="approved", **fields):
    values = {
        "title": "Pancakes",
        "ingredients": "flour, milk, eggs",
        "instructions": "mix and fry",
        "authorId": "bob",
        "timestamp": 1000,
        "status": status,
        "moderatorComment": "",
    }
    values.update(fields)
    return db.seed("recipes", doc_id, **values)
