import copy
from types import SimpleNamespace

import bson
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError


class FakeCollection:
    """In-memory stand-in for the two pymongo Collection calls the app makes."""

    def __init__(self, fail=False):
        self.docs = {}
        self.fail = fail

    def _check(self):
        if self.fail:
            raise ServerSelectionTimeoutError("vegetable-app-mongodb-svc:27017: timed out")

    def insert_one(self, doc):
        self._check()
        doc["_id"] = ObjectId()
        bson.encode(doc)  # the driver encodes before sending
        self.docs[doc["_id"]] = copy.deepcopy(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    def find_one(self, query):
        self._check()
        doc = self.docs.get(query["_id"])
        return copy.deepcopy(doc) if doc is not None else None


class FakeStore:
    def __init__(self, fail=False):
        self.fail        = fail
        self.collections = {}
        self.closed      = False

    def collection(self, name):
        return self.collections.setdefault(name, FakeCollection(self.fail))

    def close(self):
        self.closed = True
