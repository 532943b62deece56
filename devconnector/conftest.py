# devconnector/conftest.py
"""
pytest 공용 픽스처.

실제 Firestore 대신 메모리 위에서 동작하는 FakeFirestore를 create_app에 주입합니다.
서비스가 사용하는 API(collection/document/get/set/update/delete/where/order_by/limit/stream/batch)만 흉내 냅니다.
"""
import copy
import uuid

import pytest
from google.api_core.exceptions import NotFound

from devconnector import create_app


def _lookup(data, field_path):
    value = data
    for part in field_path.split('.'):
        if not isinstance(value, dict) or part not in value:
            return None
        value = value[part]
    return value


class FakeSnapshot:
    def __init__(self, reference, data):
        self.reference = reference
        self.id = reference.id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeDocumentReference:
    def __init__(self, docs, doc_id):
        self._docs = docs
        self.id = doc_id

    def get(self):
        return FakeSnapshot(self, self._docs.get(self.id))

    def set(self, data, merge=False):
        if merge and self.id in self._docs:
            self._docs[self.id].update(copy.deepcopy(data))
        else:
            self._docs[self.id] = copy.deepcopy(data)

    def update(self, data):
        if self.id not in self._docs:
            raise NotFound(f"No document to update: {self.id}")
        self._docs[self.id].update(copy.deepcopy(data))

    def delete(self):
        self._docs.pop(self.id, None)


class FakeQuery:
    def __init__(self, docs, filters=(), orders=(), limit_count=None):
        self._docs = docs
        self._filters = tuple(filters)
        self._orders = tuple(orders)
        self._limit = limit_count

    def where(self, field_path, op_string, value):
        if op_string != '==':
            raise NotImplementedError(op_string)
        return FakeQuery(self._docs, self._filters + ((field_path, value),), self._orders, self._limit)

    def order_by(self, field_path, direction='ASCENDING'):
        return FakeQuery(self._docs, self._filters, self._orders + ((field_path, direction),), self._limit)

    def limit(self, count):
        return FakeQuery(self._docs, self._filters, self._orders, count)

    def stream(self):
        matched = [
            (doc_id, data) for doc_id, data in self._docs.items()
            if all(_lookup(data, path) == value for path, value in self._filters)
        ]
        for field_path, direction in reversed(self._orders):
            matched.sort(key=lambda item: _lookup(item[1], field_path), reverse=(direction == 'DESCENDING'))
        if self._limit is not None:
            matched = matched[:self._limit]
        for doc_id, _ in matched:
            yield FakeDocumentReference(self._docs, doc_id).get()

    def get(self):
        return list(self.stream())


class FakeCollectionReference(FakeQuery):
    def __init__(self, docs):
        super().__init__(docs)

    def document(self, doc_id=None):
        return FakeDocumentReference(self._docs, doc_id or uuid.uuid4().hex)


class FakeWriteBatch:
    def __init__(self):
        self._operations = []

    def set(self, reference, data):
        self._operations.append(lambda: reference.set(data))

    def update(self, reference, data):
        self._operations.append(lambda: reference.update(data))

    def delete(self, reference):
        self._operations.append(reference.delete)

    def commit(self):
        for operation in self._operations:
            operation()
        self._operations = []


class FakeFirestore:
    def __init__(self):
        self._collections = {}

    def collection(self, name):
        return FakeCollectionReference(self._collections.setdefault(name, {}))

    def batch(self):
        return FakeWriteBatch()


# --- 픽스처 ---

@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def app(fake_db):
    return create_app('testing', db=fake_db)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    def _headers(token):
        return {'x-auth-token': token}
    return _headers


@pytest.fixture
def register(client):
    """회원가입 후 토큰을 돌려주는 헬퍼."""
    def _register(name="Ann", email="ann@x.com", password="secret1"):
        res = client.post('/api/user', json={"name": name, "email": email, "password": password})
        assert res.status_code == 200, res.get_json()
        return res.get_json()['token']
    return _register


@pytest.fixture
def user_id_of(app):
    """토큰에서 user_id를 꺼내는 헬퍼."""
    def _user_id_of(token):
        with app.app_context():
            return app.services['tokens'].verify(token)
    return _user_id_of
