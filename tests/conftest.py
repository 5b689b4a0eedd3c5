"""Shared fixtures: an in-memory store and a deterministic service."""

import itertools

import pytest

from patient_lambdas.errors import PatientNotFound
from patient_lambdas.service import PatientService


class InMemoryPatientStore:
    """Dict-backed store with the same call surface as DynamoPatientStore."""

    def __init__(self):
        self.items = {}
        self.calls = []

    def scan(self, limit, start_after=None):
        self.calls.append("scan")
        keys = list(self.items)
        start = keys.index(start_after) + 1 if start_after in self.items else 0
        page = keys[start:start + limit]
        more = start + limit < len(keys)
        return [dict(self.items[k]) for k in page], (page[-1] if more else None)

    def get(self, patient_id):
        self.calls.append("get")
        item = self.items.get(patient_id)
        return dict(item) if item else None

    def put(self, item):
        self.calls.append("put")
        self.items[item["patient_id"]] = dict(item)

    def update(self, patient_id, fields):
        self.calls.append("update")
        if patient_id not in self.items:
            raise PatientNotFound(patient_id, "updated")
        self.items[patient_id].update(fields)

    def delete(self, patient_id):
        self.calls.append("delete")
        if patient_id not in self.items:
            raise PatientNotFound(patient_id, "deleted")
        del self.items[patient_id]


@pytest.fixture
def store():
    return InMemoryPatientStore()


@pytest.fixture
def clock():
    ticks = itertools.count(1_700_000_000_000, 1000)
    return lambda: next(ticks)


@pytest.fixture
def service(store, clock):
    return PatientService(store, clock=clock)


@pytest.fixture
def ana():
    return {"name": "Ana", "phone": "123", "email": "a@a.com", "birth_date": "1990-01-01"}
