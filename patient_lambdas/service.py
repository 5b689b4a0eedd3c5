"""Patient CRUD operations, one store call each."""

import time
import uuid

from .errors import PatientNotFound
from .models import Patient


def now_millis():
    return int(time.time() * 1000)


def new_patient_id():
    return str(uuid.uuid4())


class PatientService:
    """Translates each operation into a single call on the injected store.

    The store must provide scan/get/put/update/delete as implemented by
    DynamoPatientStore. ``clock`` returns epoch milliseconds.
    """

    def __init__(self, store, clock=now_millis, id_factory=new_patient_id):
        self.store = store
        self.clock = clock
        self.id_factory = id_factory

    def list_patients(self, query):
        items, last = self.store.scan(query.limit, query.next)
        return {
            "items": [Patient.model_validate(i).model_dump() for i in items],
            "next_token": last,
        }

    def get_patient(self, patient_id):
        item = self.store.get(patient_id)
        if not item:
            raise PatientNotFound(patient_id)
        return Patient.model_validate(item)

    def create_patient(self, data):
        ts = self.clock()
        patient = Patient(
            patient_id=self.id_factory(),
            active=True,
            created_at=ts,
            updated_at=ts,
            **data.model_dump(),
        )
        self.store.put(patient.model_dump())
        return patient

    def update_patient(self, patient_id, data):
        fields = data.model_dump()
        fields["updated_at"] = self.clock()
        self.store.update(patient_id, fields)

    def delete_patient(self, patient_id):
        self.store.delete(patient_id)
