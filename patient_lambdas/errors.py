class PatientNotFound(Exception):
    """Raised when a point lookup or conditional write finds no record."""

    def __init__(self, patient_id, action=None):
        self.patient_id = patient_id
        self.action = action
        if action:
            message = f"Patient {patient_id} does not exist and cannot be {action}"
        else:
            message = f"Patient {patient_id} does not exist"
        super().__init__(message)


class StoreError(Exception):
    """A DynamoDB failure, carrying the error code and status it reported."""

    def __init__(self, name, message, status_code=500):
        super().__init__(message)
        self.name = name
        self.message = message
        self.status_code = status_code


class InvalidRequest(Exception):
    """Client input that cannot be turned into a request; reported as a 500."""

    def __init__(self, message, error="InvalidRequest"):
        super().__init__(message)
        self.error = error
