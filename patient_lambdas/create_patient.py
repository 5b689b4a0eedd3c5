from . import events
from .log import get_logger
from .responses import from_exception, respond
from .runtime import get_service

logger = get_logger(__name__)


def lambda_handler(event, context, service=None):
    logger.info("POST /patients")
    try:
        service = service or get_service()
        patient = service.create_patient(events.patient_input(event))
    except Exception as exc:
        return from_exception(exc)
    logger.info("Created patient %s", patient.patient_id)
    # body stays empty; the new id is only exposed through Location
    return respond(200, headers={"Location": f"/patients/{patient.patient_id}"})
