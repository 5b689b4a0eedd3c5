from . import events
from .log import get_logger
from .responses import from_exception, respond
from .runtime import get_service

logger = get_logger(__name__)


def lambda_handler(event, context, service=None):
    try:
        service = service or get_service()
        pid = events.patient_id(event)
        logger.info("GET /patients/%s", pid)
        patient = service.get_patient(pid)
    except Exception as exc:
        return from_exception(exc)
    return respond(200, patient.model_dump())
