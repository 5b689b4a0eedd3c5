from . import events
from .log import get_logger
from .responses import from_exception, respond
from .runtime import get_service

logger = get_logger(__name__)


def lambda_handler(event, context, service=None):
    try:
        service = service or get_service()
        pid = events.patient_id(event)
        logger.info("PUT /patients/%s", pid)
        service.update_patient(pid, events.patient_input(event))
    except Exception as exc:
        return from_exception(exc)
    return respond(204)
