from . import events
from .log import get_logger
from .responses import from_exception, respond
from .runtime import get_service

logger = get_logger(__name__)


def lambda_handler(event, context, service=None):
    logger.info("GET /patients %s", event.get("queryStringParameters"))
    try:
        service = service or get_service()
        page = service.list_patients(events.list_query(event))
    except Exception as exc:
        return from_exception(exc)
    return respond(200, page)
