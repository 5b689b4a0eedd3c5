"""Process-wide store client, built once per Lambda container."""

from functools import lru_cache

from .config import get_settings
from .log import LogConfig, setup_logging
from .service import PatientService
from .store import DynamoPatientStore, connect


@lru_cache
def get_service():
    settings = get_settings()
    setup_logging(LogConfig(level=settings.LOG_LEVEL))
    return PatientService(DynamoPatientStore(connect(settings)))
