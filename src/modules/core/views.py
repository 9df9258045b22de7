from typing import Any, Dict

import structlog
from django.apps import apps
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger(__name__)


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}

    # The catalog store is in-process, so it is "up" whenever it answers.
    repository = apps.get_app_config("products").repository
    services["catalog_store"] = {
        "status": "up",
        "backend": "in-memory",
        "products": repository.count(),
    }

    logger.info("health_check_completed", status="healthy")

    return JsonResponse(
        {
            "status": "healthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200,
    )
