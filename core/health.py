"""Service health endpoint for load balancers and uptime probes."""

from django.http import HttpRequest, JsonResponse

from core.config import AmadeusSettings, get_settings


def health_check(_request: HttpRequest) -> JsonResponse:
    """
    Report whether the proxy can serve upstream searches.

    Only configuration is inspected; no token is requested, so probes
    never consume Amadeus quota.

    Returns:
        200 with ``healthy`` when every check passes, otherwise 503 with
        ``degraded``.
    """
    checks = {"amadeus": _check_amadeus(get_settings().amadeus)}
    all_healthy = all(check["status"] == "healthy" for check in checks.values())

    return JsonResponse(
        {"status": "healthy" if all_healthy else "degraded", "checks": checks},
        status=200 if all_healthy else 503,
    )


def _check_amadeus(settings: AmadeusSettings) -> dict[str, str]:
    if not settings.is_configured:
        return {
            "status": "unhealthy",
            "environment": settings.environment,
            "error": "AMADEUS_API_KEY or AMADEUS_API_SECRET is not set",
        }
    return {"status": "healthy", "environment": settings.environment}
