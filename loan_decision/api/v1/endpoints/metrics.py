from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from ....core.constants import Metrics

router = APIRouter()


@router.get(Metrics.ENDPOINT_PATH, include_in_schema=False)
def prometheus_metrics() -> Response:
    """Prometheus text exposition of the default registry."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
