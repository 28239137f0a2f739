"""
Bluesky feed endpoint.

``GET /api/bluesky?limit=&actor=&cursor=`` returns ``{posts, cursor,
hasMore}``.  Query errors are rejected before any network call; errors
use the ``{error, details}`` envelope.
"""
import logging

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import InvalidFeedQuery
from .pipeline import FeedPipeline, MAX_LIMIT, MIN_LIMIT
from .serializers import FeedPageSerializer, FeedQuerySerializer

logger = logging.getLogger(__name__)


class InvalidLimit(InvalidFeedQuery):
    default_detail = "Invalid limit parameter"

    def __init__(self):
        super().__init__(details=f"Limit must be a number between {MIN_LIMIT} and {MAX_LIMIT}")


def parse_feed_query(query_params):
    """Validated ``(limit, actor, cursor)`` or ``InvalidFeedQuery``."""
    if len(query_params.getlist("actor")) > 1:
        raise InvalidFeedQuery("Invalid actor parameter", details="Actor must be a string")

    # an empty ?limit= is not the same as leaving it out
    if "limit" in query_params and not query_params["limit"].strip():
        raise InvalidLimit()

    serializer = FeedQuerySerializer(data=query_params)
    if not serializer.is_valid():
        if "limit" in serializer.errors:
            raise InvalidLimit()
        field = next(iter(serializer.errors))
        raise InvalidFeedQuery(f"Invalid {field} parameter", details=str(serializer.errors[field][0]))

    data = serializer.validated_data
    return data["limit"], data.get("actor") or None, data.get("cursor") or None


class BlueskyFeedView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    http_method_names = ["get", "head", "options"]
    error_envelope = "detail"

    def get_pipeline(self):
        return FeedPipeline.from_settings()

    @extend_schema(parameters=[FeedQuerySerializer], responses=FeedPageSerializer)
    def get(self, request):
        limit, actor, cursor = parse_feed_query(request.query_params)
        logger.info("Processing BlueSky request limit=%s actor=%s cursor=%s", limit, actor, cursor)

        pipeline = self.get_pipeline()
        try:
            page = pipeline.run(actor=actor, limit=limit, cursor=cursor)
        finally:
            pipeline.close()
        return Response(page.to_dict())
