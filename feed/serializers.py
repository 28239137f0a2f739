"""Query-string validation for the feed endpoint."""
from rest_framework import serializers

from .pipeline import DEFAULT_LIMIT, MAX_LIMIT, MIN_LIMIT


class FeedQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(min_value=MIN_LIMIT, max_value=MAX_LIMIT, required=False, default=DEFAULT_LIMIT)
    actor = serializers.CharField(required=False, allow_blank=True, max_length=253)
    cursor = serializers.CharField(required=False, allow_blank=True)


class FeedAuthorSerializer(serializers.Serializer):
    displayName = serializers.CharField(source="display_name")
    handle = serializers.CharField()
    avatar = serializers.CharField()


class FeedPostSerializer(serializers.Serializer):
    """Read-only schema of a served post (used for the API docs)."""
    id = serializers.CharField()
    text = serializers.CharField()
    author = FeedAuthorSerializer()
    createdAt = serializers.CharField(source="created_at")
    url = serializers.CharField()
    image = serializers.CharField(required=False)
    location = serializers.CharField(required=False)


class FeedPageSerializer(serializers.Serializer):
    posts = FeedPostSerializer(many=True)
    cursor = serializers.CharField(allow_null=True)
    hasMore = serializers.BooleanField(source="has_more")
