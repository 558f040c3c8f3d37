from rest_framework import serializers

from recipes.deep_links import build_deep_link


class RecipeSerializer(serializers.Serializer):
    """Serializer for approved recipe records as held by the client."""

    id = serializers.CharField(read_only=True)
    title = serializers.CharField(allow_blank=True, default="")
    ingredients = serializers.CharField(allow_blank=True, default="")
    instructions = serializers.CharField(allow_blank=True, default="")
    authorId = serializers.CharField(allow_blank=True, default="")
    timestamp = serializers.IntegerField(default=0)
    status = serializers.CharField(read_only=True)
    deepLink = serializers.SerializerMethodField()

    def get_deepLink(self, record):
        return build_deep_link(record.get("id") or "")
