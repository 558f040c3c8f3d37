from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.deep_links import share_payload
from recipes.exceptions import RemoteError
from recipes.firebase_admin_client import require_firestore_client
from recipes.repos.recipe_repo import RecipeRepo
from recipes.search import SEARCHABLE_FIELDS, SearchFields, filter_records
from recipes.serializers import RecipeSerializer


def _unavailable(error):
    return Response({"detail": error.message}, status=status.HTTP_503_SERVICE_UNAVAILABLE)


def _search_fields(raw):
    names = [name.strip() for name in (raw or "").split(",") if name.strip()]
    if not names:
        return SearchFields()
    return SearchFields.only(*names)


class RecipeListApi(APIView):
    """List approved recipes, optionally filtered by `q` over the `fields` given."""

    def get(self, request):
        try:
            fields = _search_fields(request.query_params.get("fields"))
        except ValueError:
            return Response(
                {"detail": f"fields must be drawn from {', '.join(SEARCHABLE_FIELDS)}"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            records = RecipeRepo(require_firestore_client()).list_approved()
        except RemoteError as e:
            return _unavailable(e)
        matched = filter_records(records, request.query_params.get("q", ""), fields)
        return Response(RecipeSerializer(matched, many=True).data)


class RecipeDetailApi(APIView):
    """Deep link target: one approved recipe by id."""

    def get_record(self, recipe_id):
        return RecipeRepo(require_firestore_client()).get_approved(recipe_id)

    def get(self, request, recipe_id):
        try:
            record = self.get_record(recipe_id)
        except RemoteError as e:
            return _unavailable(e)
        if record is None:
            return Response({"detail": "Recipe not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(RecipeSerializer(record).data)


class ShareRecipeApi(RecipeDetailApi):
    """Plain-text share payload for an approved recipe."""

    def get(self, request, recipe_id):
        try:
            record = self.get_record(recipe_id)
        except RemoteError as e:
            return _unavailable(e)
        if record is None:
            return Response({"detail": "Recipe not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(share_payload(record))
