"""Deep links to recipe detail and the share payload built from them."""

from urllib.parse import unquote, urlsplit

from django.conf import settings

from recipes.exceptions import InvalidDeepLink

DEFAULT_SHARE_SUBJECT = "Recipe from Cookify"


def build_deep_link(recipe_id: str) -> str:
    return f"{settings.COOKIFY_DEEP_LINK_BASE}{recipe_id}"


def resolve_deep_link(url: str) -> str:
    """Return the recipe id carried by the last path segment of a deep link."""
    segments = [segment for segment in urlsplit(url or "").path.split("/") if segment]
    if not segments:
        raise InvalidDeepLink()
    return unquote(segments[-1])


def share_payload(recipe) -> dict:
    """Subject and body for sharing a recipe as plain text."""
    title = recipe.get("title")
    deep_link = build_deep_link(recipe.get("id") or "")
    body = (
        "Check out this recipe on Cookify:\n\n"
        f"{title}\n\n"
        f"Link: {deep_link}\n\n"
        f"Or download the app: {settings.COOKIFY_DOWNLOAD_URL}"
    )
    return {
        "subject": str(title) if title else DEFAULT_SHARE_SUBJECT,
        "text": body,
    }
