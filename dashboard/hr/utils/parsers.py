from rest_framework.parsers import JSONParser


class MergePatchJSONParser(JSONParser):
    """Accept PATCH bodies sent as application/merge-patch+json."""

    media_type = "application/merge-patch+json"
