"""
Cast and crew serializers.
"""

from rest_framework import serializers


class PersonSummarySerializer(serializers.Serializer):
    """Actor or director as credited on a movie."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    photo_url = serializers.CharField(read_only=True)
