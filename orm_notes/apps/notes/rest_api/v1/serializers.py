"""
API Serializers for notes
"""
from rest_framework import serializers


class HeadingSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for a heading of a note
    """
    level = serializers.IntegerField()
    title = serializers.CharField()
    anchor = serializers.CharField()
    line = serializers.IntegerField()


class DocumentSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for the list view: everything but the body
    """
    path = serializers.CharField()
    folder = serializers.CharField()
    title = serializers.CharField()
    headings = HeadingSerializer(many=True)


class DocumentDetailSerializer(DocumentSerializer):  # pylint: disable=abstract-method
    """
    Serializer for a single note, including its Markdown
    """
    body = serializers.CharField()
