"""
Lists app serializers

Serializers for Skill and JobTag.
"""
from rest_framework import serializers
from .models import JobTag, Skill


class SkillSerializer(serializers.ModelSerializer):
    """
    Serializer for Skill.

    Owner is read-only and set from the request.
    """

    class Meta:
        model = Skill
        fields = ['id', 'title', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title may not be blank.")
        return value


class JobTagSerializer(SkillSerializer):
    """Serializer for JobTag; same shape and rules as Skill."""

    class Meta(SkillSerializer.Meta):
        model = JobTag


class SkillUsageSerializer(serializers.Serializer):
    """How much would be affected if a skill were deleted."""

    experienceCount = serializers.IntegerField()
    requirementCount = serializers.IntegerField()
