"""
Experience app serializers

Read serializers render the wire names the client expects
(``SkillDemonstrations``, ``Skill``, ``SkillId``); write serializers only
validate input and hand it to ExperienceService.
"""
from rest_framework import serializers

from lists.serializers import SkillSerializer
from .models import Experience, SkillDemonstration


class SkillDemonstrationSerializer(serializers.ModelSerializer):
    """
    Serializer for SkillDemonstration.

    ``Skill`` is null for orphaned demonstrations.
    """

    SkillId = serializers.IntegerField(source='skill_id', read_only=True, allow_null=True)
    ExperienceId = serializers.IntegerField(source='experience_id', read_only=True)
    Skill = SkillSerializer(source='skill', read_only=True, allow_null=True)

    class Meta:
        model = SkillDemonstration
        fields = [
            'id',
            'explanation',
            'SkillId',
            'ExperienceId',
            'Skill',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ExperienceSerializer(serializers.ModelSerializer):
    """
    Serializer for Experience with its demonstrations nested.
    """

    SkillDemonstrations = SkillDemonstrationSerializer(
        source='skill_demonstrations',
        many=True,
        read_only=True,
    )

    class Meta:
        model = Experience
        fields = [
            'id',
            'title',
            'description',
            'location',
            'position',
            'duration',
            'SkillDemonstrations',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class DemonstrationInputSerializer(serializers.Serializer):
    """One entry of ``skillDemonstrations`` in an experience payload."""

    skillId = serializers.IntegerField(required=False, allow_null=True, default=None)
    explanation = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default='',
        trim_whitespace=False,
    )

    def validate_explanation(self, value):
        return value or ''


class ExperienceWriteSerializer(serializers.ModelSerializer):
    """
    Validate experience create/update payloads.

    ``skillDemonstrations`` is optional; on update its absence means
    "leave the demonstrations alone".
    """

    skillDemonstrations = DemonstrationInputSerializer(many=True, required=False)

    class Meta:
        model = Experience
        fields = [
            'title',
            'description',
            'location',
            'position',
            'duration',
            'skillDemonstrations',
        ]
        extra_kwargs = {
            'description': {'required': True, 'allow_blank': True},
        }


class DemonstrationCreateSerializer(serializers.Serializer):
    """Body of POST /experiences/{id}/demo."""

    skillId = serializers.IntegerField(required=False, allow_null=True, default=None)
    explanation = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default='',
        trim_whitespace=False,
    )

    def validate(self, attrs):
        attrs['explanation'] = attrs.get('explanation') or ''
        if attrs.get('skillId') is None and not attrs['explanation'].strip():
            raise serializers.ValidationError("Provide a skill, an explanation, or both.")
        return attrs


class DemonstrationExplanationSerializer(serializers.Serializer):
    """Body of PUT /experiences/{id}/demo/{skillId}."""

    explanation = serializers.CharField(allow_blank=True, trim_whitespace=False)


class DemonstrationReassignSerializer(serializers.Serializer):
    """Body of PUT /experiences/demo/{id}; a null SkillId detaches the skill."""

    SkillId = serializers.IntegerField(allow_null=True)
