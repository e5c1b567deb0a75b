"""
Jobs app serializers

Read side renders a job with ``JobTags`` and ``Requirements``, each
requirement with ``Skills`` and ``MatchedExperiences``. Write side validates
the nested payload (``jobTagIds``, ``requirements[].skillIds``,
``requirements[].matches[]``) for JobService.
"""
from rest_framework import serializers

from lists.serializers import JobTagSerializer, SkillSerializer
from .models import Job, Requirement


class MatchedExperienceSerializer(serializers.Serializer):
    """
    An experience matched to a requirement, rendered from the
    RequirementMatch row so the join's explanation comes along.
    """

    id = serializers.IntegerField(source='experience.id')
    title = serializers.CharField(source='experience.title')
    description = serializers.CharField(source='experience.description')
    location = serializers.CharField(source='experience.location', allow_null=True)
    position = serializers.CharField(source='experience.position', allow_null=True)
    duration = serializers.CharField(source='experience.duration', allow_null=True)
    RequirementMatch = serializers.SerializerMethodField()

    def get_RequirementMatch(self, obj) -> dict:
        return {'id': obj.id, 'matchExplanation': obj.match_explanation}


class RequirementSerializer(serializers.ModelSerializer):
    """Serializer for Requirement with skills and matches nested."""

    JobId = serializers.IntegerField(source='job_id', read_only=True)
    Skills = SkillSerializer(source='skills', many=True, read_only=True)
    MatchedExperiences = MatchedExperienceSerializer(source='matches', many=True, read_only=True)

    class Meta:
        model = Requirement
        fields = [
            'id',
            'description',
            'JobId',
            'Skills',
            'MatchedExperiences',
        ]
        read_only_fields = fields


class JobSerializer(serializers.ModelSerializer):
    """Serializer for a fully populated Job."""

    JobTags = JobTagSerializer(source='job_tags', many=True, read_only=True)
    Requirements = RequirementSerializer(source='requirements', many=True, read_only=True)

    class Meta:
        model = Job
        fields = [
            'id',
            'title',
            'company',
            'description',
            'JobTags',
            'Requirements',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class MatchInputSerializer(serializers.Serializer):
    """One ``matches`` entry: which experience answers the requirement, and why."""

    experienceId = serializers.IntegerField()
    matchExplanation = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default='',
        trim_whitespace=False,
    )

    def validate_matchExplanation(self, value):
        return value or ''


class RequirementInputSerializer(serializers.Serializer):
    """One ``requirements`` entry of a job payload."""

    description = serializers.CharField()
    skillIds = serializers.ListField(child=serializers.IntegerField(), required=False)
    matches = MatchInputSerializer(many=True, required=False)


class JobWriteSerializer(serializers.ModelSerializer):
    """
    Validate job create/update payloads.

    The requirement tree is always sent whole; a missing ``requirements``
    key means "no requirements".
    """

    jobTagIds = serializers.ListField(child=serializers.IntegerField(), required=False)
    requirements = RequirementInputSerializer(many=True, required=False)

    class Meta:
        model = Job
        fields = [
            'title',
            'company',
            'description',
            'jobTagIds',
            'requirements',
        ]
