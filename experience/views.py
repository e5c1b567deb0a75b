"""
Experience app views

ViewSet for experiences and their skill demonstrations.
"""
from django.db.models import Prefetch
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsOwner
from .models import Experience, SkillDemonstration
from .serializers import (
    DemonstrationCreateSerializer,
    DemonstrationExplanationSerializer,
    DemonstrationReassignSerializer,
    ExperienceSerializer,
    ExperienceWriteSerializer,
    SkillDemonstrationSerializer,
)
from .services import ExperienceService


class ExperienceViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Experience.

    - GET: List current user's experiences with SkillDemonstrations
    - POST: Create experience with skillDemonstrations
    - PUT {id}: Update fields; replaces demonstrations if skillDemonstrations is sent
    - DELETE {id}: Delete experience
    - POST {id}/demo/: Add one demonstration
    - PUT/DELETE {id}/demo/{skillId}/: Edit or remove the demonstration of a skill
    - PUT/DELETE demo/{demoId}/: Reassign or remove a demonstration by its own id
    """

    permission_classes = [IsAuthenticated, IsOwner]
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        """
        Filter to show only current user's experiences, demonstrations
        and their skills prefetched.
        """
        demonstrations = SkillDemonstration.objects.select_related('skill')
        return (
            Experience.objects.filter(user=self.request.user)
            .prefetch_related(Prefetch('skill_demonstrations', queryset=demonstrations))
        )

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return ExperienceWriteSerializer
        return ExperienceSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        experience = ExperienceService.create_experience(request.user, serializer.validated_data)

        experience = self.get_queryset().get(pk=experience.pk)
        return Response(ExperienceSerializer(experience).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """
        Fields left out of the payload keep their values, so a single-field
        edit does not need to resend skillDemonstrations.
        """
        experience = self.get_object()
        serializer = self.get_serializer(experience, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        ExperienceService.update_experience(experience, serializer.validated_data)
        return Response({'message': 'Updated Successfully'})

    def destroy(self, request, *args, **kwargs):
        experience = self.get_object()
        ExperienceService.delete_experience(experience)
        return Response({'message': 'Deleted Successfully'})

    @action(detail=True, methods=['post'], url_path='demo')
    def add_demo(self, request, pk=None):
        """
        POST /experiences/{id}/demo/
        """
        experience = self.get_object()
        serializer = DemonstrationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        demo = ExperienceService.add_demonstration(
            experience,
            serializer.validated_data['skillId'],
            serializer.validated_data['explanation'],
        )
        return Response(SkillDemonstrationSerializer(demo).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['put'], url_path=r'demo/(?P<skill_id>\d+)')
    def update_demo(self, request, pk=None, skill_id=None):
        """
        PUT /experiences/{id}/demo/{skillId}/
        """
        experience = self.get_object()
        serializer = DemonstrationExplanationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        ExperienceService.update_demonstration_explanation(
            experience, int(skill_id), serializer.validated_data['explanation']
        )
        return Response({'message': 'Demonstration updated'})

    @update_demo.mapping.delete
    def remove_demo(self, request, pk=None, skill_id=None):
        """
        DELETE /experiences/{id}/demo/{skillId}/
        """
        experience = self.get_object()
        ExperienceService.remove_demonstration(experience, int(skill_id))
        return Response({'message': 'Deleted'})

    @action(detail=False, methods=['put'], url_path=r'demo/(?P<demo_id>\d+)')
    def reassign_demo(self, request, demo_id=None):
        """
        PUT /experiences/demo/{demoId}/

        Body ``{"SkillId": <id or null>}``. 409 if the experience already
        has a demonstration for that skill.
        """
        serializer = DemonstrationReassignSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        demo = ExperienceService.reassign_demonstration(
            request.user, int(demo_id), serializer.validated_data['SkillId']
        )
        return Response(SkillDemonstrationSerializer(demo).data)

    @reassign_demo.mapping.delete
    def delete_demo(self, request, demo_id=None):
        """
        DELETE /experiences/demo/{demoId}/
        """
        ExperienceService.delete_demonstration(request.user, int(demo_id))
        return Response({'message': 'Deleted'})
