"""
Lists app views

ViewSets for the skill and job tag libraries.
"""
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsOwner
from .models import JobTag, Skill
from .serializers import JobTagSerializer, SkillSerializer, SkillUsageSerializer
from .services import SkillService


class SkillViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Skill.

    - GET: List current user's skills
    - POST: Create skill with title
    - PUT {id}: Rename skill
    - DELETE {id}: Delete skill, keeping demonstrations that carry text
    - GET {id}/usage/: Count experiences and requirements using the skill
    """

    serializer_class = SkillSerializer
    permission_classes = [IsAuthenticated, IsOwner]
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        """Filter to show only current user's skills."""
        return Skill.objects.filter(user=self.request.user)

    def perform_create(self, serializer):
        """Automatically set user from request."""
        serializer.save(user=self.request.user)

    def update(self, request, *args, **kwargs):
        super().update(request, *args, **kwargs)
        return Response({'message': 'Updated'})

    def destroy(self, request, *args, **kwargs):
        skill = self.get_object()
        SkillService.delete_skill(skill)
        return Response({'message': 'Deleted'})

    @action(detail=True, methods=['get'])
    def usage(self, request, pk=None):
        """
        GET /lists/skills/{id}/usage/

        Used by clients to warn before a destructive delete.
        """
        skill = self.get_object()
        serializer = SkillUsageSerializer(SkillService.get_usage(skill))
        return Response(serializer.data)


class JobTagViewSet(viewsets.ModelViewSet):
    """
    ViewSet for JobTag.

    Deleting a tag only drops its links to jobs, never the jobs.
    """

    serializer_class = JobTagSerializer
    permission_classes = [IsAuthenticated, IsOwner]
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        """Filter to show only current user's job tags."""
        return JobTag.objects.filter(user=self.request.user)

    def perform_create(self, serializer):
        """Automatically set user from request."""
        serializer.save(user=self.request.user)

    def update(self, request, *args, **kwargs):
        super().update(request, *args, **kwargs)
        return Response({'message': 'Updated'})

    def destroy(self, request, *args, **kwargs):
        super().destroy(request, *args, **kwargs)
        return Response({'message': 'Deleted'})
