"""
Jobs app views

ViewSet for Job and its requirement tree.
"""
from django.db.models import Prefetch
from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsOwner
from .models import Job, Requirement, RequirementMatch
from .serializers import JobSerializer, JobWriteSerializer
from .services import JobService


class JobViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Job.

    - GET: List current user's jobs with JobTags and Requirements
    - POST: Create job with jobTagIds and requirements
    - GET {id}: Retrieve one populated job
    - PUT {id}: Update job; the requirement set is replaced, not merged
    - DELETE {id}: Delete job and its requirements
    """

    permission_classes = [IsAuthenticated, IsOwner]
    lookup_value_regex = r'\d+'
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def get_queryset(self):
        """
        Filter to show only current user's jobs with the whole tree
        prefetched.
        """
        requirements = Requirement.objects.prefetch_related(
            'skills',
            Prefetch('matches', queryset=RequirementMatch.objects.select_related('experience')),
        )
        return (
            Job.objects.filter(user=self.request.user)
            .prefetch_related('job_tags', Prefetch('requirements', queryset=requirements))
        )

    def get_serializer_class(self):
        if self.action in ['create', 'update']:
            return JobWriteSerializer
        return JobSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        job = JobService.create_job(request.user, serializer.validated_data)

        job = self.get_queryset().get(pk=job.pk)
        return Response(JobSerializer(job).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """
        The client resends the complete requirement tree on every save.
        """
        job = self.get_object()
        serializer = self.get_serializer(job, data=request.data)
        serializer.is_valid(raise_exception=True)

        JobService.update_job(job, serializer.validated_data)
        return Response({'message': 'Updated Successfully'})

    def destroy(self, request, *args, **kwargs):
        job = self.get_object()
        JobService.delete_job(job)
        return Response({'message': 'Deleted Successfully'})
