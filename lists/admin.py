from django.contrib import admin
from .models import JobTag, Skill
from .services import SkillService


@admin.register(Skill)
class SkillAdmin(admin.ModelAdmin):
    """
    Admin interface for Skill.

    Deletes go through SkillService so explanation text survives here too.
    """

    list_display = ['title', 'user', 'created_at', 'updated_at']
    list_filter = ['created_at']
    search_fields = ['title', 'user__username']
    readonly_fields = ['created_at', 'updated_at']

    def delete_model(self, request, obj):
        SkillService.delete_skill(obj)

    def delete_queryset(self, request, queryset):
        for skill in queryset:
            SkillService.delete_skill(skill)


@admin.register(JobTag)
class JobTagAdmin(admin.ModelAdmin):
    """Admin interface for JobTag."""

    list_display = ['title', 'user', 'created_at']
    search_fields = ['title', 'user__username']
    readonly_fields = ['created_at', 'updated_at']
