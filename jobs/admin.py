from django.contrib import admin
from .models import Job, Requirement, RequirementMatch


class RequirementInline(admin.StackedInline):
    """Requirements listed under their job."""

    model = Requirement
    extra = 0
    fields = ['description', 'skills']
    filter_horizontal = ['skills']


class RequirementMatchInline(admin.TabularInline):
    """Experience matches listed under their requirement."""

    model = RequirementMatch
    extra = 0
    fields = ['experience', 'match_explanation']


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    """Admin interface for Job."""

    list_display = ['title', 'company', 'user', 'created_at', 'updated_at']
    list_filter = ['created_at', 'updated_at', 'company']
    search_fields = ['title', 'company', 'user__username', 'description']
    readonly_fields = ['created_at', 'updated_at']
    filter_horizontal = ['job_tags']
    inlines = [RequirementInline]

    fieldsets = (
        ('Basic Info', {
            'fields': ('user', 'title', 'company', 'job_tags')
        }),
        ('Description', {
            'fields': ('description',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at')
        }),
    )


@admin.register(Requirement)
class RequirementAdmin(admin.ModelAdmin):
    """Admin interface for Requirement."""

    list_display = ['__str__', 'job', 'created_at']
    search_fields = ['description', 'job__title', 'job__company']
    filter_horizontal = ['skills']
    inlines = [RequirementMatchInline]
