from django.contrib import admin
from .models import Experience, SkillDemonstration


class SkillDemonstrationInline(admin.TabularInline):
    """Demonstrations edited in place under their experience."""

    model = SkillDemonstration
    extra = 0
    fields = ['skill', 'explanation']


@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    """Admin interface for Experience."""

    list_display = ['title', 'user', 'position', 'location', 'duration', 'created_at']
    list_filter = ['created_at', 'updated_at']
    search_fields = ['title', 'description', 'user__username', 'position', 'location']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [SkillDemonstrationInline]


@admin.register(SkillDemonstration)
class SkillDemonstrationAdmin(admin.ModelAdmin):
    """Admin interface for SkillDemonstration, orphans included."""

    list_display = ['experience', 'skill', 'is_orphan', 'updated_at']
    list_filter = [('skill', admin.EmptyFieldListFilter)]
    search_fields = ['explanation', 'experience__title', 'skill__title']
    readonly_fields = ['created_at', 'updated_at']

    @admin.display(boolean=True, description='Orphan')
    def is_orphan(self, obj):
        return obj.is_orphan
