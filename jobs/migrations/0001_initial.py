from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('experience', '0001_initial'),
        ('lists', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Job',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('company', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('job_tags', models.ManyToManyField(blank=True, related_name='jobs', to='lists.jobtag')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='jobs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Job',
                'verbose_name_plural': 'Jobs',
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='Requirement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('description', models.TextField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('job', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='requirements', to='jobs.job')),
                ('skills', models.ManyToManyField(blank=True, related_name='requirements', to='lists.skill')),
            ],
            options={
                'verbose_name': 'Requirement',
                'verbose_name_plural': 'Requirements',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='RequirementMatch',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('match_explanation', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('experience', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='requirement_matches', to='experience.experience')),
                ('requirement', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='matches', to='jobs.requirement')),
            ],
            options={
                'verbose_name': 'Requirement Match',
                'verbose_name_plural': 'Requirement Matches',
                'ordering': ['id'],
            },
        ),
        migrations.AddField(
            model_name='requirement',
            name='matched_experiences',
            field=models.ManyToManyField(blank=True, related_name='matched_requirements', through='jobs.RequirementMatch', to='experience.experience'),
        ),
        migrations.AddConstraint(
            model_name='requirementmatch',
            constraint=models.UniqueConstraint(fields=('requirement', 'experience'), name='unique_requirement_experience_match'),
        ),
    ]
