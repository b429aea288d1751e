from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Media',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Human readable name', max_length=255)),
                ('file_name', models.CharField(help_text='Sanitised file name, last component of the storage path', max_length=255)),
                ('disk', models.CharField(help_text='Storage alias the file is written to', max_length=255)),
                ('mime_type', models.CharField(help_text='MIME type guessed from the file name', max_length=255)),
                ('size', models.PositiveBigIntegerField(help_text='File size in bytes')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Media',
                'verbose_name_plural': 'Media',
                'ordering': ['-created_at'],
                'abstract': False,
                'indexes': [models.Index(fields=['disk', '-created_at'], name='media_disk_recent_idx')],
            },
        ),
    ]
