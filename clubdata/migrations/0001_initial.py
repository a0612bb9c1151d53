from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Option',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=191, unique=True)),
                ('value', models.JSONField(blank=True, default=dict)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Option',
                'verbose_name_plural': 'Optionen',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ClubData',
            fields=[],
            options={
                'verbose_name': 'Vereinsdaten',
                'verbose_name_plural': 'Vereinsdaten',
                'proxy': True,
                'indexes': [],
                'constraints': [],
            },
            bases=('clubdata.option',),
        ),
    ]
