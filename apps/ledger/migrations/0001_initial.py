# Generated manually for ledger app

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CollectionVersion',
            fields=[
                ('collection', models.CharField(max_length=50, primary_key=True, serialize=False)),
                ('version', models.PositiveBigIntegerField(default=0)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'ledger_collection_versions',
                'ordering': ['collection'],
            },
        ),
    ]
