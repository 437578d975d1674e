from django.db import models


class CollectionVersion(models.Model):
    """
    Monotonic change counter per collection.

    Bumped inside the writing transaction, so a poller that sees a new
    version is guaranteed to read the committed snapshot behind it.
    """

    collection = models.CharField(max_length=50, primary_key=True)
    version = models.PositiveBigIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'ledger_collection_versions'
        ordering = ['collection']

    def __str__(self):
        return f"{self.collection} v{self.version}"
