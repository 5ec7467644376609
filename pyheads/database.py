from tortoise.models import Model
from tortoise import fields

class CachedHead(Model):
    id = fields.IntField(pk=True)
    # "head-cache:" + base64 SHA-1 of the skin URL
    key = fields.CharField(max_length=64, unique=True)
    data = fields.BinaryField()
    # Unix timestamp after which the row is treated as missing
    expires_at = fields.BigIntField()

    class Meta:
        table = "cached_head"
