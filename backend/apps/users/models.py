from django.db import models


class User(models.Model):
    nickname = models.CharField(max_length=30, unique=True)
    email = models.EmailField(unique=True)
    # Salted hash produced by the configured password hasher, never plain text.
    password = models.CharField(max_length=128)

    class Meta:
        db_table = "users"

    def __str__(self):
        return self.nickname
