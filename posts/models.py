from django.db import models


class Post(models.Model):
    """A named post created from the admin page.

    Names are compared exactly: no case folding or whitespace trimming,
    so "a test post!" and "A test post!" are two different posts.
    """

    name = models.CharField(max_length=200, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.name
