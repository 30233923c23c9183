import pytest
from django.db import IntegrityError

from posts.models import Post


@pytest.mark.django_db
def test_str_is_name():
    assert str(Post.objects.create(name="a test post!")) == "a test post!"


@pytest.mark.django_db
def test_name_is_unique():
    Post.objects.create(name="a test post!")
    with pytest.raises(IntegrityError):
        Post.objects.create(name="a test post!")


@pytest.mark.django_db
def test_newest_posts_first():
    first = Post.objects.create(name="first")
    second = Post.objects.create(name="second")
    assert list(Post.objects.all()) == [second, first]
