from django import forms
from django.core.exceptions import ValidationError

from .models import Post

POST_NAME_FIELD = "new-post-name"

DUPLICATE_POST_ERROR = "error: post already exists"
MISSING_NAME_ERROR = "error: post name is required"


class NewPostForm(forms.Form):
    """Create-post form on the admin page.

    The HTML field is named ``new-post-name``, which is not a valid Python
    identifier, so the field is added in ``__init__`` instead of declared
    on the class.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields[POST_NAME_FIELD] = forms.CharField(
            max_length=Post._meta.get_field("name").max_length,
            strip=False,
            error_messages={"required": MISSING_NAME_ERROR},
            widget=forms.TextInput(attrs={"id": POST_NAME_FIELD}),
        )

    def clean(self):
        cleaned_data = super().clean()
        name = cleaned_data.get(POST_NAME_FIELD)
        if name and Post.objects.filter(name=name).exists():
            raise ValidationError(DUPLICATE_POST_ERROR, code="duplicate")
        return cleaned_data

    @property
    def post_name(self):
        return self.cleaned_data[POST_NAME_FIELD]
