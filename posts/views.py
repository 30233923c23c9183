import logging

from django.conf import settings
from django.db import IntegrityError, transaction
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods
from django.views.static import serve

from .forms import DUPLICATE_POST_ERROR, NewPostForm
from .models import Post

logger = logging.getLogger(__name__)


@require_http_methods(["GET", "POST"])
def admin_index(request):
    """List posts and create new ones.

    A successful create redirects back here so that reloading the page does
    not resubmit the form. A rejected create re-renders the page with the
    form errors, e.g. "error: post already exists" for a repeated name.
    """
    if request.method == "POST":
        form = NewPostForm(request.POST)
        if form.is_valid():
            try:
                with transaction.atomic():
                    post = Post.objects.create(name=form.post_name)
            except IntegrityError:
                # Another request created the same name after validation ran.
                form.add_error(None, DUPLICATE_POST_ERROR)
            else:
                logger.info("Created post %r (id=%s)", post.name, post.pk)
                return redirect("posts:admin")
        else:
            logger.info("Rejected post: %s", "; ".join(_form_errors(form)))
    else:
        form = NewPostForm()

    context = {
        "form": form,
        "errors": _form_errors(form),
        "posts": Post.objects.all(),
    }
    status = 400 if form.is_bound else 200
    return render(request, "posts/admin.html", context, status=status)


def _form_errors(form):
    if not form.is_bound:
        return []
    return [error for errors in form.errors.values() for error in errors]


@require_GET
def build_file(request, path):
    """Serve a file from BUILD_DIR; directories resolve to their index.html."""
    if path == "" or path.endswith("/"):
        path = f"{path}index.html"
    return serve(request, path, document_root=settings.BUILD_DIR)
