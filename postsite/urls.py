###################################################################################
# URL configuration for the postsite project.
#
#   /_admin/   post administration page (posts app)
#   /health/   plain-text health check
#   /<path>    files from settings.BUILD_DIR, index.html for directories
###################################################################################


from django.urls import include, path, re_path

from posts import views as posts_views
from utils.health import health_check

urlpatterns = [
    path("_admin/", include("posts.urls")),
    path("health/", health_check, name="health_check"),
    # Slashless "_admin" and "health" stay unresolved so APPEND_SLASH redirects them.
    re_path(
        r"^(?!(?:_admin|health)$)(?P<path>.*)$",
        posts_views.build_file,
        name="build_file",
    ),
]
