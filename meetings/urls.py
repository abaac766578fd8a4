from django.urls import path, re_path
from .views import EndView, JoinView, index, page_not_found

urlpatterns = [
    path("", index),
    path("join", JoinView.as_view()),
    path("end", EndView.as_view()),
    # handler404 is skipped when DEBUG is on
    re_path(r"^.*$", page_not_found),
]
