from django.urls import path, include

urlpatterns = [
    path("", include("meetings.urls")),
]

handler404 = "meetings.views.page_not_found"
