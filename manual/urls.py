from django.urls import path

from .views import ManualView, search_view

app_name = "manual"

urlpatterns = [
    path("", ManualView.as_view(), name="reference"),
    path("search/", search_view, name="search"),
]
