from django.urls import path
from . import views

urlpatterns = [
    path("", views.landing_page, name="landing"),
    path("privacy/", views.privacy_page, name="privacy"),
]
