"""URL routing for inquiries."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import InquiryListCreateView, InquiryStatusView

urlpatterns = [
    path("", InquiryListCreateView.as_view(), name="inquiry-list"),
    path("<uuid:pk>/status/", InquiryStatusView.as_view(), name="inquiry-status"),
]
