"""
Reviews API endpoints.
"""

from django.urls import path

from apps.reviews.views import ReviewCreateView, ReviewDetailView, ReviewVoteView

app_name = "reviews"

urlpatterns = [
    path("", ReviewCreateView.as_view(), name="create"),
    path("<int:review_id>/", ReviewDetailView.as_view(), name="detail"),
    path("<int:review_id>/vote/", ReviewVoteView.as_view(), name="vote"),
]
