from django.urls import path

from clubdata.views import ClubDataView

urlpatterns = [
    path('clubdata/', ClubDataView.as_view(), name='clubdata'),
]
