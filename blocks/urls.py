from django.urls import path

from blocks.views import PageView

urlpatterns = [
    path('', PageView.as_view(), name='blocks_page'),
]
