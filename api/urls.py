from django.urls import path, include
from rest_framework.routers import SimpleRouter

from api.views import TranslationJobViewSet, describe, process, processing_status

router = SimpleRouter(trailing_slash=False)
router.register(r'jobs', TranslationJobViewSet, basename='jobs')

urlpatterns = [
    path('', describe, name='describe'),
    path('process', process, name='process'),
    path('status', processing_status, name='status'),
    path('', include(router.urls)),
]
