from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'wishes'

router = SimpleRouter()
router.register(r'', views.WishViewSet, basename='wish')

urlpatterns = [
    # GET    /api/wishes/                    - List wishes, newest first
    # POST   /api/wishes/                    - Post a wish
    # GET    /api/wishes/cooldown/           - Caller's cooldown status
    # POST   /api/wishes/cooldown/reset/     - Pay to end the cooldown
    # GET    /api/wishes/{id}/               - Get wish
    # DELETE /api/wishes/{id}/               - Delete wish (owner or admin)
    # POST   /api/wishes/{id}/like/          - Like a wish
    path('', include(router.urls)),
]
