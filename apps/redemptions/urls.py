from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'redemptions'

router = SimpleRouter()
router.register(r'', views.RedemptionViewSet, basename='redemption')

urlpatterns = [
    # GET    /api/redemptions/                   - List vouchers (?search= for admin)
    # POST   /api/redemptions/                   - Redeem a product
    # GET    /api/redemptions/{id}/              - Get voucher
    # GET    /api/redemptions/lookup/?code=      - Resolve code (admin)
    # POST   /api/redemptions/{id}/confirm/      - Confirm (admin)
    # POST   /api/redemptions/{id}/cancel/       - Cancel (admin or owner)
    path('', include(router.urls)),
]
