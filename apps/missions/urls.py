from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'missions'

# Submissions first: the mission detail route would otherwise match 'submissions/'
router = SimpleRouter()
router.register(r'submissions', views.SubmissionViewSet, basename='submission')
router.register(r'', views.MissionViewSet, basename='mission')

urlpatterns = [
    # Submission routes
    # GET    /api/missions/submissions/                - Own submissions (admin: all, ?status=)
    # POST   /api/missions/submissions/                - Submit a mission
    # GET    /api/missions/submissions/{id}/           - Get submission
    # POST   /api/missions/submissions/{id}/approve/   - Approve (admin)
    # POST   /api/missions/submissions/{id}/reject/    - Reject (admin)

    # Mission routes
    # GET    /api/missions/                            - List missions
    # POST   /api/missions/                            - Create mission (admin)
    # GET    /api/missions/board/                      - Missions with today's state
    # GET    /api/missions/suggestion/                 - Daily mission idea (admin)
    # GET    /api/missions/{id}/                       - Get mission
    # PATCH  /api/missions/{id}/                       - Edit mission (admin)
    # DELETE /api/missions/{id}/                       - Delete mission (admin)
    # POST   /api/missions/{id}/toggle/                - Toggle active (admin)
    path('', include(router.urls)),
]
