from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),
    path('admin-login/', views.admin_login, name='admin-login'),
    path('guest-login/', views.guest_login, name='guest-login'),
    path('logout/', views.logout, name='logout'),
    path('session/', views.session_snapshot, name='session'),

    # Current account
    path('user/', views.get_current_account, name='current-account'),
    path('user/encouragement/', views.encouragement, name='encouragement'),

    # Admin: students
    path('students/', views.students, name='students'),
    path('students/<uuid:pk>/approve/', views.approve_student, name='approve-student'),
    path('students/<uuid:pk>/', views.reject_student, name='reject-student'),
    path('students/<uuid:pk>/grant/', views.grant_student_points, name='grant-points'),

    # Point reasons
    path('point-reasons/', views.point_reasons, name='point-reasons'),
    path('point-reasons/<uuid:pk>/', views.point_reason_detail, name='point-reason-detail'),
]
