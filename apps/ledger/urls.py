from django.urls import path
from . import views

app_name = 'ledger'

urlpatterns = [
    # GET /api/ledger/                      - Collection names and versions
    # GET /api/ledger/{collection}/         - Full snapshot (?since=<version> to poll)
    # GET /api/ledger/{collection}/{id}/    - Single document
    path('', views.collection_index, name='collection-index'),
    path('<slug:collection>/', views.collection_snapshot, name='collection-snapshot'),
    path('<slug:collection>/<str:doc_id>/', views.collection_document, name='collection-document'),
]
