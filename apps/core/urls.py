# apps/core/urls.py

from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # === AUTENTICAÇÃO ===
    path('', views.login_view, name='home'),
    path('login/', views.login_view, name='login'),
    path('logout/', views.logout_view, name='logout'),

    # Provisionamento do administrador inicial (protegido por token)
    path('seed-admin/', views.seed_admin, name='seed_admin'),

    # === PÁGINAS ===
    path('usuario/', views.usuario_view, name='usuario'),

    # === MONITORAMENTO ===
    path('health/', views.health_check, name='health'),

    # === API ===
    path('api/me/', views.api_me, name='api_me'),
    path('api/usuarios-instituicao/', views.api_usuarios, name='api_usuarios'),
    path('api/usuarios-instituicao/<str:pk>/', views.api_usuario_detalhe, name='api_usuario_detalhe'),
]
