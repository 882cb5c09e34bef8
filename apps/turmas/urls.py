# apps/turmas/urls.py

from django.urls import path
from . import views

app_name = 'turmas'

urlpatterns = [
    # Página de gestão
    path('turmas/', views.turmas_view, name='turmas'),

    # Turmas
    path('api/turmas/', views.api_turmas, name='api_turmas'),
    path('api/turmas/<str:pk>/', views.api_turma_detalhe, name='api_turma_detalhe'),

    # Jogadores
    path('api/jogadores/', views.api_jogadores, name='api_jogadores'),
    path('api/jogadores/<str:pk>/', views.api_jogador_detalhe, name='api_jogador_detalhe'),
]
