# apps/core/forms.py

from django import forms
from django.contrib.auth.forms import UserChangeForm, UserCreationForm

from .models import Usuario


class LoginForm(forms.Form):
    """Formulário de login por email"""

    email = forms.CharField(
        label='Email',
        max_length=254,
        widget=forms.EmailInput(attrs={
            'class': 'form-input w-full px-4 py-2 border rounded-lg',
            'placeholder': 'email@instituicao.edu.br',
            'autofocus': True
        })
    )

    senha = forms.CharField(
        label='Senha',
        widget=forms.PasswordInput(attrs={
            'class': 'form-input w-full px-4 py-2 border rounded-lg',
            'placeholder': 'Sua senha'
        })
    )


class UsuarioCreationForm(UserCreationForm):
    """Criação de usuários pelo admin do Django"""

    class Meta:
        model = Usuario
        fields = ('email_usuario', 'nome_usuario', 'instituicao_usuario', 'perfil')


class UsuarioChangeForm(UserChangeForm):

    class Meta:
        model = Usuario
        fields = ('email_usuario', 'nome_usuario', 'instituicao_usuario', 'perfil')
