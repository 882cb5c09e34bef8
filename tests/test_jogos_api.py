"""
Catálogo: jogos, categorias e conteúdos relacionados.

Leitura para qualquer usuário autenticado; escrita só para administradores.
"""
import uuid

import pytest
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test.client import BOUNDARY, MULTIPART_CONTENT, encode_multipart

from apps.core.crud import ServicoCrud
from apps.core.exceptions import Conflito
from apps.core.models import Categoria, ConteudoRelacionado, Jogo

pytestmark = pytest.mark.django_db


@pytest.fixture
def categoria(admin):
    return Categoria.objects.create(nome="Matemática", criado_por=admin)


@pytest.fixture
def jogo(admin, categoria):
    jogo = Jogo.objects.create(nome="Tabuada Espacial", identificacao_unity="tabuada_v1", criado_por=admin)
    jogo.categorias.set([categoria])
    return jogo


def test_qualquer_usuario_lista_jogos(cliente_u2, jogo, categoria):
    r = cliente_u2.get("/api/jogos/")
    assert r.status_code == 200
    corpo = r.json()
    assert corpo[0]["nome"] == "Tabuada Espacial"
    assert corpo[0]["categorias"] == [{"id": str(categoria.pk), "nome": "Matemática"}]


def test_nao_admin_nao_cria_jogo(cliente_u2):
    r = cliente_u2.post(
        "/api/jogos/",
        {"nome": "X", "identificacao_unity": "x"},
        content_type="application/json",
    )
    assert r.status_code == 403
    assert Jogo.objects.count() == 0


def test_admin_cria_jogo_com_categorias(cliente_admin, admin, categoria):
    r = cliente_admin.post(
        "/api/jogos/",
        {
            "nome": "Frações",
            "identificacao_unity": "fracoes_v2",
            "total_niveis": "12",
            "xp_maxima": 3000,
            "categorias": [str(categoria.pk)],
            "github_url": "https://github.com/ludus/fracoes",
        },
        content_type="application/json",
    )
    assert r.status_code == 201
    corpo = r.json()
    assert corpo["total_niveis"] == 12
    assert corpo["xp_maxima"] == 3000
    assert corpo["categorias"][0]["nome"] == "Matemática"
    assert corpo["createdBy"]["id"] == str(admin.pk)


def test_campos_obrigatorios_do_jogo(cliente_admin):
    r = cliente_admin.post("/api/jogos/", {"nome": "Sem unity"}, content_type="application/json")
    assert r.status_code == 400


def test_inteiro_invalido(cliente_admin):
    r = cliente_admin.post(
        "/api/jogos/",
        {"nome": "X", "identificacao_unity": "x", "total_niveis": "muitos"},
        content_type="application/json",
    )
    assert r.status_code == 400


def test_categoria_inexistente(cliente_admin):
    r = cliente_admin.post(
        "/api/jogos/",
        {"nome": "X", "identificacao_unity": "x", "categorias": [str(uuid.uuid4())]},
        content_type="application/json",
    )
    assert r.status_code == 404
    assert Jogo.objects.count() == 0


def test_upload_de_icone(cliente_admin):
    icone = SimpleUploadedFile("icone.png", b"\x89PNG\r\n\x1a\n", content_type="image/png")
    r = cliente_admin.post("/api/jogos/", {"nome": "Com ícone", "identificacao_unity": "icone", "icone": icone})
    assert r.status_code == 201
    assert "uploads/jogo-" in r.json()["icone_url"]
    assert r.json()["icone_url"].endswith(".png")


def test_upload_rejeita_nao_imagem(cliente_admin):
    arquivo = SimpleUploadedFile("script.txt", b"oi", content_type="text/plain")
    r = cliente_admin.post("/api/jogos/", {"nome": "X", "identificacao_unity": "x", "icone": arquivo})
    assert r.status_code == 400
    assert Jogo.objects.count() == 0


def test_atualizacao_parcial_do_jogo(cliente_admin, jogo, categoria):
    r = cliente_admin.put(f"/api/jogos/{jogo.pk}/", {"descricao": "Nova"}, content_type="application/json")
    assert r.status_code == 200
    jogo.refresh_from_db()
    assert jogo.descricao == "Nova"
    assert jogo.nome == "Tabuada Espacial"
    assert list(jogo.categorias.all()) == [categoria]


def test_nao_admin_nao_altera_nem_exclui_jogo(cliente_u2, jogo):
    assert cliente_u2.put(f"/api/jogos/{jogo.pk}/", {"nome": "X"}, content_type="application/json").status_code == 403
    assert cliente_u2.delete(f"/api/jogos/{jogo.pk}/").status_code == 403


def test_exclusao_de_jogo(cliente_admin, jogo):
    assert cliente_admin.delete(f"/api/jogos/{jogo.pk}/").json() == {"ok": True}
    assert not Jogo.objects.exists()


def test_categoria_duplicada(cliente_admin, categoria):
    r = cliente_admin.post("/api/categorias/", {"nome": "matemática"}, content_type="application/json")
    assert r.status_code == 409
    assert r.json() == {"error": "Categoria já existe"}


def test_categorias_crud(cliente_admin, cliente_u2):
    r = cliente_admin.post("/api/categorias/", {"nome": "Ciências"}, content_type="application/json")
    assert r.status_code == 201
    pk = r.json()["id"]

    assert [c["nome"] for c in cliente_u2.get("/api/categorias/").json()] == ["Ciências"]

    r = cliente_admin.put(f"/api/categorias/{pk}/", {"nome": "Ciências da Natureza"}, content_type="application/json")
    assert r.json()["nome"] == "Ciências da Natureza"

    assert cliente_admin.delete(f"/api/categorias/{pk}/").json() == {"ok": True}


def test_conteudo_relacionado(cliente_admin, cliente_u2, jogo):
    r = cliente_admin.post(
        "/api/conteudos/",
        {
            "titulo": "Gamificação em sala",
            "descricao": "Artigo sobre uso de jogos",
            "tipo": "Artigo",
            "jogos": str(jogo.pk),
        },
        content_type="application/json",
    )
    assert r.status_code == 201
    assert r.json()["jogos"] == [str(jogo.pk)]
    assert r.json()["tipo"] == "Artigo"

    assert len(cliente_u2.get("/api/conteudos/").json()) == 1
    assert cliente_u2.post("/api/conteudos/", {"titulo": "x", "descricao": "y"},
                           content_type="application/json").status_code == 403


def test_conteudo_tipo_invalido(cliente_admin):
    r = cliente_admin.post(
        "/api/conteudos/",
        {"titulo": "X", "descricao": "Y", "tipo": "Podcast"},
        content_type="application/json",
    )
    assert r.status_code == 400
    assert ConteudoRelacionado.objects.count() == 0


def _icones_gravados():
    try:
        return sorted(default_storage.listdir("uploads")[1])
    except FileNotFoundError:
        return []


def _png(nome="icone.png"):
    return SimpleUploadedFile(nome, b"\x89PNG\r\n\x1a\n", content_type="image/png")


def test_icone_nao_e_gravado_quando_a_categoria_nao_existe(cliente_admin):
    antes = _icones_gravados()
    r = cliente_admin.post(
        "/api/jogos/",
        {"nome": "X", "identificacao_unity": "x", "categorias": str(uuid.uuid4()), "icone": _png()},
    )
    assert r.status_code == 404
    assert Jogo.objects.count() == 0
    assert _icones_gravados() == antes


def test_icone_removido_quando_a_gravacao_falha(cliente_admin, monkeypatch):
    def falha(self, obj, relacoes=None):
        raise Conflito("Registro já existe")

    monkeypatch.setattr(ServicoCrud, "_persistir", falha)
    antes = _icones_gravados()

    r = cliente_admin.post("/api/jogos/", {"nome": "X", "identificacao_unity": "x", "icone": _png()})
    assert r.status_code == 409
    assert _icones_gravados() == antes


def test_atualizacao_multipart_troca_nome_e_icone(cliente_admin, jogo):
    corpo = encode_multipart(BOUNDARY, {"nome": "Tabuada Galáctica", "icone": _png("novo.png")})
    r = cliente_admin.put(f"/api/jogos/{jogo.pk}/", corpo, content_type=MULTIPART_CONTENT)
    assert r.status_code == 200

    jogo.refresh_from_db()
    assert jogo.nome == "Tabuada Galáctica"
    assert "uploads/jogo-" in jogo.icone_url
    assert jogo.icone_url.endswith(".png")
    assert jogo.identificacao_unity == "tabuada_v1"


def test_atualizacao_multipart_rejeita_nao_imagem(cliente_admin, jogo):
    arquivo = SimpleUploadedFile("script.txt", b"oi", content_type="text/plain")
    corpo = encode_multipart(BOUNDARY, {"icone": arquivo})
    r = cliente_admin.put(f"/api/jogos/{jogo.pk}/", corpo, content_type=MULTIPART_CONTENT)
    assert r.status_code == 400
    jogo.refresh_from_db()
    assert jogo.icone_url == ""
