from __future__ import annotations

import httpx
import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from resto.core.securite import ServiceJeton, verifier_mot_de_passe
from resto.domaine.enums.types import Role
from resto.domaine.modeles import Client


INSCRIPTION = {
    "nom": "Alice",
    "email": "alice@example.com",
    "password": "Password123!",
    "adresse": "1 rue des Oliviers",
    "role": "CLIENT",
}


async def _inscrire_et_connecter(client_api: httpx.AsyncClient, **surcharges: str) -> str:
    corps = {**INSCRIPTION, **surcharges}
    r = await client_api.post("/api/auth/register", json=corps)
    assert r.status_code == 200, r.text

    r = await client_api.post("/api/auth/login", json={"email": corps["email"], "password": corps["password"]})
    assert r.status_code == 200, r.text
    return r.json()["jwt"]


@pytest.mark.asyncio
async def test_inscription_puis_login(client_api: httpx.AsyncClient, session_test: AsyncSession) -> None:
    r = await client_api.post("/api/auth/register", json=INSCRIPTION)
    assert r.status_code == 200, r.text
    assert r.json() == {"message": "Utilisateur enregistré avec succès !"}
    # Pas de jeton à l’inscription
    assert "jwt" not in r.json()

    res = await session_test.execute(select(Client).where(Client.email == INSCRIPTION["email"]))
    client = res.scalar_one()
    assert client.role is Role.CLIENT
    assert client.mot_de_passe_hash != INSCRIPTION["password"]
    assert verifier_mot_de_passe(INSCRIPTION["password"], client.mot_de_passe_hash)

    r = await client_api.post(
        "/api/auth/login",
        json={"email": INSCRIPTION["email"], "password": INSCRIPTION["password"]},
    )
    assert r.status_code == 200, r.text
    assert r.json()["jwt"]


@pytest.mark.asyncio
async def test_inscription_email_casse_mixte_puis_login(client_api: httpx.AsyncClient) -> None:
    corps = {**INSCRIPTION, "email": "Bob@Example.COM", "password": "pw"}
    r = await client_api.post("/api/auth/register", json=corps)
    assert r.status_code == 200, r.text

    # Même saisie qu’à l’inscription
    r = await client_api.post("/api/auth/login", json={"email": "Bob@Example.COM", "password": "pw"})
    assert r.status_code == 200, r.text
    assert r.json()["jwt"]

    # Forme stockée (domaine en minuscules)
    r = await client_api.post("/api/auth/login", json={"email": "Bob@example.com", "password": "pw"})
    assert r.status_code == 200, r.text


@pytest.mark.asyncio
async def test_inscription_mot_de_passe_avec_octet_nul(client_api: httpx.AsyncClient) -> None:
    jeton = await _inscrire_et_connecter(client_api, password="ab\x00cd")
    assert jeton

    r = await client_api.post("/api/auth/login", json={"email": INSCRIPTION["email"], "password": "ab"})
    assert r.status_code == 401, r.text


@pytest.mark.asyncio
async def test_login_email_mal_forme_401(client_api: httpx.AsyncClient) -> None:
    r = await client_api.post("/api/auth/login", json={"email": "pas-un-email", "password": "x"})
    assert r.status_code == 401, r.text


@pytest.mark.asyncio
async def test_inscription_role_prefixe_normalise(client_api: httpx.AsyncClient, session_test: AsyncSession) -> None:
    r = await client_api.post("/api/auth/register", json={**INSCRIPTION, "role": "ROLE_ADMIN"})
    assert r.status_code == 200, r.text

    res = await session_test.execute(select(Client.role).where(Client.email == INSCRIPTION["email"]))
    assert res.scalar_one() is Role.ADMIN


@pytest.mark.asyncio
async def test_inscription_email_deja_utilise(client_api: httpx.AsyncClient, session_test: AsyncSession) -> None:
    r1 = await client_api.post("/api/auth/register", json=INSCRIPTION)
    assert r1.status_code == 200, r1.text

    r2 = await client_api.post(
        "/api/auth/register",
        json={**INSCRIPTION, "nom": "Imposteur", "password": "autre", "role": "ADMIN"},
    )
    assert r2.status_code == 400, r2.text
    corps = r2.json()
    assert corps["status"] == 400
    assert corps["message"] == "Erreur : L'email est déjà utilisé."
    assert corps["details"] is None

    # Le premier compte est intact
    res = await session_test.execute(select(Client).where(Client.email == INSCRIPTION["email"]))
    clients = list(res.scalars().all())
    assert len(clients) == 1
    assert clients[0].nom == "Alice"
    assert clients[0].role is Role.CLIENT
    assert verifier_mot_de_passe(INSCRIPTION["password"], clients[0].mot_de_passe_hash)


@pytest.mark.asyncio
async def test_inscription_payload_invalide(client_api: httpx.AsyncClient) -> None:
    r = await client_api.post(
        "/api/auth/register",
        json={"nom": "", "email": "pas-un-email", "password": "x", "role": "CHEF"},
    )
    assert r.status_code == 400, r.text
    details = r.json()["details"]
    assert set(details) == {"nom", "email", "role"}


@pytest.mark.asyncio
async def test_login_mauvais_mot_de_passe_sans_jeton(
    client_api: httpx.AsyncClient,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    r = await client_api.post("/api/auth/register", json=INSCRIPTION)
    assert r.status_code == 200, r.text

    appels: list[object] = []

    def _espion(self: ServiceJeton, identite: object) -> str:
        appels.append(identite)
        return "jamais"

    monkeypatch.setattr(ServiceJeton, "emettre", _espion)

    r = await client_api.post("/api/auth/login", json={"email": INSCRIPTION["email"], "password": "mauvais"})
    assert r.status_code == 401, r.text
    assert r.json()["message"] == "Identifiants invalides."
    assert "jwt" not in r.json()
    assert appels == []


@pytest.mark.asyncio
async def test_login_email_inconnu(client_api: httpx.AsyncClient) -> None:
    r = await client_api.post("/api/auth/login", json={"email": "personne@example.com", "password": "x"})
    assert r.status_code == 401, r.text


@pytest.mark.asyncio
async def test_jeton_client_refuse_sur_routes_admin_accepte_sur_commandes(client_api: httpx.AsyncClient) -> None:
    jeton = await _inscrire_et_connecter(client_api)
    entetes = {"Authorization": f"Bearer {jeton}"}

    r = await client_api.get("/api/plats", headers=entetes)
    assert r.status_code == 403, r.text
    assert r.json()["message"] == "Accès interdit."

    r = await client_api.get("/api/clients", headers=entetes)
    assert r.status_code == 403, r.text

    r = await client_api.get("/api/commandes", headers=entetes)
    assert r.status_code == 204, r.text

    r = await client_api.get("/api/menus", headers=entetes)
    assert r.status_code == 204, r.text


@pytest.mark.asyncio
async def test_jeton_admin_accede_aux_routes_admin(client_api: httpx.AsyncClient) -> None:
    jeton = await _inscrire_et_connecter(client_api, email="admin@example.com", role="ADMIN")

    r = await client_api.get("/api/plats", headers={"Authorization": f"Bearer {jeton}"})
    assert r.status_code == 204, r.text


@pytest.mark.asyncio
async def test_sans_jeton_ou_jeton_invalide_401(client_api: httpx.AsyncClient) -> None:
    r = await client_api.get("/api/commandes")
    assert r.status_code == 401, r.text
    assert r.json()["message"] == "Authentification requise."

    r = await client_api.get("/api/commandes", headers={"Authorization": "Bearer faux.jeton.ici"})
    assert r.status_code == 401, r.text

    autre_secret = ServiceJeton(secret="un-autre-secret", duree_minutes=5)
    jeton = autre_secret.emettre(Client(email="x@example.com", role=Role.ADMIN))
    r = await client_api.get("/api/plats", headers={"Authorization": f"Bearer {jeton}"})
    assert r.status_code == 401, r.text


@pytest.mark.asyncio
async def test_endpoints_publics(client_api: httpx.AsyncClient) -> None:
    r = await client_api.get("/health")
    assert r.status_code == 200
    assert r.json() == {"statut": "ok"}

    r = await client_api.get("/api/info")
    assert r.status_code == 200
    assert r.json()["nom"] == "Resto Back Office"

    r = await client_api.get("/api/contact")
    assert r.status_code == 200
    assert "email" in r.json()

    r = await client_api.get("/openapi.json")
    assert r.status_code == 200
