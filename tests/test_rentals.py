from datetime import date
from decimal import Decimal

import models

RENTAL_FORM = {
    "nome": "Maria Silva",
    "rg": "12.345.678-9",
    "telefone": "11 99999-0000",
    "email": "maria@example.com",
    "data_inicio": "2024-01-10",
    "data_fim": "2024-03-10",
}


def register(client, prop_id, **overrides):
    return client.post(f"/aluguel/{prop_id}", data={**RENTAL_FORM, **overrides}, follow_redirects=False)


def test_rental_page_for_available_property(admin_client, make_property):
    prop = make_property(title="Casa Sol")
    response = admin_client.get(f"/aluguel/{prop.id}")
    assert response.status_code == 200
    assert response.context["casa"].title == "Casa Sol"


def test_rental_page_for_rented_property(admin_client, make_property):
    prop = make_property()
    register(admin_client, prop.id)

    response = admin_client.get(f"/aluguel/{prop.id}")
    assert response.status_code == 404


def test_register_rental(admin_client, db_session, make_property):
    prop = make_property(price="1000.00")

    response = register(admin_client, prop.id)

    assert response.status_code == 303
    assert response.headers["location"] == "/alugueis?success=Aluguel+registrado+com+sucesso"
    rental = db_session.query(models.Rental).one()
    assert rental.total == Decimal("2000")
    assert rental.start_date == date(2024, 1, 10)
    assert rental.client.name == "Maria Silva"
    db_session.refresh(prop)
    assert prop.status == models.STATUS_RENTED


def test_register_rental_twice_is_a_conflict(admin_client, db_session, make_property):
    prop = make_property()
    register(admin_client, prop.id)

    response = register(admin_client, prop.id, nome="Outra Pessoa")

    assert response.headers["location"] == "/alugueis?error=conflito"
    assert db_session.query(models.Client).count() == 1


def test_register_rental_with_malformed_date(admin_client, db_session, make_property):
    prop = make_property()

    response = register(admin_client, prop.id, data_fim="10/03/2024")

    assert response.headers["location"] == "/alugueis?error=invalido"
    assert db_session.query(models.Rental).count() == 0


def test_register_rental_missing_property(admin_client):
    response = register(admin_client, 999)
    assert response.headers["location"] == "/alugueis?error=nao_encontrado"


def test_remove_rental(admin_client, db_session, make_property):
    prop = make_property()
    register(admin_client, prop.id)
    rental = db_session.query(models.Rental).one()

    response = admin_client.post(
        "/aluguel/remover",
        data={"aluguel_id": rental.id, "cliente_id": rental.client_id, "casa_id": prop.id},
        follow_redirects=False,
    )

    assert response.headers["location"] == "/alugueis?removido=1"
    assert db_session.query(models.Rental).count() == 0
    assert db_session.query(models.Client).count() == 0
    db_session.refresh(prop)
    assert prop.status == models.STATUS_AVAILABLE


def test_remove_rental_bad_input(admin_client):
    response = admin_client.post("/aluguel/remover", data={"aluguel_id": "x"}, follow_redirects=False)
    assert response.headers["location"] == "/alugueis?error=invalido"


def test_edit_rental_page_and_update(admin_client, db_session, make_property):
    prop = make_property(title="Casa Lua", price="800.00")
    register(admin_client, prop.id)
    rental = db_session.query(models.Rental).one()

    page = admin_client.get(f"/aluguel/editar/{rental.id}")
    assert page.status_code == 200
    assert page.context["aluguel"].client_name == "Maria Silva"
    assert "Casa Lua" in page.text

    response = admin_client.post(
        f"/aluguel/editar/{rental.id}",
        data={**RENTAL_FORM, "nome": "Maria Souza", "data_fim": "2024-07-01"},
        follow_redirects=False,
    )

    assert response.headers["location"] == "/alugueis?success=Aluguel+atualizado+com+sucesso"
    db_session.refresh(rental)
    assert rental.total == Decimal("4800")
    assert rental.client.name == "Maria Souza"


def test_edit_rental_page_not_found(admin_client):
    response = admin_client.get("/aluguel/editar/31")
    assert response.status_code == 404
    assert response.json()["detail"] == "Rental not found"


def test_rentals_report(admin_client, make_property):
    prop = make_property(title="Casa Mar")
    register(admin_client, prop.id)

    response = admin_client.get("/relatorio-alugueis")

    assert response.status_code == 200
    assert "Casa Mar" in response.text
    assert "10/01/2024" in response.text
    assert len(response.context["alugueis"]) == 1
