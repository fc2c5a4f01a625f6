import logging

import pytest

from boletos.bancos import (
    LAYOUTS_BANCOS,
    dv_nosso_numero_bradesco,
    montar_campo_livre_bb,
    montar_campo_livre_bradesco,
    montar_campo_livre_itau,
    normalizar_conta_bb,
    normalizar_conta_bradesco,
    normalizar_conta_itau,
    normalizar_nosso_numero_bb,
    normalizar_nosso_numero_bradesco,
    normalizar_nosso_numero_itau,
    obter_layout,
)
from boletos.erros import (
    BancoNaoSuportado,
    CampoObrigatorioAusente,
    ErroIntegridadeLayout,
    FormatoInvalido,
)
from boletos.modelos import ContaBancaria


# ---------------------------------------------------------------------------
# Banco do Brasil
# ---------------------------------------------------------------------------

def test_campo_livre_bb():
    conta = normalizar_conta_bb("1234", "5678901-2", "18")
    assert (conta.agencia, conta.conta, conta.carteira) == ("1234", "56789012", "18")

    nn = normalizar_nosso_numero_bb("98765432101")
    campo_livre, nn_formatado, avisos = montar_campo_livre_bb(conta, nn)

    assert campo_livre == "98765432101" + "1234" + "56789012" + "18"
    assert len(campo_livre) == 25
    assert nn_formatado == "98765432101"
    assert avisos == ()


def test_campo_livre_bb_exemplo():
    conta = normalizar_conta_bb("1234", "56789012", "18")
    campo_livre, _, _ = montar_campo_livre_bb(conta, "98765432101")
    assert campo_livre == "9876543210112345678901218"


def test_nosso_numero_bb_completa_com_zeros():
    assert normalizar_nosso_numero_bb("7777") == "00000007777"


@pytest.mark.parametrize("carteira", ["11", "16", "18"])
def test_carteira_bb_validada_sem_aviso(carteira):
    conta = normalizar_conta_bb("1234", "56789012", carteira)
    assert montar_campo_livre_bb(conta, "98765432101").avisos == ()


def test_carteira_bb_nao_validada_gera_aviso(caplog):
    conta = normalizar_conta_bb("1234", "56789012", "17")
    with caplog.at_level(logging.WARNING, logger="boletos.bancos.bb"):
        resultado = montar_campo_livre_bb(conta, "98765432101")

    assert len(resultado.campo_livre) == 25
    assert len(resultado.avisos) == 1
    assert "Carteira 17" in resultado.avisos[0]
    assert "Carteira 17" in caplog.text


# ---------------------------------------------------------------------------
# Itaú
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "conta, esperado_conta, esperado_dv",
    [
        ("12345-6", "12345", "6"),
        ("123456", "12345", "6"),
        ("12345", "12345", ""),
        ("123", "00123", ""),
    ],
)
def test_normalizar_conta_itau(conta, esperado_conta, esperado_dv):
    resultado = normalizar_conta_itau("5678", conta, "109")
    assert resultado.conta == esperado_conta
    assert resultado.conta_dv == esperado_dv
    assert resultado.agencia == "5678"
    assert resultado.carteira == "109"


def test_conta_itau_longa_demais():
    with pytest.raises(FormatoInvalido):
        normalizar_conta_itau("5678", "1234567", "109")


def test_campo_livre_itau():
    conta = normalizar_conta_itau("5678", "12345-6", "109")
    campo_livre, nn_formatado, avisos = montar_campo_livre_itau(
        conta, normalizar_nosso_numero_itau("12345678")
    )

    assert campo_livre == "1091234567815678123455000"
    assert nn_formatado == "109/12345678-1"
    assert avisos == ()


def test_campo_livre_itau_dacs():
    conta = normalizar_conta_itau("1565", "13877", "175")
    campo_livre, nn_formatado, _ = montar_campo_livre_itau(conta, "12345678")

    # DAC(carteira + NN) na posição 11 e DAC(agência + conta) na posição 21
    assert campo_livre == "1751234567821565138771000"
    assert nn_formatado == "175/12345678-2"
    assert campo_livre.endswith("000")


# ---------------------------------------------------------------------------
# Bradesco
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "carteira, nosso_numero, esperado",
    [
        ("19", "00000000002", "8"),
        ("06", "00002125525", "6"),
        ("09", "00000000002", "P"),
        ("09", "00000000007", "0"),
    ],
)
def test_dv_nosso_numero_bradesco(carteira, nosso_numero, esperado):
    assert dv_nosso_numero_bradesco(carteira, nosso_numero) == esperado


def test_campo_livre_bradesco():
    conta = normalizar_conta_bradesco("0278", "39232", "06")
    assert conta.conta == "0039232"

    nn = normalizar_nosso_numero_bradesco("2125525")
    campo_livre, nn_formatado, avisos = montar_campo_livre_bradesco(conta, nn)

    assert campo_livre == "0278060000212552500392320"
    assert nn_formatado == "06/00002125525-6"
    assert avisos == ()


def test_campo_livre_bradesco_exibe_p():
    conta = normalizar_conta_bradesco("1234", "1234567", "09")
    _, nn_formatado, _ = montar_campo_livre_bradesco(conta, "00000000002")
    assert nn_formatado == "09/00000000002-P"


# ---------------------------------------------------------------------------
# Normalização comum
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "normalizar", [normalizar_conta_bb, normalizar_conta_bradesco, normalizar_conta_itau]
)
@pytest.mark.parametrize(
    "agencia, conta, carteira, erro",
    [
        ("12a4", "1234", "11", FormatoInvalido),
        ("12345", "1234", "11", FormatoInvalido),
        ("", "1234", "11", CampoObrigatorioAusente),
        (None, "1234", "11", CampoObrigatorioAusente),
        ("1234", "", "11", CampoObrigatorioAusente),
        ("1234", "12X4", "11", FormatoInvalido),
        ("1234", "1234", None, CampoObrigatorioAusente),
        ("1234", "1234", "1A", FormatoInvalido),
    ],
)
def test_normalizacao_recusa_entradas_invalidas(normalizar, agencia, conta, carteira, erro):
    with pytest.raises(erro):
        normalizar(agencia, conta, carteira)


def test_normalizacao_descarta_pontuacao():
    conta = normalizar_conta_bradesco("0.278", " 39232-0 ", "06")
    assert conta.agencia == "0278"
    assert conta.conta == "0392320"


@pytest.mark.parametrize(
    "normalizar, tamanho",
    [
        (normalizar_nosso_numero_bb, 11),
        (normalizar_nosso_numero_itau, 8),
        (normalizar_nosso_numero_bradesco, 11),
    ],
)
def test_nosso_numero_maior_que_o_layout(normalizar, tamanho):
    assert len(normalizar("1")) == tamanho
    with pytest.raises(FormatoInvalido):
        normalizar("9" * (tamanho + 1))


@pytest.mark.parametrize(
    "montar, codigo",
    [
        (montar_campo_livre_bb, "001"),
        (montar_campo_livre_itau, "341"),
        (montar_campo_livre_bradesco, "237"),
    ],
)
def test_campo_livre_com_tamanho_errado(montar, codigo):
    # conta montada sem passar pela normalização do banco
    conta = ContaBancaria(codigo, "Banco", "123", "5678901", "11")
    with pytest.raises(ErroIntegridadeLayout) as exc:
        montar(conta, "123")
    assert exc.value.esperado == 25


# ---------------------------------------------------------------------------
# Seleção do layout
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "codigo, esperado",
    [("001", "001"), ("1", "001"), (1, "001"), ("341", "341"), (237, "237"), (" 237 ", "237")],
)
def test_obter_layout(codigo, esperado):
    layout = obter_layout(codigo)
    assert layout.codigo == esperado
    assert layout is LAYOUTS_BANCOS[esperado]


@pytest.mark.parametrize("codigo", ["999", "033", "", None])
def test_obter_layout_banco_nao_suportado(codigo):
    with pytest.raises(BancoNaoSuportado):
        obter_layout(codigo)
