import pytest

from boletos.erros import CampoObrigatorioAusente
from boletos.modelos import ContaBancaria, Endereco, Pessoa


@pytest.mark.parametrize(
    "documento, esperado",
    [
        ("12345678901", "123.456.789-01"),
        ("123.456.789-01", "123.456.789-01"),
        ("11222333000144", "11.222.333/0001-44"),
        ("", ""),
        ("ABC", "ABC"),
    ],
)
def test_documento_formatado(documento, esperado):
    assert Pessoa("Fulano", documento).documento_formatado == esperado


@pytest.mark.parametrize("nome", ["", "   ", None])
def test_pessoa_exige_nome(nome):
    with pytest.raises(CampoObrigatorioAusente):
        Pessoa(nome)


def test_endereco():
    endereco = Endereco("Rua A, 10", "Centro", "01001-000", "São Paulo", "SP")
    assert str(endereco) == "Rua A, 10, Centro - CEP: 01001-000 - São Paulo/SP"
    assert Pessoa("Fulano").endereco == Endereco()


@pytest.mark.parametrize(
    "codigo, esperado", [("001", "001-9"), ("341", "341-7"), ("237", "237-2")]
)
def test_numero_banco_formatado(codigo, esperado):
    conta = ContaBancaria(codigo, "Banco", "1234", "12345", "109")
    assert conta.numero_banco_formatado == esperado


def test_agencia_conta():
    assert ContaBancaria("341", "Itaú", "1565", "13877", "175", "4").agencia_conta == "1565 / 13877-4"
    assert ContaBancaria("237", "Bradesco", "0278", "0039232", "06").agencia_conta == "0278 / 0039232"
