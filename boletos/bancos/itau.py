"""Layout de campo livre do Itaú (Nosso Número de 8 dígitos e dois DACs)."""

from ..base import modulo10, zero_esquerda
from ..constantes import BANCOS_BOLETO
from ..erros import FormatoInvalido
from ..modelos import ContaBancaria
from .utils import CampoLivre, _conferir_campo_livre, _normalizar_numerico, _somente_digitos

CODIGO_BANCO = "341"
NOME_BANCO = BANCOS_BOLETO[CODIGO_BANCO]

TAMANHO_AGENCIA = 4
TAMANHO_CONTA = 5
TAMANHO_CARTEIRA = 3
TAMANHO_NOSSO_NUMERO = 8


def normalizar_conta_itau(agencia, conta, carteira) -> ContaBancaria:
    """
    A conta Itaú chega com ou sem o DAC ("12345-6", "123456" ou "12345").
    Com 6 dígitos, o último é o DAC e fica guardado só para exibição.
    """
    digitos = _somente_digitos(conta, "conta")
    if len(digitos) > TAMANHO_CONTA + 1:
        raise FormatoInvalido("conta", conta, "conta Itaú tem 5 dígitos mais o DAC")
    if len(digitos) == TAMANHO_CONTA + 1:
        numero, dv = digitos[:TAMANHO_CONTA], digitos[TAMANHO_CONTA:]
    else:
        numero, dv = zero_esquerda(digitos, TAMANHO_CONTA), ""
    return ContaBancaria(
        codigo_banco=CODIGO_BANCO,
        nome_banco=NOME_BANCO,
        agencia=_normalizar_numerico(agencia, TAMANHO_AGENCIA, "agência"),
        conta=numero,
        carteira=_normalizar_numerico(carteira, TAMANHO_CARTEIRA, "carteira"),
        conta_dv=dv,
    )


def normalizar_nosso_numero_itau(nosso_numero) -> str:
    return _normalizar_numerico(nosso_numero, TAMANHO_NOSSO_NUMERO, "nosso número")


def montar_campo_livre_itau(conta: ContaBancaria, nosso_numero: str) -> CampoLivre:
    """
    Campo livre Itaú:

        Carteira (3) + Nosso Número (8) + DAC(Carteira/NN) + Agência (4)
        + Conta (5) + DAC(Agência/Conta) + "000"

    Os dois DACs são módulo 10. O Nosso Número é exibido como Carteira/NN-DAC.
    """
    dac_carteira_nn = modulo10(conta.carteira + nosso_numero)
    dac_agencia_conta = modulo10(conta.agencia + conta.conta)

    campo_livre = (
        conta.carteira
        + nosso_numero
        + str(dac_carteira_nn)
        + conta.agencia
        + conta.conta
        + str(dac_agencia_conta)
        + "000"
    )
    return CampoLivre(
        _conferir_campo_livre(campo_livre, "Itaú"),
        f"{conta.carteira}/{nosso_numero}-{dac_carteira_nn}",
    )
