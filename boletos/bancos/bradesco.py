"""Layout de campo livre do Bradesco (Nosso Número de 11 dígitos, módulo 11 base 7)."""

from ..base import modulo11
from ..constantes import BANCOS_BOLETO
from ..modelos import ContaBancaria
from .utils import CampoLivre, _conferir_campo_livre, _normalizar_numerico

CODIGO_BANCO = "237"
NOME_BANCO = BANCOS_BOLETO[CODIGO_BANCO]

TAMANHO_AGENCIA = 4  # sem DV
TAMANHO_CONTA = 7  # sem DV
TAMANHO_CARTEIRA = 2
TAMANHO_NOSSO_NUMERO = 11


def normalizar_conta_bradesco(agencia, conta, carteira) -> ContaBancaria:
    return ContaBancaria(
        codigo_banco=CODIGO_BANCO,
        nome_banco=NOME_BANCO,
        agencia=_normalizar_numerico(agencia, TAMANHO_AGENCIA, "agência"),
        conta=_normalizar_numerico(conta, TAMANHO_CONTA, "conta"),
        carteira=_normalizar_numerico(carteira, TAMANHO_CARTEIRA, "carteira"),
    )


def normalizar_nosso_numero_bradesco(nosso_numero) -> str:
    return _normalizar_numerico(nosso_numero, TAMANHO_NOSSO_NUMERO, "nosso número")


def dv_nosso_numero_bradesco(carteira: str, nosso_numero: str) -> str:
    """
    DV do Nosso Número: módulo 11 com pesos 2 a 7 sobre Carteira + NN.
    Resultado 10 vira 'P' e 11 vira '0'.
    """
    dv = modulo11(carteira + nosso_numero, 7)
    if dv == 10:
        return "P"
    if dv == 11:
        return "0"
    return str(dv)


def montar_campo_livre_bradesco(conta: ContaBancaria, nosso_numero: str) -> CampoLivre:
    """
    Campo livre Bradesco:

        Agência (4) + Carteira (2) + Nosso Número (11) + Conta (7) + "0"
    """
    dv = dv_nosso_numero_bradesco(conta.carteira, nosso_numero)
    campo_livre = conta.agencia + conta.carteira + nosso_numero + conta.conta + "0"
    return CampoLivre(
        _conferir_campo_livre(campo_livre, "Bradesco"),
        f"{conta.carteira}/{nosso_numero}-{dv}",
    )
