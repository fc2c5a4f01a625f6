"""Layout de campo livre do Banco do Brasil (convênio de 6 dígitos)."""

import logging

from ..constantes import BANCOS_BOLETO, CARTEIRAS_BB_VALIDADAS
from ..modelos import ContaBancaria
from .utils import CampoLivre, _conferir_campo_livre, _normalizar_numerico

logger = logging.getLogger(__name__)

CODIGO_BANCO = "001"
NOME_BANCO = BANCOS_BOLETO[CODIGO_BANCO]

TAMANHO_AGENCIA = 4
TAMANHO_CONTA = 8  # sem DV
TAMANHO_CARTEIRA = 2
TAMANHO_NOSSO_NUMERO = 11


def normalizar_conta_bb(agencia, conta, carteira) -> ContaBancaria:
    return ContaBancaria(
        codigo_banco=CODIGO_BANCO,
        nome_banco=NOME_BANCO,
        agencia=_normalizar_numerico(agencia, TAMANHO_AGENCIA, "agência"),
        conta=_normalizar_numerico(conta, TAMANHO_CONTA, "conta"),
        carteira=_normalizar_numerico(carteira, TAMANHO_CARTEIRA, "carteira"),
    )


def normalizar_nosso_numero_bb(nosso_numero) -> str:
    return _normalizar_numerico(nosso_numero, TAMANHO_NOSSO_NUMERO, "nosso número")


def montar_campo_livre_bb(conta: ContaBancaria, nosso_numero: str) -> CampoLivre:
    """
    Campo livre BB para convênio de 6 dígitos (carteiras 11, 16, 18...):

        Nosso Número (11) + Agência (4) + Conta (8) + Carteira (2)

    O Nosso Número de 11 dígitos já traz o convênio (6) e o sequencial (5)
    e é exibido como está.
    """
    avisos = []
    if conta.carteira not in CARTEIRAS_BB_VALIDADAS:
        aviso = (
            f"Carteira {conta.carteira} não validada para o layout BB de convênio 6 "
            "(NN11 + AG4 + CTA8 + CART2); layout aplicado mesmo assim."
        )
        logger.warning(aviso)
        avisos.append(aviso)

    campo_livre = nosso_numero + conta.agencia + conta.conta + conta.carteira
    return CampoLivre(
        _conferir_campo_livre(campo_livre, "BB"),
        nosso_numero,
        tuple(avisos),
    )
