"""Montagem do código de barras de 44 posições."""

from .base import modulo11_boleto
from .constantes import TAMANHO_CAMPO_LIVRE, TAMANHO_FATOR, TAMANHO_VALOR
from .erros import ErroIntegridadeLayout, FormatoInvalido

TAMANHO_BASE_SEM_DV = 43


def _conferir_parte(valor: str, tamanho: int, campo: str):
    valor = valor or ""
    if len(valor) != tamanho:
        raise ErroIntegridadeLayout(campo, tamanho, len(valor))
    if not (valor.isascii() and valor.isdigit()):
        raise FormatoInvalido(campo, valor)


def montar_codigo_barras(codigo_banco, codigo_moeda, fator_vencimento, valor_formatado, campo_livre):
    """
    Monta o código de barras completo (44 dígitos) com o DV geral.

    Posições (0-based) da base de 43 dígitos, antes de inserir o DV:
      - banco: 0-2
      - moeda: 3
      - fator de vencimento: 4-7
      - valor: 8-17
      - campo livre: 18-42
    O DV geral (módulo 11 FEBRABAN) entra no índice 4 e desloca o restante.
    """
    _conferir_parte(codigo_banco, 3, "código do banco")
    _conferir_parte(codigo_moeda, 1, "código da moeda")
    _conferir_parte(fator_vencimento, TAMANHO_FATOR, "fator de vencimento")
    _conferir_parte(valor_formatado, TAMANHO_VALOR, "valor do código de barras")
    _conferir_parte(campo_livre, TAMANHO_CAMPO_LIVRE, "campo livre")

    base = codigo_banco + codigo_moeda + fator_vencimento + valor_formatado + campo_livre
    if len(base) != TAMANHO_BASE_SEM_DV:
        raise ErroIntegridadeLayout("base do código de barras", TAMANHO_BASE_SEM_DV, len(base))

    dv_geral = modulo11_boleto(base)
    return base[:4] + str(dv_geral) + base[4:]
