"""Cálculos compartilhados: dígitos verificadores, fator de vencimento e valor."""

import logging
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .constantes import (
    DATA_BASE_FATOR_VENCIMENTO,
    FATOR_VENCIMENTO_MAXIMO,
    TAMANHO_FATOR,
    TAMANHO_VALOR,
)
from .erros import CampoObrigatorioAusente, FormatoInvalido, ValorForaDoIntervalo

logger = logging.getLogger(__name__)

CENTAVOS = Decimal("0.01")


def limpar_numero(s: str) -> str:
    """
    Remove todos os caracteres que não são dígitos.
    """
    return "".join(ch for ch in (s or "") if ch.isascii() and ch.isdigit())


def zero_esquerda(valor: str, tamanho: int) -> str:
    """
    Completa com zeros à esquerda até o tamanho desejado.
    Se a string for maior, mantém os últimos ``tamanho`` caracteres.
    """
    valor = valor or ""
    if len(valor) >= tamanho:
        return valor[len(valor) - tamanho:]
    return valor.rjust(tamanho, "0")


def _exigir_digitos(numero: str, campo: str):
    if not numero or not numero.strip():
        raise FormatoInvalido(campo, numero, "não pode ser vazio")
    if not numero.isdigit() or not numero.isascii():
        raise FormatoInvalido(campo, numero)


def modulo10(numero: str) -> int:
    """
    Calcula o dígito verificador pelo módulo 10 (usado nos 3 primeiros campos da linha digitável).
    Pesos 2 e 1 alternados, da direita para a esquerda.
    """
    _exigir_digitos(numero, "Número para o módulo 10")

    soma = 0
    multiplicador = 2
    for d in reversed(numero):
        prod = int(d) * multiplicador
        # se resultado tiver 2 dígitos, soma os dígitos
        if prod > 9:
            prod = (prod // 10) + (prod % 10)
        soma += prod
        multiplicador = 1 if multiplicador == 2 else 2

    resto = soma % 10
    return 0 if resto == 0 else 10 - resto


def modulo11(numero: str, peso_maximo: int = 9, caso_especial: bool = False) -> int:
    """
    Calcula o módulo 11 com pesos de 2 até ``peso_maximo`` (repetindo),
    da direita para a esquerda.

    Sem ``caso_especial`` devolve o valor bruto ``11 - resto`` (0 a 11):
    resto 0 vira 11 e resto 1 vira 10, e cada banco aplica o seu
    mapeamento (ex.: Bradesco usa 'P' para 10 e '0' para 11).

    Com ``caso_especial`` (DV geral do código de barras, padrão FEBRABAN)
    os resultados 0, 1, 10 e 11 viram 1.
    """
    _exigir_digitos(numero, "Número para o módulo 11")
    if peso_maximo < 2:
        raise ValorForaDoIntervalo("peso_maximo", peso_maximo, "deve ser no mínimo 2")

    soma = 0
    peso = 2
    for d in reversed(numero):
        soma += int(d) * peso
        peso += 1
        if peso > peso_maximo:
            peso = 2

    resto = soma % 11
    dv = 11 - resto
    if caso_especial and (dv in (0, 1) or dv > 9):
        return 1
    return dv


def modulo11_boleto(numero: str) -> int:
    """
    Calcula o dígito verificador geral do boleto (módulo 11, conforme padrão FEBRABAN).
    """
    return modulo11(numero, 9, caso_especial=True)


def dv_codigo_banco(codigo_banco: str) -> str:
    """Dígito exibido ao lado do código do banco no boleto (ex.: 341-7)."""
    dv = modulo11(codigo_banco, 9)
    if dv == 10:
        return "X"
    if dv == 11:
        return "0"
    return str(dv)


def calcular_fator_vencimento(data_vencimento) -> str:
    """
    Número de dias entre a data base (07/10/1997) e o vencimento, com 4 dígitos.

    Vencimentos anteriores à data base geram fator "0000" (boleto continua
    válido, apenas sem fator). Acima de 9999 dias seria necessária a nova
    regra de fator, que este gerador não implementa, então a geração falha.
    """
    if data_vencimento is None:
        raise CampoObrigatorioAusente("data_vencimento")
    if isinstance(data_vencimento, datetime):
        data_vencimento = data_vencimento.date()
    if not isinstance(data_vencimento, date):
        raise FormatoInvalido("data_vencimento", data_vencimento, "deve ser uma data")

    if data_vencimento < DATA_BASE_FATOR_VENCIMENTO:
        logger.warning(
            "Vencimento %s anterior à data base %s; fator será 0000.",
            data_vencimento.strftime("%d/%m/%Y"),
            DATA_BASE_FATOR_VENCIMENTO.strftime("%d/%m/%Y"),
        )
        return "0" * TAMANHO_FATOR

    dias = (data_vencimento - DATA_BASE_FATOR_VENCIMENTO).days
    if dias > FATOR_VENCIMENTO_MAXIMO:
        raise ValorForaDoIntervalo(
            "data_vencimento",
            data_vencimento.strftime("%d/%m/%Y"),
            f"excede {FATOR_VENCIMENTO_MAXIMO} dias após a data base do fator",
        )
    return f"{dias:0{TAMANHO_FATOR}d}"


def normalizar_valor(valor) -> Decimal:
    """
    Converte o valor do título para Decimal com duas casas (arredondamento comercial).
    Floats passam por str() para não carregar o erro binário.
    """
    if valor is None:
        raise CampoObrigatorioAusente("valor")
    if isinstance(valor, float):
        valor = str(valor)
    try:
        decimal = Decimal(valor)
    except (InvalidOperation, TypeError, ValueError):
        raise FormatoInvalido("valor", valor, "não é um número") from None
    if not decimal.is_finite():
        raise FormatoInvalido("valor", valor, "não é um número")
    if decimal < 0:
        raise ValorForaDoIntervalo("valor", valor, "não pode ser negativo")
    try:
        return decimal.quantize(CENTAVOS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValorForaDoIntervalo(
            "valor", valor, f"não cabe nos {TAMANHO_VALOR} dígitos do código de barras"
        ) from None


def formatar_valor_codigo_barras(valor) -> str:
    """
    Valor do título no código de barras: 10 dígitos, sem separador, com centavos.
    Ex.: 199.99 -> "0000019999".
    """
    centavos = f"{normalizar_valor(valor):.2f}".replace(".", "")
    if len(centavos) > TAMANHO_VALOR:
        raise ValorForaDoIntervalo(
            "valor", valor, f"não cabe nos {TAMANHO_VALOR} dígitos do código de barras"
        )
    return centavos.rjust(TAMANHO_VALOR, "0")
