"""Linha digitável: geração a partir do código de barras e conferência."""

from datetime import timedelta
from decimal import Decimal

from .base import limpar_numero, modulo10, modulo11_boleto
from .constantes import (
    BANCOS_BOLETO,
    DATA_BASE_FATOR_VENCIMENTO,
    TAMANHO_CODIGO_BARRAS,
    TAMANHO_LINHA_DIGITAVEL,
)
from .erros import ErroIntegridadeLayout, FormatoInvalido


def _conferir_digitos(numero: str, tamanho: int, campo: str):
    numero = numero or ""
    if not (numero.isascii() and numero.isdigit()):
        raise FormatoInvalido(campo, numero)
    if len(numero) != tamanho:
        raise ErroIntegridadeLayout(campo, tamanho, len(numero))


def montar_linha_digitavel(codigo_barras: str) -> str:
    """
    Monta a linha digitável (47 dígitos) a partir do código de barras (44 dígitos).

    Campo 1: banco + moeda + campo livre[0:5] + DV (módulo 10)  -> 10
    Campo 2: campo livre[5:15] + DV (módulo 10)                 -> 11
    Campo 3: campo livre[15:25] + DV (módulo 10)                -> 11
    Campo 4: DV geral do código de barras                       -> 1
    Campo 5: fator de vencimento + valor                        -> 14
    """
    _conferir_digitos(codigo_barras, TAMANHO_CODIGO_BARRAS, "código de barras")

    banco_moeda = codigo_barras[0:4]
    dv_geral = codigo_barras[4]
    fator = codigo_barras[5:9]
    valor = codigo_barras[9:19]
    campo_livre = codigo_barras[19:]

    campo1 = banco_moeda + campo_livre[0:5]
    campo2 = campo_livre[5:15]
    campo3 = campo_livre[15:25]

    return (
        campo1 + str(modulo10(campo1))
        + campo2 + str(modulo10(campo2))
        + campo3 + str(modulo10(campo3))
        + dv_geral
        + fator + valor
    )


def formatar_linha_digitavel(linha: str) -> str:
    """Forma de exibição: AAAAA.AAAAA BBBBB.BBBBBB CCCCC.CCCCCC D EEEEEEEEEEEEEE."""
    _conferir_digitos(linha, TAMANHO_LINHA_DIGITAVEL, "linha digitável")
    return (
        f"{linha[0:5]}.{linha[5:10]} "
        f"{linha[10:15]}.{linha[15:21]} "
        f"{linha[21:26]}.{linha[26:32]} "
        f"{linha[32]} "
        f"{linha[33:]}"
    )


def linha_digitavel_para_codigo_barras(linha: str) -> str:
    """
    Remonta o código de barras (44 dígitos) a partir da linha digitável.
    Aceita a linha com a pontuação de exibição.
    """
    d = limpar_numero(linha)
    if len(d) != TAMANHO_LINHA_DIGITAVEL:
        raise ErroIntegridadeLayout("linha digitável", TAMANHO_LINHA_DIGITAVEL, len(d))
    campo_livre = d[4:9] + d[10:20] + d[21:31]
    return d[0:4] + d[32] + d[33:37] + d[37:47] + campo_livre


def validar_linha_digitavel_boleto(linha: str):
    """
    Valida uma linha digitável de boleto bancário (47 dígitos, padrão cobrança).

    Retorna (erros, infos), onde:
      - erros: lista de mensagens de erro (DV incorreto, tamanho, etc.)
      - infos: dicionário com dados extraídos (banco, valor, vencimento, código de barras, etc.)
    """
    erros = []
    infos = {}

    numeros = limpar_numero(linha)

    if len(numeros) != TAMANHO_LINHA_DIGITAVEL:
        erros.append(
            f"Tamanho inválido: esperado {TAMANHO_LINHA_DIGITAVEL} dígitos, recebido {len(numeros)}."
        )
        return erros, infos

    d = numeros  # atalho

    campos = [
        ("Campo 1", d[0:9], int(d[9])),
        ("Campo 2", d[10:20], int(d[20])),
        ("Campo 3", d[21:31], int(d[31])),
    ]
    for nome, base, dv in campos:
        esperado = modulo10(base)
        if esperado != dv:
            erros.append(
                f"Dígito verificador do {nome} inválido. Esperado {esperado}, encontrado {dv}."
            )

    codigo_barras = linha_digitavel_para_codigo_barras(d)
    dv_geral = int(codigo_barras[4])
    dv_geral_calculado = modulo11_boleto(codigo_barras[:4] + codigo_barras[5:])
    if dv_geral_calculado != dv_geral:
        erros.append(
            f"Dígito verificador geral inválido. Esperado {dv_geral_calculado}, encontrado {dv_geral}."
        )

    banco = codigo_barras[0:3]
    fator = codigo_barras[5:9]
    infos["codigo_barras"] = codigo_barras
    infos["banco"] = banco
    infos["nome_banco"] = BANCOS_BOLETO.get(banco, "Banco não mapeado neste gerador")
    infos["moeda"] = codigo_barras[3]
    infos["campo_livre"] = codigo_barras[19:]
    infos["fator_vencimento"] = fator

    # Fator 0000: boleto sem data de vencimento codificada
    if fator == "0000":
        infos["vencimento"] = None
    else:
        infos["vencimento"] = DATA_BASE_FATOR_VENCIMENTO + timedelta(days=int(fator))

    infos["valor"] = Decimal(int(codigo_barras[9:19])) / 100

    return erros, infos
