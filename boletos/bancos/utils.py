"""Funções utilitárias compartilhadas entre os layouts de campo livre."""

from typing import NamedTuple, Tuple

from ..base import zero_esquerda
from ..constantes import SEPARADORES_NUMERICOS, TAMANHO_CAMPO_LIVRE
from ..erros import CampoObrigatorioAusente, ErroIntegridadeLayout, FormatoInvalido


class CampoLivre(NamedTuple):
    campo_livre: str
    nosso_numero_formatado: str
    avisos: Tuple[str, ...] = ()


def _somente_digitos(valor, campo: str) -> str:
    """Descarta a pontuação usual e exige que o restante seja só dígitos."""
    bruto = "" if valor is None else str(valor).strip()
    if not bruto:
        raise CampoObrigatorioAusente(campo)
    numero = "".join(ch for ch in bruto if ch not in SEPARADORES_NUMERICOS)
    if not numero.isdigit() or not numero.isascii():
        raise FormatoInvalido(campo, valor)
    return numero


def _normalizar_numerico(valor, tamanho: int, campo: str) -> str:
    """
    Completa com zeros à esquerda até o tamanho do layout.
    Valores maiores que o tamanho são recusados, nunca truncados.
    """
    numero = _somente_digitos(valor, campo)
    if len(numero) > tamanho:
        raise FormatoInvalido(campo, valor, f"aceita no máximo {tamanho} dígitos")
    return zero_esquerda(numero, tamanho)


def _conferir_campo_livre(campo_livre: str, nome_banco: str) -> str:
    if len(campo_livre) != TAMANHO_CAMPO_LIVRE:
        raise ErroIntegridadeLayout(
            f"campo livre {nome_banco}", TAMANHO_CAMPO_LIVRE, len(campo_livre)
        )
    return campo_livre
