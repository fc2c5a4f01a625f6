"""Layouts de campo livre por banco e o seletor usado pelo builder."""
from dataclasses import dataclass
from typing import Callable

from ..erros import BancoNaoSuportado
from ..modelos import ContaBancaria
from .utils import CampoLivre

from .bb import (
    normalizar_conta_bb,
    normalizar_nosso_numero_bb,
    montar_campo_livre_bb,
)

from .itau import (
    normalizar_conta_itau,
    normalizar_nosso_numero_itau,
    montar_campo_livre_itau,
)

from .bradesco import (
    dv_nosso_numero_bradesco,
    normalizar_conta_bradesco,
    normalizar_nosso_numero_bradesco,
    montar_campo_livre_bradesco,
)

from . import bb, bradesco, itau


@dataclass(frozen=True)
class LayoutBanco:
    codigo: str
    nome: str
    normalizar_conta: Callable[[str, str, str], ContaBancaria]
    normalizar_nosso_numero: Callable[[str], str]
    montar_campo_livre: Callable[[ContaBancaria, str], CampoLivre]


LAYOUTS_BANCOS = {
    bb.CODIGO_BANCO: LayoutBanco(
        bb.CODIGO_BANCO,
        bb.NOME_BANCO,
        normalizar_conta_bb,
        normalizar_nosso_numero_bb,
        montar_campo_livre_bb,
    ),
    itau.CODIGO_BANCO: LayoutBanco(
        itau.CODIGO_BANCO,
        itau.NOME_BANCO,
        normalizar_conta_itau,
        normalizar_nosso_numero_itau,
        montar_campo_livre_itau,
    ),
    bradesco.CODIGO_BANCO: LayoutBanco(
        bradesco.CODIGO_BANCO,
        bradesco.NOME_BANCO,
        normalizar_conta_bradesco,
        normalizar_nosso_numero_bradesco,
        montar_campo_livre_bradesco,
    ),
}


def obter_layout(codigo_banco) -> LayoutBanco:
    """Seleciona o layout pelo código de compensação (aceita 1, "1" ou "001")."""
    codigo = str(codigo_banco or "").strip().zfill(3)
    layout = LAYOUTS_BANCOS.get(codigo)
    if layout is None:
        raise BancoNaoSuportado(codigo_banco)
    return layout


__all__ = [
    "CampoLivre",
    "LayoutBanco",
    "LAYOUTS_BANCOS",
    "obter_layout",
    "normalizar_conta_bb",
    "normalizar_nosso_numero_bb",
    "montar_campo_livre_bb",
    "normalizar_conta_itau",
    "normalizar_nosso_numero_itau",
    "montar_campo_livre_itau",
    "dv_nosso_numero_bradesco",
    "normalizar_conta_bradesco",
    "normalizar_nosso_numero_bradesco",
    "montar_campo_livre_bradesco",
]
